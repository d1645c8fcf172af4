"""
CLI handler for a short text summary.
"""

import argparse
from collections import Counter

from ..geometry.icosahedron import icosahedron
from ..geometry.metrics import solid_metrics
from ..geometry.topology import base_topology
from ..geometry.truncation import build_truncated_icosahedron
from .common import add_build_options, config_from_args

def register_arguments(parser: argparse.ArgumentParser):
    add_build_options(parser)

def run(args: argparse.Namespace):
    cfg = config_from_args(args)
    base = icosahedron()
    topo, _ = base_topology()
    faces = build_truncated_icosahedron(config=cfg)
    kinds = Counter(f.kind.value for f in faces)
    m = solid_metrics(faces)

    print(f"base: V={base.vertex_count} E={len(topo.edges)} F={base.face_count}")
    print(f"truncation s={cfg.truncation:.6f}")
    print(f"faces: {len(faces)} (pent={kinds['pent']}, hex={kinds['hex']})")
    print(f"unique vertices: {m.vertex_count}")
    print(f"surface area: {m.surface_area:.6f}")
    print(f"volume: {m.volume:.6f}")
    print(f"circumradius: {m.circumradius:.6f}")
