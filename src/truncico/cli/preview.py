"""
CLI handler for the matplotlib preview.
"""

import argparse
import logging
from pathlib import Path

from ..geometry.projection import project_faces
from ..geometry.truncation import build_truncated_icosahedron
from ..utils.export import layered
from .common import add_build_options, config_from_args

logger = logging.getLogger(__name__)

def register_arguments(parser: argparse.ArgumentParser):
    add_build_options(parser)
    parser.add_argument("--out", type=Path, default=Path("outputs/truncated_icosahedron.png"))
    parser.add_argument("--columns", type=int, default=8, help="Flattened faces per row")

def run(args: argparse.Namespace):
    # Imported here so `build` and `info` never load matplotlib.
    from ..utils.visualization import render_preview

    cfg = config_from_args(args)
    faces = layered(build_truncated_icosahedron(config=cfg))
    flats = project_faces(faces, cfg.min_extent)
    render_preview(
        faces,
        flats,
        args.out,
        title=f"Truncated icosahedron, s = {cfg.truncation:.3f}",
        columns=max(1, args.columns),
    )
    logger.info("Preview saved → %s", args.out)
