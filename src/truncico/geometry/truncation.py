"""
Truncated icosahedron: pentagon and hexagon loops cut from the base solid at
a fraction s along every edge, with outward normals and plane offsets.
"""

from __future__ import annotations

import enum
import logging
import warnings
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..config import BuildConfig
from ..errors import ConfigurationError, DegenerateGeometryError, NumericToleranceWarning
from .core import polygon_normal, read_only
from .icosahedron import BasePolyhedron, icosahedron
from .topology import base_topology

logger = logging.getLogger(__name__)


class FaceKind(enum.Enum):
    PENTAGON = "pent"
    HEXAGON = "hex"

    @property
    def vertex_count(self) -> int:
        return 5 if self is FaceKind.PENTAGON else 6


@dataclass(frozen=True, eq=False)
class Face:
    kind: FaceKind
    verts: NDArray[np.floating]   # (N, 3), right-hand order around `normal`
    normal: NDArray[np.floating]  # unit, outward
    plane_offset: float           # dot(normal, v) for every vertex
    source: int                   # base vertex (pentagon) or base triangle (hexagon)

    @property
    def centroid(self) -> NDArray[np.floating]:
        return self.verts.mean(axis=0)

    def __len__(self) -> int:
        return int(self.verts.shape[0])


def trunc_point(vi: NDArray[np.floating], vj: NDArray[np.floating], s: float) -> NDArray[np.floating]:
    """Point at fraction s from vi toward vj. Not projected back to the sphere."""
    return vi * (1.0 - s) + vj * s


def truncate_faces(
    base: BasePolyhedron,
    rings: Sequence[Sequence[int]],
    s: float,
) -> List[Tuple[FaceKind, NDArray[np.floating], int]]:
    """Raw (kind, loop, source) triples: 12 pentagons, then 20 hexagons."""
    V = base.vertices
    loops: List[Tuple[FaceKind, NDArray[np.floating], int]] = []

    for i, ring in enumerate(rings):
        verts = np.array([trunc_point(V[i], V[j], s) for j in ring], dtype=float)
        loops.append((FaceKind.PENTAGON, verts, i))

    # Alternating order keeps each hexagon simple and in the triangle's winding.
    for t, (a, b, c) in enumerate(base.faces):
        verts = np.array(
            [
                trunc_point(V[a], V[b], s),
                trunc_point(V[b], V[a], s),
                trunc_point(V[b], V[c], s),
                trunc_point(V[c], V[b], s),
                trunc_point(V[c], V[a], s),
                trunc_point(V[a], V[c], s),
            ],
            dtype=float,
        )
        loops.append((FaceKind.HEXAGON, verts, t))
    return loops


def orient_face(kind: FaceKind, verts: NDArray[np.floating], source: int = -1) -> Face:
    """
    Build a Face whose normal points away from the origin.
    An inward candidate normal is negated and the loop reversed, on a copy.
    """
    loop = np.array(verts, dtype=float)
    if loop.shape != (kind.vertex_count, 3):
        raise ConfigurationError(
            f"{kind.name.lower()} {source} needs {kind.vertex_count} vertices, got shape {loop.shape}"
        )
    n = polygon_normal(loop)
    if not np.any(n):
        raise DegenerateGeometryError(f"{kind.name.lower()} {source} has no defined normal")
    avg = loop.mean(axis=0)
    if float(np.dot(n, avg)) < 0.0:
        n = -n
        loop = loop[::-1].copy()
    return Face(
        kind=kind,
        verts=read_only(loop),
        normal=read_only(n),
        plane_offset=float(np.dot(n, loop[0])),
        source=int(source),
    )


def check_face(face: Face, tolerance: float = 1e-6) -> bool:
    """Warn with NumericToleranceWarning if the face is not planar or not outward."""
    ok = True
    residual = float(np.max(np.abs(face.verts @ face.normal - face.plane_offset)))
    if residual > tolerance:
        ok = False
        msg = f"{face.kind.name.lower()} {face.source} off-plane by {residual:.3e} (tol {tolerance:.1e})"
        logger.warning(msg)
        warnings.warn(msg, NumericToleranceWarning, stacklevel=2)
    facing = float(np.dot(face.normal, face.centroid))
    if facing < -tolerance:
        ok = False
        msg = f"{face.kind.name.lower()} {face.source} normal points inward ({facing:.3e})"
        logger.warning(msg)
        warnings.warn(msg, NumericToleranceWarning, stacklevel=2)
    return ok


def build_truncated_icosahedron(
    s: Optional[float] = None,
    config: Optional[BuildConfig] = None,
) -> Tuple[Face, ...]:
    """
    All 32 faces of the icosahedron truncated at fraction s in (0, 1).

    Pentagons come first, one per base vertex in index order, followed by one
    hexagon per base triangle. Nothing is returned unless every face builds.
    """
    cfg = config if config is not None else BuildConfig()
    if s is not None:
        cfg = replace(cfg, truncation=s)
    cfg.validate()
    s = cfg.truncation

    base = icosahedron()
    base.check(cfg.unit_tolerance)
    _, rings = base_topology()

    faces = [orient_face(kind, verts, src) for kind, verts, src in truncate_faces(base, rings, s)]
    for face in faces:
        check_face(face, cfg.planarity_tolerance)

    logger.debug(
        "Truncated at s=%.6f: %d pentagons, %d hexagons",
        s,
        sum(f.kind is FaceKind.PENTAGON for f in faces),
        sum(f.kind is FaceKind.HEXAGON for f in faces),
    )
    return tuple(faces)
