"""
Whole-solid measurements of a set of truncated faces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull

from .truncation import Face


@dataclass(frozen=True)
class SolidMetrics:
    vertex_count: int
    face_count: int
    surface_area: float
    volume: float
    circumradius: float


def unique_vertices(faces: Sequence[Face], decimals: int = 9) -> NDArray[np.floating]:
    """Face vertices with shared corners merged."""
    stacked = np.concatenate([f.verts for f in faces], axis=0)
    # +0.0 folds -0.0 into 0.0 before deduplication
    return np.unique(np.round(stacked, decimals) + 0.0, axis=0)


def solid_metrics(faces: Sequence[Face]) -> SolidMetrics:
    verts = unique_vertices(faces)
    hull = ConvexHull(verts)
    return SolidMetrics(
        vertex_count=int(verts.shape[0]),
        face_count=len(faces),
        surface_area=float(hull.area),
        volume=float(hull.volume),
        circumradius=float(np.linalg.norm(verts, axis=1).max()),
    )
