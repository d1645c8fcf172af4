"""
Unit icosahedron used as the base of every truncation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..errors import ConfigurationError
from .core import normalize, read_only

logger = logging.getLogger(__name__)

GOLDEN_RATIO = (1.0 + 5.0 ** 0.5) / 2.0

_PHI = GOLDEN_RATIO
ICOSAHEDRON_COORDS = (
    (-1, _PHI, 0), (1, _PHI, 0), (-1, -_PHI, 0), (1, -_PHI, 0),
    (0, -1, _PHI), (0, 1, _PHI), (0, -1, -_PHI), (0, 1, -_PHI),
    (_PHI, 0, -1), (_PHI, 0, 1), (-_PHI, 0, -1), (-_PHI, 0, 1),
)
ICOSAHEDRON_FACES = (
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)

Triangle = Tuple[int, int, int]


@dataclass(frozen=True, eq=False)
class BasePolyhedron:
    vertices: NDArray[np.floating]  # (V, 3), unit length
    faces: Tuple[Triangle, ...]     # orientation as listed, not guaranteed outward

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def check(self, unit_tolerance: float = 1e-9) -> None:
        """Raise ConfigurationError if the vertices or triangles are malformed."""
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise ConfigurationError(f"vertices must have shape (V, 3), got {self.vertices.shape}")
        lengths = np.linalg.norm(self.vertices, axis=1)
        off = np.flatnonzero(np.abs(lengths - 1.0) > unit_tolerance)
        if off.size:
            raise ConfigurationError(
                f"base vertices {off.tolist()} are not on the unit sphere"
            )
        n = self.vertex_count
        for idx, tri in enumerate(self.faces):
            if len(tri) != 3:
                raise ConfigurationError(f"face {idx} is not a triangle: {tri}")
            if any(not 0 <= int(k) < n for k in tri):
                raise ConfigurationError(f"face {idx} references a vertex outside 0..{n - 1}: {tri}")
            if len(set(tri)) != 3:
                raise ConfigurationError(f"face {idx} repeats a vertex: {tri}")


@lru_cache(maxsize=None)
def icosahedron() -> BasePolyhedron:
    """Return the 12-vertex, 20-face unit icosahedron (built once per process)."""
    verts = np.array([normalize(np.array(v, dtype=float)) for v in ICOSAHEDRON_COORDS], dtype=float)
    base = BasePolyhedron(vertices=read_only(verts), faces=tuple(ICOSAHEDRON_FACES))
    base.check()
    logger.debug("Built base icosahedron: %d vertices, %d faces", base.vertex_count, base.face_count)
    return base
