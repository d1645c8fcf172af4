"""
Core vector utilities.
Includes zero-safe normalization, tangent frames and polygon normals.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# |n.y| above this picks the x axis as reference instead of y.
REFERENCE_AXIS_THRESHOLD = 0.9

# -----------------------------------------------------------------------------
# Vector Utilities
# -----------------------------------------------------------------------------

def normalize(vec: np.ndarray) -> np.ndarray:
    """Return the normalized vector; a zero vector stays zero."""
    norm = np.linalg.norm(vec)
    if norm == 0:
        return np.zeros_like(vec, dtype=float)
    return vec / norm

def tangent_frame(normal: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Construct a right-handed orthonormal basis (u, v, n) for the plane orthogonal to n."""
    n = np.asarray(normal, dtype=float)
    if abs(n[1]) < REFERENCE_AXIS_THRESHOLD:
        ref = np.array([0.0, 1.0, 0.0], dtype=float)
    else:
        ref = np.array([1.0, 0.0, 0.0], dtype=float)
    u = normalize(np.cross(ref, n))
    v = normalize(np.cross(n, u))
    return u, v, n

def area_vector(loop: NDArray[np.floating]) -> NDArray[np.floating]:
    """Sum of fan-triangle cross products around loop[0] (twice the vector area)."""
    origin = loop[0]
    total = np.zeros(3, dtype=float)
    for i in range(1, len(loop) - 1):
        total += np.cross(loop[i] - origin, loop[i + 1] - origin)
    return total

def polygon_normal(loop: NDArray[np.floating], eps: float = 1e-12) -> NDArray[np.floating]:
    """
    Unit normal of a planar loop from its first three vertices.
    Falls back to the area vector when the first three are collinear or coincide.
    """
    first = np.cross(loop[1] - loop[0], loop[2] - loop[0])
    if np.linalg.norm(first) > eps:
        return normalize(first)
    return normalize(area_vector(loop))

def read_only(arr: np.ndarray) -> np.ndarray:
    """Mark an array as immutable and return it."""
    arr.setflags(write=False)
    return arr
