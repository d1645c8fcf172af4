"""
Plane-local projection of faces into normalized 2D polygons.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray

from ..errors import DegenerateGeometryError
from .core import read_only, tangent_frame
from .truncation import Face

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ProjectedFace:
    points01: NDArray[np.floating]  # (N, 2) in [0, 1] x [0, 1], same order as Face.verts
    width: float
    height: float

    def __len__(self) -> int:
        return int(self.points01.shape[0])


def plane_coordinates(face: Face) -> NDArray[np.floating]:
    """(u, v) coordinates of each vertex relative to the plane point closest to the origin."""
    u, v, n = tangent_frame(face.normal)
    p0 = n * face.plane_offset
    w = face.verts - p0
    return np.stack([w @ u, w @ v], axis=1)


def project_face(face: Face, min_extent: float = 1e-12) -> ProjectedFace:
    """Project a face onto its own plane, center it and remap it into the unit square."""
    pts = plane_coordinates(face)
    pts = pts - pts.mean(axis=0)

    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    width, height = (float(x) for x in hi - lo)
    for label, extent in (("width", width), ("height", height)):
        if not math.isfinite(extent) or extent <= min_extent:
            raise DegenerateGeometryError(
                f"{face.kind.name.lower()} {face.source} has projected {label} {extent!r}"
            )

    pts01 = (pts - lo) / np.array([width, height])
    return ProjectedFace(points01=read_only(pts01), width=width, height=height)


def project_faces(faces: Iterable[Face], min_extent: float = 1e-12) -> Tuple[ProjectedFace, ...]:
    """Project every face; raises before returning anything if one of them collapses."""
    projected = tuple(project_face(f, min_extent) for f in faces)
    logger.debug("Projected %d faces", len(projected))
    return projected


def normal_to_euler(normal: NDArray[np.floating]) -> Tuple[float, float]:
    """(pitch, yaw) in radians that turn the +z axis onto `normal`."""
    x, y, z = (float(c) for c in normal)
    yaw = math.atan2(x, z)
    pitch = math.atan2(y, math.hypot(x, z))
    return pitch, yaw
