"""
Truncated icosahedron faces as planar 3D loops and normalized 2D polygons.
"""

from .config import BuildConfig
from .errors import (
    TruncicoError,
    ConfigurationError,
    DegenerateGeometryError,
    NumericToleranceWarning,
)
from .geometry import (
    Face,
    FaceKind,
    ProjectedFace,
    build_truncated_icosahedron,
    project_face,
)

__version__ = "0.1.0"

__all__ = [
    "BuildConfig",
    "TruncicoError",
    "ConfigurationError",
    "DegenerateGeometryError",
    "NumericToleranceWarning",
    "Face",
    "FaceKind",
    "ProjectedFace",
    "build_truncated_icosahedron",
    "project_face",
]
