"""
Geometry package: base icosahedron, topology, truncation and face projection.
"""

from .core import (
    REFERENCE_AXIS_THRESHOLD,
    normalize,
    tangent_frame,
    area_vector,
    polygon_normal,
)
from .icosahedron import GOLDEN_RATIO, BasePolyhedron, icosahedron
from .topology import (
    Topology,
    edges_and_neighbors,
    check_icosahedral,
    order_neighbors_ccw,
    ordered_rings,
    base_topology,
)
from .truncation import (
    FaceKind,
    Face,
    trunc_point,
    truncate_faces,
    orient_face,
    check_face,
    build_truncated_icosahedron,
)
from .projection import ProjectedFace, project_face, project_faces, normal_to_euler
from .metrics import SolidMetrics, solid_metrics

__all__ = [
    "REFERENCE_AXIS_THRESHOLD",
    "normalize",
    "tangent_frame",
    "area_vector",
    "polygon_normal",
    "GOLDEN_RATIO",
    "BasePolyhedron",
    "icosahedron",
    "Topology",
    "edges_and_neighbors",
    "check_icosahedral",
    "order_neighbors_ccw",
    "ordered_rings",
    "base_topology",
    "FaceKind",
    "Face",
    "trunc_point",
    "truncate_faces",
    "orient_face",
    "check_face",
    "build_truncated_icosahedron",
    "ProjectedFace",
    "project_face",
    "project_faces",
    "normal_to_euler",
    "SolidMetrics",
    "solid_metrics",
]
