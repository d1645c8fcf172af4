"""
Edge and neighbor extraction from a triangle list, and angular ordering of
each vertex's neighbors around its tangent plane.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np
from numpy.typing import NDArray

from ..errors import ConfigurationError
from .core import tangent_frame
from .icosahedron import BasePolyhedron, icosahedron

logger = logging.getLogger(__name__)

ICOSAHEDRON_DEGREE = 5
ICOSAHEDRON_EDGE_COUNT = 30

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Topology:
    edges: Tuple[Edge, ...]                # (i, j) with i < j, sorted
    neighbors: Tuple[Tuple[int, ...], ...]  # per vertex, ascending

    def degree(self, vertex: int) -> int:
        return len(self.neighbors[vertex])


def edges_and_neighbors(faces: Sequence[Sequence[int]], n_verts: int) -> Topology:
    """Collect unique undirected edges and per-vertex neighbor sets."""
    edge_set: Set[Edge] = set()
    nbr: List[Set[int]] = [set() for _ in range(n_verts)]
    for idx, tri in enumerate(faces):
        a, b, c = (int(k) for k in tri)
        for i, j in ((a, b), (b, c), (c, a)):
            if not (0 <= i < n_verts and 0 <= j < n_verts):
                raise ConfigurationError(
                    f"triangle {idx} {tuple(tri)} references a vertex outside 0..{n_verts - 1}"
                )
            edge_set.add((i, j) if i < j else (j, i))
            nbr[i].add(j)
            nbr[j].add(i)
    return Topology(
        edges=tuple(sorted(edge_set)),
        neighbors=tuple(tuple(sorted(s)) for s in nbr),
    )


def check_icosahedral(topology: Topology) -> None:
    """Raise ConfigurationError unless E = 30 and every vertex has degree 5."""
    if len(topology.edges) != ICOSAHEDRON_EDGE_COUNT:
        raise ConfigurationError(
            f"expected {ICOSAHEDRON_EDGE_COUNT} edges, found {len(topology.edges)}"
        )
    for vertex, ring in enumerate(topology.neighbors):
        if len(ring) != ICOSAHEDRON_DEGREE:
            raise ConfigurationError(
                f"vertex {vertex} has {len(ring)} neighbors, expected {ICOSAHEDRON_DEGREE}"
            )


def order_neighbors_ccw(
    vertex: int,
    neighbors: Sequence[Sequence[int]],
    vertices: NDArray[np.floating],
    expected_degree: int = ICOSAHEDRON_DEGREE,
) -> Tuple[int, ...]:
    """
    Sort the neighbors of `vertex` counter-clockwise around its tangent plane,
    seen from outside. Ties in angle fall back to the neighbor index.
    """
    ring = neighbors[vertex]
    if len(ring) != expected_degree:
        raise ConfigurationError(
            f"vertex {vertex} has {len(ring)} neighbors, expected {expected_degree}"
        )
    n = vertices[vertex]
    u, v, _ = tangent_frame(n)

    keyed: Dict[int, float] = {}
    for j in ring:
        w = vertices[j] - n
        proj = w - n * float(np.dot(w, n))
        keyed[j] = math.atan2(float(np.dot(proj, v)), float(np.dot(proj, u)))
    return tuple(sorted(ring, key=lambda j: (keyed[j], j)))


def ordered_rings(base: BasePolyhedron, topology: Topology) -> Tuple[Tuple[int, ...], ...]:
    """CCW neighbor ring for every base vertex."""
    return tuple(
        order_neighbors_ccw(i, topology.neighbors, base.vertices)
        for i in range(base.vertex_count)
    )


@lru_cache(maxsize=None)
def base_topology() -> Tuple[Topology, Tuple[Tuple[int, ...], ...]]:
    """Topology and CCW rings of the base icosahedron; independent of truncation."""
    base = icosahedron()
    topo = edges_and_neighbors(base.faces, base.vertex_count)
    check_icosahedral(topo)
    rings = ordered_rings(base, topo)
    logger.debug("Base topology: %d edges, %d rings", len(topo.edges), len(rings))
    return topo, rings
