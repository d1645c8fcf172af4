import numpy as np
import pytest

from truncico.geometry.core import area_vector
from truncico.geometry.metrics import solid_metrics, unique_vertices
from truncico.geometry.truncation import build_truncated_icosahedron


@pytest.mark.parametrize("s, count", [(0.2, 60), (1.0 / 3.0, 60), (0.5, 30)])
def test_unique_vertex_count(s, count):
    faces = build_truncated_icosahedron(s)
    assert unique_vertices(faces).shape == (count, 3)
    assert solid_metrics(faces).vertex_count == count


def test_metrics_at_one_third():
    faces = build_truncated_icosahedron(1.0 / 3.0)
    m = solid_metrics(faces)
    assert m.face_count == 32
    assert 0.0 < m.circumradius < 1.0
    # smaller than the icosahedron inscribed in the unit sphere
    assert 0.0 < m.volume < 2.54
    face_area = sum(float(np.dot(area_vector(f.verts), f.normal)) / 2.0 for f in faces)
    assert m.surface_area == pytest.approx(face_area, rel=1e-9)


def test_deeper_cut_removes_volume():
    shallow = solid_metrics(build_truncated_icosahedron(0.1))
    deep = solid_metrics(build_truncated_icosahedron(0.4))
    assert deep.volume < shallow.volume
