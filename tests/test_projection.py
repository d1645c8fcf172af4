import math

import numpy as np
import pytest

from truncico.errors import DegenerateGeometryError
from truncico.geometry.projection import (
    normal_to_euler,
    plane_coordinates,
    project_face,
    project_faces,
)
from truncico.geometry.truncation import Face, FaceKind, build_truncated_icosahedron


@pytest.mark.parametrize("s", [0.1, 1.0 / 3.0, 0.5, 0.8])
def test_projection_preserves_count_and_bounds(s):
    for face in build_truncated_icosahedron(s):
        flat = project_face(face)
        pts = flat.points01
        assert pts.shape == (len(face), 2)
        assert np.all(np.isfinite(pts))
        assert np.all(pts >= 0.0) and np.all(pts <= 1.0)
        assert np.isclose(pts[:, 0].min(), 0.0) and np.isclose(pts[:, 0].max(), 1.0)
        assert np.isclose(pts[:, 1].min(), 0.0) and np.isclose(pts[:, 1].max(), 1.0)
        assert flat.width > 0.0 and flat.height > 0.0


@pytest.mark.parametrize("s", [0.2, 1.0 / 3.0, 0.6])
def test_projection_keeps_vertex_correspondence(s):
    for face in build_truncated_icosahedron(s):
        flat = project_face(face)
        scaled = flat.points01 * np.array([flat.width, flat.height])
        for i in range(len(face)):
            for k in range(i + 1, len(face)):
                d3 = np.linalg.norm(face.verts[i] - face.verts[k])
                d2 = np.linalg.norm(scaled[i] - scaled[k])
                assert abs(d3 - d2) < 1e-9


def test_plane_coordinates_match_offset_plane():
    face = build_truncated_icosahedron(0.3)[0]
    coords = plane_coordinates(face)
    assert coords.shape == (5, 2)
    # pentagon 0 is regular and centred on the plane's closest point to the origin
    np.testing.assert_allclose(coords.mean(axis=0), [0.0, 0.0], atol=1e-12)


def test_projected_face_is_read_only():
    flat = project_face(build_truncated_icosahedron(0.3)[0])
    with pytest.raises(ValueError):
        flat.points01[0, 0] = 0.5


def _collinear_face():
    verts = np.array([[x, 0.0, 1.0] for x in (0.0, 1.0, 2.0, 3.0, 4.0, 5.0)])
    return Face(
        kind=FaceKind.HEXAGON,
        verts=verts,
        normal=np.array([0.0, 0.0, 1.0]),
        plane_offset=1.0,
        source=0,
    )


def test_zero_height_is_degenerate():
    with pytest.raises(DegenerateGeometryError):
        project_face(_collinear_face())


def test_project_faces_is_all_or_nothing():
    faces = list(build_truncated_icosahedron(0.3)) + [_collinear_face()]
    with pytest.raises(DegenerateGeometryError):
        project_faces(faces)


def test_project_faces_order():
    faces = build_truncated_icosahedron(0.3)
    flats = project_faces(faces)
    assert [len(p) for p in flats] == [len(f) for f in faces]


@pytest.mark.parametrize(
    "normal, pitch, yaw",
    [
        ((0.0, 0.0, 1.0), 0.0, 0.0),
        ((1.0, 0.0, 0.0), 0.0, math.pi / 2),
        ((0.0, 1.0, 0.0), math.pi / 2, 0.0),
        ((0.0, 0.0, -1.0), 0.0, math.pi),
    ],
)
def test_normal_to_euler(normal, pitch, yaw):
    p, y = normal_to_euler(np.array(normal))
    assert p == pytest.approx(pitch)
    assert y == pytest.approx(yaw)
