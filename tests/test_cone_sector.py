import math

import numpy as np
import pytest

from wiremodels import ConeSector, InvalidParameterError, MeshMaker, Vertex
from wiremodels.config import GEOMETRY_TOLERANCE


@pytest.mark.parametrize("n, k", [(2, 4), (3, 4), (16, 8), (5, 11)])
def test_counts(n, k):
    model = ConeSector(n=n, k=k).build()
    assert model.vertex_count == n * k + 1
    assert model.segment_count == n * (k - 1) + n * k
    assert model.check() == []


def test_default_sector():
    sector = ConeSector()
    assert (sector.n, sector.k) == (16, 8)
    assert sector.theta1 == pytest.approx(math.pi / 2)
    assert sector.theta2 == pytest.approx(3 * math.pi / 2)
    assert sector.name == "Cone Sector(1.00,1.00,1.00,1.57,4.71,16,8)"


def test_vertex_grid_runs_up_each_longitude():
    r, h, t, n, k = 2.0, 4.0, 2.0, 3, 4
    model = ConeSector(r, h, t, 0.0, math.pi, n, k).build()
    v = model.vertices

    # first line of longitude lies along +x, climbing to y = t
    assert v[0] == Vertex(2.0, 0.0, 0.0)
    assert v[1] == Vertex(1.5, 1.0, 0.0)
    assert v[2] == Vertex(1.0, 2.0, 0.0)
    # last line of longitude ends at theta2 = pi
    np.testing.assert_allclose(
        [[p.x, p.y, p.z] for p in v[9:12]],
        [[-2.0, 0.0, 0.0], [-1.5, 1.0, 0.0], [-1.0, 2.0, 0.0]],
        atol=GEOMETRY_TOLERANCE,
    )
    assert v[12] == Vertex(0.0, 0.0, 0.0)


def test_segment_order():
    n, k = 2, 4
    segments = [s.as_tuple() for s in ConeSector(n=n, k=k).build().segments]
    bottom_center = n * k
    # circles of latitude: vertex (i, j) has index j*n + i
    assert segments[:6] == [(0, 2), (2, 4), (4, 6), (1, 3), (3, 5), (5, 7)]
    # then for each longitude, the base fan segment and its slant segments
    assert segments[6:] == [
        (bottom_center, 0), (0, 1),
        (bottom_center, 2), (2, 3),
        (bottom_center, 4), (4, 5),
        (bottom_center, 6), (6, 7),
    ]


def test_full_cone_top_collapses_to_apex():
    model = ConeSector(1.0, 3.0, 3.0, 0.0, 1.0, 4, 5).build()
    tops = model.vertices[3:20:4]
    for p in tops:
        assert p.x == pytest.approx(0.0, abs=GEOMETRY_TOLERANCE)
        assert p.z == pytest.approx(0.0, abs=GEOMETRY_TOLERANCE)
        assert p.y == pytest.approx(3.0)


@pytest.mark.parametrize(
    "theta1, theta2, expected1, expected2",
    [
        (-math.pi / 2, math.pi / 2, 3 * math.pi / 2, 5 * math.pi / 2),
        (5 * math.pi, 0.5, math.pi, 0.5 + 2 * math.pi),
        (1.0, 1.0, 1.0, 1.0 + 2 * math.pi),
        (0.25, 2.0, 0.25, 2.0),
    ],
)
def test_angles_are_normalized(theta1, theta2, expected1, expected2):
    sector = ConeSector(theta1=theta1, theta2=theta2)
    assert 0.0 <= sector.theta1 < 2 * math.pi
    assert sector.theta2 > sector.theta1
    assert sector.theta1 == pytest.approx(expected1)
    assert sector.theta2 == pytest.approx(expected2)


@pytest.mark.parametrize(
    "params, message",
    [
        ({"n": 1}, "n must be greater than 1"),
        ({"k": 3}, "k must be greater than 3"),
        ({"h": 1.0, "t": 1.5}, "h must be greater than or equal to t"),
        ({"h": 0.0, "t": 0.0}, "h must be greater than 0"),
    ],
)
def test_invalid_parameters(params, message):
    with pytest.raises(InvalidParameterError, match=message):
        ConeSector(**params)


def test_remake_keeps_shape():
    sector = ConeSector(2.0, 3.0, 1.0, 0.5, 2.5, 4, 6)
    assert isinstance(sector, MeshMaker)
    remade = sector.remake(5, 9)
    assert (remade.r, remade.h, remade.t, remade.theta1, remade.theta2) == (2.0, 3.0, 1.0, 0.5, 2.5)
    assert (remade.latitude_count, remade.longitude_count) == (5, 9)
    with pytest.raises(InvalidParameterError):
        sector.remake(1, 9)
