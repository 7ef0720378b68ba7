import pytest

from wiremodels import Point, TriangularPrism, Vertex, WireframeModel, make_point_cloud


def test_point_per_used_vertex():
    model = TriangularPrism.from_height(1.0, 2.0, 0.5, n=2).build()
    cloud = make_point_cloud(model)

    assert cloud.name == "PointCloud: Triangular Prism(1.00,2.00,0.50,2)"
    assert cloud.vertices == model.vertices
    assert cloud.segments == []
    assert cloud.points == [Point(i) for i in range(model.vertex_count)]
    assert cloud.check() == []


def test_unused_vertices_are_not_drawn():
    model = WireframeModel(name="partial", visible=False)
    model.add_vertices(Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(2, 0, 0), Vertex(3, 0, 0))
    model.add_segment(3, 1)
    model.add_point(1)

    cloud = make_point_cloud(model)

    assert cloud.vertex_count == 4
    assert cloud.points == [Point(1), Point(3)]
    assert cloud.visible is False


def test_source_model_is_untouched():
    model = TriangularPrism().build()
    before = model.segment_count
    cloud = make_point_cloud(model)
    cloud.add_vertex(Vertex(9, 9, 9))
    assert model.segment_count == before
    assert model.vertex_count == 8


def test_rejects_non_models():
    with pytest.raises(TypeError):
        make_point_cloud([Vertex(0, 0, 0)])
