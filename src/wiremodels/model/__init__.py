"""
The MODEL layer contains pure data structures and geometry helpers.
It has NO knowledge of the generators or the visualization (PyVista).
It deals with vertices, primitives and the mesh that collects them.
"""
from wiremodels.model.errors import InvalidParameterError
from wiremodels.model.geometry_primitives import LineSegment, Point, Vertex
from wiremodels.model.wireframe import WireframeModel
from wiremodels.model.point_cloud import make_point_cloud

__all__ = ["InvalidParameterError", "LineSegment", "Point", "Vertex", "WireframeModel", "make_point_cloud"]
