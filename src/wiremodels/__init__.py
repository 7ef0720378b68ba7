"""Procedural wireframe models: prisms, pyramids, cones and view frustums as vertices and line segments."""
from wiremodels.model import InvalidParameterError, LineSegment, Point, Vertex, WireframeModel, make_point_cloud
from wiremodels.models import (
    Axes2D,
    Axes3D,
    ConeSector,
    MeshMaker,
    ModelKind,
    Square,
    TriangularPrism,
    TriangularPyramid,
    ViewFrustum,
    create_model,
)

__version__ = "0.1.0"

__all__ = [
    "Axes2D",
    "Axes3D",
    "ConeSector",
    "InvalidParameterError",
    "LineSegment",
    "MeshMaker",
    "ModelKind",
    "Point",
    "Square",
    "TriangularPrism",
    "TriangularPyramid",
    "Vertex",
    "ViewFrustum",
    "WireframeModel",
    "create_model",
    "make_point_cloud",
]
