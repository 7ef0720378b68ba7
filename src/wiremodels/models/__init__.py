"""
Parametric wireframe model generators.

Importing this package registers every generator with the registry.
"""
from wiremodels.models.base import MeshMaker, ModelGenerator
from wiremodels.models.registry import ModelKind, create_model, get_model_class, list_keys
from wiremodels.models.axes import Axes2D, Axes3D
from wiremodels.models.cone_sector import ConeSector
from wiremodels.models.frustum import ViewFrustum
from wiremodels.models.prism import TriangularPrism
from wiremodels.models.pyramid import TriangularPyramid
from wiremodels.models.square import Square

__all__ = [
    "Axes2D",
    "Axes3D",
    "ConeSector",
    "MeshMaker",
    "ModelGenerator",
    "ModelKind",
    "Square",
    "TriangularPrism",
    "TriangularPyramid",
    "ViewFrustum",
    "create_model",
    "get_model_class",
    "list_keys",
]
