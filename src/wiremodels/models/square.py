from __future__ import annotations

from dataclasses import dataclass

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model


@register_model
@dataclass(frozen=True)
class Square(ModelGenerator):
    """
    A square in the xy-plane centred at the origin with corners (+-r, +-r, 0).

    Vertices run v0 = (-r, -r), v1 = (-r, r), v2 = (r, r), v3 = (r, -r).
    """
    KEY = ModelKind.SQUARE

    r: float = config.SQUARE_RADIUS

    def __post_init__(self) -> None:
        if self.r <= 0:
            self._reject("r must be greater than 0")

    @property
    def name(self) -> str:
        return f"Square({self.r:.2f})"

    def _populate(self, model: WireframeModel) -> None:
        r = self.r
        model.add_vertices(
            Vertex(-r, -r, 0.0),
            Vertex(-r, r, 0.0),
            Vertex(r, r, 0.0),
            Vertex(r, -r, 0.0),
        )
        model.add_segments((0, 1), (1, 2), (2, 3), (3, 0))
