"""
Triangular Pyramid
==================
Wireframe model of a tetrahedron as a triangular pyramid: an equilateral
triangle base centred at the origin of the xz-plane whose three vertices are
connected to an apex on the positive y-axis.

Two modes:
----------
1. Simple: the 4 vertices and 6 edges of the tetrahedron.
2. Tessellated: `k` lines of longitude fan out over each side from the apex
   down to the base and on to the base centre, and `n` lines of latitude
   (triangles) climb from the base towards the apex.

If h = r*sqrt(2), the tetrahedron is regular with side length r*sqrt(3).
"""
from __future__ import annotations

from dataclasses import dataclass
import math

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.geometry_utils import equilateral_ring, lerp
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model


@register_model
@dataclass(frozen=True)
class TriangularPyramid(ModelGenerator):
    KEY = ModelKind.TRIANGULAR_PYRAMID

    r: float = config.PYRAMID_SIDE_LENGTH / math.sqrt(3.0)
    h: float = config.PYRAMID_SIDE_LENGTH * math.sqrt(2.0) / math.sqrt(3.0)
    n: int = 1
    k: int = 1
    subdivided: bool = False

    def __post_init__(self) -> None:
        if not self.subdivided:
            if (self.n, self.k) != (1, 1):
                self._reject("n and k are only used by a subdivided pyramid")
            return
        if self.n < 1:
            self._reject("n must be greater than 0")
        if self.k < 1:
            self._reject("k must be greater than 0")

    @classmethod
    def regular(cls, s: float) -> TriangularPyramid:
        """Regular tetrahedron with side length `s` and apex at height s*sqrt(2)/sqrt(3)."""
        return cls(s / math.sqrt(3.0), s * math.sqrt(2.0) / math.sqrt(3.0))

    @classmethod
    def tessellated(cls, r: float, h: float, n: int, k: int) -> TriangularPyramid:
        """
        Pyramid with `n` lines of latitude and a fan of `k` triangles at the top of each side.

        Raises:
            InvalidParameterError: If `n` or `k` is less than 1.
        """
        return cls(r=r, h=h, n=n, k=k, subdivided=True)

    # ---- MeshMaker ----

    @property
    def latitude_count(self) -> int:
        return self.n

    @property
    def longitude_count(self) -> int:
        return self.k

    def remake(self, n: int, k: int) -> TriangularPyramid:
        return TriangularPyramid.tessellated(self.r, self.h, n, k)

    @property
    def name(self) -> str:
        if self.subdivided:
            return f"Triangular Pyramid({self.r:.2f},{self.h:.2f},{self.n},{self.k})"
        return f"Triangular Pyramid({self.r:.2f},{self.h:.2f})"

    def _populate(self, model: WireframeModel) -> None:
        if self.subdivided:
            self._populate_tessellated(model)
        else:
            self._populate_simple(model)

    def _populate_simple(self, model: WireframeModel) -> None:
        model.add_vertices(*equilateral_ring(self.r, 0.0))  # bottom face
        model.add_vertex(Vertex(0.0, self.h, 0.0))          # apex

        model.add_segments((0, 1), (1, 2), (2, 0))  # bottom face
        model.add_segments((0, 3), (1, 3), (2, 3))  # edges to the apex

    def _populate_tessellated(self, model: WireframeModel) -> None:
        apex = Vertex(0.0, self.h, 0.0)
        apex_index = model.add_vertex(apex)
        center_index = model.add_vertex(Vertex(0.0, 0.0, 0.0))

        v0, v1, v2 = equilateral_ring(self.r, 0.0)

        # Lines of longitude from the apex, down to the base,
        # and then on to the centre of the base.
        for j in range(self.k):
            t = j * (1.0 / self.k)
            for p in (lerp(v0, v1, t), lerp(v1, v2, t), lerp(v2, v0, t)):
                index = model.add_vertex(p)
                model.add_segments((apex_index, index), (index, center_index))

        # Lines of latitude, starting at the base and working upwards.
        for i in range(self.n):
            t = i * (1.0 / self.n)
            a, b, c = model.add_vertices(lerp(v0, apex, t), lerp(v1, apex, t), lerp(v2, apex, t))
            model.add_segments((a, b), (b, c), (c, a))
