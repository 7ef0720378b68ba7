"""
Triangular Prism
================
Wireframe model of a right equilateral triangular prism with the y-axis as
its central axis and a tetrahedron attached to each triangular end.

The body of the prism runs from -h to h along the y-axis. The triangle is
inscribed in a circle of radius r in the xz-plane, and each end tetrahedron
adds a further h2 to the total length, so the total height is 2*(h + h2).

If only the top half is requested, the body runs from 0 to h and the bottom
apex collapses onto the origin.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.geometry_utils import equilateral_ring
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model

_DEFAULT_RADIUS = config.PRISM_SIDE_LENGTH / math.sqrt(3.0)


@register_model
@dataclass(frozen=True)
class TriangularPrism(ModelGenerator):
    KEY = ModelKind.TRIANGULAR_PRISM

    r: float = _DEFAULT_RADIUS
    h: float = config.PRISM_HALF_HEIGHT
    h2: float = _DEFAULT_RADIUS * math.tan(config.REGULAR_TETRAHEDRON_ANGLE)
    n: int = 0
    both_halves: bool = True

    def __post_init__(self) -> None:
        if self.n < 0:
            self._reject("n must be greater than or equal to 0")

    # ---- alternative constructors ----

    @classmethod
    def from_height(
        cls,
        r: float,
        h: float,
        h2: float,
        n: int = 0,
        both_halves: bool = True
    ) -> TriangularPrism:
        """End tetrahedra given by their height `h2`."""
        return cls(r=r, h=h, h2=h2, n=n, both_halves=both_halves)

    @classmethod
    def from_angle(
        cls,
        r: float,
        h: float,
        theta: float,
        n: int = 0,
        both_halves: bool = True
    ) -> TriangularPrism:
        """
        End tetrahedra given by their face-edge-face slant angle `theta` (radians).

        theta = 0 gives flat ends; theta = atan(sqrt(2)) gives regular tetrahedra.
        """
        return cls(r=r, h=h, h2=r * math.tan(theta), n=n, both_halves=both_halves)

    @classmethod
    def from_side_length(cls, s: float, h: float, n: int = 0) -> TriangularPrism:
        """Triangle side length `s` with a regular tetrahedron at each end."""
        return cls.from_angle(s / math.sqrt(3.0), h, config.REGULAR_TETRAHEDRON_ANGLE, n)

    @property
    def name(self) -> str:
        return f"Triangular Prism({self.r:.2f},{self.h:.2f},{self.h2:.2f},{self.n})"

    def _populate(self, model: WireframeModel) -> None:
        r, h, h2 = self.r, self.h, self.h2
        bottom_y = -h if self.both_halves else 0.0

        model.add_vertices(*equilateral_ring(r, h))         # 0, 1, 2
        model.add_vertices(*equilateral_ring(r, bottom_y))  # 3, 4, 5
        model.add_vertex(Vertex(0.0, h + h2, 0.0))          # 6, top apex
        if self.both_halves:
            model.add_vertex(Vertex(0.0, -h - h2, 0.0))     # 7, bottom apex
        else:
            model.add_vertex(Vertex(0.0, 0.0, 0.0))

        # 3 top faces
        model.add_segments((6, 0), (6, 1), (6, 2))
        # the top edge
        model.add_segments((0, 1), (1, 2), (2, 0))
        # three vertical edges
        model.add_segments((0, 3), (1, 4), (2, 5))
        # the bottom edge
        model.add_segments((3, 4), (4, 5), (5, 3))
        # 3 bottom faces
        model.add_segments((7, 3), (7, 4), (7, 5))

        # Lines of latitude around the body, not connected to each other.
        if self.both_halves:
            delta_y = 2.0 * h / (self.n + 1)
            start_y = -h
        else:
            delta_y = h / (self.n + 1)
            start_y = 0.0

        for j in range(self.n):
            y = start_y + (j + 1) * delta_y
            a, b, c = model.add_vertices(*equilateral_ring(r, y))
            model.add_segments((a, b), (b, c), (c, a))
