"""
Cone Sector
===========
Wireframe model of a partial right circular cone with its base parallel to
the xz-plane and its apex on the positive y-axis.

"Partial" in two ways:
----------------------
1. The cone sits over the circular sector from angle theta1 to angle theta2
   (counterclockwise), so the circles of latitude are arcs.
2. If 0 < t < h, the part of the cone above y = t is cut off, leaving a
   frustum whose top edge is the highest circle of latitude.

There are n circles of latitude (including the bottom edge and the top edge
at y = t) and k lines of longitude. Each line of longitude has n-1 segments
and joins the centre of the base through one extra segment, and each circle
of latitude has k-1 segments.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model

TWO_PI = 2 * math.pi


@register_model
@dataclass(frozen=True)
class ConeSector(ModelGenerator):
    KEY = ModelKind.CONE_SECTOR

    r: float = config.CONE_SECTOR_RADIUS
    h: float = config.CONE_SECTOR_HEIGHT
    t: float = config.CONE_SECTOR_TOP
    theta1: float = config.CONE_SECTOR_THETA1
    theta2: float = config.CONE_SECTOR_THETA2
    n: int = config.CONE_SECTOR_LATITUDES
    k: int = config.CONE_SECTOR_LONGITUDES

    def __post_init__(self) -> None:
        if self.n < 2:
            self._reject("n must be greater than 1")
        if self.k < 4:
            self._reject("k must be greater than 3")
        if self.h <= 0:
            self._reject("h must be greater than 0")
        if self.h < self.t:
            self._reject("h must be greater than or equal to t")

        # Both angles in [0, 2*pi), with theta2 strictly after theta1.
        theta1 = self.theta1 % TWO_PI
        theta2 = self.theta2 % TWO_PI
        if theta2 <= theta1:
            theta2 += TWO_PI
        object.__setattr__(self, "theta1", theta1)
        object.__setattr__(self, "theta2", theta2)

    # ---- MeshMaker ----

    @property
    def latitude_count(self) -> int:
        return self.n

    @property
    def longitude_count(self) -> int:
        return self.k

    def remake(self, n: int, k: int) -> ConeSector:
        return ConeSector(self.r, self.h, self.t, self.theta1, self.theta2, n, k)

    @property
    def name(self) -> str:
        return (
            f"Cone Sector({self.r:.2f},{self.h:.2f},{self.t:.2f},"
            f"{self.theta1:.2f},{self.theta2:.2f},{self.n},{self.k})"
        )

    def _populate(self, model: WireframeModel) -> None:
        n, k = self.n, self.k
        delta_h = self.t / (n - 1)
        delta_theta = (self.theta2 - self.theta1) / (k - 1)

        # indexes[i][j] is the vertex on circle of latitude i and line of longitude j
        indexes = [[0] * k for _ in range(n)]

        # Vertices go up each line of longitude in turn.
        for j in range(k):
            c = math.cos(self.theta1 + j * delta_theta)
            s = math.sin(self.theta1 + j * delta_theta)
            for i in range(n):
                slant_radius = self.r * (1 - i * delta_h / self.h)
                indexes[i][j] = model.add_vertex(Vertex(slant_radius * c, i * delta_h, slant_radius * s))

        bottom_center = model.add_vertex(Vertex(0.0, 0.0, 0.0))

        # circles of latitude
        for i in range(n):
            for j in range(k - 1):
                model.add_segment(indexes[i][j], indexes[i][j + 1])

        # lines of longitude, plus the triangle fan in the base
        for j in range(k):
            model.add_segment(bottom_center, indexes[0][j])
            for i in range(n - 1):
                model.add_segment(indexes[i][j], indexes[i + 1][j])
