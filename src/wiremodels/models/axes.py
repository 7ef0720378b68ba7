from __future__ import annotations

from dataclasses import dataclass

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model

_XMIN, _XMAX, _YMIN, _YMAX, _ZMIN, _ZMAX = config.AXES_EXTENT


@register_model
@dataclass(frozen=True)
class Axes3D(ModelGenerator):
    """An x, y and z axis with the given endpoints for each axis."""
    KEY = ModelKind.AXES_3D

    xmin: float = _XMIN
    xmax: float = _XMAX
    ymin: float = _YMIN
    ymax: float = _YMAX
    zmin: float = _ZMIN
    zmax: float = _ZMAX

    @property
    def name(self) -> str:
        return (
            f"Axes 3D({self.xmin:.2f},{self.xmax:.2f},{self.ymin:.2f},"
            f"{self.ymax:.2f},{self.zmin:.2f},{self.zmax:.2f})"
        )

    def _populate(self, model: WireframeModel) -> None:
        model.add_vertices(
            Vertex(self.xmin, 0.0, 0.0),
            Vertex(self.xmax, 0.0, 0.0),
            Vertex(0.0, self.ymin, 0.0),
            Vertex(0.0, self.ymax, 0.0),
            Vertex(0.0, 0.0, self.zmin),
            Vertex(0.0, 0.0, self.zmax),
        )
        model.add_segments((0, 1), (2, 3), (4, 5))


@register_model
@dataclass(frozen=True)
class Axes2D(ModelGenerator):
    """
    An x and y axis in the plane z = `z`, with evenly spaced tick marks.

    Each axis gets `marks` + 1 ticks, one at each end and `marks` - 1 in between.
    A small `z` (e.g. 0.01 or -0.01) puts the axes just in front of or behind
    whatever is drawn in the xy-plane.
    """
    KEY = ModelKind.AXES_2D

    xmin: float = _XMIN
    xmax: float = _XMAX
    ymin: float = _YMIN
    ymax: float = _YMAX
    x_marks: int = config.AXES_2D_MARKS
    y_marks: int = config.AXES_2D_MARKS
    z: float = 0.0

    def __post_init__(self) -> None:
        if self.x_marks < 1:
            self._reject("x_marks must be greater than 0")
        if self.y_marks < 1:
            self._reject("y_marks must be greater than 0")

    @property
    def name(self) -> str:
        return f"Axes 2D({self.xmin:.2f},{self.xmax:.2f},{self.ymin:.2f},{self.ymax:.2f})"

    def _populate(self, model: WireframeModel) -> None:
        z = self.z
        x_span = self.xmax - self.xmin
        y_span = self.ymax - self.ymin

        # x-axis, then y-axis
        model.add_vertices(Vertex(self.xmin, 0.0, z), Vertex(self.xmax, 0.0, z))
        model.add_segment(0, 1)
        model.add_vertices(Vertex(0.0, self.ymin, z), Vertex(0.0, self.ymax, z))
        model.add_segment(2, 3)

        # Tick lengths are a fiftieth of the other axis.
        half_tick = y_span / 50 / 2
        for i in range(self.x_marks + 1):
            x = self.xmin + i * x_span / self.x_marks
            a, b = model.add_vertices(Vertex(x, half_tick, z), Vertex(x, -half_tick, z))
            model.add_segment(a, b)

        half_tick = x_span / 50 / 2
        for i in range(self.y_marks + 1):
            y = self.ymin + i * y_span / self.y_marks
            a, b = model.add_vertices(Vertex(half_tick, y, z), Vertex(-half_tick, y, z))
            model.add_segment(a, b)
