"""
Wireframe Model (Mesh Sink)
===========================
A WireframeModel is the ordered collection of vertices and primitives
(line segments and single points) that a generator produces.

Indexing rules:
---------------
1. Vertices receive sequential, 0-based indices in insertion order.
   Indices are never reused.
2. A primitive may only reference vertices that already exist.
3. Merging another model appends its vertices after ours and offsets its
   primitive indices, so every model is built with its own local indices.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, TYPE_CHECKING

import numpy as np

from wiremodels.model.geometry_primitives import LineSegment, Point, Vertex

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class WireframeModel:
    name: str = ""
    vertices: List[Vertex] = field(default_factory=list)
    segments: List[LineSegment] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    visible: bool = True

    # ---- building ----

    def add_vertex(self, vertex: Vertex) -> int:
        """Append one vertex and return its index."""
        if not isinstance(vertex, Vertex):
            raise TypeError("Can only add a Vertex to a WireframeModel.")
        self.vertices.append(vertex)
        return len(self.vertices) - 1

    def add_vertices(self, *vertices: Vertex) -> list[int]:
        return [self.add_vertex(v) for v in vertices]

    def _require_vertex(self, index: int) -> None:
        count = len(self.vertices)
        if not 0 <= index < count:
            raise IndexError(
                f"Vertex index {index} out of range for model '{self.name}' with {count} vertices."
            )

    def add_segment(self, start: int, end: int) -> LineSegment:
        """Append one line segment between two existing vertices."""
        self._require_vertex(start)
        self._require_vertex(end)
        segment = LineSegment(start, end)
        self.segments.append(segment)
        return segment

    def add_segments(self, *pairs: tuple[int, int]) -> list[LineSegment]:
        return [self.add_segment(i, j) for i, j in pairs]

    def add_point(self, index: int) -> Point:
        """Append a point primitive drawing one existing vertex."""
        self._require_vertex(index)
        point = Point(index)
        self.points.append(point)
        return point

    def merge(self, other: WireframeModel) -> int:
        """
        Append the geometry of `other` to this model.

        Returns:
            The offset that was added to every vertex index of `other`.
        """
        offset = len(self.vertices)
        self.vertices.extend(other.vertices)
        self.segments.extend(
            LineSegment(s.start + offset, s.end + offset) for s in other.segments
        )
        self.points.extend(Point(p.index + offset) for p in other.points)
        logger.debug("Merged '%s' into '%s' at offset %d.", other.name, self.name, offset)
        return offset

    # ---- queries ----

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def primitive_count(self) -> int:
        return len(self.segments) + len(self.points)

    def vertex_array(self) -> npt.NDArray[np.float64]:
        """All vertex coordinates as an (N, 3) array."""
        if not self.vertices:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([[v.x, v.y, v.z] for v in self.vertices], dtype=np.float64)

    def segment_array(self) -> npt.NDArray[np.int64]:
        """All segment endpoint indices as an (M, 2) array."""
        if not self.segments:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([s.as_tuple() for s in self.segments], dtype=np.int64)

    def point_array(self) -> npt.NDArray[np.int64]:
        """All point primitive indices as an (P,) array."""
        return np.array([p.index for p in self.points], dtype=np.int64)

    def check(self) -> list[str]:
        """
        Look for obvious problems with the model, e.g. a model that has
        primitives but no vertices, or a primitive with an invalid index.

        Returns:
            A list of human readable problems (empty if the model looks fine).
        """
        problems = []
        if not self.vertices and self.primitive_count:
            problems.append(f"Model '{self.name}' does not have any vertices.")
        if self.vertices and not self.primitive_count:
            problems.append(f"Model '{self.name}' does not have any primitives.")

        count = len(self.vertices)
        for position, segment in enumerate(self.segments):
            if not (0 <= segment.start < count and 0 <= segment.end < count):
                problems.append(f"Segment {position} {segment} has an invalid vertex index.")
        for position, point in enumerate(self.points):
            if not 0 <= point.index < count:
                problems.append(f"Point {position} {point} has an invalid vertex index.")

        for problem in problems:
            logger.warning(problem)
        return problems

    def __str__(self) -> str:
        lines = [
            f"Model: {self.name}",
            f"This Model's visibility is: {self.visible}",
            f"Model has {len(self.vertices)} vertices.",
            f"Model has {self.primitive_count} primitives.",
        ]
        lines.extend(f"{i}: {v}" for i, v in enumerate(self.vertices))
        primitives = [*self.segments, *self.points]
        lines.extend(f"{i}: {p}" for i, p in enumerate(primitives))
        return "\n".join(lines)
