"""
Geometric Primitives for wireframe models.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vertex:
    """A point in 3D space. Identity is positional."""
    x: float
    y: float
    z: float = 0.0

    def distance_to(self, other: Vertex) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def __str__(self) -> str:
        return f"({self.x: .5f} {self.y: .5f} {self.z: .5f})"


@dataclass(frozen=True)
class LineSegment:
    """A straight edge between two vertices, given by their indices in a model."""
    start: int
    end: int

    def as_tuple(self) -> tuple[int, int]:
        return self.start, self.end

    def __str__(self) -> str:
        return f"Line Segment: ([{self.start}, {self.end}])"


@dataclass(frozen=True)
class Point:
    """A single vertex drawn on its own, given by its index in a model."""
    index: int

    def __str__(self) -> str:
        return f"Point: ([{self.index}])"
