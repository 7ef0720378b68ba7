from __future__ import annotations

from math import pi, sqrt

from wiremodels.model.geometry_primitives import Vertex

SQRT3 = sqrt(3.0)


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def lerp(a: Vertex, b: Vertex, t: float) -> Vertex:
    """
    Linear interpolation between two vertices.

    Computed component-wise as (1-t)*a + t*b, so that t=0 reproduces `a`
    and t=1 reproduces `b` exactly.
    """
    return Vertex(
        (1 - t) * a.x + t * b.x,
        (1 - t) * a.y + t * b.y,
        (1 - t) * a.z + t * b.z,
    )


def equilateral_ring(r: float, y: float) -> tuple[Vertex, Vertex, Vertex]:
    """
    Three vertices of an equilateral triangle inscribed in a circle of radius `r`
    in the plane at height `y`, centred on the y-axis.

    The vertices are always returned at 0, 120 and 240 degrees about the y-axis
    (in that order), starting on the positive x-axis.
    """
    return (
        Vertex(r, y, 0.0),
        Vertex(-r / 2, y, r * 0.5 * SQRT3),
        Vertex(-r / 2, y, -r * 0.5 * SQRT3),
    )
