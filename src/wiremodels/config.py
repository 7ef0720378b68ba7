"""
Configuration & Global Constants
================================
This module serves as the central registry for the default dimensions of
every model and the numeric constants shared across the package.

Exports:
    REGULAR_TETRAHEDRON_ANGLE (float): Slant angle (radians) of a regular tetrahedron.
    GEOMETRY_TOLERANCE (float): Absolute tolerance for coordinate comparisons.
"""
import math

# Face-edge-face slant angle that makes the end caps of a prism regular tetrahedra.
REGULAR_TETRAHEDRON_ANGLE: float = math.atan(math.sqrt(2.0))

GEOMETRY_TOLERANCE: float = 1e-9

# Triangular prism: side length and half-height of the body.
PRISM_SIDE_LENGTH: float = 0.5
PRISM_HALF_HEIGHT: float = 0.6

# Triangular pyramid: side length giving a regular tetrahedron of height 1.
PYRAMID_SIDE_LENGTH: float = math.sqrt(3.0) / math.sqrt(2.0)

# View frustum: (left, right, bottom, top, near, far)
FRUSTUM_BOUNDS: tuple[float, float, float, float, float, float] = (-0.25, 0.25, -0.25, 0.25, 0.25, 1.0)

# Axes: (xmin, xmax, ymin, ymax, zmin, zmax)
AXES_EXTENT: tuple[float, float, float, float, float, float] = (-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)

# Square: corners at (+-r, +-r, 0).
SQUARE_RADIUS: float = 1.0

# 2D axes tick marks per axis.
AXES_2D_MARKS: int = 5

# Cone sector: base radius, apex height, frustum top, sector angles (radians), latitude and longitude counts.
CONE_SECTOR_RADIUS: float = 1.0
CONE_SECTOR_HEIGHT: float = 1.0
CONE_SECTOR_TOP: float = 1.0
CONE_SECTOR_THETA1: float = math.pi / 2
CONE_SECTOR_THETA2: float = 3 * math.pi / 2
CONE_SECTOR_LATITUDES: int = 16
CONE_SECTOR_LONGITUDES: int = 8
