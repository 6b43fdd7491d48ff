"""
This module provides:
    - point_distance
    - angle              (law of cosines, clamped to the acos domain)
    - polygon_angles     (interior angle at every vertex, wrap-around)
"""

import math
from typing import List, Sequence

from utils.errors import DegenerateGeometry


# ----------------------------------------------------------------------
#  POINT DISTANCE
# ----------------------------------------------------------------------

def point_distance(p, q) -> float:
    """
    Euclidean distance between two (x, y) points.
    """
    return math.dist((float(p[0]), float(p[1])), (float(q[0]), float(q[1])))


# ----------------------------------------------------------------------
#  ANGLE AT A VERTEX (LAW OF COSINES)
# ----------------------------------------------------------------------

def angle(a, b, c) -> float:
    """
    Returns the interior angle ABC (vertex at B) in radians, in [0, pi].

        AB, BC, AC = side lengths
        angle = acos((AB^2 + BC^2 - AC^2) / (2 * AB * BC))

    The cosine is clamped to [-1, 1] before acos, so floating-point
    rounding on nearly straight corners never leaves the acos domain.

    Raises:
        DegenerateGeometry: if A or C coincides with B, or if the three
        points are exactly collinear.
    """
    ab = point_distance(a, b)
    bc = point_distance(b, c)
    ac = point_distance(a, c)

    if ab == 0.0 or bc == 0.0:
        raise DegenerateGeometry(f"zero-length leg at vertex {tuple(b)}")

    # cross product of BA x BC; zero means no corner at B
    cross = (
        (float(a[0]) - float(b[0])) * (float(c[1]) - float(b[1]))
        - (float(a[1]) - float(b[1])) * (float(c[0]) - float(b[0]))
    )
    if abs(cross) <= 1e-12 * ab * bc:
        raise DegenerateGeometry(f"collinear points around vertex {tuple(b)}")

    cos_angle = (ab * ab + bc * bc - ac * ac) / (2 * ab * bc)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle)


# ----------------------------------------------------------------------
#  ALL INTERIOR ANGLES OF A CLOSED POLYGON
# ----------------------------------------------------------------------

def polygon_angles(points: Sequence) -> List[float]:
    """
    Angle at every vertex i, measured with neighbours i-1 and i+1
    (indices wrap around the closed polygon).
    """
    n = len(points)
    return [
        angle(points[(i - 1) % n], points[i], points[(i + 1) % n])
        for i in range(n)
    ]
