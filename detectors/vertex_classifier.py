"""
Vertex-count classifier for gated, approximated polygons.

    3 vertices → triangle
    4 vertices → rectangle, if the largest corner is ~ pi/2
    5 vertices → pentagon

Anything else is left undecided here: polygons with 6+ vertices are
handed to the ellipse detector by the caller.
"""

import math
from typing import Optional

from models.shape_match import TRIANGLE, RECTANGLE, PENTAGON
from utils.contours import as_points
from utils.geometry import polygon_angles
from config import get_active_params


def max_corner_angle(polygon) -> float:
    """
    Largest interior angle of the polygon, in radians.

    Raises DegenerateGeometry if any corner is degenerate.
    """
    return max(polygon_angles(as_points(polygon)))


def is_rectangle(polygon, angle_tolerance=None) -> bool:
    """
    A quadrilateral counts as a rectangle when its largest corner is
    within `angle_tolerance` radians of pi/2.

    Corner angles of a quadrilateral sum to 2*pi, so this also bounds
    the smallest corner to pi/2 - 3 * angle_tolerance. Skewed shapes
    inside that band are still accepted.
    """
    if angle_tolerance is None:
        angle_tolerance = get_active_params()["RIGHT_ANGLE_TOLERANCE"]

    return abs(max_corner_angle(polygon) - math.pi / 2) < angle_tolerance


def classify_polygon(polygon, angle_tolerance=None) -> Optional[str]:
    """
    Returns the shape label for a 3-, 4- or 5-vertex polygon, or None.

    DegenerateGeometry from the quadrilateral check propagates; the
    shape classifier turns it into "no match".
    """
    n = len(polygon)

    if n == 3:
        # TODO: reject slivers whose smallest angle is near zero
        return TRIANGLE

    if n == 4:
        return RECTANGLE if is_rectangle(polygon, angle_tolerance) else None

    if n == 5:
        return PENTAGON

    return None
