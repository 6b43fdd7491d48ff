"""
Convexity + minimum-area gate applied to approximated polygons.

Only convex outlines are classified (the vertex-count rules assume a
simple convex shape), and anything at or below the area floor is treated
as edge-detection noise.
"""

import cv2

from utils.contours import as_contour
from config import get_active_params


def passes_gate(polygon, min_area=None) -> bool:
    """
    Returns True if the polygon has at least 3 vertices, is convex,
    and encloses strictly more than `min_area` square pixels.
    """
    if min_area is None:
        min_area = get_active_params()["MIN_AREA"]

    poly = as_contour(polygon)
    if len(poly) < 3:
        return False

    if not cv2.isContourConvex(poly):
        return False

    return abs(cv2.contourArea(poly)) > min_area
