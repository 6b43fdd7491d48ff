"""
Visualization utilities for rendering classified shapes.

This module provides:
    • draw_outlines(img, matches, color, thickness)
    • draw_labels(img, matches, color, font_scale)
    • draw_shapes(img, matches)
"""

import cv2
import numpy as np
from typing import List, Tuple

from models.shape_match import ShapeMatch
from config import SHAPE_COLOR, LABEL_COLOR, SHAPE_THICKNESS, LABEL_FONT_SCALE


# ---------------------------------------------------------------------
#  Outlines as closed, anti-aliased polylines
# ---------------------------------------------------------------------

def draw_outlines(
    image,
    matches: List[ShapeMatch],
    color: Tuple[int, int, int] = SHAPE_COLOR,
    thickness: int = SHAPE_THICKNESS
):
    """
    Args:
        image: BGR numpy array (modified in-place)
        matches: list of ShapeMatch objects
        color: (B, G, R)
        thickness: pixel width
    """
    polylines = [np.round(m.polygon).astype(np.int32) for m in matches]
    if polylines:
        cv2.polylines(image, polylines, True, color, thickness, cv2.LINE_AA)
    return image


# ---------------------------------------------------------------------
#  Labels at each shape's centroid
# ---------------------------------------------------------------------

def draw_labels(
    image,
    matches: List[ShapeMatch],
    color: Tuple[int, int, int] = LABEL_COLOR,
    font_scale: float = LABEL_FONT_SCALE
):
    for m in matches:
        cx, cy = m.centroid
        cv2.putText(
            image,
            m.label,
            (int(cx), int(cy)),
            cv2.FONT_HERSHEY_SIMPLEX,
            font_scale,
            color
        )
    return image


def draw_shapes(image, matches: List[ShapeMatch]):
    """
    Outlines first, then labels on top.
    """
    draw_outlines(image, matches)
    draw_labels(image, matches)
    return image
