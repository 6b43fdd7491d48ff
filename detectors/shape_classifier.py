"""
Per-contour shape classification.

This module provides:
    • approximate_polygon(contour, epsilon_ratio)
    • find_shape_from_contour(contour, params)
    • classify_contours(contours, mask_index, workers)

Pipeline for one contour:
    approximate → convexity/area gate → vertex-count rules
                → (6+ vertices) ellipse/circle fallback on the raw contour
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import cv2
import numpy as np

from models.shape_match import ShapeMatch
from detectors.polygon_gate import passes_gate
from detectors.vertex_classifier import classify_polygon
from detectors.ellipse_detector import classify_ellipse
from utils.contours import as_contour
from utils.errors import ShapeDetectionError
from config import get_active_params


logger = logging.getLogger(__name__)


# ========================================================================
# 1. POLYGON APPROXIMATION
# ========================================================================

def approximate_polygon(contour, epsilon_ratio=None) -> np.ndarray:
    """
    Douglas-Peucker simplification of a closed contour, with a tolerance
    of `epsilon_ratio` times the contour's own perimeter.
    """
    if epsilon_ratio is None:
        epsilon_ratio = get_active_params()["APPROX_EPSILON_RATIO"]

    pts = as_contour(contour)
    epsilon = cv2.arcLength(pts, True) * epsilon_ratio
    return cv2.approxPolyDP(pts, epsilon, True)


# ========================================================================
# 2. SINGLE CONTOUR
# ========================================================================

def _classify(contour: np.ndarray, params: dict):
    approx = approximate_polygon(contour, params["APPROX_EPSILON_RATIO"])

    # Shapes only appear with convex contours; small ones are noise
    if not passes_gate(approx, params["MIN_AREA"]):
        return None, None

    if len(approx) < 6:
        label = classify_polygon(approx, params["RIGHT_ANGLE_TOLERANCE"])
        return label, approx

    # approximation looks bad for curved shapes, report the raw contour
    label = classify_ellipse(
        contour,
        threshold=params["ELLIPSE_TOLERANCE"],
        min_fraction=params["ELLIPSE_MIN_FIT_FRACTION"],
        circle_tolerance=params["CIRCLE_AXIS_TOLERANCE"],
    )
    return label, contour


def find_shape_from_contour(
    contour,
    params=None,
    mask_index: int = 0,
    contour_index: int = 0,
) -> Optional[ShapeMatch]:
    """
    Classifies one contour.

    Returns a ShapeMatch, or None when the contour is rejected by the
    gate, matches no shape, or fails with a per-contour geometry error.
    """
    if params is None:
        params = get_active_params()

    pts = as_contour(contour)
    if len(pts) < 3:
        return None

    try:
        label, polygon = _classify(pts, params)
    except (ShapeDetectionError, cv2.error) as exc:
        logger.debug("contour %d/%d skipped: %s", mask_index, contour_index, exc)
        return None

    if label is None:
        return None

    return ShapeMatch(label, polygon, mask_index, contour_index)


# ========================================================================
# 3. MANY CONTOURS
# ========================================================================

def classify_contours(
    contours: Sequence,
    mask_index: int = 0,
    workers: Optional[int] = None,
    params=None,
) -> List[ShapeMatch]:
    """
    Classifies every contour of one mask.

    Each contour yields at most one match; matches come back in contour
    order. With workers > 1 the contours are classified on a thread pool
    (OpenCV releases the GIL) and merged back in the same order.
    """
    if params is None:
        params = get_active_params()

    def classify_one(item):
        idx, contour = item
        return find_shape_from_contour(contour, params, mask_index, idx)

    items = list(enumerate(contours))

    if workers is not None and workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(classify_one, items))
    else:
        results = [classify_one(item) for item in items]

    return [m for m in results if m is not None]
