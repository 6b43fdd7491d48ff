"""
Ellipse / circle fallback for contours whose approximation has 6+ vertices.

This module provides:
    • fit_ellipse(contour)
    • ellipse_fit_fraction(contour, ellipse, threshold)
    • classify_ellipse(contour, ...)

Steps:
    1. Least-squares ellipse fit of the raw contour (cv2.fitEllipse)
    2. Evaluate the normalized ellipse equation at every contour point
    3. Count points whose value is within `threshold` of 1.0
    4. If at least half conform, the contour is an ellipse; axes that
       differ by a few pixels or less make it a circle
"""

import logging
import math
from typing import Optional

import cv2
import numpy as np

from models.fitted_ellipse import FittedEllipse
from models.shape_match import CIRCLE, ELLIPSE
from utils.contours import as_contour
from utils.errors import EllipseFitFailure
from config import get_active_params


logger = logging.getLogger(__name__)

# cv2.fitEllipse needs at least this many points
MIN_FIT_POINTS = 5


# ========================================================================
# 1. ELLIPSE FIT
# ========================================================================

def fit_ellipse(contour) -> FittedEllipse:
    """
    Fits an ellipse to the contour points.

    Raises:
        EllipseFitFailure: too few points, OpenCV failure, or a
        zero / non-finite axis in the result.
    """
    pts = as_contour(contour)
    if len(pts) < MIN_FIT_POINTS:
        raise EllipseFitFailure(
            f"need at least {MIN_FIT_POINTS} points, got {len(pts)}"
        )

    try:
        box = cv2.fitEllipse(pts)
    except cv2.error as exc:
        raise EllipseFitFailure(str(exc)) from exc

    ellipse = FittedEllipse.from_rotated_rect(box)

    values = (ellipse.center[0], ellipse.center[1], ellipse.width, ellipse.height)
    if not all(math.isfinite(v) for v in values):
        raise EllipseFitFailure(f"non-finite ellipse parameters {box}")
    if ellipse.width <= 0 or ellipse.height <= 0:
        raise EllipseFitFailure(f"zero-length ellipse axis {box}")

    return ellipse


# ========================================================================
# 2. GOODNESS OF FIT
# ========================================================================

def ellipse_fit_fraction(contour, ellipse: FittedEllipse, threshold=None) -> float:
    """
    Fraction of contour points lying on the ellipse boundary, where
    "on" means |value - 1| < threshold for the normalized equation.
    """
    if threshold is None:
        threshold = get_active_params()["ELLIPSE_TOLERANCE"]

    values = ellipse.evaluate(contour)
    if values.size == 0:
        return 0.0

    conforming = np.count_nonzero(np.abs(values - 1.0) < threshold)
    return conforming / values.size


# ========================================================================
# 3. CLASSIFICATION
# ========================================================================

def classify_ellipse(
    contour,
    threshold=None,
    min_fraction=None,
    circle_tolerance=None,
) -> Optional[str]:
    """
    Returns "circle", "ellipse", or None when the contour is not
    ellipse-like or no ellipse can be fitted.
    """
    params = get_active_params()
    if threshold is None:
        threshold = params["ELLIPSE_TOLERANCE"]
    if min_fraction is None:
        min_fraction = params["ELLIPSE_MIN_FIT_FRACTION"]
    if circle_tolerance is None:
        circle_tolerance = params["CIRCLE_AXIS_TOLERANCE"]

    try:
        ellipse = fit_ellipse(contour)
    except EllipseFitFailure as exc:
        logger.debug("ellipse fit failed: %s", exc)
        return None

    fraction = ellipse_fit_fraction(contour, ellipse, threshold)
    if fraction < min_fraction:
        logger.debug("ellipse fit fraction %.2f below %.2f", fraction, min_fraction)
        return None

    return CIRCLE if ellipse.is_circle(circle_tolerance) else ELLIPSE
