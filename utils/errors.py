"""
Exception types raised while classifying a single contour.

None of these are fatal for a whole image: the shape classifier catches
them and moves on to the next contour.
"""


class ShapeDetectionError(Exception):
    """Base class for per-contour classification failures."""


class DegenerateGeometry(ShapeDetectionError, ValueError):
    """
    Raised when an angle is requested for coincident or collinear points,
    i.e. when there is no corner to measure.
    """


class EllipseFitFailure(ShapeDetectionError):
    """
    Raised when no usable ellipse can be fitted to a contour
    (too few points, zero-length axis, or an OpenCV fitting error).
    """
