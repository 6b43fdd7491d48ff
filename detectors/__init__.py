"""
Detectors Package

Contains the detection modules used in the shape detection pipeline:
- Mask generation & contour extraction
- Convexity / area gate
- Vertex-count classification
- Ellipse / circle fallback
- Per-contour and per-image drivers
"""

from .mask_builder import build_masks, extract_contours
from .polygon_gate import passes_gate
from .vertex_classifier import classify_polygon, is_rectangle, max_corner_angle
from .ellipse_detector import fit_ellipse, ellipse_fit_fraction, classify_ellipse
from .shape_classifier import (
    approximate_polygon,
    find_shape_from_contour,
    classify_contours,
)
from .shape_finder import find_shapes, find_shapes_in_masks, deduplicate_matches

__all__ = [
    "build_masks",
    "extract_contours",
    "passes_gate",
    "classify_polygon",
    "is_rectangle",
    "max_corner_angle",
    "fit_ellipse",
    "ellipse_fit_fraction",
    "classify_ellipse",
    "approximate_polygon",
    "find_shape_from_contour",
    "classify_contours",
    "find_shapes",
    "find_shapes_in_masks",
    "deduplicate_matches",
]
