"""
Utility Functions

Provides geometry operations, error types, contour conversion,
clustering, and image I/O utilities used across detectors.
"""

from .errors import ShapeDetectionError, DegenerateGeometry, EllipseFitFailure
from .geometry import point_distance, angle, polygon_angles
from .contours import as_contour, as_points
from .clustering import cluster_indices_radius, cluster_objects_radius
from .image_io import load_images, extract_image_id, ensure_output_dir, save_image

__all__ = [
    "ShapeDetectionError",
    "DegenerateGeometry",
    "EllipseFitFailure",
    "point_distance",
    "angle",
    "polygon_angles",
    "as_contour",
    "as_points",
    "cluster_indices_radius",
    "cluster_objects_radius",
    "load_images",
    "extract_image_id",
    "ensure_output_dir",
    "save_image",
]
