"""
Contour Shape Detection Package

This package finds simple geometric shapes in raster images:

- Multi-channel, multi-threshold mask generation
- Contour extraction & polygon approximation
- Convexity / area gating
- Vertex-count classification (triangle, rectangle, pentagon)
- Ellipse / circle fallback
- Output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
