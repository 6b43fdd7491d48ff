"""
Data Models

Defines the core data structures:
- ShapeMatch
- FittedEllipse
"""

from .shape_match import (
    ShapeMatch,
    SHAPE_LABELS,
    TRIANGLE,
    RECTANGLE,
    PENTAGON,
    CIRCLE,
    ELLIPSE,
)
from .fitted_ellipse import FittedEllipse

__all__ = [
    "ShapeMatch",
    "FittedEllipse",
    "SHAPE_LABELS",
    "TRIANGLE",
    "RECTANGLE",
    "PENTAGON",
    "CIRCLE",
    "ELLIPSE",
]
