"""
Visualization Tools

Provides drawing utilities for:
- Shape outlines
- Shape labels
- Saving annotated results
"""

from .draw_shapes import draw_outlines, draw_labels, draw_shapes
from .save_outputs import save_all_outputs, save_annotated_shapes, save_mask

__all__ = [
    "draw_outlines",
    "draw_labels",
    "draw_shapes",
    "save_all_outputs",
    "save_annotated_shapes",
    "save_mask",
]
