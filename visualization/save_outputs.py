"""
Centralized output-saving utilities for the shape detection pipeline.

This module provides:
    • save_all_outputs(...)
    • save_annotated_shapes(...)
    • save_mask(...)

Uses draw_shapes to visualize and utils.image_io for filesystem handling.
"""

import numpy as np
from typing import List, Optional

from models.shape_match import ShapeMatch
from visualization.draw_shapes import draw_shapes
from utils.image_io import save_image, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_annotated_shapes(path: str, base_image: np.ndarray, matches: List[ShapeMatch]):
    """
    Draw outlines and labels on a copy of the base image and save to disk.
    """
    vis = base_image.copy()
    draw_shapes(vis, matches)
    save_image(path, vis)
    return vis


def save_mask(path: str, mask: np.ndarray):
    """
    Saves a binary mask (uint8).
    """
    if mask.dtype != np.uint8:
        mask = mask.astype(np.uint8)
    save_image(path, mask)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    matches: List[ShapeMatch],
    edge_mask: Optional[np.ndarray] = None
):
    """
    Saves every output artifact for one processed image.

    Example output:
        <id>_shapes.png
        <id>_edges.png      (only when edge_mask is given)
    """

    ensure_output_dir(output_dir)

    save_annotated_shapes(
        f"{output_dir}/{image_id}_shapes.png",
        base_image,
        matches
    )

    if edge_mask is not None:
        save_mask(
            f"{output_dir}/{image_id}_edges.png",
            edge_mask
        )
