"""
Shape-finding driver.

This module provides:
    • find_shapes_in_masks(masks, ...)
    • find_shapes(image, ...)
    • deduplicate_matches(matches, radius)

Each mask is processed independently and the per-mask results are
concatenated, so one physical shape is normally reported once for every
channel/threshold level it survives. deduplicate_matches() collapses
those repeats when asked to.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from models.shape_match import ShapeMatch
from detectors.mask_builder import build_masks, extract_contours
from detectors.shape_classifier import classify_contours
from utils.clustering import cluster_objects_radius
from config import get_active_params


logger = logging.getLogger(__name__)


# ========================================================================
# 1. OPTIONAL MERGE OF REPEATED DETECTIONS
# ========================================================================

def deduplicate_matches(matches: List[ShapeMatch], radius=None) -> List[ShapeMatch]:
    """
    Keeps one match per cluster of same-label matches whose centroids
    chain together within `radius` pixels. The earliest match (lowest
    mask index, then contour index) of each cluster is kept.
    """
    if radius is None:
        radius = get_active_params()["DEDUP_RADIUS"]

    labels = []
    for m in matches:
        if m.label not in labels:
            labels.append(m.label)

    kept = []
    for label in labels:
        same = [m for m in matches if m.label == label]
        for cluster in cluster_objects_radius(same, radius, key=lambda m: m.centroid):
            kept.append(min(cluster, key=ShapeMatch.sort_key))

    kept.sort(key=ShapeMatch.sort_key)
    return kept


# ========================================================================
# 2. DRIVER
# ========================================================================

def find_shapes_in_masks(
    masks: Iterable[np.ndarray],
    deduplicate: Optional[bool] = None,
    workers: Optional[int] = None,
    params=None,
) -> List[ShapeMatch]:
    """
    Extracts and classifies the contours of every mask and concatenates
    the results in (mask, contour) order.
    """
    if params is None:
        params = get_active_params()
    if deduplicate is None:
        deduplicate = params["DEDUPLICATE_RESULTS"]

    matches: List[ShapeMatch] = []
    mask_count = 0

    for mask_index, mask in enumerate(masks):
        contours = extract_contours(mask)
        found = classify_contours(contours, mask_index, workers=workers, params=params)
        logger.debug("mask %d: %d contours, %d shapes", mask_index, len(contours), len(found))
        matches.extend(found)
        mask_count += 1

    if deduplicate:
        before = len(matches)
        matches = deduplicate_matches(matches, params["DEDUP_RADIUS"])
        logger.debug("deduplicated %d matches down to %d", before, len(matches))

    logger.info("found %d shapes across %d masks", len(matches), mask_count)
    return matches


def find_shapes(
    image: np.ndarray,
    deduplicate: Optional[bool] = None,
    workers: Optional[int] = None,
    params=None,
) -> List[ShapeMatch]:
    """
    Runs the complete detection for one image:
      1. Smooth (pyramid down/up)
      2. Build per-channel edge and threshold masks
      3. Extract contours from each mask
      4. Classify every contour
    """
    if params is None:
        params = get_active_params()

    masks = build_masks(image, params)
    return find_shapes_in_masks(masks, deduplicate, workers, params)
