"""
Binary mask generation and contour extraction.

This module provides:
    • smooth_image(image)
    • build_masks(image)
    • extract_contours(mask)

For every colour channel, the smoothed image produces:
    level 0      → Canny edges, dilated to close small gaps
    levels 1..N  → gray >= (level + 1) * 255 / 10
"""

from typing import Iterator, List

import cv2
import numpy as np

from config import get_active_params


def smooth_image(image: np.ndarray) -> np.ndarray:
    """
    Pyramid down + up: cheap low-pass filter that keeps the image size.
    """
    h, w = image.shape[:2]
    downscaled = cv2.pyrDown(image)
    return cv2.pyrUp(downscaled, dstsize=(w, h))


def split_channels(image: np.ndarray) -> List[np.ndarray]:
    """
    Returns the image's colour planes (a single plane for grayscale).
    """
    if image.ndim == 2:
        return [image]
    return list(cv2.split(image))[:3]


def edge_mask(gray: np.ndarray, low=None, high=None, aperture=None) -> np.ndarray:
    """
    Canny edges, dilated with a 3x3 kernel to help the contour tracer.
    """
    params = get_active_params()
    if low is None:
        low = params["CANNY_LOW"]
    if high is None:
        high = params["CANNY_HIGH"]
    if aperture is None:
        aperture = params["CANNY_APERTURE"]

    edges = cv2.Canny(gray, low, high, apertureSize=aperture)
    return cv2.dilate(edges, None)


def threshold_mask(gray: np.ndarray, level: int) -> np.ndarray:
    """
    255 wherever the channel value is at least (level + 1) / 10 of full scale.
    """
    mask = gray >= (level + 1) * 255 / 10.0
    return mask.astype(np.uint8) * 255


def build_masks(image: np.ndarray, params=None) -> Iterator[np.ndarray]:
    """
    Yields every binary mask for the image, in (channel, level) order.
    """
    if params is None:
        params = get_active_params()

    smoothed = smooth_image(image)

    for gray in split_channels(smoothed):
        for level in range(params["THRESHOLD_LEVELS"]):
            if level == 0:
                yield edge_mask(
                    gray,
                    params["CANNY_LOW"],
                    params["CANNY_HIGH"],
                    params["CANNY_APERTURE"],
                )
            else:
                yield threshold_mask(gray, level)


def extract_contours(mask: np.ndarray) -> List[np.ndarray]:
    """
    Traces every boundary in a binary mask (all hierarchy levels,
    straight runs compressed to their end points).
    """
    if mask.dtype != np.uint8:
        mask = (mask > 0).astype(np.uint8) * 255

    # OpenCV 3 returns (image, contours, hierarchy), OpenCV 4 (contours, hierarchy)
    found = cv2.findContours(mask, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)
    return list(found[-2])
