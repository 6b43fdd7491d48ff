"""
Conversions between plain point lists and OpenCV contour arrays.

OpenCV contour functions want an (N, 1, 2) array of int32 or float32.
Synthetic contours built in tests and scripts are usually lists of
tuples or (N, 2) float64 arrays, so everything passes through here first.
"""

import numpy as np


def as_contour(points) -> np.ndarray:
    """
    Returns `points` as an (N, 1, 2) contour array.

    Integer input becomes int32, anything else float32.
    """
    arr = np.asarray(points)
    if arr.size == 0:
        return np.zeros((0, 1, 2), dtype=np.int32)

    arr = arr.reshape(-1, 1, 2)
    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(np.int32, copy=False)
    return arr.astype(np.float32, copy=False)


def as_points(contour) -> np.ndarray:
    """
    Returns the contour's vertices as an (N, 2) float64 array.
    """
    return np.asarray(contour, dtype=np.float64).reshape(-1, 2)
