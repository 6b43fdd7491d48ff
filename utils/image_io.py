"""
Image I/O utilities for the shape detection pipeline.

This module provides:
    • load_images(path_patterns)
    • extract_image_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
import re
import glob
from typing import Iterable, List, Tuple, Union

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_image_id(filename: str) -> str:
    """
    Extract the first integer found in the file name, or the bare
    file stem when the name has no digits.

    Example:
        'images/038.png'    → '038'
        'images/shapes.jpg' → 'shapes'
    """
    stem = os.path.splitext(os.path.basename(filename))[0]
    m = re.search(r'\d+', stem)
    return m.group(0) if m else stem


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_patterns: Union[str, Iterable[str]]) -> Tuple[List[np.ndarray], List[str]]:
    """
    Loads all images matching the given glob pattern(s).
    Unreadable files are skipped.

    Returns:
        images:  list of np.ndarray (BGR)
        names:   list of identifiers extracted from filenames

    Example:
        images, names = load_images('images/*.png')
    """
    if isinstance(path_patterns, str):
        path_patterns = [path_patterns]

    file_list = []
    for pattern in path_patterns:
        for fname in sorted(glob.glob(pattern)):
            if fname not in file_list:
                file_list.append(fname)

    images = []
    names = []

    for fname in file_list:
        img = cv2.imread(fname)
        if img is None:
            continue
        images.append(img)
        names.append(extract_image_id(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)
