"""Shared test fixtures: synthetic contours and masks."""

import math

import cv2
import numpy as np
import pytest


def regular_polygon(n, radius, center=(0.0, 0.0), rotation=-math.pi / 2):
    """(n, 2) float array of a regular n-gon's vertices."""
    cx, cy = center
    t = rotation + np.arange(n) * 2 * math.pi / n
    return np.stack([cx + radius * np.cos(t), cy + radius * np.sin(t)], axis=1)


def sampled_ellipse(a, b, center=(0.0, 0.0), n=200, rotation=0.0):
    """(n, 2) float array of points on an ellipse with semi-axes a, b."""
    cx, cy = center
    t = np.arange(n) * 2 * math.pi / n
    x = a * np.cos(t)
    y = b * np.sin(t)
    cr, sr = math.cos(rotation), math.sin(rotation)
    return np.stack([cx + x * cr - y * sr, cy + x * sr + y * cr], axis=1)


def pentagon_radius_for_area(area):
    """Circumradius of the regular pentagon with the given area."""
    return math.sqrt(area / (2.5 * math.sin(2 * math.pi / 5)))


@pytest.fixture
def square():
    return np.array([[10, 10], [210, 10], [210, 210], [10, 210]], dtype=np.int32)


@pytest.fixture
def parallelogram():
    # obtuse corners of ~122 degrees
    return np.array([[0, 0], [100, 0], [150, 80], [50, 80]], dtype=np.int32)


@pytest.fixture
def pentagon():
    return regular_polygon(5, 50, center=(100, 100))


@pytest.fixture
def circle_contour():
    return sampled_ellipse(60, 60, center=(100, 100), n=120)


@pytest.fixture
def ellipse_contour():
    return sampled_ellipse(80, 50, center=(150, 100), n=200)


@pytest.fixture
def shapes_mask():
    """
    600x600 mask with a 200x200 square, a regular pentagon of area
    5000 and a circle of radius 50.
    """
    mask = np.zeros((600, 600), dtype=np.uint8)

    cv2.rectangle(mask, (50, 50), (249, 249), 255, -1)

    pentagon_pts = regular_polygon(5, pentagon_radius_for_area(5000), center=(420, 150))
    cv2.fillPoly(mask, [np.round(pentagon_pts).astype(np.int32)], 255)

    cv2.circle(mask, (300, 420), 50, 255, -1)
    return mask


@pytest.fixture
def rectangle_image():
    """BGR image with one white 200x150 rectangle on black."""
    image = np.zeros((300, 300, 3), dtype=np.uint8)
    cv2.rectangle(image, (50, 75), (249, 224), (255, 255, 255), -1)
    return image
