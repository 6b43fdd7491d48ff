"""Tests for the ellipse / circle fallback."""

import math

import numpy as np
import pytest

from detectors.ellipse_detector import classify_ellipse, ellipse_fit_fraction, fit_ellipse
from models.fitted_ellipse import FittedEllipse
from utils.errors import EllipseFitFailure
from conftest import sampled_ellipse


def test_evaluate_is_one_on_the_boundary():
    e = FittedEllipse((0.0, 0.0), 20.0, 10.0, 0.0)
    values = e.evaluate([(10, 0), (-10, 0), (0, 5), (0, -5), (0, 0)])
    assert values[:4] == pytest.approx([1.0] * 4)
    assert values[4] == pytest.approx(0.0)


def test_evaluate_follows_rotation():
    e = FittedEllipse((5.0, 5.0), 20.0, 10.0, 90.0)
    # width axis now points along y
    assert e.evaluate([(5, 15), (10, 5)]) == pytest.approx([1.0, 1.0])


def test_from_rotated_rect():
    e = FittedEllipse.from_rotated_rect(((1.0, 2.0), (30.0, 10.0), 45.0))
    assert e.center == (1.0, 2.0)
    assert (e.a, e.b) == (15.0, 5.0)
    assert e.theta == pytest.approx(math.pi / 4)


def test_fit_ellipse_recovers_axes(ellipse_contour):
    e = fit_ellipse(ellipse_contour)
    assert sorted([e.width, e.height]) == pytest.approx([100.0, 160.0], rel=0.02)
    assert e.center == pytest.approx((150.0, 100.0), abs=0.5)


def test_fit_needs_five_points():
    with pytest.raises(EllipseFitFailure):
        fit_ellipse([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_sampled_ellipse_conforms(ellipse_contour):
    e = fit_ellipse(ellipse_contour)
    assert ellipse_fit_fraction(ellipse_contour, e, 0.09) > 0.95


def test_circle(circle_contour):
    assert classify_ellipse(circle_contour) == "circle"


def test_ellipse(ellipse_contour):
    assert classify_ellipse(ellipse_contour) == "ellipse"


def test_mild_ellipse_over_axis_tolerance():
    # axis ratio 1.1: radii differ by 5 px > 2 px
    contour = sampled_ellipse(55, 50, center=(100, 100))
    assert classify_ellipse(contour) == "ellipse"
    assert classify_ellipse(contour, circle_tolerance=6) == "circle"


def test_rotated_ellipse():
    contour = sampled_ellipse(90, 40, center=(200, 200), rotation=math.radians(30))
    assert classify_ellipse(contour) == "ellipse"


def test_square_outline_is_not_an_ellipse():
    # 50 points along each edge of a square
    t = np.linspace(0, 100, 50, endpoint=False)
    zeros = np.zeros_like(t)
    edges = [
        np.stack([t, zeros], axis=1),
        np.stack([zeros + 100, t], axis=1),
        np.stack([100 - t, zeros + 100], axis=1),
        np.stack([zeros, 100 - t], axis=1),
    ]
    contour = np.concatenate(edges)
    assert classify_ellipse(contour) is None


def test_fit_failure_is_no_match():
    assert classify_ellipse([(0, 0), (10, 0), (5, 5)]) is None
