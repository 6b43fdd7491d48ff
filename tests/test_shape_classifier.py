"""Tests for per-contour classification and classify_contours()."""

import numpy as np

import detectors.shape_classifier as shape_classifier
from detectors.shape_classifier import (
    approximate_polygon,
    classify_contours,
    find_shape_from_contour,
)
from models.shape_match import ShapeMatch
from utils.errors import DegenerateGeometry
from conftest import regular_polygon, sampled_ellipse


def test_approximation_never_adds_vertices(circle_contour):
    approx = approximate_polygon(circle_contour, 0.02)
    assert 6 <= len(approx) < len(circle_contour)


def test_square(square):
    match = find_shape_from_contour(square)
    assert isinstance(match, ShapeMatch)
    assert match.label == "rectangle"
    assert match.vertex_count == 4


def test_triangle():
    match = find_shape_from_contour([(0, 0), (100, 0), (50, 80)])
    assert match.label == "triangle"


def test_pentagon(pentagon):
    match = find_shape_from_contour(pentagon)
    assert match.label == "pentagon"
    assert match.vertex_count == 5


def test_circle_reports_original_contour(circle_contour):
    match = find_shape_from_contour(circle_contour)
    assert match.label == "circle"
    assert len(match.polygon) == len(circle_contour)


def test_ellipse(ellipse_contour):
    label, polygon = find_shape_from_contour(ellipse_contour)
    assert label == "ellipse"
    assert len(polygon) == len(ellipse_contour)


def test_parallelogram_is_no_match(parallelogram):
    assert find_shape_from_contour(parallelogram) is None


def test_small_triangle_is_gated_out():
    assert find_shape_from_contour([(0, 0), (20, 0), (0, 10)]) is None


def test_area_floor_from_params(square):
    params = dict(shape_classifier.get_active_params(), MIN_AREA=50000)
    assert find_shape_from_contour(square, params) is None


def test_concave_contour_is_no_match():
    assert find_shape_from_contour([(0, 0), (100, 0), (100, 100), (50, 40), (0, 100)]) is None


def test_degenerate_geometry_is_no_match(square, monkeypatch):
    def raise_degenerate(*args, **kwargs):
        raise DegenerateGeometry("coincident")

    monkeypatch.setattr(shape_classifier, "classify_polygon", raise_degenerate)
    assert find_shape_from_contour(square) is None


def test_empty_contour_is_no_match():
    assert find_shape_from_contour([]) is None


def test_classification_is_idempotent(pentagon, circle_contour):
    for contour in (pentagon, circle_contour):
        first = find_shape_from_contour(contour)
        second = find_shape_from_contour(contour)
        assert first.label == second.label
        assert np.array_equal(first.polygon, second.polygon)


def test_classify_contours_keeps_contour_order(square, pentagon):
    contours = [square, [(0, 0), (20, 0), (0, 10)], pentagon]
    matches = classify_contours(contours, mask_index=3)

    assert [m.label for m in matches] == ["rectangle", "pentagon"]
    assert [m.contour_index for m in matches] == [0, 2]
    assert all(m.mask_index == 3 for m in matches)


def test_classify_contours_on_threads_matches_serial():
    contours = [regular_polygon(n, 40 + n, center=(100, 100)) for n in (3, 4, 5)]
    contours += [sampled_ellipse(60, 60, center=(100, 100)), sampled_ellipse(80, 40)]

    serial = classify_contours(contours)
    threaded = classify_contours(contours, workers=4)

    assert [m.label for m in serial] == ["triangle", "rectangle", "pentagon", "circle", "ellipse"]
    assert [(m.label, m.contour_index) for m in threaded] == [
        (m.label, m.contour_index) for m in serial
    ]


def test_match_unpacks_as_label_and_polygon(square):
    label, polygon = find_shape_from_contour(square)
    assert label == "rectangle"
    assert len(polygon) == 4
