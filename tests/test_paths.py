"""Tests for edge path derivation."""

from roadmap_graph.layout.paths import edge_curve, format_path
from roadmap_graph.parser.model import Orientation


def test_vertical_curve_connects_bottom_to_top():
    curve = edge_curve(50, 50, 280, 250, Orientation.VERTICAL)
    assert curve.start == (140, 130)
    assert curve.end == (370, 250)
    # Control points halfway down, directly above/below the endpoints
    assert curve.control1 == (140, 190)
    assert curve.control2 == (370, 190)


def test_horizontal_curve_connects_right_to_left():
    curve = edge_curve(50, 50, 300, 230, Orientation.HORIZONTAL)
    assert curve.start == (250, 100)
    assert curve.end == (300, 280)
    assert curve.control1 == (275, 100)
    assert curve.control2 == (275, 280)


def test_straight_vertical_edge_has_aligned_controls():
    curve = edge_curve(50, 50, 50, 250, Orientation.VERTICAL)
    xs = {curve.start[0], curve.control1[0], curve.control2[0], curve.end[0]}
    assert xs == {140}


def test_format_path():
    curve = edge_curve(50, 50, 300, 230, Orientation.HORIZONTAL)
    assert format_path(curve) == "M 250 100 C 275 100, 275 280, 300 280"


def test_format_path_keeps_fractions():
    curve = edge_curve(0, 0, 125, 0, Orientation.HORIZONTAL)
    # start x 200, end x 125: travel of -75, controls at 162.5
    assert "162.5" in format_path(curve)


def test_format_path_accepts_int_coordinates():
    """Whole-number int inputs format without a trailing .0."""
    curve = edge_curve(0, 0, 100, 200, Orientation.VERTICAL)
    assert format_path(curve) == "M 90 80 C 90 140, 190 140, 190 200"
