"""Tests for grid-line label placement."""

import pytest

from grid_room_renderer.camera import Camera, ScreenPoint, Viewport
from grid_room_renderer.config import LabelConfig, WorldConfig
from grid_room_renderer.geometry import GridLine, Orientation, build_room
from grid_room_renderer.labels import depth_font_size, place_label, place_labels
from grid_room_renderer.viewpoint import Viewpoint

VIEWPORT = Viewport(800, 600)
WORLD = WorldConfig()


def center_labels(cfg=None):
    snap = build_room(WORLD, Camera(viewport=VIEWPORT), Viewpoint(5, 5))
    return place_labels(snap.grid_lines, VIEWPORT, WORLD, 5.0, cfg)


def by_orientation(placed, orientation):
    return {line.index: label for line, label in placed
            if line.orientation is orientation}


def test_depth_font_size_is_clamped():
    cfg = LabelConfig()
    assert depth_font_size(0.5, cfg) == cfg.max_font_size
    assert depth_font_size(4.0, cfg) == pytest.approx(10.0)
    assert depth_font_size(50.0, cfg) == cfg.min_font_size


def test_center_view_depth_labels():
    """Far boundary is always attempted; line 1 is just legible; nearer lines run off screen."""
    labels = by_orientation(center_labels(), Orientation.HORIZONTAL)

    assert sorted(labels) == [0, 1]
    far = labels[0]
    assert far.text == '0'
    assert far.anchor == 'right'
    assert far.align == 'start'
    assert far.font_size == pytest.approx(8.0)
    assert far.x == pytest.approx(670 + 6)
    assert far.y == pytest.approx(367.5)


def test_interior_depth_label_needs_legible_font():
    cfg = LabelConfig(legible_font_size=11.0)
    labels = by_orientation(center_labels(cfg), Orientation.HORIZONTAL)
    assert sorted(labels) == [0]


def test_width_labels_only_near_viewer_or_boundary():
    labels = by_orientation(center_labels(), Orientation.VERTICAL)
    assert sorted(labels) == [0, 3, 4, 5, 6, 7, 10]


def test_width_label_flips_above_when_near_end_is_off_screen():
    labels = by_orientation(center_labels(), Orientation.VERTICAL)
    cfg = LabelConfig()
    label = labels[5]
    assert label.anchor == 'above'
    assert label.align == 'middle'
    assert label.x == pytest.approx(400)
    assert label.y == pytest.approx(367.5 - cfg.offset)
    assert label.font_size == pytest.approx(cfg.base_font_size * cfg.vertical_font_fraction)


def test_width_label_below_lower_endpoint():
    line = GridLine(4, Orientation.VERTICAL,
                    ScreenPoint(300, 100, 5), ScreenPoint(350, 200, 1))
    label = place_label(line, VIEWPORT, WORLD, 4.0)
    cfg = LabelConfig()
    assert label.anchor == 'below'
    assert label.x == pytest.approx(350)
    assert label.y == pytest.approx(200 + cfg.offset + label.font_size)


def test_width_label_suppressed_far_from_viewer():
    line = GridLine(4, Orientation.VERTICAL,
                    ScreenPoint(300, 100, 5), ScreenPoint(350, 200, 1))
    assert place_label(line, VIEWPORT, WORLD, 8.0) is None


def test_depth_label_anchors_left_when_line_sits_right():
    line = GridLine(0, Orientation.HORIZONTAL,
                    ScreenPoint(500, 350, 4), ScreenPoint(700, 350, 4))
    label = place_label(line, VIEWPORT, WORLD, 5.0)
    assert label.anchor == 'left'
    assert label.align == 'end'
    assert label.x == pytest.approx(494)


def test_label_outside_safe_rect_is_suppressed():
    line = GridLine(10, Orientation.HORIZONTAL,
                    ScreenPoint(-100, 598, 2), ScreenPoint(100, 598, 2))
    assert place_label(line, VIEWPORT, WORLD, 5.0) is None


def test_suppressed_labels_do_not_hide_lines():
    snap = build_room(WORLD, Camera(viewport=VIEWPORT), Viewpoint(5, 5))
    placed = place_labels(snap.grid_lines, VIEWPORT, WORLD, 5.0)
    assert len(placed) < len(snap.grid_lines)
    assert len(snap.grid_lines) == 16
