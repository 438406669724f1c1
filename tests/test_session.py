"""Tests for the session pipeline driver."""

import pytest

from grid_room_renderer.camera import Camera, Viewport
from grid_room_renderer.config import WorldConfig
from grid_room_renderer.session import SessionState
from grid_room_renderer.viewpoint import Direction, Viewpoint


def test_initial_frame_is_built():
    session = SessionState()
    assert session.frame is not None
    assert session.position_text() == '5,5'
    assert session.frame.primitives


def test_move_rebuilds_frame():
    session = SessionState()
    before = session.frame
    assert session.move(Direction.FORWARD)
    assert session.frame is not before
    assert session.position_text() == '5,4'


def test_blocked_move_keeps_frame():
    session = SessionState(start=Viewpoint(5, 0.5))
    before = session.frame
    assert not session.move(Direction.FORWARD)
    assert session.frame is before
    assert session.position_text() == '5,0.5'


def test_resize_recomputes_center():
    session = SessionState(camera=Camera(viewport=Viewport(800, 600)))
    far_before = session.frame.snapshot.corners['left-far-floor']
    session.resize(400, 300)
    far_after = session.frame.snapshot.corners['left-far-floor']

    assert session.viewport.center_x == 200
    assert far_after.x == pytest.approx(far_before.x - 200)
    assert far_after.y == pytest.approx(far_before.y - 150)


def test_relative_position():
    session = SessionState()
    rel = session.relative_position()
    assert rel.center_distance == pytest.approx(0.0)
    assert rel.normalized_distance == pytest.approx(0.0)

    corner = SessionState(start=Viewpoint(0.5, 0.5))
    rel = corner.relative_position()
    assert rel.normalized_distance == pytest.approx(0.9)


def test_floor_level_reaches_camera():
    session = SessionState(world=WorldConfig(floor_level=2.0))
    assert session.camera.floor_level == 2.0
    far = session.frame.snapshot.corners['left-far-floor']
    # Floor sits eye_height below the eye wherever the floor is
    assert far.y > session.viewport.center_y


def test_labels_follow_primitives():
    session = SessionState(clip_surfaces=True)
    kinds = [p.kind for p in session.frame.primitives]
    assert kinds[0] == 'floor'
    assert kinds[-1] == 'ceiling'
    assert session.frame.labels


def test_shared_camera_is_left_untouched():
    camera = Camera(viewport=Viewport(640, 480))
    raised = SessionState(world=WorldConfig(floor_level=2.0), camera=camera)
    level = SessionState(world=WorldConfig(), camera=camera)

    assert camera.floor_level == 0.0
    assert raised.camera.floor_level == 2.0
    assert level.camera.floor_level == 0.0
    raised.resize(320, 240)
    assert camera.viewport.width == 640
    assert level.viewport.width == 640
