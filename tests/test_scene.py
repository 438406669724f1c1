"""Tests for depth ordering of room primitives."""

import math

import pytest

from grid_room_renderer.camera import Camera, ScreenPoint
from grid_room_renderer.config import WorldConfig
from grid_room_renderer.geometry import build_room
from grid_room_renderer.scene import (
    LinePrimitive,
    PolygonPrimitive,
    Scene,
    compose,
    wall_depth,
)
from grid_room_renderer.viewpoint import Direction, Viewpoint, ViewpointController


def ordered_for(viewpoint, clip_surfaces=True):
    world = WorldConfig()
    snap = build_room(world, Camera(), viewpoint, clip_surfaces=clip_surfaces)
    return compose(snap, viewpoint, world).ordered()


def test_floor_first_and_ceiling_last():
    ordered = ordered_for(Viewpoint(5, 5))
    kinds = [p.kind for p in ordered]

    assert kinds[0] == 'floor'
    assert kinds[-1] == 'ceiling'
    assert kinds.count('grid-line') == 16
    assert {'north', 'west', 'east'} <= set(kinds)


def test_draw_order_invariant_holds_everywhere():
    world = WorldConfig()
    ctl = ViewpointController(world, Viewpoint(0.5, 9.5))
    route = [Direction.FORWARD] * 9 + [Direction.RIGHT] * 9 + [Direction.BACK] * 9
    for direction in route:
        ctl.move(direction)
        ordered = ordered_for(ctl.viewpoint)
        kinds = [p.kind for p in ordered]
        if 'floor' in kinds:
            assert kinds.index('floor') == 0
        if 'ceiling' in kinds:
            assert kinds.index('ceiling') == len(kinds) - 1


def test_depth_keys_never_increase():
    ordered = ordered_for(Viewpoint(3, 7))
    depths = [p.depth for p in ordered]
    assert all(a >= b for a, b in zip(depths, depths[1:]))
    assert ordered[0].depth == math.inf
    assert ordered[-1].depth == -math.inf


def test_wall_depth_keys():
    world = WorldConfig()
    vp = Viewpoint(2, 6)
    assert wall_depth('north', vp, world) == pytest.approx(6)
    assert wall_depth('west', vp, world) == pytest.approx(2 + 3)
    assert wall_depth('east', vp, world) == pytest.approx(8 + 3)
    with pytest.raises(ValueError):
        wall_depth('south', vp, world)


def test_grid_lines_keep_back_reference():
    ordered = ordered_for(Viewpoint(5, 5), clip_surfaces=False)
    lines = [p for p in ordered if isinstance(p, LinePrimitive)]
    assert lines
    for prim in lines:
        assert prim.grid_line is not None
        assert prim.depth == pytest.approx(prim.grid_line.average_depth)
        assert prim.style == 'grid-line'


def test_wall_styles():
    ordered = ordered_for(Viewpoint(5, 5))
    styles = {p.kind: p.style for p in ordered if isinstance(p, PolygonPrimitive)}
    assert styles == {
        'floor': 'room-floor',
        'ceiling': 'room-ceiling',
        'north': 'room-wall-back',
        'west': 'room-wall-left',
        'east': 'room-wall-right',
    }


def test_equal_depths_keep_insertion_order():
    p = ScreenPoint(0, 0, 1)
    scene = Scene()
    first = LinePrimitive('grid-line', p, p, 2.0)
    second = LinePrimitive('grid-line', p, p, 2.0)
    far = LinePrimitive('grid-line', p, p, 3.0)
    for prim in (first, second, far):
        scene.add(prim)

    assert scene.ordered() == [far, first, second]
    assert len(scene) == 3
    scene.clear()
    assert len(scene) == 0
