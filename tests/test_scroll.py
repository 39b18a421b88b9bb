import pytest

from flappy.config import GameConfig
from flappy.scroll import FloorSegment, ScrollField, tile_floor


def test_scroll_moves_left():
    field = ScrollField(100.0)
    assert field.scroll(10.0, 0.5) == pytest.approx(-40.0)


def test_floor_wraps_to_restart_offset():
    field = ScrollField(100.0)
    segments = [FloorSegment(0.0), FloorSegment(144.0)]
    field.scroll_floor(segments, 1.5, -144.0, 144.0)
    assert [s.x for s in segments] == [144.0, pytest.approx(-6.0)]


def test_floor_at_threshold_does_not_wrap():
    field = ScrollField(100.0)
    segments = [FloorSegment(-143.0)]
    field.scroll_floor(segments, 0.01, -144.0, 144.0)
    assert segments[0].x == pytest.approx(-144.0)


def test_tile_floor_follows_scale():
    assert [s.x for s in tile_floor(GameConfig())] == [0.0, 144.0]
    assert [s.x for s in tile_floor(GameConfig().scaled(2))] == [0.0, 288.0, 576.0]
