import pytest
from conftest import ScriptedRandom

from flappy.config import GameConfig
from flappy.events import ObstacleDespawned, ObstacleKind, ObstacleSpawned, ScoreChanged
from flappy.obstacles import Obstacle, ObstacleSpawner
from flappy.scoreboard import Scoreboard
from flappy.scroll import ScrollField

CFG = GameConfig()


def make_spawner(values=(0.5,)):
    return ObstacleSpawner(CFG, ScrollField(CFG.scroll_speed), ScriptedRandom(values))


def test_pair_shares_x_and_gap():
    spawner = make_spawner([0.25])
    obstacles = {}
    top, bottom = spawner.spawn_pair(obstacles)
    gap = 0.25 * (256 - 125)
    assert top.x == bottom.x == CFG.spawn_x
    assert top.kind == ObstacleKind.TOP and bottom.kind == ObstacleKind.BOTTOM
    assert top.y == pytest.approx(gap + 125)
    assert bottom.y == pytest.approx(gap - 320)
    assert top.gap_center_y == bottom.gap_center_y == pytest.approx(gap)
    assert set(obstacles) == {top.id, bottom.id}


def test_gap_sequence_is_deterministic():
    spawner = make_spawner([0.0, 0.1, 0.99])
    gaps = [spawner.draw_gap() for _ in range(3)]
    assert gaps == pytest.approx([0.0, 13.1, 129.69])
    assert all(0 <= g < CFG.gap_range for g in gaps)


def test_ids_are_unique():
    spawner = make_spawner()
    obstacles = {}
    ids = [o.id for _ in range(3) for o in spawner.spawn_pair(obstacles)]
    assert len(set(ids)) == 6


def test_timer_firing_scores_and_spawns():
    spawner = make_spawner()
    scoreboard = Scoreboard()
    obstacles = {}
    assert spawner.update(obstacles, scoreboard, 1.0) == []
    events = spawner.update(obstacles, scoreboard, 1.0)
    assert events[0] == ScoreChanged(0)
    spawned = [e for e in events if isinstance(e, ObstacleSpawned)]
    assert len(spawned) == 2
    assert {e.position[0] for e in spawned} == {CFG.spawn_x}
    assert scoreboard.score == 0


def test_large_delta_spawns_each_firing():
    spawner = make_spawner()
    scoreboard = Scoreboard()
    obstacles = {}
    events = spawner.update(obstacles, scoreboard, 6.5)
    assert [e.new_score for e in events if isinstance(e, ScoreChanged)] == [0, 1, 2]
    assert len(obstacles) == 6


def test_obstacles_scroll_and_despawn_past_threshold():
    spawner = make_spawner()
    obstacles = {
        1: Obstacle(1, -199.5, 10.0, 0.0, ObstacleKind.TOP),
        2: Obstacle(2, 50.0, -300.0, 0.0, ObstacleKind.BOTTOM),
    }
    events = spawner.update(obstacles, Scoreboard(), 0.01)
    assert events == [ObstacleDespawned(1)]
    assert list(obstacles) == [2]
    assert obstacles[2].x == pytest.approx(49.0)


def test_obstacle_exactly_at_threshold_is_kept():
    spawner = make_spawner()
    obstacles = {1: Obstacle(1, -199.0, 0.0, 0.0, ObstacleKind.TOP)}
    spawner.update(obstacles, Scoreboard(), 0.01)
    assert 1 in obstacles
