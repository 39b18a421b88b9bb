import pytest
from conftest import FLAP, START, start

from flappy import (
    Flapped,
    GameState,
    ObstacleDespawned,
    ObstacleKind,
    ObstacleSpawned,
    OverlayCleared,
    ScoreChanged,
    StateChanged,
    TickInput,
)
from flappy.obstacles import Obstacle


def of_type(events, cls):
    return [e for e in events if isinstance(e, cls)]


def test_starts_in_menu(game):
    events = game.tick(0.016)
    assert events[0] == StateChanged(None, GameState.MENU)
    assert game.current_state() == GameState.MENU
    assert game.current_score() == -1
    assert game.display_score() == 0
    assert game.bird_pose() is None
    assert game.bird_sprite() is None
    assert game.obstacle_list() == []


def test_menu_scrolls_floor_only(game):
    game.tick(0.5)
    assert game.floor_segment_list() == [pytest.approx(-50.0), pytest.approx(94.0)]
    assert game.bird_pose() is None
    assert game.obstacle_list() == []


def test_flap_in_menu_is_ignored(game):
    events = game.tick(0.1, FLAP)
    assert game.current_state() == GameState.MENU
    assert of_type(events, Flapped) == []


def test_start_enters_playing(game):
    events = start(game)
    assert events == [
        StateChanged(None, GameState.MENU),
        StateChanged(GameState.MENU, GameState.PLAYING),
        OverlayCleared(GameState.MENU),
        ScoreChanged(-1),
    ]
    assert game.current_state() == GameState.PLAYING
    assert game.bird_pose() == ((-50.0, 0.0), 0.0)
    assert game.bird_sprite() == ("red", 0)
    assert game.current_score() == -1


def test_gravity_scenario(game):
    start(game)
    game.tick(0.1)
    pose = game.bird_pose()
    assert game.bird.velocity_y == pytest.approx(-100.0)
    assert pose.position[1] == pytest.approx(-10.0)
    assert game.current_state() == GameState.PLAYING


def test_flap_emits_cue(game):
    start(game)
    events = game.tick(0.1, FLAP)
    assert of_type(events, Flapped) == [Flapped()]
    assert game.bird.velocity_y == 400.0


def test_start_while_playing_does_nothing(floaty_game):
    game = floaty_game
    start(game)
    game.tick(2.0)
    assert game.current_score() == 0
    for _ in range(2):
        events = game.tick(0.1, START)
        assert of_type(events, StateChanged) == []
    assert game.current_score() == 0
    assert len(game.obstacle_list()) == 2


def test_score_counts_spawn_firings(floaty_game):
    game = floaty_game
    start(game)
    scores = []
    for _ in range(8):
        events = game.tick(0.5)
        scores.extend(e.new_score for e in of_type(events, ScoreChanged))
    assert scores == [0, 1]
    assert game.current_score() == 1
    assert game.display_score() == 1
    assert game.current_state() == GameState.PLAYING


def test_pairs_spawn_together(floaty_game):
    game = floaty_game
    start(game)
    events = game.tick(4.0)
    spawned = of_type(events, ObstacleSpawned)
    assert len(spawned) == 4
    assert [e.new_score for e in of_type(events, ScoreChanged)] == [0, 1]
    assert {e.position[0] for e in spawned} == {180.0}
    kinds = [kind for _, _, kind in game.obstacle_list()]
    assert kinds == [ObstacleKind.TOP, ObstacleKind.BOTTOM] * 2


def test_despawned_obstacle_leaves_list(floaty_game):
    game = floaty_game
    start(game)
    game.obstacles[99] = Obstacle(99, -199.0, 300.0, 0.0, ObstacleKind.TOP)
    events = game.tick(0.01001)
    assert ObstacleDespawned(99) in events
    assert 99 not in [obstacle_id for obstacle_id, _, _ in game.obstacle_list()]


def test_floor_collision_ends_game_same_tick(game):
    start(game)
    events = game.tick(1.0)
    assert StateChanged(GameState.PLAYING, GameState.GAME_OVER) in events
    assert game.current_state() == GameState.GAME_OVER


def test_ceiling_collision(game):
    start(game)
    game.tick(1.0, FLAP)
    assert game.current_state() == GameState.GAME_OVER


def test_pipe_collision(floaty_game):
    game = floaty_game
    start(game)
    game.obstacles[7] = Obstacle(7, -40.0, 100.0, 0.0, ObstacleKind.TOP)
    events = game.tick(0.01)
    assert StateChanged(GameState.PLAYING, GameState.GAME_OVER) in events


def test_game_over_freezes_world(game):
    start(game)
    game.tick(1.0)
    pose = game.bird_pose()
    floor = game.floor_segment_list()
    events = game.tick(3.0, FLAP)
    assert events == []
    assert game.bird_pose() == pose
    assert game.floor_segment_list() == floor


def test_restart_resets_run(floaty_game):
    game = floaty_game
    start(game)
    game.tick(4.0)
    game.bird.y = -500.0
    game.tick(0.01)
    assert game.current_state() == GameState.GAME_OVER
    leftover = [obstacle_id for obstacle_id, _, _ in game.obstacle_list()]
    assert len(leftover) == 4

    events = game.tick(0.01, START)
    assert events[0] == StateChanged(GameState.GAME_OVER, GameState.PLAYING)
    assert events[1] == OverlayCleared(GameState.GAME_OVER)
    assert [e.id for e in of_type(events, ObstacleDespawned)] == leftover
    assert game.current_score() == -1
    assert game.obstacle_list() == []
    assert game.bird_pose() == ((-50.0, 0.0), 0.0)

    # La minuterie repart de zéro
    assert of_type(game.tick(1.9), ScoreChanged) == []
    assert of_type(game.tick(0.1), ScoreChanged) == [ScoreChanged(0)]


def test_hooks_are_notified(game):
    seen = []
    game.on_enter(GameState.GAME_OVER, seen.append)
    game.on_exit(GameState.PLAYING, seen.append)
    start(game)
    game.tick(1.0)
    assert seen == [GameState.PLAYING, GameState.GAME_OVER]


def test_events_serialise(game):
    events = start(game)
    assert events[1].to_dict() == {"type": "StateChanged", "from_state": "menu", "to_state": "playing"}
    assert TickInput() == TickInput(False, False)


def test_gap_draws_ignore_restarts():
    from conftest import ScriptedRandom
    from flappy import Game, GameConfig

    gaps_rng = ScriptedRandom([0.1, 0.2, 0.3])
    game = Game(GameConfig(gravity=0.001), gaps_rng, ScriptedRandom())
    start(game)
    game.tick(2.0)
    first = [o.gap_center_y for o in game.obstacles.values()]

    game.bird.y = -500.0
    game.tick(0.01)
    assert game.current_state() == GameState.GAME_OVER
    game.tick(0.01, START)
    game.tick(2.0)
    second = [o.gap_center_y for o in game.obstacles.values()]

    assert first == pytest.approx([0.1 * 131] * 2)
    assert second == pytest.approx([0.2 * 131] * 2)
    assert gaps_rng.calls == 2
