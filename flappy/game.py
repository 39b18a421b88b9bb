# flappy/game.py
# -------------------------------------------------------------
# Le coeur de la simulation: un tick = une mise à jour complète
# Licence: MIT
# -------------------------------------------------------------

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .bird import BirdBody, BirdPose
from .clock import Clock
from .collision import CollisionDetector
from .config import GameConfig
from .events import Event, Flapped, GameState, ObstacleDespawned, ObstacleKind, OverlayCleared, ScoreChanged
from .obstacles import Obstacle, ObstacleSpawner
from .scoreboard import Scoreboard
from .scroll import ScrollField, tile_floor
from .state import GameStateMachine, Hook

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickInput:
    flap_pressed: bool = False
    start_pressed: bool = False


NO_INPUT = TickInput()


class Game:
    """Façade de la simulation.

    Ordre fixe à chaque tick: horloge, filtrage par état, physique,
    tuyaux et défilement, collisions, application de la transition.
    Le Game possède seul l'oiseau, les tuyaux et le score; le défilement
    et les collisions ne font que lire ou déplacer ce qui existe déjà.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None, skin_rng=None):
        self.config = config or GameConfig()
        # Deux sources distinctes: les écarts ne dépendent que du nombre de spawns
        self.rng = rng if rng is not None else random.Random()
        self.skin_rng = skin_rng if skin_rng is not None else random.Random()
        self.clock = Clock()
        self.scroll = ScrollField(self.config.scroll_speed)
        self.spawner = ObstacleSpawner(self.config, self.scroll, self.rng)
        self.collisions = CollisionDetector(self.config)
        self.scoreboard = Scoreboard(self.config.score_sentinel)
        self.machine = GameStateMachine(GameState.MENU)

        self.bird: Optional[BirdBody] = None
        self.obstacles: Dict[int, Obstacle] = {}
        self.floor = tile_floor(self.config)
        self._events: List[Event] = []

        self.machine.on_enter(GameState.PLAYING, self._enter_playing)
        self.machine.on_exit(GameState.MENU, self._clear_overlay)
        self.machine.on_exit(GameState.GAME_OVER, self._clear_overlay)

    # ----------------------- hooks -------------------------
    def on_enter(self, state: GameState, hook: Hook):
        self.machine.on_enter(state, hook)

    def on_exit(self, state: GameState, hook: Hook):
        self.machine.on_exit(state, hook)

    def _enter_playing(self, _state: GameState):
        """Nouvelle partie: plus de tuyaux, score à la sentinelle, oiseau neuf."""
        for obstacle_id in list(self.obstacles):
            del self.obstacles[obstacle_id]
            self._events.append(ObstacleDespawned(obstacle_id))
        self._events.append(ScoreChanged(self.scoreboard.reset()))
        self.spawner.reset()
        self.bird = BirdBody.spawn(self.config, self.skin_rng.choice(self.config.bird_skins))
        logger.debug("nouvelle partie", extra={"data": {"skin": self.bird.skin}})

    def _clear_overlay(self, state: GameState):
        self._events.append(OverlayCleared(state))

    # ----------------------- logique -----------------------
    def tick(self, delta_seconds: float, inputs: TickInput = NO_INPUT) -> List[Event]:
        """Avancer la simulation d'un pas et retourner les événements produits."""
        self._events = []
        started = self.machine.start()
        if started is not None:
            self._events.insert(0, started)

        dt = self.clock.advance(delta_seconds)
        state = self.machine.state

        if state == GameState.MENU:
            self._scroll_floor(dt)
            if inputs.start_pressed:
                self.machine.request(GameState.PLAYING)
        elif state == GameState.PLAYING:
            self._update_playing(dt, inputs)
        elif state == GameState.GAME_OVER:
            if inputs.start_pressed:
                self.machine.request(GameState.PLAYING)

        mark = len(self._events)
        changed = self.machine.apply()
        if changed is not None:
            self._events.insert(mark, changed)
        return self._events

    def _update_playing(self, dt: float, inputs: TickInput):
        bird = self.bird
        bird.step(dt, inputs.flap_pressed, self.config)
        if inputs.flap_pressed:
            self._events.append(Flapped())
        bird.animate(dt, self.config.bird_frames)

        self._events.extend(self.spawner.update(self.obstacles, self.scoreboard, dt))
        self._scroll_floor(dt)

        cause = self.collisions.check(bird, self.obstacles.values())
        if cause is not None:
            logger.info("collision (%s) à y=%.1f, score %d", cause, bird.y, self.scoreboard.display)
            self.machine.request(GameState.GAME_OVER)

    def _scroll_floor(self, dt: float):
        cfg = self.config
        self.scroll.scroll_floor(self.floor, dt, cfg.floor_wrap_threshold, cfg.floor_wrap_offset)

    # ----------------------- lecture -----------------------
    def current_state(self) -> GameState:
        return self.machine.state

    def current_score(self) -> int:
        return self.scoreboard.score

    def display_score(self) -> int:
        return self.scoreboard.display

    def bird_pose(self) -> Optional[BirdPose]:
        return self.bird.pose() if self.bird is not None else None

    def bird_sprite(self) -> Optional[Tuple[str, int]]:
        return (self.bird.skin, self.bird.frame) if self.bird is not None else None

    def obstacle_list(self) -> List[Tuple[int, Tuple[float, float], ObstacleKind]]:
        return [(o.id, o.position, o.kind) for o in self.obstacles.values()]

    def floor_segment_list(self) -> List[float]:
        return [segment.x for segment in self.floor]
