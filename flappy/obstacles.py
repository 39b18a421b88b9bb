# flappy/obstacles.py
# -------------------------------------------------------------
# Tuyaux: génération par paires, défilement, retrait hors écran
# Licence: MIT
# -------------------------------------------------------------

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List

from .clock import RepeatingTimer
from .config import GameConfig
from .events import Event, ObstacleDespawned, ObstacleKind, ObstacleSpawned, ScoreChanged
from .scoreboard import Scoreboard
from .scroll import ScrollField

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    id: int
    x: float
    y: float
    gap_center_y: float
    kind: ObstacleKind

    @property
    def position(self):
        return (self.x, self.y)


class ObstacleSpawner:
    """Minuterie de spawn + retrait des tuyaux sortis par la gauche.

    Chaque déclenchement de la minuterie ajoute un point au score, même si
    l'oiseau n'a encore franchi aucun tuyau: le score compte les paires
    apparues, décalé d'une sentinelle au départ.
    """

    def __init__(self, config: GameConfig, scroll: ScrollField, rng):
        self.config = config
        self.scroll = scroll
        self.rng = rng
        self.timer = RepeatingTimer(config.pipe_spawn_interval)
        self._ids = itertools.count(1)

    def reset(self):
        self.timer.reset()

    def draw_gap(self) -> float:
        """Tirage uniforme dans [0, demi-hauteur - hauteur de l'écart)."""
        return self.rng.random() * self.config.gap_range

    def spawn_pair(self, obstacles: Dict[int, Obstacle]) -> List[Obstacle]:
        cfg = self.config
        gap = self.draw_gap()
        pair = [
            Obstacle(next(self._ids), cfg.spawn_x, gap + cfg.pipe_gap_height, gap, ObstacleKind.TOP),
            Obstacle(next(self._ids), cfg.spawn_x, gap - cfg.pipe_body_offset, gap, ObstacleKind.BOTTOM),
        ]
        for obstacle in pair:
            obstacles[obstacle.id] = obstacle
        logger.debug("paire de tuyaux", extra={"data": {"ids": [o.id for o in pair], "gap": gap}})
        return pair

    def update(self, obstacles: Dict[int, Obstacle], scoreboard: Scoreboard, dt: float) -> List[Event]:
        events: List[Event] = []

        # Défilement puis retrait de ce qui a franchi le seuil
        for obstacle in list(obstacles.values()):
            obstacle.x = self.scroll.scroll(obstacle.x, dt)
            if obstacle.x < self.config.despawn_x:
                del obstacles[obstacle.id]
                events.append(ObstacleDespawned(obstacle.id))

        # Un grand delta peut déclencher plusieurs spawns: aucun regroupement
        for _ in range(self.timer.tick(dt)):
            events.append(ScoreChanged(scoreboard.increment()))
            for obstacle in self.spawn_pair(obstacles):
                events.append(ObstacleSpawned(obstacle.id, obstacle.position, obstacle.kind))
        return events
