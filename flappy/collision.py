# flappy/collision.py
# -------------------------------------------------------------
# Collisions: boîtes alignées sur les axes + plafond/sol
# Licence: MIT
# -------------------------------------------------------------

from dataclasses import dataclass
from typing import Iterable, Optional

from .bird import BirdBody
from .config import GameConfig
from .obstacles import Obstacle


@dataclass(frozen=True)
class Box:
    """Boîte centrée en (x, y), de demi-dimensions (half_w, half_h)."""

    x: float
    y: float
    half_w: float
    half_h: float

    def overlaps(self, other: "Box") -> bool:
        return abs(self.x - other.x) < self.half_w + other.half_w and abs(self.y - other.y) < (
            self.half_h + other.half_h
        )


class CollisionDetector:
    def __init__(self, config: GameConfig):
        self.config = config

    def bird_box(self, bird: BirdBody) -> Box:
        return Box(bird.x, bird.y, self.config.bird_hitbox_half_w, self.config.bird_hitbox_half_h)

    def obstacle_box(self, obstacle: Obstacle) -> Box:
        return Box(obstacle.x, obstacle.y, self.config.pipe_hitbox_half_w, self.config.pipe_hitbox_half_h)

    def hits_boundary(self, bird: BirdBody) -> bool:
        return bird.y > self.config.ceiling_y or bird.y < self.config.floor_limit_y

    def hit_obstacle(self, bird: BirdBody, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
        """Premier tuyau touché (chaque moitié de paire est testée seule)."""
        box = self.bird_box(bird)
        for obstacle in obstacles:
            if box.overlaps(self.obstacle_box(obstacle)):
                return obstacle
        return None

    def check(self, bird: BirdBody, obstacles: Iterable[Obstacle]) -> Optional[str]:
        """Retourne la cause de la collision ('boundary', 'obstacle') ou None."""
        if self.hits_boundary(bird):
            return "boundary"
        if self.hit_obstacle(bird, obstacles) is not None:
            return "obstacle"
        return None
