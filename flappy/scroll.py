# flappy/scroll.py
# -------------------------------------------------------------
# Défilement horizontal du sol et des tuyaux
# Licence: MIT
# -------------------------------------------------------------

from dataclasses import dataclass
from typing import List

from .config import GameConfig


@dataclass
class FloorSegment:
    x: float


class ScrollField:
    """Fait glisser vers la gauche tout ce qui défile à vitesse constante."""

    def __init__(self, speed: float):
        self.speed = speed

    def offset(self, dt: float) -> float:
        return self.speed * dt

    def scroll(self, x: float, dt: float) -> float:
        return x - self.offset(dt)

    def scroll_floor(self, segments: List[FloorSegment], dt: float, threshold: float, restart: float):
        """Le sol ne disparaît jamais: passé le seuil, il repart à droite."""
        for segment in segments:
            segment.x = self.scroll(segment.x, dt)
            if segment.x < threshold:
                segment.x = restart


def tile_floor(config: GameConfig) -> List[FloorSegment]:
    """Segments de sol côte à côte, le premier centré sur x=0."""
    return [FloorSegment(i * config.floor_segment_width) for i in range(config.floor_segments)]
