# flappy/bird.py
# -------------------------------------------------------------
# L'oiseau: état physique et règle d'intégration
# Licence: MIT
# -------------------------------------------------------------

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Tuple

from .clock import RepeatingTimer
from .config import GameConfig


def clamp(value: float, a: float, b: float) -> float:
    """Contraindre value dans [a, b]."""
    return max(a, min(b, value))


class BirdPose(NamedTuple):
    position: Tuple[float, float]
    rotation: float


@dataclass
class BirdBody:
    x: float
    y: float
    velocity_y: float = 0.0
    rotation: float = 0.0
    skin: str = "yellow"
    frame: int = 0
    frame_timer: RepeatingTimer = field(default=None, repr=False, compare=False)

    @classmethod
    def spawn(cls, config: GameConfig, skin: str) -> "BirdBody":
        """Nouvel oiseau à la position canonique, vitesse nulle."""
        return cls(
            x=config.bird_start_x,
            y=config.bird_start_y,
            skin=skin,
            frame_timer=RepeatingTimer(config.bird_frame_time),
        )

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def pose(self) -> BirdPose:
        return BirdPose(self.position, self.rotation)

    def flap(self, config: GameConfig):
        """Remplacer la vitesse verticale par l'impulsion fixe (pas d'addition)."""
        self.velocity_y = config.flap_velocity

    def step(self, dt: float, flap: bool, config: GameConfig):
        """Un tick de physique: impulsion ou gravité, déplacement, inclinaison."""
        if flap:
            self.flap(config)
        else:
            self.velocity_y -= config.gravity * dt
        self.y += self.velocity_y * dt
        self.rotation = tilt(self.velocity_y, config)

    def animate(self, dt: float, frames: int):
        """Faire battre les ailes: une image de plus à chaque déclenchement."""
        if self.frame_timer is None:
            return
        self.frame = (self.frame + self.frame_timer.tick(dt)) % frames


def tilt(velocity_y: float, config: GameConfig) -> float:
    """Inclinaison visuelle (radians), fonction de la seule vitesse."""
    return clamp(velocity_y / config.rotation_scale, -0.5, 0.5) * math.pi
