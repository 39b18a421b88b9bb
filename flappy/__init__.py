# flappy/__init__.py
# -------------------------------------------------------------
# Flappy Bird: simulation pilotée par ticks + hôte pygame
# Licence: MIT
# -------------------------------------------------------------

from .config import ConfigError, GameConfig
from .events import (
    Event,
    Flapped,
    GameState,
    ObstacleDespawned,
    ObstacleKind,
    ObstacleSpawned,
    OverlayCleared,
    ScoreChanged,
    StateChanged,
)
from .game import Game, TickInput

__all__ = [
    "ConfigError",
    "Event",
    "Flapped",
    "Game",
    "GameConfig",
    "GameState",
    "ObstacleDespawned",
    "ObstacleKind",
    "ObstacleSpawned",
    "OverlayCleared",
    "ScoreChanged",
    "StateChanged",
    "TickInput",
]
