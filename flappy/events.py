# flappy/events.py
# -------------------------------------------------------------
# Événements émis par la simulation à destination de l'affichage
# Licence: MIT
# -------------------------------------------------------------

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Tuple


class GameState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class ObstacleKind(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Event:
    def to_dict(self) -> dict:
        data = {"type": type(self).__name__}
        for key, value in asdict(self).items():
            data[key] = value.value if isinstance(value, Enum) else value
        return data


@dataclass(frozen=True)
class ObstacleSpawned(Event):
    id: int
    position: Tuple[float, float]
    kind: ObstacleKind


@dataclass(frozen=True)
class ObstacleDespawned(Event):
    id: int


@dataclass(frozen=True)
class ScoreChanged(Event):
    new_score: int


@dataclass(frozen=True)
class StateChanged(Event):
    from_state: Optional[GameState]
    to_state: GameState


@dataclass(frozen=True)
class Flapped(Event):
    pass


@dataclass(frozen=True)
class OverlayCleared(Event):
    """Le calque de l'état quitté (menu, game over) doit être effacé."""

    state: GameState
