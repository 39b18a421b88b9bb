# flappy/scoreboard.py
# -------------------------------------------------------------
# Compteur de score
# Licence: MIT
# -------------------------------------------------------------

from .config import SCORE_SENTINEL


class Scoreboard:
    """Compteur monotone; commence à la sentinelle (-1, affiché 0)."""

    def __init__(self, sentinel: int = SCORE_SENTINEL):
        self.sentinel = sentinel
        self.score = sentinel

    def reset(self) -> int:
        self.score = self.sentinel
        return self.score

    def increment(self) -> int:
        self.score += 1
        return self.score

    @property
    def display(self) -> int:
        return max(self.score, 0)
