import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy import Game, GameConfig, TickInput


class ScriptedRandom:
    """Source aléatoire déterministe: rejoue une liste de valeurs dans [0, 1)."""

    def __init__(self, values=(0.5,)):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


START = TickInput(start_pressed=True)
FLAP = TickInput(flap_pressed=True)


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def game(rng):
    return Game(GameConfig(), rng, ScriptedRandom())


@pytest.fixture
def floaty_game(rng):
    """Gravité quasi nulle: l'oiseau reste vers y=0 sans battre des ailes."""
    return Game(GameConfig(gravity=0.001), rng, ScriptedRandom())


def start(game):
    return game.tick(0.0, START)
