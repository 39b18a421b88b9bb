# flappy/clock.py
# -------------------------------------------------------------
# Horloge de simulation et minuterie répétitive
# Licence: MIT
# -------------------------------------------------------------

import math

NANOS_PER_SECOND = 1_000_000_000


def to_nanos(seconds: float) -> int:
    """Convertir des secondes en nanosecondes entières (arrondi au plus proche)."""
    return round(seconds * NANOS_PER_SECOND)


class Clock:
    """Fournit le delta de chaque tick et le temps écoulé total."""

    def __init__(self):
        self.delta = 0.0
        self.elapsed_nanos = 0
        self.ticks = 0

    def advance(self, delta_seconds: float) -> float:
        if not math.isfinite(delta_seconds) or delta_seconds < 0:
            raise ValueError(f"delta invalide: {delta_seconds!r}")
        self.delta = float(delta_seconds)
        self.elapsed_nanos += to_nanos(delta_seconds)
        self.ticks += 1
        return self.delta

    @property
    def elapsed(self) -> float:
        return self.elapsed_nanos / NANOS_PER_SECOND


class RepeatingTimer:
    """Minuterie qui se déclenche toutes les `interval` secondes.

    Le temps est compté en nanosecondes entières: dix ticks de 0.1 s font
    exactement une seconde. Un grand delta peut provoquer plusieurs
    déclenchements dans le même tick; `tick` retourne leur nombre.
    """

    def __init__(self, interval: float):
        self.interval_nanos = to_nanos(interval)
        if self.interval_nanos <= 0:
            raise ValueError(f"intervalle invalide: {interval!r}")
        self.elapsed_nanos = 0

    def tick(self, delta_seconds: float) -> int:
        self.elapsed_nanos += to_nanos(delta_seconds)
        fired, self.elapsed_nanos = divmod(self.elapsed_nanos, self.interval_nanos)
        return fired

    def reset(self):
        self.elapsed_nanos = 0
