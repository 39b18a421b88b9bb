# flappy/config.py
# -------------------------------------------------------------
# Constantes de simulation (validées) et réglages de l'hôte
# Licence: MIT
# -------------------------------------------------------------

import math
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv


class ConfigError(ValueError):
    """Configuration invalide, rejetée au démarrage."""


# -------------------------------------------------------------
# Constantes globales (échelle 1, unités monde, y vers le haut)
# -------------------------------------------------------------
SCREEN_WIDTH, SCREEN_HEIGHT = 288, 512

# Physique oiseau
GRAVITY = 1000.0  # unités/s^2
FLAP_VELOCITY = 400.0  # unités/s
ROTATION_SCALE = 3000.0
BIRD_START_X, BIRD_START_Y = -50.0, 0.0
BIRD_HALF_HEIGHT = 12.0
BIRD_HITBOX_HALF_W, BIRD_HITBOX_HALF_H = 8.5, 6.0
BIRD_FRAMES = 4
BIRD_FRAME_TIME = 0.3  # secondes
BIRD_SKINS = ("red", "blue", "yellow")

# Défilement
SCROLL_SPEED = 100.0  # unités/s

# Tuyaux
PIPE_SPAWN_INTERVAL = 2.0  # secondes
PIPE_GAP_HEIGHT = 125.0
PIPE_BODY_OFFSET = 320.0
PIPE_HITBOX_HALF_W, PIPE_HITBOX_HALF_H = 26.0, 160.0
SPAWN_X = 180.0
DESPAWN_X = -200.0

# Sol
FLOOR_Y = -256.0
FLOOR_HALF_HEIGHT = 56.0
FLOOR_SEGMENT_WIDTH = 144.0
FLOOR_WRAP_THRESHOLD = -144.0
FLOOR_WRAP_OFFSET = 144.0

# Score
SCORE_SENTINEL = -1

# Champs multipliés par l'échelle d'affichage
_SCALED_FIELDS = (
    "screen_width",
    "screen_height",
    "gravity",
    "flap_velocity",
    "rotation_scale",
    "bird_start_x",
    "bird_start_y",
    "bird_half_height",
    "bird_hitbox_half_w",
    "bird_hitbox_half_h",
    "scroll_speed",
    "pipe_gap_height",
    "pipe_body_offset",
    "pipe_hitbox_half_w",
    "pipe_hitbox_half_h",
    "spawn_x",
    "despawn_x",
    "floor_y",
    "floor_half_height",
    "floor_segment_width",
    "floor_wrap_threshold",
    "floor_wrap_offset",
)


@dataclass(frozen=True)
class GameConfig:
    """Règles fixes de la simulation.

    Les invariants sont vérifiés à la construction: une configuration qui
    rendrait le tirage de l'écart impossible est refusée ici, jamais au
    moment d'un spawn.
    """

    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    gravity: float = GRAVITY
    flap_velocity: float = FLAP_VELOCITY
    rotation_scale: float = ROTATION_SCALE
    bird_start_x: float = BIRD_START_X
    bird_start_y: float = BIRD_START_Y
    bird_half_height: float = BIRD_HALF_HEIGHT
    bird_hitbox_half_w: float = BIRD_HITBOX_HALF_W
    bird_hitbox_half_h: float = BIRD_HITBOX_HALF_H
    bird_frames: int = BIRD_FRAMES
    bird_frame_time: float = BIRD_FRAME_TIME
    bird_skins: tuple = BIRD_SKINS
    scroll_speed: float = SCROLL_SPEED
    pipe_spawn_interval: float = PIPE_SPAWN_INTERVAL
    pipe_gap_height: float = PIPE_GAP_HEIGHT
    pipe_body_offset: float = PIPE_BODY_OFFSET
    pipe_hitbox_half_w: float = PIPE_HITBOX_HALF_W
    pipe_hitbox_half_h: float = PIPE_HITBOX_HALF_H
    spawn_x: float = SPAWN_X
    despawn_x: float = DESPAWN_X
    floor_y: float = FLOOR_Y
    floor_half_height: float = FLOOR_HALF_HEIGHT
    floor_segment_width: float = FLOOR_SEGMENT_WIDTH
    floor_wrap_threshold: float = FLOOR_WRAP_THRESHOLD
    floor_wrap_offset: float = FLOOR_WRAP_OFFSET
    floor_segments: int = 2
    score_sentinel: int = SCORE_SENTINEL
    scale: float = 1.0

    def __post_init__(self):
        for name in (
            "screen_width",
            "screen_height",
            "gravity",
            "flap_velocity",
            "rotation_scale",
            "scroll_speed",
            "pipe_spawn_interval",
            "pipe_gap_height",
            "bird_frame_time",
            "scale",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} doit être strictement positif (reçu {value!r})")
        if self.pipe_gap_height >= self.screen_half_height:
            raise ConfigError(
                f"pipe_gap_height ({self.pipe_gap_height}) doit être inférieur à "
                f"la demi-hauteur d'écran ({self.screen_half_height})"
            )
        if self.floor_wrap_offset <= self.floor_wrap_threshold:
            raise ConfigError("floor_wrap_offset doit être supérieur à floor_wrap_threshold")
        if self.despawn_x >= self.spawn_x:
            raise ConfigError("despawn_x doit être à gauche de spawn_x")
        if self.bird_frames < 1 or self.floor_segments < 1:
            raise ConfigError("bird_frames et floor_segments doivent valoir au moins 1")
        if not self.bird_skins:
            raise ConfigError("bird_skins ne peut pas être vide")

    # --------------------- dérivés ---------------------
    @property
    def screen_half_height(self) -> float:
        return self.screen_height / 2

    @property
    def ceiling_y(self) -> float:
        """Au-dessus de cette hauteur, l'oiseau touche le plafond."""
        return self.screen_half_height - self.bird_half_height

    @property
    def floor_limit_y(self) -> float:
        """En dessous de cette hauteur, l'oiseau touche le sol."""
        return -self.screen_half_height + self.floor_half_height + self.bird_half_height

    @property
    def gap_range(self) -> float:
        """Borne haute (exclue) du tirage de gap_center_y."""
        return self.screen_half_height - self.pipe_gap_height

    def scaled(self, factor: float) -> "GameConfig":
        """Retourne une copie où toutes les distances sont multipliées par factor."""
        if not math.isfinite(factor) or factor <= 0:
            raise ConfigError(f"échelle invalide: {factor!r}")
        changes = {name: getattr(self, name) * factor for name in _SCALED_FIELDS}
        scale = self.scale * factor
        return replace(self, scale=scale, floor_segments=int(scale) + 1, **changes)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# -------------------------------------------------------------
# Réglages de l'hôte (environnement + .env)
# -------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    scale: float = 1.0
    fps: int = 60
    seed: Optional[int] = None
    log_level: str = "info"
    log_file: Optional[str] = None


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name}={raw!r} n'est pas un nombre valide") from exc


def load_settings() -> Settings:
    """Charger les réglages depuis .env et les variables d'environnement."""
    load_dotenv(find_dotenv(usecwd=True))

    settings = Settings(
        scale=_env_number("FLAPPY_SCALE", 1.0, float),
        fps=_env_number("FLAPPY_FPS", 60, int),
        seed=_env_number("FLAPPY_SEED", None, int),
        log_level=os.environ.get("FLAPPY_LOG_LEVEL", "info").lower(),
        log_file=os.environ.get("FLAPPY_LOG_FILE") or None,
    )
    if settings.scale <= 0 or not math.isfinite(settings.scale):
        raise ConfigError(f"FLAPPY_SCALE doit être strictement positif (reçu {settings.scale})")
    if settings.fps <= 0:
        raise ConfigError(f"FLAPPY_FPS doit être strictement positif (reçu {settings.fps})")
    return settings
