# flappy/app.py
# -------------------------------------------------------------
# Hôte pygame: fenêtre, entrées, boucle principale, ligne de commande
# Licence: MIT
# Lancement:
#   - pip install -e .
#   - python -m flappy   (ou: flappy --scale 1.5)
# -------------------------------------------------------------

import argparse
import logging
import random
from dataclasses import replace
from typing import Iterable, Optional, Sequence, Tuple

import pygame

from .config import ConfigError, GameConfig, Settings, load_settings
from .events import Event, GameState
from .game import Game, TickInput
from .log import setup_logging
from .render import Renderer

logger = logging.getLogger(__name__)

TITLE = "Flappy Bird - mini"
ACTION_KEYS = (pygame.K_SPACE, pygame.K_UP)


def read_inputs(events: Iterable[pygame.event.Event]) -> Tuple[TickInput, bool]:
    """Traduire les événements pygame en entrées abstraites (+ demande de sortie).

    Espace / flèche haut / clic gauche servent à la fois de battement
    d'ailes et de démarrage: c'est la simulation qui filtre selon l'état.
    """
    pressed = False
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                quit_requested = True
            elif event.key in ACTION_KEYS:
                pressed = True
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            pressed = True
    return TickInput(flap_pressed=pressed, start_pressed=pressed), quit_requested


class App:
    def __init__(self, settings: Settings):
        self.settings = settings
        config = GameConfig().scaled(settings.scale)
        self.game = Game(config, random.Random(settings.seed), random.Random(settings.seed))
        logger.debug("configuration", extra={"data": config.to_dict()})
        self.game.on_enter(GameState.GAME_OVER, self._log_game_over)

        pygame.init()
        pygame.display.set_caption(TITLE)
        self.screen = pygame.display.set_mode((int(config.screen_width), int(config.screen_height)))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, self.game)

    def _log_game_over(self, _state: GameState):
        logger.info("partie terminée", extra={"data": {"score": self.game.display_score()}})

    def step(self, dt: float, inputs: TickInput) -> list:
        events = self.game.tick(dt, inputs)
        self._trace(events)
        self.renderer.handle(events, dt)
        self.renderer.draw()
        pygame.display.flip()
        return events

    @staticmethod
    def _trace(events: Sequence[Event]):
        if logger.isEnabledFor(logging.DEBUG):
            for event in events:
                logger.debug("événement", extra={"data": event.to_dict()})

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(self.settings.fps) / 1000.0  # secondes
            inputs, quit_requested = read_inputs(pygame.event.get())
            if quit_requested:
                running = False
                continue
            self.step(dt, inputs)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Flappy Bird minimaliste (pygame).")
    parser.add_argument("--scale", type=float, help="Facteur d'échelle de la fenêtre (FLAPPY_SCALE).")
    parser.add_argument("--fps", type=int, help="Images par seconde (FLAPPY_FPS).")
    parser.add_argument("--seed", type=int, help="Graine du générateur aléatoire (FLAPPY_SEED).")
    parser.add_argument("--log-level", help="debug, info, warning... (FLAPPY_LOG_LEVEL).")
    parser.add_argument("--log-file", help="Journal NDJSON optionnel (FLAPPY_LOG_FILE).")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Réglages d'environnement, surchargés par la ligne de commande."""
    settings = load_settings()
    overrides = {
        key: value
        for key, value in (
            ("scale", args.scale),
            ("fps", args.fps),
            ("seed", args.seed),
            ("log_level", args.log_level),
            ("log_file", args.log_file),
        )
        if value is not None
    }
    settings = replace(settings, **overrides)
    if settings.fps <= 0:
        raise ConfigError(f"--fps doit être strictement positif (reçu {settings.fps})")
    return settings


def main(argv: Optional[Sequence[str]] = None):
    settings = build_settings(parse_args(argv))
    setup_logging(settings.log_level, settings.log_file)
    logger.info("démarrage", extra={"data": {"scale": settings.scale, "fps": settings.fps, "seed": settings.seed}})

    app = App(settings)
    try:
        app.run()
    finally:
        logger.info("arrêt")
        pygame.quit()


if __name__ == "__main__":
    main()
