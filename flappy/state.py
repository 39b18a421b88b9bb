# flappy/state.py
# -------------------------------------------------------------
# Machine à états Menu / Playing / GameOver
# Licence: MIT
# -------------------------------------------------------------

import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from .events import GameState, StateChanged

logger = logging.getLogger(__name__)

Hook = Callable[[GameState], None]

# Transitions autorisées: (état courant, état demandé)
TRANSITIONS = {
    (GameState.MENU, GameState.PLAYING),
    (GameState.PLAYING, GameState.GAME_OVER),
    (GameState.GAME_OVER, GameState.PLAYING),
}


class GameStateMachine:
    """Un seul état actif; les changements sont demandés pendant le tick
    et appliqués à la fin de celui-ci, hooks de sortie puis d'entrée."""

    def __init__(self, initial: GameState = GameState.MENU):
        self.state = initial
        self.pending: Optional[GameState] = None
        self.started = False
        self._on_enter: Dict[GameState, List[Hook]] = defaultdict(list)
        self._on_exit: Dict[GameState, List[Hook]] = defaultdict(list)

    def on_enter(self, state: GameState, hook: Hook):
        self._on_enter[state].append(hook)

    def on_exit(self, state: GameState, hook: Hook):
        self._on_exit[state].append(hook)

    def start(self) -> Optional[StateChanged]:
        """Entrer dans l'état initial (une seule fois)."""
        if self.started:
            return None
        self.started = True
        logger.info("état initial: %s", self.state.value)
        self._run(self._on_enter, self.state)
        return StateChanged(None, self.state)

    def request(self, target: GameState) -> bool:
        """Demander une transition; les demandes invalides sont ignorées."""
        if (self.state, target) not in TRANSITIONS:
            return False
        if self.pending is None:
            self.pending = target
        return self.pending == target

    def apply(self) -> Optional[StateChanged]:
        if self.pending is None:
            return None
        previous, self.state, self.pending = self.state, self.pending, None
        logger.info("transition %s -> %s", previous.value, self.state.value)
        self._run(self._on_exit, previous)
        self._run(self._on_enter, self.state)
        return StateChanged(previous, self.state)

    @staticmethod
    def _run(hooks: Dict[GameState, List[Hook]], state: GameState):
        for hook in hooks.get(state, ()):
            hook(state)
