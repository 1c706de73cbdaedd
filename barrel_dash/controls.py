# controls.py -- key presses to game intents

from enum import Enum

import pygame


class Intent(Enum):
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"
    QUIT = "quit"
    MUTE = "mute"


KEYMAP = {
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_r: Intent.RESTART,
    pygame.K_q: Intent.QUIT,
    pygame.K_m: Intent.MUTE,
}


def intent_for_key(key):
    return KEYMAP.get(key)


def apply_intent(session, intent):
    """Apply a lane or restart intent to ``session``.

    While the game is over only RESTART does anything; restart while running
    is ignored. QUIT and MUTE belong to the host and are left alone here.
    Returns True if the session changed.
    """
    if intent is Intent.RESTART:
        if session.running:
            return False
        session.reset()
        return True
    if not session.running:
        return False
    if intent is Intent.LEFT:
        return session.move_left()
    if intent is Intent.RIGHT:
        return session.move_right()
    return False
