"""Map pygame key events onto the typing core's key alphabet."""
from __future__ import annotations

import string

import pygame

from wordpulse.types import BACKSPACE, QUIT

LETTER_KEYS: dict[int, str] = {
    getattr(pygame, f"K_{ch}"): ch for ch in string.ascii_lowercase
}


def key_to_input(key: int) -> str | None:
    """Return a-z for the 26 letter keys, BACKSPACE for backspace, else None."""
    if key == pygame.K_BACKSPACE:
        return BACKSPACE
    return LETTER_KEYS.get(key)


def drain_key_events(events: list[pygame.event.Event]) -> list[str | None]:
    """Turn one frame's pygame events into the key batch for the engine.

    Window close and Escape become QUIT so the engine handles the stop.
    """
    keys: list[str | None] = []
    for event in events:
        if event.type == pygame.QUIT:
            keys.append(QUIT)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                keys.append(QUIT)
            else:
                keys.append(key_to_input(event.key))
    return keys
