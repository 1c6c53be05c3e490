"""Draw the current word, the preview word, the bubble, and a small HUD."""
from __future__ import annotations

import pygame

from wordpulse.growth import Growable
from wordpulse.progress import WordProgress
from wordpulse.ui.constants import (
    BUBBLE_FILL,
    BUBBLE_OUTLINE,
    BUBBLE_OUTLINE_W,
    BUBBLE_X,
    BUBBLE_Y,
    HUD_COLOR,
    NEXT_COLOR,
    NEXT_GAP,
    REMAINING_COLOR,
    SCREEN_H,
    TEXT_PADDING,
    TYPED_COLOR,
)


def bubble_rect(growable: Growable, cx: float = BUBBLE_X, cy: float = BUBBLE_Y) -> pygame.Rect:
    """Square bounding box of the bubble, shifted by its offset to stay centred."""
    size = max(int(round(growable.size)), 1)
    return pygame.Rect(int(cx - growable.offset), int(cy - growable.offset), size, size)


def draw_word(
    surface: pygame.Surface,
    current_font: pygame.font.Font,
    next_font: pygame.font.Font,
    progress: WordProgress,
) -> None:
    """Draw typed and remaining runs side by side, with the preview below."""
    typed, remaining = progress.split()
    x = TEXT_PADDING
    y = TEXT_PADDING

    for run, color in ((typed, TYPED_COLOR), (remaining, REMAINING_COLOR)):
        if not run:
            continue
        run_surf = current_font.render(run, True, color)
        surface.blit(run_surf, (x, y))
        x += run_surf.get_width()

    y += current_font.get_linesize() + NEXT_GAP
    surface.blit(next_font.render(progress.next, True, NEXT_COLOR), (TEXT_PADDING, y))


def draw_bubble(surface: pygame.Surface, growable: Growable) -> None:
    rect = bubble_rect(growable)
    pygame.draw.ellipse(surface, BUBBLE_FILL, rect)
    pygame.draw.ellipse(surface, BUBBLE_OUTLINE, rect, BUBBLE_OUTLINE_W)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    words_completed: int,
    mode: str,
) -> None:
    text = f"Words: {words_completed}   Mode: {mode}   [Esc] Quit"
    label = font.render(text, True, HUD_COLOR)
    surface.blit(label, (TEXT_PADDING, SCREEN_H - label.get_height() - TEXT_PADDING))
