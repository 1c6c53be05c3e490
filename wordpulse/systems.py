"""System factories for typing, shrinking, and word completion."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from wordpulse.growth import grow, shrink
from wordpulse.types import QUIT

if TYPE_CHECKING:
    from wordpulse.setup import GameState
    from wordpulse.types import FrameContext

logger = logging.getLogger(__name__)


def make_quit_system() -> Callable[[GameState, FrameContext], None]:
    """Return a system that stops the engine when the batch carries QUIT."""

    def quit_system(state: GameState, ctx: FrameContext) -> None:
        if QUIT in ctx.keys:
            logger.debug("frame %d: quit requested", ctx.frame_number)
            ctx.request_stop()

    return quit_system


def make_typing_system() -> Callable[[GameState, FrameContext], None]:
    """Return a system that drains the frame's key batch into WordProgress."""

    def typing_system(state: GameState, ctx: FrameContext) -> None:
        for key in ctx.keys:
            state.progress.on_key_press(key)

    return typing_system


def make_shrink_system() -> Callable[[GameState, FrameContext], None]:
    """Return a system that relaxes every shape toward the floor size."""

    def shrink_system(state: GameState, ctx: FrameContext) -> None:
        cfg = state.config
        for _sid, growable in state.shapes.items():
            shrink(growable, ctx.dt, cfg.shrink_rate, cfg.floor_size)

    return shrink_system


def make_completion_system(
    on_complete: Callable[[GameState, FrameContext, str], None] | None = None,
) -> Callable[[GameState, FrameContext], None]:
    """Return a system that pulses every shape and rotates words on completion.

    on_complete receives the word that was just finished, after the rotation.
    """

    def completion_system(state: GameState, ctx: FrameContext) -> None:
        progress = state.progress
        if not progress.is_word_complete():
            return

        for _sid, growable in state.shapes.items():
            grow(growable, ctx.dt, state.config.growth_rate)

        finished = progress.current
        progress.advance_word()
        state.words_completed += 1
        logger.debug(
            "frame %d: completed %r (%d total)",
            ctx.frame_number,
            finished,
            state.words_completed,
        )
        if on_complete is not None:
            on_complete(state, ctx, finished)

    return completion_system
