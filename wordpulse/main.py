"""wordpulse - type the word, watch the bubble pulse.

Controls:
  a-z         Type the highlighted word
  Backspace   Undo a letter (buffered mode only)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterator

import pygame

from wordpulse.config import GameConfig
from wordpulse.setup import GameState, build_game
from wordpulse.types import CorrectionMode, EmptyWordListError, FrameContext
from wordpulse.ui.constants import (
    BG_COLOR,
    CURRENT_FONT_SIZE,
    FPS,
    HUD_FONT_SIZE,
    NEXT_FONT_SIZE,
    SCREEN_H,
    SCREEN_W,
    TITLE,
)
from wordpulse.ui.keys import drain_key_events
from wordpulse.ui.render import draw_bubble, draw_hud, draw_word
from wordpulse.words import load_words

logger = logging.getLogger("wordpulse")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="wordpulse - typing practice with a pulsing bubble")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--words", type=str, default=None, metavar="FILE",
                   help="Newline-delimited word list (default: bundled list)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--mode", choices=[m.value for m in CorrectionMode],
                   default=CorrectionMode.STRICT.value,
                   help="strict: forward-only matching; buffered: free input with backspace")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args(argv)
    args.fps = max(1, args.fps)
    return args


def _log_completion(state: GameState, ctx: FrameContext, word: str) -> None:
    logger.info("typed %r at %.2fs (%d words)", word, ctx.elapsed, state.words_completed)


def _log_session_start(state: GameState, ctx: FrameContext) -> None:
    logger.info(
        "session start: typing %r (next %r)",
        state.progress.current,
        state.progress.next,
    )


def _log_session_over(state: GameState, ctx: FrameContext) -> None:
    logger.info(
        "session over: %d words in %.1fs over %d frames",
        state.words_completed,
        ctx.elapsed,
        ctx.frame_number,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        words = load_words(args.words)
    except (OSError, EmptyWordListError) as exc:
        logger.error("cannot load word list: %s", exc)
        sys.exit(1)

    config = GameConfig(mode=CorrectionMode(args.mode))
    engine = build_game(words, seed=args.seed, config=config, on_complete=_log_completion)
    engine.on_start(_log_session_start)
    engine.on_stop(_log_session_over)
    state = engine.state

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    current_font = pygame.font.SysFont("monospace", CURRENT_FONT_SIZE)
    next_font = pygame.font.SysFont("monospace", NEXT_FONT_SIZE)
    hud_font = pygame.font.SysFont("monospace", HUD_FONT_SIZE)

    def frames() -> Iterator[tuple[float, list[str | None]]]:
        """Render the current state, then hand the engine the next frame."""
        while True:
            screen.fill(BG_COLOR)
            if state.bubble_id is not None:
                draw_bubble(screen, state.shapes.get(state.bubble_id))
            draw_word(screen, current_font, next_font, state.progress)
            draw_hud(screen, hud_font, state.words_completed, state.config.mode.value)
            pygame.display.flip()

            dt = clock.tick(args.fps) / 1000.0
            yield dt, drain_key_events(pygame.event.get())

    # Runs until the quit system sees QUIT in a frame's key batch
    engine.run(frames())
    pygame.quit()


if __name__ == "__main__":
    main()
