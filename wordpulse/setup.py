"""Build the complete game state."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from wordpulse.config import GameConfig
from wordpulse.engine import Engine
from wordpulse.growth import Growable
from wordpulse.progress import WordProgress
from wordpulse.registry import ShapeRegistry
from wordpulse.systems import (
    make_completion_system,
    make_quit_system,
    make_shrink_system,
    make_typing_system,
)
from wordpulse.types import FrameContext, ShapeId
from wordpulse.words import WordSupply

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Everything the systems read and mutate each frame."""

    progress: WordProgress
    config: GameConfig = field(default_factory=GameConfig)
    shapes: ShapeRegistry = field(default_factory=ShapeRegistry)
    bubble_id: ShapeId | None = None
    words_completed: int = 0


def build_game(
    words: Sequence[str],
    seed: int | None = 42,
    config: GameConfig | None = None,
    on_complete: Callable[[GameState, FrameContext, str], None] | None = None,
) -> Engine[GameState]:
    """Wire up the game and return an engine ready to step."""
    config = config or GameConfig()
    engine: Engine[GameState] = Engine(seed=seed)
    supply = WordSupply(words, engine.rng)

    state = GameState(progress=WordProgress(supply, mode=config.mode), config=config)
    state.bubble_id = state.shapes.spawn(Growable.centred(config.initial_size))
    engine.state = state

    # Systems (order matters: quit first, keys drained before completion is checked)
    engine.add_system(make_quit_system())
    engine.add_system(make_typing_system())
    engine.add_system(make_shrink_system())
    engine.add_system(make_completion_system(on_complete=on_complete))

    logger.info(
        "game ready: seed=%d mode=%s words=%d first=%r",
        engine.seed,
        config.mode.value,
        len(supply.words),
        state.progress.current,
    )
    return engine
