"""wordpulse - A typing-practice mini-game built on a frame-stepped engine."""

from wordpulse.clock import FrameClock
from wordpulse.config import GameConfig
from wordpulse.engine import Engine
from wordpulse.growth import Growable, grow, shrink
from wordpulse.progress import WordProgress
from wordpulse.registry import ShapeRegistry
from wordpulse.setup import GameState, build_game
from wordpulse.systems import (
    make_completion_system,
    make_quit_system,
    make_shrink_system,
    make_typing_system,
)
from wordpulse.types import (
    BACKSPACE,
    QUIT,
    CorrectionMode,
    EmptyWordListError,
    FrameContext,
    IncompleteWordError,
    ShapeId,
    UnknownShapeError,
    WordpulseError,
)
from wordpulse.words import WordSupply, load_words, parse_words

__all__ = [
    "Engine",
    "FrameClock",
    "FrameContext",
    "GameConfig",
    "GameState",
    "build_game",
    "WordProgress",
    "Growable",
    "grow",
    "shrink",
    "ShapeRegistry",
    "ShapeId",
    "WordSupply",
    "load_words",
    "parse_words",
    "make_typing_system",
    "make_shrink_system",
    "make_completion_system",
    "make_quit_system",
    "BACKSPACE",
    "QUIT",
    "CorrectionMode",
    "WordpulseError",
    "EmptyWordListError",
    "IncompleteWordError",
    "UnknownShapeError",
]
