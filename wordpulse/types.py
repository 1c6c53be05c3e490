"""Shared type aliases, errors, and the per-frame context."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import Callable

ShapeId = int

# Sentinels carried in a key batch alongside the letters a-z.
BACKSPACE = "\b"
QUIT = "\x1b"


class CorrectionMode(str, enum.Enum):
    """How keystrokes are matched against the target word."""

    STRICT = "strict"
    BUFFERED = "buffered"


@dataclass(frozen=True, slots=True)
class FrameContext:
    """Per-frame view handed to every system.

    ``keys`` is the input batch queued since the previous frame; it belongs to
    this frame only and is never replayed.
    """

    frame_number: int
    dt: float
    elapsed: float
    keys: tuple[str | None, ...]
    request_stop: Callable[[], None]
    random: _random.Random


class WordpulseError(Exception):
    """Base class for game errors."""


class EmptyWordListError(WordpulseError, ValueError):
    """Raised when a word list has no usable words."""


class IncompleteWordError(WordpulseError):
    """Raised when advancing past a word that has not been fully typed."""


class UnknownShapeError(KeyError):
    """Raised when looking up a shape id that is not registered."""

    def __init__(self, shape_id: int, message: str) -> None:
        self.shape_id = shape_id
        super().__init__(message)

