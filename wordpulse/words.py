"""Word list loading and random word supply."""
from __future__ import annotations

import logging
import random
import string
from importlib import resources
from pathlib import Path
from typing import Iterable, Sequence

from wordpulse.types import EmptyWordListError

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_lowercase)


def parse_words(lines: Iterable[str]) -> list[str]:
    """Normalize raw lines into typeable words.

    Blank lines and entries with anything other than a-z after lowercasing
    are dropped.
    """
    words = []
    for line in lines:
        word = line.strip().lower()
        if word and set(word) <= _LETTERS:
            words.append(word)
    return words


def load_words(path: str | Path | None = None) -> list[str]:
    """Read a newline-delimited word list, defaulting to the bundled one."""
    if path is None:
        text = resources.files("wordpulse").joinpath("data/words.txt").read_text(
            encoding="utf-8"
        )
        source = "bundled word list"
    else:
        text = Path(path).read_text(encoding="utf-8")
        source = str(path)

    words = parse_words(text.splitlines())
    if not words:
        raise EmptyWordListError(f"No usable words in {source}")
    logger.info("loaded %d words from %s", len(words), source)
    return words


class WordSupply:
    """Draws words uniformly at random from a fixed list."""

    def __init__(self, words: Sequence[str], rng: random.Random) -> None:
        if not words:
            raise EmptyWordListError("WordSupply requires at least one word")
        self._words = tuple(words)
        self._rng = rng

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def rng(self) -> random.Random:
        return self._rng

    def random_word(self) -> str:
        return self._rng.choice(self._words)

    def __call__(self) -> str:
        return self.random_word()
