"""WordProgress - typing progress through the current target word."""
from __future__ import annotations

import logging
import string
from typing import Callable

from wordpulse.types import BACKSPACE, CorrectionMode, IncompleteWordError

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_lowercase)


def common_prefix_len(a: str, b: str) -> int:
    n = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            break
        n += 1
    return n


class WordProgress:
    """Tracks the target word, the queued preview word, and the typed prefix.

    In STRICT mode only the expected next letter advances ``typed_count``;
    wrong letters and backspace do nothing. In BUFFERED mode every letter is
    appended to a free-form buffer, backspace pops it, and ``typed_count`` is
    the length of the prefix the buffer shares with ``current``.
    """

    def __init__(
        self,
        supply: Callable[[], str],
        mode: CorrectionMode = CorrectionMode.STRICT,
    ) -> None:
        self._supply = supply
        self._mode = CorrectionMode(mode)
        self._current = supply()
        self._next = supply()
        self._typed_count = 0
        self._buffer = ""

    @property
    def current(self) -> str:
        return self._current

    @property
    def next(self) -> str:
        return self._next

    @property
    def typed_count(self) -> int:
        return self._typed_count

    @property
    def mode(self) -> CorrectionMode:
        return self._mode

    @property
    def buffer(self) -> str:
        return self._buffer

    def on_key_press(self, key: str | None) -> None:
        if key == BACKSPACE:
            if self._mode is CorrectionMode.BUFFERED and self._buffer:
                self._buffer = self._buffer[:-1]
                self._typed_count = common_prefix_len(self._buffer, self._current)
            return
        if key is None or key not in _LETTERS:
            return

        if self._mode is CorrectionMode.BUFFERED:
            self._buffer += key
            self._typed_count = common_prefix_len(self._buffer, self._current)
        elif (
            self._typed_count < len(self._current)
            and self._current[self._typed_count] == key
        ):
            self._typed_count += 1

    def is_word_complete(self) -> bool:
        return self._typed_count == len(self._current)

    def advance_word(self) -> None:
        if not self.is_word_complete():
            raise IncompleteWordError(
                f"Cannot advance past {self._current!r}: "
                f"{self._typed_count}/{len(self._current)} typed"
            )
        finished = self._current
        self._current = self._next
        self._next = self._supply()
        self._typed_count = 0
        self._buffer = ""
        logger.debug(
            "finished %r, now typing %r (next %r)",
            finished,
            self._current,
            self._next,
        )

    def split(self) -> tuple[str, str]:
        """Return the typed prefix and untyped remainder of ``current``."""
        return self._current[: self._typed_count], self._current[self._typed_count :]
