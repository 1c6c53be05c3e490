"""FrameClock and FrameContext for a variable-timestep frame loop."""

import random
from typing import Callable, Sequence

from wordpulse.types import FrameContext


class FrameClock:
    def __init__(self) -> None:
        self._frame_number = 0
        self._dt = 0.0
        self._elapsed = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._frame_number += 1
        self._dt = dt
        self._elapsed += dt
        return self._frame_number

    def context(
        self,
        keys: Sequence[str | None],
        stop_fn: Callable[[], None],
        rng: random.Random,
    ) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            keys=tuple(keys),
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._frame_number = 0
        self._dt = 0.0
        self._elapsed = 0.0
