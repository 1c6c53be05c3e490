"""Engine - frame loop, system ordering, and lifecycle hooks."""

from __future__ import annotations

import logging
import os
import random
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from wordpulse.clock import FrameClock
from wordpulse.types import FrameContext

logger = logging.getLogger(__name__)

S = TypeVar("S")

Frame = tuple[float, Sequence[str | None]]


class Engine(Generic[S]):
    """Runs an ordered list of systems over a state object, one frame at a time.

    The caller owns pacing: every frame supplies its own ``dt`` and the batch
    of key events queued since the previous frame. The state may be attached
    after construction so setup code can draw from ``rng`` first.
    """

    def __init__(self, state: S | None = None, seed: int | None = None) -> None:
        self._clock = FrameClock()
        self._state = state
        self._systems: list[Callable[[S, FrameContext], None]] = []
        self._start_hooks: list[Callable[[S, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[S, FrameContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def state(self) -> S:
        if self._state is None:
            raise RuntimeError("Engine has no state attached")
        return self._state

    @state.setter
    def state(self, state: S) -> None:
        self._state = state

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: Callable[[S, FrameContext], None]) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[S, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[S, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self, dt: float, keys: Sequence[str | None]) -> None:
        state = self.state
        self._clock.advance(dt)
        ctx = self._clock.context(keys, self._request_stop, self._rng)
        for system in self._systems:
            system(state, ctx)
            if self._stop_requested:
                logger.debug("stop requested during frame %d", ctx.frame_number)
                break

    def step(self, dt: float, keys: Sequence[str | None] = ()) -> None:
        self._stop_requested = False
        self._frame(dt, keys)

    def run(self, frames: Iterable[Frame]) -> None:
        self._stop_requested = False
        ctx = self._clock.context((), self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(self.state, ctx)

        for dt, keys in frames:
            self._frame(dt, keys)
            if self._stop_requested:
                break

        ctx = self._clock.context((), self._request_stop, self._rng)
        for hook in self._stop_hooks:
            hook(self.state, ctx)
