"""Tests for engine lifecycle, frame counting, and system ordering."""

from dataclasses import dataclass, field

import pytest
from wordpulse.clock import FrameClock
from wordpulse.engine import Engine


@dataclass
class Counter:
    value: int = 0
    seen: list = field(default_factory=list)


# --- Initialization ---

def test_engine_init_defaults():
    state = Counter()
    engine = Engine(state)
    assert engine.state is state
    assert isinstance(engine.clock, FrameClock)
    assert engine.clock.frame_number == 0
    assert isinstance(engine.seed, int)


def test_engine_seed_is_kept():
    engine = Engine(Counter(), seed=7)
    assert engine.seed == 7
    assert engine.rng.random() == Engine(Counter(), seed=7).rng.random()


def test_state_can_be_attached_later():
    engine = Engine(seed=3)
    rng_before = engine.rng
    engine.state = Counter(value=5)
    assert engine.state.value == 5
    assert engine.rng is rng_before


def test_step_without_state_raises():
    engine = Engine()
    with pytest.raises(RuntimeError):
        engine.step(0.1)
    assert engine.clock.frame_number == 0


# --- System registration ---

def test_systems_receive_state_and_context():
    engine = Engine(Counter())

    def sys(state, ctx):
        state.value += 1
        state.seen.append((ctx.frame_number, ctx.dt, ctx.keys))

    engine.add_system(sys)
    engine.step(0.25, ["a", "b"])
    assert engine.state.value == 1
    assert engine.state.seen == [(1, 0.25, ("a", "b"))]


def test_systems_run_in_order():
    engine = Engine(Counter())
    order = []

    engine.add_system(lambda s, c: order.append("first"))
    engine.add_system(lambda s, c: order.append("second"))
    engine.add_system(lambda s, c: order.append("third"))
    engine.step(0.016)
    assert order == ["first", "second", "third"]


# --- step() ---

def test_step_advances_one_frame():
    engine = Engine(Counter())
    engine.step(0.1)
    engine.step(0.2)
    assert engine.clock.frame_number == 2
    assert abs(engine.clock.elapsed - 0.3) < 1e-9


def test_step_defaults_to_empty_batch():
    engine = Engine(Counter())
    batches = []
    engine.add_system(lambda s, c: batches.append(c.keys))
    engine.step(0.1)
    assert batches == [()]


def test_step_does_not_call_hooks():
    engine = Engine(Counter())
    called = []
    engine.on_start(lambda s, c: called.append("start"))
    engine.on_stop(lambda s, c: called.append("stop"))
    engine.step(0.1)
    assert called == []


def test_request_stop_skips_remaining_systems():
    engine = Engine(Counter())
    order = []

    def stopper(state, ctx):
        order.append("stopper")
        ctx.request_stop()

    engine.add_system(stopper)
    engine.add_system(lambda s, c: order.append("after"))
    engine.step(0.1)
    assert order == ["stopper"]
    assert engine.stop_requested


def test_step_clears_previous_stop_request():
    engine = Engine(Counter())
    engine.add_system(lambda s, c: c.request_stop() if c.frame_number == 1 else None)
    engine.step(0.1)
    assert engine.stop_requested
    engine.step(0.1)
    assert not engine.stop_requested


# --- run() ---

def test_run_steps_each_frame_and_calls_hooks():
    engine = Engine(Counter())
    events = []

    engine.on_start(lambda s, c: events.append(("start", c.frame_number)))
    engine.on_stop(lambda s, c: events.append(("stop", c.frame_number)))
    engine.add_system(lambda s, c: events.append(("frame", c.frame_number, c.keys)))

    engine.run([(0.1, ["a"]), (0.1, []), (0.1, ["b", "c"])])

    assert events == [
        ("start", 0),
        ("frame", 1, ("a",)),
        ("frame", 2, ()),
        ("frame", 3, ("b", "c")),
        ("stop", 3),
    ]


def test_run_stops_early_on_request():
    engine = Engine(Counter())

    def sys(state, ctx):
        state.value += 1
        if state.value == 2:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run([(0.1, [])] * 10)
    assert engine.state.value == 2
    assert engine.clock.frame_number == 2


def test_run_accepts_generator():
    engine = Engine(Counter())
    engine.add_system(lambda s, c: setattr(s, "value", s.value + len(c.keys)))
    engine.run((0.05, ["x"] * n) for n in range(4))
    assert engine.state.value == 6
