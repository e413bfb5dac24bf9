# ===== Signal Algebra =====
"""
Everything here is a pure function of time.

Time offsets and durations are plain ``int`` nanoseconds so that sequencing
and sampling never accumulate floating point drift.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

SECOND = 1_000_000_000

Number = Union[int, float]


class CompositionError(ValueError):
    """
    Raised when a signal graph can't produce a defined value (empty mix, zero-length loop, ...).
    """


def is_ns(value) -> bool:
    """
    Whole nanoseconds only: ints and numpy ints, not floats or bools.
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def seconds(t: int) -> float:
    return t / SECOND


def duration(secs: float) -> int:
    """
    Float seconds -> nearest whole nanosecond.
    """
    return int(round(secs * SECOND))


class Signal:
    """
    A value at a point in time.

    Subclasses implement ``evaluate``. Calling the signal is the same thing.
    """

    def evaluate(self, t: int) -> float:
        raise NotImplementedError

    def __call__(self, t: int) -> float:
        return self.evaluate(t)

    def __mul__(self, other: Union["Signal", Number]) -> "Signal":
        return Amplify(self, as_signal(other))

    def __rmul__(self, other: Number) -> "Signal":
        return Amplify(as_signal(other), self)


@dataclass(frozen=True)
class Constant(Signal):
    value: float

    def evaluate(self, t: int) -> float:
        return self.value


@dataclass(frozen=True)
class Amplify(Signal):
    carrier: Signal
    envelope: Signal

    def evaluate(self, t: int) -> float:
        return self.carrier.evaluate(t) * self.envelope.evaluate(t)


@dataclass(frozen=True)
class FiniteSignal:
    """
    A signal plus how long it stays active inside a sequence.

    Doesn't silence anything outside its window, that's up to the sequencer.
    """

    signal: Signal
    duration: int

    def __post_init__(self) -> None:
        if not is_ns(self.duration):
            raise CompositionError(f"Duration must be whole nanoseconds, got {self.duration!r}")
        if self.duration < 0:
            raise CompositionError(f"Negative duration: {self.duration}ns")

    def evaluate(self, t: int) -> float:
        return self.signal.evaluate(t)

    def __call__(self, t: int) -> float:
        return self.signal.evaluate(t)


def as_signal(value) -> Signal:
    """
    Lift numbers (and anything with a ``signal()`` method, like a Note) into a Signal.
    """
    if isinstance(value, Signal):
        return value
    if isinstance(value, FiniteSignal):
        return value.signal
    to_signal = getattr(value, "signal", None)
    if callable(to_signal):
        return to_signal()
    if isinstance(value, (int, float)):
        return Constant(float(value))
    raise TypeError(f"Can't use {value!r} as a signal")


def constant(value: float) -> Constant:
    return Constant(float(value))
