# ===== Envelopes =====
from dataclasses import dataclass

from sigsynth.sequencer import sequence
from sigsynth.signals import CompositionError, Constant, FiniteSignal, Signal, is_ns


@dataclass(frozen=True)
class Ramp(Signal):
    """
    Linear slide from ``start`` to ``end`` that repeats every ``over`` ns.

    Works off ``(t - offset) mod over`` so the same ramp can be read at any
    absolute time inside a sequence. ``offset`` shifts where the slide begins.
    """

    start: float
    end: float
    over: int
    offset: int = 0

    def __post_init__(self) -> None:
        if not is_ns(self.over) or not is_ns(self.offset):
            raise CompositionError(
                f"Ramp length and offset must be whole nanoseconds, got {self.over!r}, {self.offset!r}"
            )
        if self.over <= 0:
            raise CompositionError(f"Ramp needs a positive length, got {self.over}ns")

    def evaluate(self, t: int) -> float:
        return self.start + (self.end - self.start) * ((t - self.offset) % self.over) / self.over


def ramp(start: float, end: float, over: int, offset: int = 0) -> FiniteSignal:
    return FiniteSignal(Ramp(float(start), float(end), over, offset), over)


def blank(d: int) -> FiniteSignal:
    """
    Silence, for ``d`` ns.
    """
    return FiniteSignal(Constant(0.0), d)


def swell(up: int, down: int, peak: float = 1.0) -> Signal:
    """
    Fade in over ``up`` then back out over ``down``, looping every ``up + down``.

    The fade-out ramp is shifted by ``up`` so it starts at ``peak`` right on
    the boundary even when the two halves differ in length. Inside a longer
    sequence the swell lines up with segments that start on multiples of
    ``up + down``.
    """
    return sequence(ramp(0.0, peak, up), ramp(peak, 0.0, down, offset=up))
