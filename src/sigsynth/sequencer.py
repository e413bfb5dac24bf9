# ===== Audacity? Never met her =====
import logging
from bisect import bisect_right
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Tuple

from sigsynth.signals import Amplify, CompositionError, FiniteSignal, Signal, as_signal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mix(Signal):
    """
    Average of every voice. Dividing by the voice count keeps the level put as voices pile up.
    """

    voices: Tuple[Signal, ...]

    def __post_init__(self) -> None:
        if not self.voices:
            raise CompositionError("Can't mix zero signals")

    def evaluate(self, t: int) -> float:
        total = 0.0
        for voice in self.voices:
            total += voice.evaluate(t)
        return total / len(self.voices)


@dataclass(frozen=True)
class Sequence(Signal):
    """
    Finite segments played back to back, looping forever.

    The chosen segment is read at the loop-local time ``t mod total``, NOT at
    the time since that segment started, so oscillators keep their phase
    across boundaries. A time right on a boundary belongs to the segment that
    starts there.
    """

    segments: Tuple[FiniteSignal, ...]
    starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    total: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        durations = [segment.duration for segment in self.segments]
        total = sum(durations)
        if total <= 0:
            raise CompositionError(
                f"Sequence of {len(self.segments)} segment(s) has zero total duration"
            )
        # Exact integer prefix sums, a lookup can't miss
        starts = tuple(accumulate([0] + durations[:-1]))
        object.__setattr__(self, "starts", starts)
        object.__setattr__(self, "total", total)

    def evaluate(self, t: int) -> float:
        local = t % self.total
        # Rightmost start <= local; zero-length segments get skipped over
        idx = bisect_right(self.starts, local) - 1
        return self.segments[idx].signal.evaluate(local)


def mix(*signals) -> Mix:
    return Mix(tuple(as_signal(s) for s in signals))


def amplify(carrier, envelope) -> Amplify:
    """
    Volume knob. Constant envelope = gain, ramps or swells = fades.
    """
    return Amplify(as_signal(carrier), as_signal(envelope))


def finite(d: int, signal) -> FiniteSignal:
    return FiniteSignal(as_signal(signal), d)


def sequence(*segments: FiniteSignal) -> Sequence:
    """
    Glue segments into one looping signal with period = sum of their durations.

    Raises:
        CompositionError: no segments, or all of them zero-length.
    """
    for segment in segments:
        if not isinstance(segment, FiniteSignal):
            raise TypeError(f"Sequence needs FiniteSignal segments, got {segment!r}")
    seq = Sequence(tuple(segments))
    logger.debug("Sequenced %d segment(s), period %dns", len(segments), seq.total)
    return seq
