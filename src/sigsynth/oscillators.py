# ===== Wibbly Wobbly Bois =====
import math
from dataclasses import dataclass

from sigsynth.signals import Signal, as_signal, seconds


@dataclass(frozen=True)
class Oscillator(Signal):
    """
    Sine wave whose pitch is itself a signal.

    The frequency is read at the same instant as the output, so a constant
    gives a plain tone and anything else bends the pitch.
    """

    frequency: Signal

    def evaluate(self, t: int) -> float:
        return math.sin(seconds(t) * 2.0 * math.pi * self.frequency.evaluate(t))


def oscillator(frequency) -> Oscillator:
    """
    Beep. ``frequency`` can be a Signal, a Note or a plain number of Hz.
    """
    return Oscillator(as_signal(frequency))
