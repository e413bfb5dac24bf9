import math

import pytest

from sigsynth.oscillators import Oscillator, oscillator
from sigsynth.sequencer import Amplify, mix
from sigsynth.signals import (
    SECOND,
    CompositionError,
    Constant,
    FiniteSignal,
    as_signal,
    constant,
    duration,
    seconds,
)
from sigsynth.tones import Note


def test_constant_is_flat():
    c = constant(0.25)
    for t in (0, 1, SECOND, 10 * SECOND, -5):
        assert c.evaluate(t) == 0.25
        assert c(t) == 0.25


def test_evaluate_is_pure():
    # vibrato: pitch wobbles around 440
    s = oscillator(mix(constant(880.0), oscillator(5.0) * 20.0))
    t = 123_456_789
    first = s.evaluate(t)
    for _ in range(5):
        assert s.evaluate(t) == first


def test_oscillator_quarter_period_peaks():
    s = oscillator(constant(1.0))
    assert s.evaluate(SECOND // 4) == pytest.approx(1.0)
    assert s.evaluate(3 * SECOND // 4) == pytest.approx(-1.0)
    assert s.evaluate(0) == 0.0


def test_oscillator_reads_frequency_at_same_instant():
    seen = []

    class Probe(Constant):
        def evaluate(self, t):
            seen.append(t)
            return self.value

    oscillator(Probe(2.0)).evaluate(777)
    assert seen == [777]


def test_oscillator_lifts_numbers_and_notes():
    assert oscillator(440).frequency == Constant(440.0)
    assert oscillator(Note.A4).frequency == Constant(440.0)
    assert isinstance(oscillator(Note.A4), Oscillator)


def test_finite_signal_rejects_negative_duration():
    with pytest.raises(CompositionError):
        FiniteSignal(constant(1.0), -1)


def test_zero_duration_finite_signal_is_fine():
    f = FiniteSignal(constant(1.0), 0)
    assert f.duration == 0
    assert f.evaluate(42) == 1.0


def test_as_signal_rejects_junk():
    with pytest.raises(TypeError):
        as_signal("nope")


def test_multiplying_signals_amplifies():
    s = oscillator(1.0) * 0.5
    assert isinstance(s, Amplify)
    t = SECOND // 4
    assert s.evaluate(t) == pytest.approx(0.5)
    assert (2 * constant(3.0)).evaluate(0) == 6.0


def test_time_conversions():
    assert seconds(SECOND) == 1.0
    assert seconds(SECOND // 2) == 0.5
    assert duration(0.5) == SECOND // 2
    assert duration(1e-9) == 1
    assert math.isclose(seconds(duration(2.75)), 2.75)


def test_multiplying_builds_plain_amplify():
    s = constant(2.0) * constant(3.0)
    assert s == Amplify(Constant(2.0), Constant(3.0))
    assert s.evaluate(0) == 6.0
