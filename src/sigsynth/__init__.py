"""
sigsynth

A small algebra of time-varying signals, sampled into raw PCM.

Output format (not embedded in the stream, tell your player):
  mono, big-endian float64, SAMPLE_RATE Hz
"""

# ===== Global Session Settings =====
SAMPLE_RATE = 44100
BPM = 127
BEATS = 16

from sigsynth.envelope import blank, ramp, swell  # noqa: E402
from sigsynth.io import (  # noqa: E402
    SamplingError,
    decode_pcm,
    encode_pcm,
    iter_samples,
    sample,
    write_pcm,
)
from sigsynth.oscillators import oscillator  # noqa: E402
from sigsynth.sequencer import amplify, finite, mix, sequence  # noqa: E402
from sigsynth.signals import (  # noqa: E402
    SECOND,
    CompositionError,
    FiniteSignal,
    Signal,
    constant,
    duration,
    seconds,
)
from sigsynth.tones import Note, Tempo, note_to_freq, tone, transpose  # noqa: E402

__all__ = [
    "SAMPLE_RATE",
    "BPM",
    "BEATS",
    "SECOND",
    "CompositionError",
    "SamplingError",
    "FiniteSignal",
    "Signal",
    "Note",
    "Tempo",
    "amplify",
    "blank",
    "constant",
    "decode_pcm",
    "duration",
    "encode_pcm",
    "finite",
    "iter_samples",
    "mix",
    "note_to_freq",
    "oscillator",
    "ramp",
    "sample",
    "seconds",
    "sequence",
    "swell",
    "tone",
    "transpose",
    "write_pcm",
]
