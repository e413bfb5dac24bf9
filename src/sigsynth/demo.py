# -*- coding: utf-8 -*-
from typing import List, Tuple

from sigsynth.envelope import swell
from sigsynth.oscillators import oscillator
from sigsynth.sequencer import amplify, finite, mix, sequence
from sigsynth.signals import FiniteSignal, Signal
from sigsynth.tones import Note, Tempo

BEATS_PER_CHORD = 4


def progression() -> List[Tuple[Note, Note, Note]]:
    """
    Beep boop boop
    """
    return [
        (Note.C4, Note.E4, Note.G4),
        (Note.A4, Note.C4, Note.E4),
        (Note.E4, Note.B4, Note.G4),
        (Note.D4, Note.A4, Note.Gb4),
    ]


def chord(*notes: Note) -> Signal:
    return mix(*(oscillator(n) for n in notes))


# ===== Ok let's make a music =====
def build_song(tempo: Tempo) -> Signal:
    """
    Four chords, each swelling in for two beats and out for two, on a loop.

    Pitches follow standard octave numbering (C4 below A4), so the C, D, E
    and G tones sit an octave lower than if all twelve names counted upward
    from A4.
    """
    half = tempo.beats(BEATS_PER_CHORD / 2)
    bar = tempo.beats(BEATS_PER_CHORD)
    bars: List[FiniteSignal] = []
    for notes in progression():
        bars.append(finite(bar, amplify(chord(*notes), swell(half, half))))
    return sequence(*bars)
