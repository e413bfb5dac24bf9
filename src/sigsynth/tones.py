# ===== Tone Map =====
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from sigsynth.signals import SECOND, Constant

# Pitch classes from C, sharps first, flats folded onto the same step
SHARPS = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLATS = {"DB": "C#", "EB": "D#", "GB": "F#", "AB": "G#", "BB": "A#"}

TONES = {name: step for step, name in enumerate(SHARPS)}
TONES.update({flat: TONES[sharp] for flat, sharp in FLATS.items()})

A4_HZ = 440.0
A4_INDEX = 9 + 12 * 4  # index 57


def transpose(freq: float, semitones: float) -> float:
    """
    Shift a frequency up or down the equal tempered scale.
    """
    return freq * (2.0 ** (semitones / 12.0))


class Note(IntEnum):
    """
    Semitone offsets from A4 = 440 Hz, one octave's worth of names.
    """

    C4 = -9
    Db4 = -8
    D4 = -7
    Eb4 = -6
    E4 = -5
    F4 = -4
    Gb4 = -3
    G4 = -2
    Ab4 = -1
    A4 = 0
    Bb4 = 1
    B4 = 2

    @property
    def hz(self) -> float:
        return transpose(A4_HZ, int(self))

    def signal(self) -> Constant:
        """
        Constant Hz signal, ready to plug into an oscillator.
        """
        return Constant(self.hz)


def note_to_freq(name: str) -> float:
    """
    Convert conventional pitch notation (C0=0 indexing) to frequency in Hz.
    Equal temperament with A4 = 440 Hz.
    """
    name = name.strip().upper()
    if len(name) < 2:
        raise ValueError(f"Bad note name: {name}")
    if name[1] in ["#", "B"]:
        key = name[:2]
        octave_str = name[2:]
    else:
        key = name[0]
        octave_str = name[1:]
    if key not in TONES:
        raise ValueError(f"Bad note key: {key}")
    try:
        octave = int(octave_str)
    except ValueError:
        raise ValueError(f"Bad octave in note name: {name}") from None
    idx = TONES[key] + 12 * octave
    return transpose(A4_HZ, idx - A4_INDEX)


def tone(note: Union[str, Note]) -> Constant:
    if isinstance(note, Note):
        return note.signal()
    return Constant(note_to_freq(note))


@dataclass(frozen=True)
class Tempo:
    bpm: float

    def __post_init__(self) -> None:
        if self.bpm <= 0:
            raise ValueError(f"Tempo must be positive, got {self.bpm} bpm")

    def beats(self, n: float) -> int:
        """
        Length of ``n`` beats, in ns.
        """
        return int(n * 60 * SECOND / self.bpm)
