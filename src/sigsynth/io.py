import logging
from typing import BinaryIO, Iterable, Iterator

import numpy as np

from sigsynth.signals import SECOND, Signal, is_ns

logger = logging.getLogger(__name__)

# Raw PCM: one channel, big-endian IEEE-754 float64, no header
PCM_DTYPE = np.dtype(">f8")


class SamplingError(ValueError):
    """
    Raised for a sample rate or window the sampler can't work with.
    """


def _check_window(rate: int, start: int, length: int) -> None:
    if not is_ns(rate) or rate <= 0:
        raise SamplingError(f"Sample rate must be a positive integer, got {rate!r}")
    if not is_ns(start) or not is_ns(length):
        raise SamplingError(f"Window start and length must be whole nanoseconds, got {start!r}, {length!r}")
    if start < 0:
        raise SamplingError(f"Window start must be non-negative, got {start}ns")
    if length < 0:
        raise SamplingError(f"Window length must be non-negative, got {length}ns")


def sample_count(rate: int, length: int) -> int:
    """
    How many samples fit in ``length`` ns at ``rate`` Hz (rounded down).
    """
    return (length * rate) // SECOND


def iter_samples(signal: Signal, rate: int, start: int, length: int) -> Iterator[float]:
    """
    Lazily evaluate ``signal`` across ``[start, start + length)``.

    Sample ``i`` lands on ``start + i * SECOND // rate`` so the instants never drift.
    """
    _check_window(rate, start, length)
    for i in range(sample_count(rate, length)):
        yield signal.evaluate(start + (i * SECOND) // rate)


def sample(signal: Signal, rate: int, start: int, length: int) -> np.ndarray:
    """
    Discretize ``signal`` over a half-open window.

    Parameters:
        signal (Signal): The root of the signal graph.
        rate (int): Samples per second.
        start (int): Window start, in ns.
        length (int): Window length, in ns.

    Returns:
        np.ndarray: float64 samples in time order. Amplitudes are not clipped.

    Raises:
        SamplingError: rate isn't a positive int, or start/length is negative.
    """
    _check_window(rate, start, length)
    n = sample_count(rate, length)
    frames = np.fromiter(iter_samples(signal, rate, start, length), dtype=np.float64, count=n)
    logger.debug("Sampled %d frame(s) at %d Hz from %dns", n, rate, start)
    return frames


def encode_pcm(samples: Iterable[float]) -> bytes:
    """
    Samples -> headerless big-endian float64 PCM, 8 bytes each.
    """
    if not isinstance(samples, np.ndarray):
        samples = list(samples)
    frames = np.asarray(samples, dtype=np.float64)
    return frames.astype(PCM_DTYPE).tobytes()


def decode_pcm(data: bytes) -> np.ndarray:
    """
    The other way around. Handy for checking what went out the door.
    """
    if len(data) % PCM_DTYPE.itemsize:
        raise ValueError(f"PCM buffer length {len(data)} isn't a multiple of {PCM_DTYPE.itemsize}")
    return np.frombuffer(data, dtype=PCM_DTYPE).astype(np.float64)


def write_pcm(stream: BinaryIO, samples: Iterable[float]) -> int:
    """
    Encode and write everything in one go. Returns the number of bytes written.
    """
    data = encode_pcm(samples)
    stream.write(data)
    logger.debug("Wrote %d byte(s) of PCM", len(data))
    return len(data)
