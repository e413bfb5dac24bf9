#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
sigsynth

Renders the demo loop to raw PCM.

Output:
  mono, big-endian float64, no header. Written to stdout unless -o is given.
  Something like ``ffplay -f f64be -ar 44100 -ac 1 -`` will play it.
"""

import argparse
import logging
import sys
from typing import List, Optional

from sigsynth import BEATS, BPM, SAMPLE_RATE
from sigsynth.demo import build_song
from sigsynth.io import sample, write_pcm
from sigsynth.tones import Tempo

logger = logging.getLogger("sigsynth")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sigsynth", description="Render the demo loop as raw f64be PCM.")
    parser.add_argument("--rate", type=int, default=SAMPLE_RATE, help="Sample rate in Hz (default: %(default)s)")
    parser.add_argument("--bpm", type=float, default=BPM, help="Tempo (default: %(default)s)")
    parser.add_argument("--beats", type=float, default=BEATS, help="How many beats to render (default: %(default)s)")
    parser.add_argument("-o", "--output", default="-", help="Output file, '-' for stdout (default)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)
    if args.rate <= 0:
        parser.error("--rate must be positive")
    if args.bpm <= 0:
        parser.error("--bpm must be positive")
    if args.beats < 0:
        parser.error("--beats can't be negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # stdout is for audio, chatter goes to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tempo = Tempo(args.bpm)
    song = build_song(tempo)
    frames = sample(song, args.rate, 0, tempo.beats(args.beats))

    if args.output == "-":
        written = write_pcm(sys.stdout.buffer, frames)
        sys.stdout.buffer.flush()
    else:
        with open(args.output, "wb") as f:
            written = write_pcm(f, frames)

    logger.info("%d frame(s), %d byte(s) -> %s", len(frames), written, args.output)
    logger.info("Play with: ffplay -f f64be -ar %d -ac 1 %s", args.rate, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
