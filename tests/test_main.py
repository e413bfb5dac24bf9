import pytest

from sigsynth.__main__ import main, parse_args
from sigsynth.demo import BEATS_PER_CHORD, build_song, progression
from sigsynth.io import decode_pcm, sample, sample_count
from sigsynth.tones import Note, Tempo


def test_song_loops_every_sixteen_beats():
    tempo = Tempo(127)
    song = build_song(tempo)
    assert song.total == len(progression()) * tempo.beats(BEATS_PER_CHORD)
    for t in (0, 12345, tempo.beats(3), tempo.beats(9.5)):
        assert song.evaluate(t) == song.evaluate(t + song.total)


def test_song_swells_from_silence():
    tempo = Tempo(120)
    song = build_song(tempo)
    assert song.evaluate(0) == 0.0
    # chords are averaged, then scaled by an envelope that tops out at 1
    frames = sample(song, 2000, 0, tempo.beats(BEATS_PER_CHORD))
    assert abs(frames).max() <= 1.0
    assert abs(frames).max() > 0.1


def test_cli_writes_file(tmp_path):
    out = tmp_path / "loop.pcm"
    assert main(["--rate", "100", "--beats", "1", "-o", str(out)]) == 0
    expected = sample_count(100, Tempo(127).beats(1))
    data = out.read_bytes()
    assert len(data) == 8 * expected
    assert decode_pcm(data).tolist() == sample(build_song(Tempo(127)), 100, 0, Tempo(127).beats(1)).tolist()


def test_cli_writes_stdout(capsysbinary):
    assert main(["--rate", "50", "--bpm", "60", "--beats", "2"]) == 0
    out = capsysbinary.readouterr().out
    assert len(out) == 8 * 100


def test_parse_args_defaults():
    args = parse_args([])
    assert args.rate == 44100
    assert args.bpm == 127
    assert args.beats == 16
    assert args.output == "-"


@pytest.mark.parametrize("argv", [["--rate", "0"], ["--bpm", "-1"], ["--beats", "-2"]])
def test_cli_rejects_bad_numbers(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_song_c_e_g_chord_sits_below_a4():
    first = progression()[0]
    assert first == (Note.C4, Note.E4, Note.G4)
    assert all(n.hz < Note.A4.hz for n in first)
