import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hct_tool import main  # noqa: E402


def test_solve_white(capsys):
    assert main(["solve", "0", "0", "100"]) == 0
    out = capsys.readouterr().out
    assert "#ffffff" in out
    assert "T 100" in out


def test_solve_prints_realised_tone(capsys):
    assert main(["solve", "120", "30", "120"]) == 0
    out = capsys.readouterr().out
    assert "T 100" in out
    assert "T 120" not in out


def test_solve_reports_clamping(capsys):
    assert main(["--debug", "solve", "270", "300", "50"]) == 0
    out = capsys.readouterr().out
    assert "gamut limit" in out
    assert "[debug]" in out


def test_solve_warns_on_tone_out_of_range(capsys):
    assert main(["solve", "10", "20", "120"]) == 0
    out = capsys.readouterr().out
    assert "[warn]" in out
    assert "#ffffff" in out


def test_measure(capsys):
    assert main(["measure", "#0000ff", "0xFF4285F4", "--workers", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("#0000ff")
    assert "T 32.3" in lines[0]
    assert lines[1].startswith("  J 25.4")
    assert lines[2].startswith("#4285f4")
    assert len(lines) == 4


def test_measure_bad_colour_exits_2(capsys):
    assert main(["measure", "#zzzzzz"]) == 2
    err = capsys.readouterr().err
    assert "[error]" in err


def test_distance_of_identical_colours(capsys):
    assert main(["distance", "#ff0000", "ff0000"]) == 0
    assert capsys.readouterr().out.strip() == "0.0000"


def test_max_chroma_with_viewing_flags(capsys):
    assert main(["--surround", "1", "--discount", "max-chroma", "270", "0", "50"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "T 0  max C 0"
    assert lines[1].startswith("T 50  max C ")
