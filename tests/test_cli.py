import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cli.cli import build_flags, build_parser, describe_flags, main
from map_fixtures import MAPS_DIR

OUTPOST = str(MAPS_DIR / "outpost.txt")


def test_parser_defaults():
    args = build_parser().parse_args(["--map-file", OUTPOST])
    assert args.level == 1
    assert args.seed is None
    assert args.flag == []
    assert args.loglevel == 'warning'


def test_build_flags_maps_errors_to_value_error():
    assert build_flags(["total_decks=4"]).total_decks == 4
    with pytest.raises(ValueError):
        build_flags(["nope=1"])
    with pytest.raises(ValueError):
        build_flags(["total_decks"])


def test_dump_to_stdout(capsys):
    assert main(["--map-file", OUTPOST, "--seed", "7", "--level", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("=== MAP DUMP DEBUG")
    assert "=== END MAP DUMP ===" in captured.out
    assert "seed 7" in captured.err


def test_dump_to_file(tmp_path, capsys):
    output = tmp_path / "out" / "dump.txt"
    result = main(["--map-file", OUTPOST, "--seed", "11", "--level", "5",
                   "--flag", "place_puzzles=false", "--output-file", str(output)])
    assert result == 0
    assert output.read_text(encoding="utf-8").startswith("=== MAP DUMP DEBUG")
    assert str(output) in capsys.readouterr().out


def test_random_seed_when_omitted(capsys):
    assert main(["--map-file", OUTPOST]) == 0
    assert "generated with seed" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--map-file", "missing_map.txt"],
    ["--map-file", OUTPOST, "--level", "0"],
    ["--map-file", OUTPOST, "--flag", "not_a_flag=1"],
    ["--map-file", OUTPOST, "--flag", "total_decks=lots"],
    ["--map-file", OUTPOST, "--timezone", "Mars/Olympus_Mons"],
    [],
])
def test_bad_input_is_a_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_invalid_grid_is_a_usage_error(tmp_path):
    broken = tmp_path / "broken.txt"
    broken.write_text("start = 0,0\nexit = 0,1\n---\n#.\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--map-file", str(broken)])
    assert excinfo.value.code == 2


def test_help_lists_flags_by_category(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert describe_flags() in out
    for heading in ("Level Content:", "Difficulty Scaling:", "Solvability Checks:"):
        assert heading in out
    assert "place_hazards (default: True)" in out
    assert "enforce_power_solvability" not in out
