"""Tests for the snake-controller CLI."""

import json

import pytest

from snake_controller.cli import _build_parser, main, parse_script_line
from snake_controller.events import (
    DirectionInd,
    FoodInd,
    FoodResp,
    PauseInd,
    TimeoutInd,
)
from snake_controller.segments import Direction, Position


@pytest.fixture()
def config_file(tmp_path):
    path = tmp_path / "game.txt"
    path.write_text("W 5 5 F 3 3 S R 2 1 1 2 1\n")
    return path


class TestScriptParsing:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("tick", TimeoutInd()),
            ("  PAUSE  ", PauseInd()),
            ("dir d", DirectionInd(Direction.DOWN)),
            ("food 0 4", FoodInd(Position(0, 4))),
            ("resp 4 4  # answer", FoodResp(Position(4, 4))),
        ],
    )
    def test_lines(self, line, expected):
        assert parse_script_line(line) == expected

    @pytest.mark.parametrize("line", ["", "   ", "# comment"])
    def test_blank_lines(self, line):
        assert parse_script_line(line) is None

    @pytest.mark.parametrize("line", ["jump", "dir X", "food 1", "tick 3"])
    def test_bad_lines(self, line):
        with pytest.raises(ValueError):
            parse_script_line(line)


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_run_defaults(self):
        args = _build_parser().parse_args(["run", "game.txt"])
        assert args.command == "run"
        assert args.events is None
        assert args.seed is None


class TestCLICommands:
    def test_check_valid(self, config_file, capsys):
        assert main(["check", str(config_file)]) == 0
        assert capsys.readouterr().out.startswith("ok: W 5 5")

    def test_check_invalid(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("W 5 5 F 3 3 S Q 0")
        assert main(["check", str(path)]) == 1
        assert "invalid" in capsys.readouterr().out

    def test_run_replays_script(self, config_file, tmp_path, capsys):
        events = tmp_path / "events.txt"
        events.write_text("# move once\ntick\ndir D\ntick\n")
        assert main(["run", str(config_file), "--events", str(events)]) == 0
        lines = capsys.readouterr().out.splitlines()
        first = json.loads(lines[0])
        assert first == {"type": "display", "position": [3, 1], "value": "SNAKE"}
        assert json.loads(lines[1])["value"] == "FREE"
        assert lines[-1] == "score=0 lost=false"
        assert lines[-6:-1] == [".....", "...#.", "...#.", "...@.", "....."]

    def test_run_bad_script_line(self, config_file, tmp_path):
        events = tmp_path / "events.txt"
        events.write_text("tick\nwiggle\n")
        assert main(["run", str(config_file), "--events", str(events)]) == 1
