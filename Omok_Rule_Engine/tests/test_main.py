"""Tests for settings loading, CLI overrides, move parsing, and text rendering."""

import io

import pytest

from Omok_Rule_Engine import main as main_mod
from Omok_Rule_Engine.errors import ConfigError
from Omok_Rule_Engine.Omokgame import GameConfig, Omokgame, apply_move, new_game
from Omok_Rule_Engine.render import render_text
from Omok_Rule_Engine.utils.cli import parse_args


def test_default_settings_file_loads():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_size"] == 15
    assert settings["win_length"] == 5
    assert settings["player_names"] == ["Cross", "Ring"]


def test_missing_settings_file_gives_defaults(tmp_path):
    assert main_mod.load_settings(tmp_path / "nope.yaml") == {}
    config = main_mod.build_config({})
    assert config == GameConfig()


def test_cli_overrides_settings(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_size: 9\nwin_length: 4\n", encoding="utf-8")
    args = parse_args(["--settings", str(path), "--win-length", "3"])
    config = main_mod.build_config(main_mod.load_settings(args.settings), args)
    assert (config.board_size, config.win_length) == (9, 3)
    assert config.names == ("First", "Second")


def test_build_config_rejects_unwinnable_board():
    with pytest.raises(ConfigError):
        main_mod.build_config({"board_size": 3, "win_length": 4})


@pytest.mark.parametrize("raw, expected", [("2 1", 7), ("7", 7), ("0 0", 0), ("24", 24)])
def test_parse_move(raw, expected):
    assert main_mod.parse_move(raw, 5) == expected


@pytest.mark.parametrize("raw, exc", [("a b", ValueError), ("1 2 3", ValueError), ("5 0", IndexError), ("25", IndexError)])
def test_parse_move_rejects(raw, exc):
    with pytest.raises(exc):
        main_mod.parse_move(raw, 5)


def test_render_text_brackets_winning_cells():
    state = new_game(GameConfig(board_size=3, win_length=3))
    for index in (0, 3, 1, 4, 2):
        state = apply_move(state, index)
    lines = render_text(state).splitlines()
    assert len(lines) == 5
    assert lines[1] == " 0 [X][X][X]"
    assert lines[2] == " 1  O  O  . "
    assert lines[-1] == "First wins! Click anywhere to play again."


def test_play_loop_reads_moves_until_quit():
    game = Omokgame(GameConfig(board_size=3, win_length=3), logger=lambda *_: None)
    out = io.StringIO()
    state = main_mod.play(game, stdin=io.StringIO("1 1\nbogus\n\n0\nq\n8\n"), out=out)
    assert state.board.move_count == 2
    assert "Invalid input format" in out.getvalue()
    assert out.getvalue().rstrip().endswith("First to move")


def test_main_exits_on_config_error(capsys):
    code = main_mod.main(["--board-size", "3", "--win-length", "5"])
    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_runs_console_game(monkeypatch, capsys):
    monkeypatch.setattr(main_mod.sys, "stdin", io.StringIO("7 7\nq\n"))
    assert main_mod.main([]) == 0
    out = capsys.readouterr().out
    assert "Board 15x15, 5 in a row" in out
    assert "Move 1: Cross 112" in out
    assert "Ring to move" in out
