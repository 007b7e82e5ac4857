import io
import sys

import pytest

from floodmaze.cli import main


def test_main_solves_maze(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("l\n" * 20))
    assert main(["--delay", "0"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Robot initialized at (0, 0)\n")
    assert "Goal reached!" in text
    assert "Robot returned back to the start cell" in text
    assert "Path from start to goal:\n(0, 0) " in text


def test_main_with_exhausted_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--delay", "0"]) == 0
    text = capsys.readouterr().out
    assert "Invalid input. Press 'l' to continue" in text
    assert "Goal reached!" in text


def test_main_rejects_bad_delay():
    with pytest.raises(SystemExit) as info:
        main(["--delay", "soon"])
    assert info.value.code == 2