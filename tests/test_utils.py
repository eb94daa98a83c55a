from pathlib import Path

import pytest

from sudokit.utils import ensure_sudoku_dir, format_time


def test_format_time_examples():
    assert format_time(0) == "0:00"
    assert format_time(65) == "1:05"
    assert format_time(59.9) == "0:59"


@pytest.mark.parametrize("secs", [1, 59, 60, 61, 600, 3599, 3600, 7322])
def test_format_time_round_trip(secs):
    minutes, seconds = format_time(secs).split(":")
    assert len(seconds) == 2
    assert 0 <= int(seconds) < 60
    assert int(minutes) * 60 + int(seconds) == secs


def test_format_time_truncates_fractions():
    assert format_time(125.99) == format_time(125)


def test_ensure_sudoku_dir_creates_directory(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    result = ensure_sudoku_dir()
    assert result == tmp_path / ".sudoku"
    assert result.is_dir()


def test_ensure_sudoku_dir_reuses_existing(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    existing = tmp_path / ".sudoku"
    existing.mkdir()
    marker = existing / "game.json"
    marker.write_text("{}")
    assert ensure_sudoku_dir() == existing
    assert marker.read_text() == "{}"


def test_ensure_sudoku_dir_falls_back_to_parent(tmp_path, monkeypatch):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    monkeypatch.setattr(Path, "home", lambda: blocker)
    assert ensure_sudoku_dir() == blocker