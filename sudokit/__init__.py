"""Sudoku boards, pencil-mark notes with solving patterns, and a flex layout engine."""

__version__ = "0.1.0"