"""Shared fixtures for runsplit tests."""

from __future__ import annotations

import os
import sys

import pytest

from runsplit import _term


@pytest.fixture
def lines_file(tmp_path):
    """Write the given lines to a temporary text file and return its path."""

    def _write(lines: list[str], name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def _reset_color():
    yield
    _term.force_color(None)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
