"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable, Generator

import pytest

from labyrinth.config import get_settings
from labyrinth.core import GameState, GridSpec, validate_lines

# Start at (1, 1), exit at (1, 3)
SAMPLE_MAZE = [
    "#####",
    "#S E#",
    "#   #",
    "#   #",
    "#####",
]

# Start on the top edge at (0, 1), exit at (3, 3)
EDGE_MAZE = [
    "#S###",
    "#   #",
    "# # #",
    "#  E#",
    "#####",
]

# Start at (2, 2) with floor on every side, exit at (1, 1)
OPEN_MAZE = [
    "#####",
    "#E  #",
    "# S #",
    "#   #",
    "#####",
]


@pytest.fixture
def sample_grid() -> GridSpec:
    return validate_lines(SAMPLE_MAZE)


@pytest.fixture
def edge_grid() -> GridSpec:
    return validate_lines(EDGE_MAZE)


@pytest.fixture
def open_grid() -> GridSpec:
    return validate_lines(OPEN_MAZE)


@pytest.fixture
def sample_state(sample_grid) -> GameState:
    return GameState.new(sample_grid)


@pytest.fixture
def write_maze(tmp_path) -> Callable[..., Path]:
    """Write maze rows to a file and return its path."""

    def _write(rows: list[str], name: str = "maze.txt", trailing_newline: bool = True) -> Path:
        path = tmp_path / name
        text = "\n".join(rows)
        if trailing_newline:
            text += "\n"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch) -> Generator[None, None, None]:
    """Give every test fresh settings built from a clean environment."""
    for name in (
        "LABYRINTH_DEBUG",
        "LABYRINTH_LOG_LEVEL",
        "LABYRINTH_MIN_SIZE",
        "LABYRINTH_MAX_SIZE",
        "LABYRINTH_MAP_DELIMITER",
        "LABYRINTH_GENERATED_WIDTH",
        "LABYRINTH_GENERATED_HEIGHT",
        "LABYRINTH_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
