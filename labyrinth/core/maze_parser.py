"""
Maze Parser for Labyrinth.

Loads and validates maze text into a GridSpec.

Validation runs in a fixed order and stops at the first failure:
    1. row count within [min_size, max_size]
    2. every row as long as the first, and that width within bounds
    3. every character one of '#', ' ', 'S', 'E'
    4. exactly one start (S)
    5. exactly one exit (E)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .grid import VALID_CHARS, Cell, GridSpec, Position

logger = logging.getLogger(__name__)

MIN_SIZE = 5
MAX_SIZE = 100


class MazeError(Exception):
    """Base exception for anything that prevents a maze from loading."""

    pass


class MazeFileError(MazeError):
    """Exception raised when a maze file cannot be opened or read."""

    def __init__(self, path: Path | str, reason: Optional[str] = None):
        self.path = str(path)
        message = f"Error opening file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MazeValidationError(MazeError):
    """Exception raised when maze validation fails."""

    pass


class InvalidDimensionsError(MazeValidationError):
    def __init__(self, height: int, width: Optional[int], min_size: int, max_size: int):
        self.height = height
        self.width = width
        size = f"{height} rows" if width is None else f"{width}x{height}"
        super().__init__(
            f"Invalid maze dimensions: {size} "
            f"(each side must be between {min_size} and {max_size})"
        )


class NotRectangularError(MazeValidationError):
    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid maze: Not rectangular "
            f"(row {row + 1} has {actual} columns, expected {expected})"
        )


class InvalidCharacterError(MazeValidationError):
    def __init__(self, char: str, row: int, col: int):
        self.char = char
        self.row = row
        self.col = col
        super().__init__(f"Invalid character '{char}' at row {row + 1}, column {col + 1}")


class MissingStartError(MazeValidationError):
    def __init__(self):
        super().__init__("Missing start position (S)")


class MultipleStartsError(MazeValidationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Multiple start positions: found {count}")


class MissingExitError(MazeValidationError):
    def __init__(self):
        super().__init__("Missing exit position (E)")


class MultipleExitsError(MazeValidationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Multiple exit positions: found {count}")


def validate_lines(
    lines: Iterable[str],
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
) -> GridSpec:
    """
    Validate raw maze rows and build the grid.

    Args:
        lines: Maze rows, without line terminators. Spaces are floor cells.
        min_size: Smallest allowed width and height.
        max_size: Largest allowed width and height.

    Returns:
        GridSpec for the maze.

    Raises:
        MazeValidationError: The subclass names the first check that failed.
    """
    rows = list(lines)

    height = len(rows)
    if height == 0 or not min_size <= height <= max_size:
        raise InvalidDimensionsError(height, None, min_size, max_size)

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise NotRectangularError(y, width, len(row))

    if not min_size <= width <= max_size:
        raise InvalidDimensionsError(height, width, min_size, max_size)

    starts: list[Position] = []
    exits: list[Position] = []
    cells: list[Cell] = []

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in VALID_CHARS:
                raise InvalidCharacterError(char, y, x)

            cell = Cell.from_char(char)
            if cell == Cell.START:
                starts.append(Position(y, x))
            elif cell == Cell.EXIT:
                exits.append(Position(y, x))
            cells.append(cell)

    if not starts:
        raise MissingStartError()
    if len(starts) > 1:
        raise MultipleStartsError(len(starts))

    if not exits:
        raise MissingExitError()
    if len(exits) > 1:
        raise MultipleExitsError(len(exits))

    return GridSpec(
        width=width,
        height=height,
        cells=tuple(cells),
        start=starts[0],
        exit=exits[0],
    )


def parse_maze_text(
    maze_text: str,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
) -> GridSpec:
    """
    Parse maze text into a GridSpec.

    Rows are split on '\\n' only, so other control characters stay inside
    their row. A trailing newline does not add a row, a trailing '\\r' is
    dropped from each row, and spaces are kept as floor.
    """
    lines = maze_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    rows = [line[:-1] if line.endswith("\r") else line for line in lines]
    return validate_lines(rows, min_size=min_size, max_size=max_size)


def load_maze_file(
    file_path: Path | str,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
) -> GridSpec:
    """
    Load and validate a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        min_size: Smallest allowed width and height.
        max_size: Largest allowed width and height.

    Returns:
        GridSpec for the maze.

    Raises:
        MazeFileError: If the file doesn't exist or can't be read.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise MazeFileError(file_path, "no such file")

    if not file_path.is_file():
        raise MazeFileError(file_path, "not a file")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeFileError(file_path, str(e)) from e

    try:
        grid = parse_maze_text(maze_text, min_size=min_size, max_size=max_size)
    except MazeValidationError as e:
        logger.warning(f"Rejected maze {file_path}: {e}")
        raise

    logger.info(f"Loaded {grid.width}x{grid.height} maze from {file_path}")
    return grid


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeValidationError as e:
        return False, str(e)
