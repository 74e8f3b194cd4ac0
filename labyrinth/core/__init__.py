# Core module
from .grid import Cell, GridSpec, Position
from .maze_engine import (
    Command,
    Direction,
    GameOverError,
    GameState,
    GameStatus,
    MoveOutcome,
    MoveResult,
    parse_command,
)
from .maze_parser import (
    InvalidCharacterError,
    InvalidDimensionsError,
    MazeError,
    MazeFileError,
    MazeValidationError,
    MissingExitError,
    MissingStartError,
    MultipleExitsError,
    MultipleStartsError,
    NotRectangularError,
    load_maze_file,
    parse_maze_text,
    validate_lines,
    validate_maze_text,
)
from .renderer import render
from .generator import GenerationContext, generate_maze, generate_maze_lines

__all__ = [
    "Cell",
    "GridSpec",
    "Position",
    "Command",
    "Direction",
    "GameOverError",
    "GameState",
    "GameStatus",
    "MoveOutcome",
    "MoveResult",
    "parse_command",
    "InvalidCharacterError",
    "InvalidDimensionsError",
    "MazeError",
    "MazeFileError",
    "MazeValidationError",
    "MissingExitError",
    "MissingStartError",
    "MultipleExitsError",
    "MultipleStartsError",
    "NotRectangularError",
    "load_maze_file",
    "parse_maze_text",
    "validate_lines",
    "validate_maze_text",
    "render",
    "GenerationContext",
    "generate_maze",
    "generate_maze_lines",
]
