"""
Labyrinth Maze Engine

Core maze navigation logic including:
- Command parsing (WASD to move, M to view the map, Q to quit)
- Edge and wall collision checks
- Move counting
- Exit detection

State is mutated in place; a session has exclusive access to its GameState.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .grid import Cell, GridSpec, Position

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Movement directions."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.NORTH: (-1, 0),
            Direction.SOUTH: (1, 0),
            Direction.EAST: (0, 1),
            Direction.WEST: (0, -1),
        }
        return deltas[self]


class Command(Enum):
    """Commands a player can issue, one per input line."""
    MOVE_NORTH = "W"
    MOVE_SOUTH = "S"
    MOVE_EAST = "D"
    MOVE_WEST = "A"
    VIEW_MAP = "M"
    QUIT = "Q"
    INVALID = "?"

    @property
    def direction(self) -> Optional[Direction]:
        """Direction for movement commands, None otherwise."""
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.MOVE_NORTH: Direction.NORTH,
    Command.MOVE_SOUTH: Direction.SOUTH,
    Command.MOVE_EAST: Direction.EAST,
    Command.MOVE_WEST: Direction.WEST,
}


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    The line must hold a single command letter (case-insensitive) once
    surrounding whitespace is stripped; anything else is Command.INVALID.
    """
    token = line.strip().upper()
    if len(token) != 1 or token == Command.INVALID.value:
        return Command.INVALID
    try:
        return Command(token)
    except ValueError:
        return Command.INVALID


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    QUIT = "quit"


class MoveOutcome(Enum):
    """Result classification of applying one command."""
    MOVED = "moved"
    VICTORY = "victory"
    BLOCKED_BY_WALL = "blocked"
    OFF_EDGE = "off_edge"
    VIEW_REQUESTED = "view"
    QUIT = "quit"
    INVALID_COMMAND = "invalid"

    @property
    def message(self) -> Optional[str]:
        """Player-facing feedback for this outcome."""
        return _OUTCOME_MESSAGES.get(self)


_OUTCOME_MESSAGES = {
    MoveOutcome.VICTORY: "!!! VICTORY !!! You found the exit!",
    MoveOutcome.BLOCKED_BY_WALL: "Blocked by wall!",
    MoveOutcome.OFF_EDGE: "Cannot move off the edge!",
    MoveOutcome.QUIT: "Game quit.",
    MoveOutcome.INVALID_COMMAND: "Invalid command.",
}


class GameOverError(Exception):
    """Exception raised when a command arrives after the game has ended."""

    pass


@dataclass
class MoveResult:
    """Result of applying a command."""
    outcome: MoveOutcome
    position: Position
    moves: int

    @property
    def message(self) -> Optional[str]:
        return self.outcome.message


@dataclass
class GameState:
    """
    Current state of one game session.

    Example usage:
        state = GameState.new(grid)

        # Viewing the map is free
        state.apply(Command.VIEW_MAP)

        # Accepted moves are counted
        result = state.apply(parse_command("d"))
    """

    grid: GridSpec
    position: Position
    moves: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS

    @classmethod
    def new(cls, grid: GridSpec) -> "GameState":
        """Start a session at the grid's start cell."""
        return cls(grid=grid, position=grid.start)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def _result(self, outcome: MoveOutcome) -> MoveResult:
        return MoveResult(outcome=outcome, position=self.position, moves=self.moves)

    def apply(self, command: Command) -> MoveResult:
        """
        Apply one command.

        Args:
            command: Parsed player command.

        Returns:
            MoveResult describing what happened.

        Raises:
            GameOverError: If the game already ended in victory or quit.
        """
        if self.is_over:
            raise GameOverError(f"Game already over ({self.status.value})")

        if command == Command.QUIT:
            self.status = GameStatus.QUIT
            return self._result(MoveOutcome.QUIT)

        if command == Command.VIEW_MAP:
            return self._result(MoveOutcome.VIEW_REQUESTED)

        direction = command.direction
        if direction is None:
            return self._result(MoveOutcome.INVALID_COMMAND)

        return self.move(direction)

    def move(self, direction: Direction) -> MoveResult:
        """
        Move one cell in direction.

        The edge check runs before the wall check; neither changes state.

        Raises:
            GameOverError: If the game already ended in victory or quit.
        """
        if self.is_over:
            raise GameOverError(f"Game already over ({self.status.value})")

        candidate = self.position.moved(direction)

        if not self.grid.contains(candidate):
            return self._result(MoveOutcome.OFF_EDGE)

        target_cell = self.grid.cell_at(candidate)
        if target_cell == Cell.WALL:
            return self._result(MoveOutcome.BLOCKED_BY_WALL)

        self.position = candidate
        self.moves += 1
        logger.debug(f"Moved {direction.value} to {candidate.to_dict()} (move {self.moves})")

        if target_cell == Cell.EXIT:
            self.status = GameStatus.VICTORY
            logger.info(f"Exit reached in {self.moves} moves")
            return self._result(MoveOutcome.VICTORY)

        return self._result(MoveOutcome.MOVED)
