"""
Grid data model for Labyrinth.

A GridSpec is the validated, immutable maze: its dimensions, the row-major
cell sequence, and the unique start and exit positions.

Maze Format:
    # = Wall (impassable)
    S = Start position
    E = Exit (goal)
      = Open floor (space)
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .maze_engine import Direction


class Cell(Enum):
    """Types of cells in the maze."""
    WALL = "#"
    FLOOR = " "
    START = "S"
    EXIT = "E"

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        """Convert character to Cell. Raises KeyError for unknown glyphs."""
        return _CHAR_TO_CELL[char]

    @property
    def glyph(self) -> str:
        return self.value


_CHAR_TO_CELL = {cell.value: cell for cell in Cell}

VALID_CHARS = frozenset(_CHAR_TO_CELL)


@dataclass(frozen=True)
class Position:
    """(row, col) position in the maze."""
    row: int
    col: int

    def moved(self, direction: "Direction") -> "Position":
        """Return the neighbouring position in direction."""
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.col + d_col)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class GridSpec:
    """Validated maze grid plus its start and exit coordinates."""

    width: int
    height: int
    cells: tuple[Cell, ...]
    start: Position
    exit: Position

    def contains(self, position: Position) -> bool:
        """Check whether position lies inside the grid."""
        return 0 <= position.row < self.height and 0 <= position.col < self.width

    def cell_at(self, position: Position) -> Cell:
        """Get cell at position. Position must be inside the grid."""
        if not self.contains(position):
            raise IndexError(f"Position {position.to_dict()} is outside the grid")
        return self.cells[position.row * self.width + position.col]

    def rows(self) -> tuple[str, ...]:
        """Grid as text rows, one string per row."""
        return tuple(
            "".join(
                cell.glyph
                for cell in self.cells[row * self.width:(row + 1) * self.width]
            )
            for row in range(self.height)
        )
