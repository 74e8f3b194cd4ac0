"""
Procedural maze generation.

Mazes are carved with a randomized depth-first search over the odd
coordinates of an all-wall grid, which yields a perfect maze (exactly one
path between any two floor cells). The start sits at (1, 1) and the exit at
the floor cell farthest from it.

All randomness comes from an explicit GenerationContext, so the same seed
and size always produce the same maze.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from .grid import Cell, GridSpec
from .maze_parser import MAX_SIZE, MIN_SIZE, InvalidDimensionsError, validate_lines

logger = logging.getLogger(__name__)

STEPS = [(-2, 0), (2, 0), (0, 2), (0, -2)]


@dataclass
class GenerationContext:
    """Seed and random source for one generation run."""
    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        if self.seed is None:
            self.seed = random.SystemRandom().randrange(2**32)
        self.rng = random.Random(self.seed)


def _carve(width: int, height: int, rng: random.Random) -> list[list[str]]:
    grid = [[Cell.WALL.value] * width for _ in range(height)]
    grid[1][1] = Cell.FLOOR.value

    stack = [(1, 1)]
    while stack:
        row, col = stack[-1]
        neighbours = [
            (row + d_row, col + d_col)
            for d_row, d_col in STEPS
            if 0 < row + d_row < height - 1
            and 0 < col + d_col < width - 1
            and grid[row + d_row][col + d_col] == Cell.WALL.value
        ]
        if not neighbours:
            stack.pop()
            continue

        next_row, next_col = rng.choice(neighbours)
        grid[(row + next_row) // 2][(col + next_col) // 2] = Cell.FLOOR.value
        grid[next_row][next_col] = Cell.FLOOR.value
        stack.append((next_row, next_col))

    return grid


def _farthest_cell(grid: list[list[str]], start: tuple[int, int]) -> tuple[int, int]:
    """Find the floor cell with the longest shortest-path from start."""
    queue = deque([start])
    visited = {start}
    farthest = start

    while queue:
        row, col = queue.popleft()
        farthest = (row, col)
        for d_row, d_col in ((-1, 0), (1, 0), (0, 1), (0, -1)):
            neighbour = (row + d_row, col + d_col)
            if neighbour in visited:
                continue
            if grid[neighbour[0]][neighbour[1]] != Cell.FLOOR.value:
                continue
            visited.add(neighbour)
            queue.append(neighbour)

    return farthest


def generate_maze_lines(width: int, height: int, context: GenerationContext) -> list[str]:
    """
    Generate the text rows of a random maze.

    Args:
        width: Number of columns, at least 5.
        height: Number of rows, at least 5.
        context: Random source for this run.

    Returns:
        Maze rows using the same glyphs as maze files.
    """
    if width < MIN_SIZE or height < MIN_SIZE:
        raise InvalidDimensionsError(height, width, MIN_SIZE, MAX_SIZE)

    grid = _carve(width, height, context.rng)

    start = (1, 1)
    exit_row, exit_col = _farthest_cell(grid, start)
    grid[start[0]][start[1]] = Cell.START.value
    grid[exit_row][exit_col] = Cell.EXIT.value

    return ["".join(row) for row in grid]


def generate_maze(
    width: int,
    height: int,
    context: GenerationContext,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
) -> GridSpec:
    """
    Generate a random maze and validate it like a loaded file.

    Raises:
        InvalidDimensionsError: If the size is below the generator's minimum.
        MazeValidationError: If the size falls outside [min_size, max_size].
    """
    lines = generate_maze_lines(width, height, context)
    grid = validate_lines(lines, min_size=min_size, max_size=max_size)
    logger.info(f"Generated {width}x{height} maze with seed {context.seed}")
    return grid
