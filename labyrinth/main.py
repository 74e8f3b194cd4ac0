#!/usr/bin/env python3
"""
Labyrinth - console maze game.

Usage:
    labyrinth [<maze_file>]

With a maze file the maze is loaded and validated; without one a random
maze of the configured size is generated. Commands are read one per line:
W/A/S/D to move, M to view the map, Q to quit.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from labyrinth.config import Settings, get_settings
from labyrinth.core import (
    GameState,
    GenerationContext,
    GridSpec,
    MazeError,
    MoveOutcome,
    generate_maze,
    load_maze_file,
    parse_command,
    render,
)

logger = logging.getLogger("labyrinth")

EXIT_OK = 0
EXIT_LOAD_FAILURE = 1
EXIT_USAGE = 2

PROMPT = "Command (WASD/M/Q): "
USAGE = "Usage: labyrinth [<maze_file>]"


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so they never mix with game output."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_grid(maze_file: Optional[str], settings: Settings) -> GridSpec:
    """
    Load the maze for a session.

    Raises:
        MazeError: If the file can't be read or the maze is invalid.
    """
    if maze_file is not None:
        return load_maze_file(
            maze_file,
            min_size=settings.min_size,
            max_size=settings.max_size,
        )

    context = GenerationContext(seed=settings.seed)
    return generate_maze(
        settings.generated_width,
        settings.generated_height,
        context,
        min_size=settings.min_size,
        max_size=settings.max_size,
    )


def run_game(
    state: GameState,
    lines: Iterable[str],
    out: TextIO,
    delimiter: str = " ",
) -> int:
    """
    Play a session until victory, quit, or end of input.

    Args:
        state: Session to play.
        lines: Player input, one command per line.
        out: Stream for prompts and feedback.
        delimiter: Cell separator for the map view.

    Returns:
        Process exit status.
    """
    out.write(PROMPT)
    out.flush()

    for line in lines:
        if not line.strip():
            continue

        command = parse_command(line)
        result = state.apply(command)

        if result.outcome == MoveOutcome.VIEW_REQUESTED:
            out.write(render(state, delimiter) + "\n")
        elif result.message:
            if result.outcome == MoveOutcome.VICTORY:
                out.write("\n")
            out.write(result.message + "\n")

        if result.outcome == MoveOutcome.VICTORY:
            out.write(f"You escaped in {result.moves} moves.\n")

        if state.is_over:
            break

        out.write(PROMPT)
        out.flush()
    else:
        out.write("\n")
        logger.info("Input ended before the game finished")

    logger.debug(f"Session ended: status={state.status.value} moves={state.moves}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) > 1:
        print(USAGE)
        return EXIT_USAGE

    settings = get_settings()
    configure_logging(settings)

    maze_file = argv[0] if argv else None
    try:
        grid = load_grid(maze_file, settings)
    except MazeError as e:
        print(e, file=sys.stderr)
        return EXIT_LOAD_FAILURE

    state = GameState.new(grid)
    return run_game(state, sys.stdin, sys.stdout, settings.map_delimiter)


if __name__ == "__main__":
    sys.exit(main())
