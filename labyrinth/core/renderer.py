"""Text map rendering for a game session."""

from .maze_engine import GameState

PLAYER_GLYPH = "X"


def render(state: GameState, delimiter: str = " ") -> str:
    """
    Generate the text map of a session.

    Args:
        state: Session to draw.
        delimiter: Separator placed between the cells of a row.

    Returns:
        One line per maze row. The player's cell is always drawn as X,
        even on the start or exit cell.
    """
    grid = state.grid
    lines = []
    for row, text in enumerate(grid.rows()):
        glyphs = list(text)
        if row == state.position.row:
            glyphs[state.position.col] = PLAYER_GLYPH
        lines.append(delimiter.join(glyphs))

    return "\n".join(lines)
