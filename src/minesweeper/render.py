"""Text rendering of a game for the terminal."""
from .cell import Cell, Visibility
from .game import Game

MINE = "*"
FLAG = "F"
CLOSED = "-"
BLANK = " "


def cell_glyph(cell: Cell, game_ended: bool) -> str:
    """
    Get the character shown for a cell.

    Once the game has ended every mine is shown, whatever its visibility.
    """
    if game_ended and cell.is_mine:
        return MINE
    if cell.visibility == Visibility.OPEN:
        return BLANK if cell.adjacent_mines == 0 else str(cell.adjacent_mines)
    if cell.visibility == Visibility.FLAGGED:
        return FLAG
    return CLOSED


def render_board(game: Game) -> str:
    """Render the board with row and column numbers."""
    board = game.board
    game_ended = game.is_over

    header = "   " + " ".join(f"{col:2d}" for col in range(board.cols))
    lines = [header]
    for row in range(board.rows):
        glyphs = [
            cell_glyph(board.cells[board.index_of(row, col)], game_ended)
            for col in range(board.cols)
        ]
        lines.append(f"{row:2d} " + " ".join(f"{glyph:>2}" for glyph in glyphs))
    return "\n".join(lines)
