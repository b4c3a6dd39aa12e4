"""
Game module for Minesweeper.

Holds the game state value and the operations that change it: opening
a cell (with cascade), toggling flags and evaluating the win condition.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .board import BEGINNER, Board, BoardConfig, generate
from .cell import Visibility

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game State
# ============================================================================

@dataclass
class Game:
    """
    One game in progress.

    Attributes:
        board: The board, owned exclusively by this game.
        status: Playing, won or lost. Won and lost are terminal.
    """

    board: Board
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def is_over(self) -> bool:
        """Check if game reached a terminal state."""
        return not self.is_playing


def new_game(
    config: Optional[BoardConfig] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """Start a new game on a freshly generated board."""
    config = config or BEGINNER
    board = generate(config.rows, config.cols, config.num_mines, rng=rng)
    return Game(board=board)


# ============================================================================
# Game Actions
# ============================================================================

def open_cell(game: Game, index: int) -> Game:
    """
    Open the cell at ``index``.

    Opening a mine loses the game and leaves the mine closed. Opening a
    blank cell cascades to every closed neighbor, and on through any
    blank cells reached that way. Flagged cells are never opened.

    Args:
        game: Game in the playing state.
        index: Flat index of the cell to open.

    Returns:
        The same game, updated in place.
    """
    board = game.board
    target = board.cells[index]
    if target.visibility != Visibility.CLOSED:
        return game

    if target.is_mine:
        game.status = GameStatus.LOST
        logger.info("Mine hit at %s, game lost", board.position_of(index))
        return game

    opened = _cascade(board, index)
    logger.debug("Opened %d cell(s) from %s", opened, board.position_of(index))
    return game


def _cascade(board: Board, start: int) -> int:
    """Open ``start`` and flood through blank cells; return cells opened."""
    opened = 0
    stack: List[int] = [start]
    while stack:
        index = stack.pop()
        cell = board.cells[index]
        if not cell.open():
            continue
        opened += 1
        if cell.adjacent_mines == 0:
            stack.extend(
                neighbor
                for neighbor in board.neighbors(index)
                if board.cells[neighbor].is_closed
            )
    return opened


def toggle_flag(game: Game, index: int) -> Game:
    """
    Toggle the flag on the cell at ``index``.

    Closed becomes flagged, flagged becomes closed, open is unchanged.
    """
    game.board.cells[index].toggle_flag()
    return game


def check_win(board: Board) -> bool:
    """Check that every safe cell is open and no mine is open."""
    for cell in board.cells:
        if cell.is_mine == cell.is_open:
            return False
    return True
