"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(closed/open/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Visibility(Enum):
    """Possible visibility states of a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Fixed at generation time and left at 0 for mines.
        visibility: Current visibility (closed, open, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    visibility: Visibility = Visibility.CLOSED

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if cell was opened, False if already open or flagged.
        """
        if self.visibility != Visibility.CLOSED:
            return False
        self.visibility = Visibility.OPEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.visibility == Visibility.CLOSED:
            self.visibility = Visibility.FLAGGED
        elif self.visibility == Visibility.FLAGGED:
            self.visibility = Visibility.CLOSED
        elif self.visibility == Visibility.OPEN:
            return False
        return True

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.visibility == Visibility.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.visibility == Visibility.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == Visibility.FLAGGED

    @property
    def is_blank(self) -> bool:
        """Check if cell is a safe cell with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self, game_ended: bool = False) -> int:
        """
        Convert cell to observation value for ML agent.

        Args:
            game_ended: Whether mines should be exposed.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Mine once the game has ended
        """
        if game_ended and self.is_mine:
            return 9
        if self.visibility == Visibility.OPEN:
            return self.adjacent_mines
        if self.visibility == Visibility.FLAGGED:
            return -2
        return -1
