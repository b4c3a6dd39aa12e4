"""
Board module for Minesweeper game.

Implements the mined grid, random mine placement and neighbor mine
counting. Adjacency is never stored; it is derived from (row, col)
arithmetic whenever it is needed.
"""
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
BEGINNER = BoardConfig(8, 8, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are stored row-major, so the cell at (row, col) lives at
    index ``row * cols + col``.
    """

    rows: int
    cols: int
    mines_count: int
    cells: List[Cell] = field(default_factory=list, repr=False)

    @classmethod
    def from_mines(
        cls, rows: int, cols: int, mine_indices: Iterable[int]
    ) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mine_indices: Flat indices of the mined cells.

        Returns:
            Board with adjacent mine counts filled in.
        """
        mines = set(mine_indices)
        config = BoardConfig(rows, cols, len(mines))
        if any(not 0 <= index < config.total_cells for index in mines):
            raise ValueError("Mine position outside the board")

        board = cls(
            rows=rows,
            cols=cols,
            mines_count=len(mines),
            cells=[
                Cell(is_mine=index in mines)
                for index in range(config.total_cells)
            ],
        )
        board._calculate_adjacent_mines()
        return board

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for index, cell in enumerate(self.cells):
            if not cell.is_mine:
                cell.adjacent_mines = count_mines_around(self, index)

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def __len__(self) -> int:
        return len(self.cells)

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat index."""
        return row * self.cols + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        return divmod(index, self.cols)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, index: int) -> List[int]:
        """
        Get flat indices of the cells around ``index``.

        Args:
            index: Flat index of center cell.

        Returns:
            Up to 8 indices, clipped at the board edges.
        """
        row, col = self.position_of(index)
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append(self.index_of(new_row, new_col))
        return neighbors

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.cells[self.index_of(row, col)]

    def mine_indices(self) -> List[int]:
        """Get flat indices of every mine."""
        return [index for index, cell in enumerate(self.cells) if cell.is_mine]

    def observation(self, game_ended: bool = False) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Args:
            game_ended: Whether mines should be exposed.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = open with adjacent count
                9 = mine (only once the game has ended)
        """
        values = [cell.to_observation(game_ended) for cell in self.cells]
        return np.array(values, dtype=np.int8).reshape(self.rows, self.cols)


# ============================================================================
# Generation and Counting
# ============================================================================

def count_mines_around(board: Board, index: int) -> int:
    """Count mines in the Moore neighborhood of ``index``."""
    count = 0
    for neighbor in board.neighbors(index):
        if board.cells[neighbor].is_mine:
            count += 1
    return count


def generate(
    rows: int,
    cols: int,
    mines_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a board with mines placed uniformly at random.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mines_count: Number of mines, at most ``rows * cols``.
        rng: Random source; the module-level generator when omitted.

    Returns:
        New board with every cell closed.

    Raises:
        ValueError: If the dimensions or mine count are invalid.
    """
    config = BoardConfig(rows, cols, mines_count)
    rng = rng or random
    mine_positions = rng.sample(range(config.total_cells), config.num_mines)
    return Board.from_mines(config.rows, config.cols, mine_positions)
