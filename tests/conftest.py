"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game, generate, new_game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, 3, [0])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board split by a column of mines.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return Board.from_mines(5, 5, [2, 7, 12, 17, 22])


@pytest.fixture
def random_board() -> Board:
    """Seeded 9x9 board with 10 mines."""
    return generate(9, 9, 10, rng=random.Random(1234))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> Game:
    """Game on the 3x3 corner mine board."""
    return Game(board=corner_mine_board)


@pytest.fixture
def walled_game(walled_board: Board) -> Game:
    """Game on the walled board."""
    return Game(board=walled_board)


@pytest.fixture
def default_game() -> Game:
    """Seeded game with the default 8x8, 10 mine configuration."""
    return new_game(rng=random.Random(42))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
