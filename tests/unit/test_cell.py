"""
Unit tests for Cell class.

Tests visibility transitions, flag toggling and observation conversion.
"""
import pytest
from minesweeper import Cell, Visibility


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_closed(self) -> None:
        """New cell should be closed by default."""
        cell = Cell()
        assert cell.visibility == Visibility.CLOSED
        assert cell.is_closed is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_blank_requires_safe_cell(self) -> None:
        """Only safe cells with no adjacent mines are blank."""
        assert Cell().is_blank is True
        assert Cell(adjacent_mines=2).is_blank is False
        assert Cell(is_mine=True).is_blank is False


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_closed_cell_returns_true(self, closed_cell: Cell) -> None:
        """Opening a closed cell should succeed."""
        assert closed_cell.open() is True
        assert closed_cell.is_open is True

    def test_open_already_open_returns_false(self, closed_cell: Cell) -> None:
        """Opening an open cell should fail."""
        closed_cell.open()
        assert closed_cell.open() is False

    def test_open_flagged_cell_returns_false(self, closed_cell: Cell) -> None:
        """Cannot open a flagged cell."""
        closed_cell.toggle_flag()
        assert closed_cell.open() is False
        assert closed_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_closed_cell(self, closed_cell: Cell) -> None:
        """Flagging a closed cell should mark it flagged."""
        assert closed_cell.toggle_flag() is True
        assert closed_cell.visibility == Visibility.FLAGGED

    @pytest.mark.parametrize("start", [Visibility.CLOSED, Visibility.FLAGGED])
    def test_double_toggle_restores_visibility(self, start: Visibility) -> None:
        """Toggling twice returns to the starting visibility."""
        cell = Cell(visibility=start)
        cell.toggle_flag()
        cell.toggle_flag()
        assert cell.visibility == start

    def test_flag_open_cell_returns_false(self, closed_cell: Cell) -> None:
        """Cannot flag an open cell."""
        closed_cell.open()
        assert closed_cell.toggle_flag() is False
        assert closed_cell.is_open is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for ML agent."""

    def test_closed_cell_observation_is_negative_one(
        self, closed_cell: Cell
    ) -> None:
        """Closed cell should return -1 for observation."""
        assert closed_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, closed_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        closed_cell.toggle_flag()
        assert closed_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_open_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Open cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.open()
        assert cell.to_observation() == count

    def test_mine_hidden_while_playing(self, mine_cell: Cell) -> None:
        """A closed mine looks like any closed cell during play."""
        assert mine_cell.to_observation() == -1

    def test_mine_exposed_after_game_end(self, mine_cell: Cell) -> None:
        """Mines show as 9 once the game has ended, even when flagged."""
        mine_cell.toggle_flag()
        assert mine_cell.to_observation(game_ended=True) == 9
