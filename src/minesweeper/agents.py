"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent:
    """
    Agent that selects actions uniformly at random.

    By default only open actions are considered, so every move makes
    progress or ends the game.
    """

    def __init__(
        self,
        rows: int = 8,
        cols: int = 8,
        seed: Optional[int] = None,
        use_flags: bool = False,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
            use_flags: Whether flag actions may be chosen too.
        """
        self.rows = rows
        self.cols = cols
        self.total_cells = rows * cols
        self.use_flags = use_flags
        self.rng = np.random.default_rng(seed)

    def valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid open actions from an observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over the full action space.
        """
        mask = np.zeros(2 * self.total_cells, dtype=bool)
        # Closed cells (value -1) can be opened
        mask[: self.total_cells] = observation.flatten() == -1
        return mask

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.valid_actions_from_obs(observation)
        if not self.use_flags:
            valid_actions = valid_actions.copy()
            valid_actions[self.total_cells:] = False

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be ignored)
            return 0

        return int(self.rng.choice(valid_indices))

    def position_of(self, action: int) -> tuple:
        """Convert action index to (row, col) position."""
        return divmod(action % self.total_cells, self.cols)
