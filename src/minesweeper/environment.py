"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of the command dispatch layer.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BEGINNER, BoardConfig
from .commands import Command, CommandKind, apply_command
from .game import Game, new_game
from .render import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = mine, shown once the game has ended

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < n opens cell i, action i >= n toggles the flag on
        cell i - n, where cell i is at (i // cols, i % cols).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BEGINNER
        self.render_mode = render_mode
        self.game: Game = new_game(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One open action and one flag action per cell
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.game = new_game(self.config, rng=rng)
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Open or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        command = self._action_to_command(int(action))
        self._steps += 1

        reward = self._apply(command)

        terminated = self.game.is_over
        truncated = False

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _action_to_command(self, action: int) -> Command:
        """Convert flat action index to a command."""
        total = self.config.total_cells
        kind = CommandKind.OPEN if action < total else CommandKind.FLAG
        row, col = divmod(action % total, self.config.cols)
        return Command(kind, row, col)

    def _apply(self, command: Command) -> float:
        """
        Apply a command and calculate its reward.

        Args:
            command: Command derived from the action.

        Returns:
            Reward value.
        """
        cell = self.game.board.get_cell(command.row, command.col)
        if cell is None or not self.game.is_playing:
            return -0.1
        if command.kind == CommandKind.OPEN and not cell.is_closed:
            return -0.1
        if command.kind == CommandKind.FLAG and cell.is_open:
            return -0.1

        self.game = apply_command(self.game, command)

        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        if command.kind == CommandKind.FLAG:
            return 0.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        return self.game.board.observation(self.game.is_over)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        opened = sum(1 for cell in self.game.board.cells if cell.is_open)

        return {
            "steps": self._steps,
            "opened": opened,
            "total_safe": self._total_safe_cells,
            "game_status": self.game.status.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game)
        if self.render_mode == "human":
            print(render_board(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        total = self.config.total_cells
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.game.is_playing:
            return mask
        for index, cell in enumerate(self.game.board.cells):
            mask[index] = cell.is_closed
            mask[total + index] = not cell.is_open
        return mask
