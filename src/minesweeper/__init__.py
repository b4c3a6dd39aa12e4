"""
Minesweeper rules engine.

Provides board generation, cell state, the open/flag game actions,
command dispatch and a Gymnasium environment.
"""
from .cell import Cell, Visibility
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    count_mines_around,
    generate,
)
from .game import Game, GameStatus, check_win, new_game, open_cell, toggle_flag
from .commands import (
    Command,
    CommandKind,
    ParseResult,
    apply_command,
    parse_command,
    process_input,
)
from .render import cell_glyph, render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Visibility",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "count_mines_around",
    "generate",
    "Game",
    "GameStatus",
    "check_win",
    "new_game",
    "open_cell",
    "toggle_flag",
    "Command",
    "CommandKind",
    "ParseResult",
    "apply_command",
    "parse_command",
    "process_input",
    "cell_glyph",
    "render_board",
    "MinesweeperEnv",
]
