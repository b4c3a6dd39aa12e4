"""
Command parsing and dispatch.

Turns text such as ``o 3 4`` or ``flag 0 7`` into a structured command
and applies it to a game. Anything that cannot be applied (bad text,
positions off the board, a finished game) leaves the game untouched.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .game import Game, GameStatus, check_win, open_cell, toggle_flag

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    """Commands a player can issue."""

    OPEN = "o"
    FLAG = "f"


VERBS = {
    "o": CommandKind.OPEN,
    "open": CommandKind.OPEN,
    "f": CommandKind.FLAG,
    "flag": CommandKind.FLAG,
}


@dataclass(frozen=True)
class Command:
    """A parsed command addressing one cell."""

    kind: CommandKind
    row: int
    col: int


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing: a command on success, a reason on failure."""

    command: Optional[Command] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.command is not None


def parse_command(text: str) -> ParseResult:
    """
    Parse a command line of the form ``<verb> <row> <col>``.

    Args:
        text: Raw input line.

    Returns:
        ParseResult holding either the command or an error message.
    """
    parts = text.split()
    if len(parts) != 3:
        return ParseResult(error=f"expected 3 tokens, got {len(parts)}")

    verb, row_token, col_token = parts
    kind = VERBS.get(verb.lower())
    if kind is None:
        return ParseResult(error=f"unknown command {verb!r}")

    try:
        row = int(row_token)
        col = int(col_token)
    except ValueError:
        return ParseResult(error="row and column must be integers")

    return ParseResult(command=Command(kind, row, col))


def apply_command(game: Game, command: Command) -> Game:
    """
    Apply a command and advance the game status.

    Commands on a finished game or outside the board are ignored.

    Args:
        game: Current game.
        command: Parsed command.

    Returns:
        The game after the command.
    """
    if game.status != GameStatus.PLAYING:
        logger.debug("Ignoring %s: game is %s", command, game.status.name)
        return game

    board = game.board
    if not board.is_valid_position(command.row, command.col):
        logger.debug("Ignoring %s: outside %dx%d board",
                     command, board.rows, board.cols)
        return game

    index = board.index_of(command.row, command.col)
    if command.kind == CommandKind.OPEN:
        game = open_cell(game, index)
    elif command.kind == CommandKind.FLAG:
        game = toggle_flag(game, index)

    if game.status == GameStatus.PLAYING and check_win(game.board):
        game.status = GameStatus.WON
        logger.info("All safe cells opened, game won")
    return game


def process_input(game: Game, text: str) -> Game:
    """Parse a raw line and apply it; malformed input changes nothing."""
    result = parse_command(text)
    if not result.ok:
        logger.debug("Ignoring input %r: %s", text, result.error)
        return game
    return apply_command(game, result.command)
