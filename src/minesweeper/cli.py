"""
Interactive terminal game.

Usage:
    python main.py [--rows N] [--cols N] [--mines N] [--seed N]
"""
import argparse
import logging
import random
from typing import Callable, Optional

from .board import BEGINNER, BoardConfig
from .commands import process_input
from .game import Game, new_game
from .render import render_board

PROMPT = "Command (o <row> <col> - open, f <row> <col> - flag): "


def print_help() -> None:
    """Print the command reference."""
    print("Commands:")
    print("  o <row> <col> - open square")
    print("  f <row> <col> - put/remove flag")


def play_round(
    game: Game,
    read_line: Callable[[str], str] = input,
) -> Optional[Game]:
    """
    Play one game until it is won or lost.

    Args:
        game: Freshly started game.
        read_line: Source of player input.

    Returns:
        The finished game, or None if input ran out mid-game.
    """
    while game.is_playing:
        print()
        print(render_board(game))
        try:
            line = read_line(PROMPT)
        except EOFError:
            return None
        game = process_input(game, line)

    print()
    print(render_board(game))
    if game.is_lost:
        print("BOOM! Game over, you lose.")
    else:
        print("You won!")
    return game


def ask_play_again(read_line: Callable[[str], str] = input) -> bool:
    """Ask whether to start another game."""
    try:
        answer = read_line("Play again? (y/n) ")
    except EOFError:
        return False
    return answer.strip().lower() == "y"


def run(
    config: BoardConfig,
    rng: Optional[random.Random] = None,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run games back to back until the player stops."""
    print("Hello little minesweeper!")
    print_help()

    while True:
        game = new_game(config, rng=rng)
        if play_round(game, read_line) is None:
            break
        if not ask_play_again(read_line):
            break

    print("Thanks for playing!")


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and start the game."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument(
        "--rows", type=int, default=BEGINNER.rows, help="Number of rows"
    )
    parser.add_argument(
        "--cols", type=int, default=BEGINNER.cols, help="Number of columns"
    )
    parser.add_argument(
        "--mines", type=int, default=BEGINNER.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = BoardConfig(args.rows, args.cols, args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed) if args.seed is not None else None
    run(config, rng=rng)


if __name__ == "__main__":
    main()
