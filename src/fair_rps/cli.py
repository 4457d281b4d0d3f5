# Area: CLI
"""
fair_rps.cli — Command-line interface
=====================================

Provides the CLI entry point for playing a game.

Usage:
    fair-rps rock paper scissors                    # Play with 3 moves
    fair-rps --key-policy turn rock paper scissors lizard spock
    fair-rps --verify KEY MOVE HMAC                 # Check a revealed turn

Settings can also come from a JSON config file (--config), a .env
file, or FAIR_RPS_* environment variables. CLI flags take precedence.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence, TextIO

from dotenv import find_dotenv, load_dotenv

from ._config import GameSettings, build_settings, load_config, validate_moves
from ._core.commitment import calculate_commitment, verify_commitment
from ._core.enums import KeyPolicy
from ._shared.console_display import PROMPT, format_menu
from ._shared.logging_config import log_and_terminate, log_startup_error, setup_logging
from ._shared.logging_formatters import enable_console_logs
from .errors import EntropySourceError, InvalidMoveSelectionError, InvalidMoveSetError
from .game import Game

logger = logging.getLogger("fair_rps.cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Provably fair rock-paper-scissors with any odd number of moves",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fair-rps rock paper scissors
  fair-rps rock paper scissors lizard spock
  fair-rps --key-policy turn rock paper scissors
  fair-rps --verify <key> scissors <hmac>
        """,
    )

    parser.add_argument(
        "moves",
        nargs="*",
        help="Moves in cyclic order (odd count, at least 3, all unique)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--key-policy",
        choices=[p.value for p in KeyPolicy],
        help="Rotate the HMAC key every turn (default) or reuse one key for the session",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer's move choice (keys stay cryptographically random)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON log records to this file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Show log records on stderr",
    )

    parser.add_argument(
        "--verify",
        nargs=3,
        metavar=("KEY", "MOVE", "HMAC"),
        help="Verify a revealed key and computer move against the HMAC shown earlier",
    )

    # Options may sit between moves: fair-rps rock --seed 1 paper scissors
    return parser.parse_intermixed_args(argv)


def parse_selection(raw: str, max_choice: int) -> int:
    """
    Parse one menu line.

    Returns:
        0 for exit, or 1..max_choice for a move

    Raises:
        InvalidMoveSelectionError: If non-numeric or out of range
    """
    text = raw.strip()
    try:
        choice = int(text)
    except ValueError:
        raise InvalidMoveSelectionError(text, max_choice) from None
    if choice < 0 or choice > max_choice:
        raise InvalidMoveSelectionError(text, max_choice)
    return choice


def run_session(game: Game, input_stream: Optional[TextIO] = None) -> int:
    """
    Run the interactive loop until "0" or end of input.

    Everything is written to the game's own stream. The rule table and
    menu are printed once. Under KeyPolicy.TURN each turn's HMAC is shown
    before the player's choice is read. Under KeyPolicy.SESSION the key
    of the previous turn is already public, so the commitment is only
    made and shown by play() once the choice is in.
    """
    input_stream = input_stream if input_stream is not None else sys.stdin
    out = game.stream
    commit_first = game.key_policy == KeyPolicy.TURN

    game.print_rules()
    for line in format_menu(game.moves):
        print(line, file=out)

    while True:
        if commit_first and not game.turn_in_progress:
            print(f"HMAC: {game.begin_turn()}", file=out)
        print(PROMPT, end="", file=out, flush=True)

        raw = input_stream.readline()
        if not raw:
            print(file=out)
            logger.info("End of input, session closed")
            return EXIT_OK

        try:
            choice = parse_selection(raw, len(game.moves))
        except InvalidMoveSelectionError as e:
            logger.warning(f"Rejected menu input {e.raw_input!r}")
            print(e.message, file=out)
            continue

        if choice == 0:
            logger.info(f"Player exited after {game.turns_played} turn(s)")
            return EXIT_OK

        game.play(game.moves[choice - 1])


def verify(key: str, move: str, commitment: str) -> int:
    """Print whether (key, move) reproduces `commitment`."""
    if verify_commitment(key, move, commitment):
        print("Commitment verified: HMAC(key, move) matches.")
        return EXIT_OK
    print(f"Commitment mismatch: HMAC(key, move) = {calculate_commitment(key, move)}")
    return EXIT_ERROR


def build_game(moves: List[str], settings: GameSettings) -> Game:
    """Create a Game from validated settings."""
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return Game(
        moves,
        rng=rng,
        key_policy=settings.key_policy,
        key_bytes=settings.key_bytes,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)

    try:
        settings = build_settings(
            load_config(args.config),
            {
                "key_policy": args.key_policy,
                "seed": args.seed,
                "log_file": args.log_file,
                "verbose": args.verbose,
            },
        )
    except (OSError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(log_file_path=settings.log_file, level=settings.log_level_value)
    if settings.verbose:
        enable_console_logs()
    logger.debug(f"Settings: {settings.model_dump(mode='json')}")

    if args.verify:
        return verify(*args.verify)

    try:
        validate_moves(args.moves)
    except InvalidMoveSetError as e:
        log_startup_error(e)
        return EXIT_USAGE

    try:
        game = build_game(args.moves, settings)
        return run_session(game)
    except EntropySourceError as e:
        log_and_terminate(e)
    except KeyboardInterrupt:
        print()
        return EXIT_OK
