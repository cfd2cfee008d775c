"""
Command-line interface for checking, converting, solving and playing.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ten_puzzle.api import check_formula, check_infix, solve, solve_infix
from ten_puzzle.core import Verdict
from ten_puzzle.formula import to_infix, to_postfix, validate_shape
from ten_puzzle.utils.config import Config
from ten_puzzle.utils.factory import create_game

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ten-puzzle",
        description="Check and play the make-10 number puzzle",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check whether a formula makes 10")
    check.add_argument("formula", help="Formula (postfix unless --infix)")
    check.add_argument(
        "--infix", "-i",
        action="store_true",
        help="Treat the formula as infix (e.g. '(1+4)*(3-1)')",
    )

    postfix = sub.add_parser("postfix", help="Convert infix to postfix")
    postfix.add_argument("infix")

    infix = sub.add_parser("infix", help="Convert postfix to infix")
    infix.add_argument("postfix")

    solve = sub.add_parser("solve", help="Find formulas making 10 from four digits")
    solve.add_argument("digits", help="Four digits 1-9, e.g. 1234")
    solve.add_argument(
        "--all", "-a",
        action="store_true",
        help="Print every solution instead of the first",
    )

    play = sub.add_parser("play", help="Play a round in the terminal")
    play.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for board digits (default: random)",
    )
    play.add_argument(
        "--hints",
        action="store_true",
        help="Show which areas can currently make 10",
    )
    return parser.parse_args(argv)


def parse_digits(digits_str: str) -> List[int]:
    """Parse a string like '1234' or '1,2,3,4' into four digits."""
    cleaned = digits_str.replace(",", "").replace(" ", "")
    if len(cleaned) != 4 or any(ch not in "123456789" for ch in cleaned):
        raise ValueError(
            f"Invalid digits: '{digits_str}'. Expected four digits 1-9 (e.g. '1234')."
        )
    return [int(ch) for ch in cleaned]


def _cmd_check(args: argparse.Namespace) -> int:
    if args.infix:
        verdict = check_infix(args.formula)
    else:
        verdict = check_formula(args.formula)
        if verdict is Verdict.INVALID:
            logger.debug("%s", validate_shape(args.formula).error)
    print(verdict)
    return 0 if verdict is Verdict.TEN else 1


def _cmd_postfix(args: argparse.Namespace) -> int:
    result = to_postfix(args.infix)
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    print(result.value)
    return 0


def _cmd_infix(args: argparse.Namespace) -> int:
    shape = validate_shape(args.postfix)
    if not shape.ok:
        print(shape.error, file=sys.stderr)
        return 1
    print(to_infix(args.postfix))
    return 0


def _cmd_solve(args: argparse.Namespace) -> int:
    try:
        digits = parse_digits(args.digits)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    # Fall back to postfix when no infix rendering survives the printer
    solutions = solve_infix(digits) or solve(digits)
    if not solutions:
        print("No solution")
        return 1

    for line in (solutions if args.all else solutions[:1]):
        print(line)
    return 0


def _cmd_play(args: argparse.Namespace) -> int:
    config = Config(seed=args.seed, show_hints=args.hints)
    game = create_game(config)

    print("Make 10 from the four digits of a row, column, diagonal or 2x2 block.")
    print("Type an infix formula (e.g. (1+4)*(3-1)), or 'q' to quit.")

    try:
        while True:
            print(game.state_string())
            print(f"Score: {game.score}  Board version: {game.get_state().version}")
            if config.show_hints:
                names = ", ".join(a.name for a in game.solvable_areas()) or "none"
                print(f"Solvable: {names}")

            raw = input("Formula: ").strip()
            if raw.lower() in ("q", "quit", "exit"):
                break

            result = game.apply_formula(raw)
            if result.area is not None:
                print(f"\nCleared {result.area.name}! +{game.gain_score}")
            else:
                verdict = check_infix(raw)
                if verdict is Verdict.TEN:
                    print("\nMakes 10, but no area holds those digits.")
                else:
                    print(f"\n{verdict}")
    except (EOFError, KeyboardInterrupt):
        print()

    print(f"Final score: {game.score}")
    return 0


_COMMANDS = {
    "check": _cmd_check,
    "postfix": _cmd_postfix,
    "infix": _cmd_infix,
    "solve": _cmd_solve,
    "play": _cmd_play,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
