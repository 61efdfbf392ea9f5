from __future__ import annotations

import argparse
import logging

from .engine_play import run_play


def _add_play_args(p: argparse.ArgumentParser) -> None:
    # If omitted, runs with a random seed for variety. Pass an int to reproduce.
    p.add_argument("--seed", type=int, default=None, help="RNG seed for the computer's pick (random if omitted)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored on a terminal)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rps-trainer", description="Single-round Rock-Paper-Scissors vs the computer")
    _add_play_args(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Play one round. Invalid input is reported and still exits with status 0."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    run_play(seed=args.seed, no_color=args.no_color)


if __name__ == "__main__":
    main()
