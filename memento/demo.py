"""
Demo driver — save a sequence of states, then restore each one in turn.

Run:
    python -m memento.demo               # prints State1, State2
    python -m memento.demo a b c --log-level DEBUG

Restored states go to stdout, one per line. Log output goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from memento.core.history import History
from memento.core.originator import StateHolder

logger = logging.getLogger(__name__)

_DEFAULT_STATES = ("State1", "State2")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_LOG_LEVEL = os.environ.get("MEMENTO_LOG_LEVEL", "WARNING")


def run_demo(states: Sequence[str] = _DEFAULT_STATES) -> list[str | None]:
    """Save every state into a History, then restore each snapshot by position."""
    holder = StateHolder()
    history = History()

    for state in states:
        holder.set_state(state)
        history.add(holder.save())

    restored: list[str | None] = []
    for index in range(len(history)):
        holder.restore(history.get(index))
        restored.append(holder.get_state())
    logger.info("Restored %d snapshot(s)", len(restored))
    return restored


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="memento-demo")
    parser.add_argument(
        "states",
        nargs="*",
        default=list(_DEFAULT_STATES),
        help="States to save and restore, in order.",
    )
    parser.add_argument(
        "--log-level",
        default=_DEFAULT_LOG_LEVEL,
        choices=_LOG_LEVELS,
        type=str.upper,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # defaults (MEMENTO_LOG_LEVEL) bypass argparse choices
    if args.log_level not in _LOG_LEVELS:
        parser.error(
            f"MEMENTO_LOG_LEVEL: invalid choice: {args.log_level!r} "
            f"(choose from {', '.join(_LOG_LEVELS)})"
        )
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    for state in run_demo(args.states):
        print(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
