"""Command-line tools for checking configs and replaying event scripts."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from snake_controller.config import GameConfig
from snake_controller.errors import ConfigurationError
from snake_controller.events import (
    DirectionInd,
    Event,
    FoodInd,
    FoodResp,
    PauseInd,
    TimeoutInd,
)
from snake_controller.segments import Direction, Position

logger = logging.getLogger(__name__)


def parse_script_line(line: str) -> Event | None:
    """Turn one event-script line into an inbound event.

    Returns ``None`` for blank lines and ``#`` comments; raises ValueError
    for anything unrecognised.
    """
    text = line.split("#", 1)[0].strip()
    if not text:
        return None
    word, *args = text.split()
    word = word.lower()

    if word == "tick" and not args:
        return TimeoutInd()
    if word == "pause" and not args:
        return PauseInd()
    if word == "dir" and len(args) == 1:
        return DirectionInd(Direction.from_char(args[0].upper()))
    if word in ("food", "resp") and len(args) == 2:
        position = Position(int(args[0]), int(args[1]))
        return FoodInd(position) if word == "food" else FoodResp(position)
    raise ValueError(f"Unrecognised script line: {line.strip()!r}")


def _read_script(path: str | None) -> Iterable[str]:
    if path is None or path == "-":
        return sys.stdin.read().splitlines()
    return Path(path).read_text().splitlines()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-controller",
        description="Snake controller configuration and replay tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Replay an event script and print notifications.",
    )
    run_p.add_argument("config", help="Path to a game configuration file.")
    run_p.add_argument(
        "--events", type=str, default=None,
        help="Event script path (default: stdin).",
    )
    run_p.add_argument("--seed", type=int, default=None)

    # --- check ---
    check_p = sub.add_parser("check", help="Validate a configuration file.")
    check_p.add_argument("config", help="Path to a game configuration file.")

    return parser


def _run_replay(args: argparse.Namespace) -> int:
    from snake_controller.session import GameSession

    session = GameSession(GameConfig.load(args.config), seed=args.seed)
    for lineno, line in enumerate(_read_script(args.events), start=1):
        try:
            event = parse_script_line(line)
        except ValueError as exc:
            logger.error("Line %d: %s", lineno, exc)
            return 1
        if event is None:
            continue
        for emitted in session.dispatch(event):
            print(json.dumps(emitted.to_dict()))  # noqa: T201

    print(session.board.render())  # noqa: T201
    print(  # noqa: T201
        f"score={session.scores.score} lost={str(session.lost).lower()}",
    )
    return 0


def _run_check(args: argparse.Namespace) -> int:
    try:
        config = GameConfig.load(args.config)
    except ConfigurationError as exc:
        print(f"invalid: {exc}")  # noqa: T201
        return 1
    print(f"ok: {config.to_text()}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-controller`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_replay,
        "check": _run_check,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
