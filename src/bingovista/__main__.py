"""
Command-line entry point for bingovista.
Usage: python -m bingovista {decode,encode,goal} ...
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from . import __version__
from .binary import from_base64u, read_long
from .constants import MAGIC_NUMBER, TAG_SEPARATOR
from .errors import BingoError, BoardFormatError
from .models import Board
from .service import BingoService
from .settings import AppSettings
from .utils.logging_config import setup_logging


def _load_board(service: BingoService, source: str) -> Board:
    """Board from a file, a text board or a base64url string."""
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:  # board strings can exceed the file name limit
        is_file = False
    if is_file:
        raw = path.read_bytes()
        if len(raw) >= 4 and read_long(raw, 0) == MAGIC_NUMBER:
            return service.decode_binary_board(raw)
        source = raw.decode("utf-8")
    source = source.strip()
    if TAG_SEPARATOR in source:
        return service.decode_text_board(source)
    return service.decode_binary_board(from_base64u(source))


def do_decode(service: BingoService, args: argparse.Namespace) -> int:
    """Print a board as JSON or text."""
    board = _load_board(service, args.source)
    if args.format == "text":
        print(service.encode_text_board(board))
    else:
        output = board.to_dict()
        output["perk_names"] = service.data.perk_names(board.perks)
        sys.stdout.buffer.write(orjson.dumps(output, option=orjson.OPT_INDENT_2))
        sys.stdout.write("\n")
    return 1 if board.errors and args.strict else 0


def do_encode(service: BingoService, args: argparse.Namespace) -> int:
    """Print a board as a base64url string."""
    board = _load_board(service, args.source)
    if args.comments is not None:
        board.comments = args.comments
    print(service.board_to_base64(board))
    return 1 if board.errors and args.strict else 0


def do_goal(service: BingoService, args: argparse.Namespace) -> int:
    """Print one decoded goal."""
    goal = service.decode_text(args.goal)
    if args.json:
        sys.stdout.buffer.write(orjson.dumps(goal.to_dict(), option=orjson.OPT_INDENT_2))
        sys.stdout.write("\n")
    else:
        print(f"{goal.name}: {goal.description}")
        for item, value in zip(goal.items, goal.values):
            print(f"  {item}: {value}")
        if goal.error:
            print(f"  error: {goal.error}")
    return 1 if goal.error else 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the decode, encode and goal commands."""
    parser = argparse.ArgumentParser(
        prog="bingovista",
        description="Decode and encode Rain World Bingo boards.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--profile", default="default", help="Settings profile to use.")
    parser.add_argument("--data-file", type=Path, help="Override the bundled game tables.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any goal fails to decode.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    p_decode = subparsers.add_parser("decode", help="Decode a text, base64url or binary board.")
    p_decode.add_argument("source", help="Board string, or path to a board file.")
    p_decode.add_argument(
        "--format", choices=("json", "text"), default="json", help="Output format (default: json)."
    )
    p_decode.set_defaults(func=do_decode)

    p_encode = subparsers.add_parser("encode", help="Encode a board as a base64url string.")
    p_encode.add_argument("source", help="Board string, or path to a board file.")
    p_encode.add_argument("--comments", help="Replace the board comments.")
    p_encode.set_defaults(func=do_encode)

    p_goal = subparsers.add_parser("goal", help="Decode a single text goal.")
    p_goal.add_argument("goal", help="Goal string, e.g. BingoEnterRegionChallenge~...")
    p_goal.add_argument("--json", action="store_true", help="Print the goal as JSON.")
    p_goal.set_defaults(func=do_goal)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings(args.profile)
        setup_logging(settings)
        logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        service = BingoService(settings, data_file=args.data_file)
        return args.func(service, args)

    except (BoardFormatError, ValueError) as e:
        logger.error(f"Cannot read board: {e}")
        return 1
    except BingoError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
