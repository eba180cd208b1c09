"""Command-line interface for the quote board."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import load_config
from .logging_setup import configure_logging
from .models import QuoteState
from .services import QuoteBoard
from .sources import StaticSymbolSource


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="quoteboard",
        description="Fetch current stock quotes for a list of tickers",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    fetch_parser = sub.add_parser("fetch", help="Fetch quotes once and print them")
    fetch_parser.add_argument(
        "symbols",
        nargs="*",
        help="Tickers to fetch (default: the configured symbol file)",
    )

    watch_parser = sub.add_parser("watch", help="Refresh quotes continuously")
    watch_parser.add_argument(
        "interval",
        nargs="?",
        type=positive_int,
        default=None,
        help="Refresh interval in seconds (overrides config)",
    )

    return parser


def render_state(state: QuoteState) -> str:
    """Format the board for the terminal, one ticker per line."""
    lines: list[str] = []
    if state.error:
        lines.append(f"Error: {state.error}")
    if not state.quotes:
        lines.append("No quotes.")
    for quote in sorted(state.quotes, key=lambda q: q.symbol):
        lines.append(f"{quote.symbol:<8} ${quote.price:>12,.2f}")
    return "\n".join(lines)


def _print_state(state: QuoteState) -> None:
    print(render_state(state), flush=True)


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)

    if args.command == "fetch":
        source = StaticSymbolSource(args.symbols) if args.symbols else None
        board = QuoteBoard(config, source=source)
        await board.refresh()
        _print_state(board.store.state)
        return 1 if board.store.error else 0

    if args.command == "watch":
        board = QuoteBoard(config)
        board.store.subscribe(_print_state)
        await board.run_continuous(args.interval)
        return 0

    build_parser().print_help()
    return 1


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
