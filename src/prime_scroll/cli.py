"""Command-line interface for prime_scroll."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from prime_scroll.core.errors import InvalidInputError, PrimeScrollError
from prime_scroll.utils.config import ScrollConfig, load_config
from prime_scroll.utils.logger import setup_logger


def _check_columns(columns: int) -> None:
    if columns < 1:
        raise InvalidInputError(f"columns must be >= 1, got {columns}")


def cmd_chunk(args: argparse.Namespace, config: ScrollConfig) -> int:
    """Print one chunk of primes after a cursor."""
    from prime_scroll.core.chunks import next_chunk
    from prime_scroll.session.render import format_grid

    _check_columns(args.columns)
    count = args.count if args.count is not None else config.chunk_size
    chunk = next_chunk(args.cursor, count)

    print(format_grid(chunk.primes, columns=args.columns))
    print(f"next cursor: {chunk.cursor}")
    return 0


def cmd_scroll(args: argparse.Namespace, config: ScrollConfig) -> int:
    """Start a session and load several pages of primes."""
    from tqdm import tqdm

    from prime_scroll.session.params import parse_start_param
    from prime_scroll.session.render import format_grid
    from prime_scroll.session.scroll import PrimeScroll

    if args.pages < 1:
        raise InvalidInputError(f"pages must be >= 1, got {args.pages}")
    _check_columns(args.columns)

    session = PrimeScroll(config)

    if args.lucky:
        session.start_random()
    else:
        session.start(parse_start_param(args.start, default=config.start, max_value=config.max_start))

    for _ in tqdm(range(args.pages - 1), desc="Loading primes", disable=args.pages < 3, file=sys.stderr):
        session.extend()

    print(f"Primes from {session.start_value} ({len(session)} loaded):")
    print(format_grid(session.primes, columns=args.columns))
    return 0


def cmd_check(args: argparse.Namespace, config: ScrollConfig) -> int:
    """Report primality of each number given."""
    from prime_scroll.core.primality import is_prime_array

    flags = is_prime_array([int(n) for n in args.numbers])
    for n, flag in zip(args.numbers, flags):
        print(f"{n}: {'prime' if flag else 'not prime'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Endlessly scrolling list of prime numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug log to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug messages")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    chunk_parser = subparsers.add_parser("chunk", help="Print the next chunk of primes after a cursor")
    chunk_parser.add_argument("--cursor", type=int, default=0, help="Last value examined")
    chunk_parser.add_argument("--count", type=int, default=None, help="Primes per chunk")
    chunk_parser.add_argument("--columns", type=int, default=4, help="Grid columns")

    scroll_parser = subparsers.add_parser("scroll", help="Load pages of primes from a start value")
    scroll_parser.add_argument("--start", "-n", type=str, default=None, help="Starting value")
    scroll_parser.add_argument("--pages", type=int, default=1, help="Chunks to load")
    scroll_parser.add_argument("--lucky", action="store_true", help="Start from a random value")
    scroll_parser.add_argument("--columns", type=int, default=4, help="Grid columns")

    check_parser = subparsers.add_parser("check", help="Test numbers for primality")
    check_parser.add_argument("numbers", type=int, nargs="+", help="Numbers to test")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "chunk": cmd_chunk,
        "scroll": cmd_scroll,
        "check": cmd_check,
    }

    try:
        config = load_config(args.config) if args.config else ScrollConfig()
    except (OSError, InvalidInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    level = "DEBUG" if args.verbose else config.log_level
    logger = setup_logger(log_path=args.log_file, level=level)

    try:
        return commands[args.command](args, config)
    except InvalidInputError as e:
        logger.error(f"Error: {e}")
        return 2
    except PrimeScrollError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
