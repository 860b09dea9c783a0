"""Command-line interface for the copper list converter.

WHY: Copper programs are assembled to .bin files; build scripts turn
them into C arrays with ``copper-bin2c [-c] list.bin > list.h``. The CLI
wires argument parsing, the binary reader, and the formatters behind
that one command.

HOW: parse_args() handles the tiny argument surface by hand (argparse
would reword the usage message and reject unknown dash-prefixed paths).
run() loads the copper list, renders it completely, and only then writes
it to stdout, so an error line and array output never both appear.

RULES:
- ``-c`` may appear anywhere and any number of times
- Exactly one positional argument (the binary path) must remain
- Usage and not-found messages go to stdout with the exact bin2c.rb text
- Exit codes: 0 = success, 1 = usage error, missing file, or bad config
- Diagnostics go to stderr via logging, never to stdout
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from copper_bin2c import config
from copper_bin2c.core.reader import load_copper_list
from copper_bin2c.formatters import get_formatter

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Wrong number of positional arguments after removing ``-c``."""


@dataclass
class CliArgs:
    """Parsed command line."""

    input_file: Optional[str]
    compact: bool = False
    show_help: bool = False


def parse_args(argv: List[str]) -> CliArgs:
    """Split ``argv`` into the compact flag and the single input path.

    WHY: The flag is position-independent, so ``-c f.bin`` and
    ``f.bin -c`` must parse identically.

    HOW: Removes every ``-c`` token, then requires exactly one remaining
    token. No other token is treated as an option, except a lone
    ``-h``/``--help``.

    Raises:
        UsageError: If zero or more than one positional argument remains.
    """
    compact = config.COMPACT_FLAG in argv
    remaining = [a for a in argv if a != config.COMPACT_FLAG]

    if len(remaining) != 1:
        raise UsageError(
            "expected 1 positional argument, got {}".format(len(remaining))
        )

    if remaining[0] in config.HELP_FLAGS:
        return CliArgs(input_file=None, compact=compact, show_help=True)

    return CliArgs(input_file=remaining[0], compact=compact)


def run(input_file: str, compact: bool = False) -> int:
    """Convert one copper list binary and print it.

    Args:
        input_file: Path to the binary, as given on the command line.
        compact: Use the compact layout instead of one pair per line.

    Returns:
        Process exit code.
    """
    try:
        copper_list = load_copper_list(input_file)
    except FileNotFoundError as e:
        print(config.NOT_FOUND_TEMPLATE.format(path=e.filename))
        return 1

    try:
        formatter = get_formatter(compact)
        text = formatter.format(copper_list)
    except ValueError as e:
        # Config errors (bad COPPER_COMPACT_WIDTH)
        print("Error: {}".format(e))
        return 1

    sys.stdout.write(text)
    logger.debug("Wrote %d words (%s layout)", copper_list.word_count, formatter.name)
    return 0


def _configure_logging() -> None:
    level = getattr(logging, config.COPPER_LOG_LEVEL, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv[1:] (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the exit code; __main__ and the console script exit with it
    """
    if argv is None:
        argv = sys.argv[1:]

    _configure_logging()

    try:
        args = parse_args(list(argv))
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        print(config.USAGE_TEXT)
        return 1

    if args.show_help:
        print(config.HELP_TEXT.format(
            usage=config.USAGE_TEXT,
            width=config.DEFAULT_COMPACT_WIDTH,
        ), end="")
        return 0

    return run(args.input_file, compact=args.compact)


if __name__ == "__main__":
    sys.exit(main())
