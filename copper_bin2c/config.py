"""Configuration constants, message text, and .env loading.

WHY: The array identifier, element type, and compact line width are the
knobs a build might want to change when embedding several copper lists.
Keeping them (and the user-visible messages) as plain module-level data
makes them easy to find and override without touching formatter logic.

HOW: python-dotenv loads the .env file on import. Constants read
os.getenv() with defaults that reproduce the classic bin2c.rb output
exactly. load_compact_width() validates the one numeric setting.

RULES:
- Defaults must produce byte-identical output to the legacy bin2c.rb script
- USAGE_TEXT and NOT_FOUND_TEMPLATE are exact, user-visible strings
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Command-line surface
# ---------------------------------------------------------------------------

COMPACT_FLAG = "-c"
HELP_FLAGS = ("-h", "--help")

USAGE_TEXT = "Usage: bin2c.rb [-c] <binfile>"
"""Printed verbatim on a wrong positional argument count."""

NOT_FOUND_TEMPLATE = "Error: '{path}' not found"
"""Printed when the resolved input path is not an existing file."""

HELP_TEXT = """{usage}

Convert a copper list binary (16-bit big-endian words) to a C array
literal on stdout.

Options:
    -c    compact layout, {width} words per line (default: one word pair
          per line)

Environment:
    COPPER_LIST_NAME      array identifier (default: copper_list)
    COPPER_WORD_TYPE      element type (default: uint16_t)
    COPPER_COMPACT_WIDTH  words per compact line (default: 9)
    COPPER_LOG_LEVEL      diagnostics on stderr (default: WARNING)
"""

# ---------------------------------------------------------------------------
# Output defaults
# ---------------------------------------------------------------------------

DEFAULT_LIST_NAME = "copper_list"
DEFAULT_WORD_TYPE = "uint16_t"
DEFAULT_COMPACT_WIDTH = 9

COPPER_LIST_NAME = os.getenv("COPPER_LIST_NAME", DEFAULT_LIST_NAME)
COPPER_WORD_TYPE = os.getenv("COPPER_WORD_TYPE", DEFAULT_WORD_TYPE)
COPPER_LOG_LEVEL = os.getenv("COPPER_LOG_LEVEL", "WARNING").upper()


def load_compact_width() -> int:
    """Return the number of words per line in compact mode.

    WHY: The width is the only numeric setting; a typo in .env should
    fail loudly rather than produce a zero-width (infinite) loop.

    HOW: Reads COPPER_COMPACT_WIDTH at call time so tests can
    monkeypatch the environment.

    RULES:
    - Defaults to 9 when unset or blank
    - Raises ValueError if the value is not a positive integer
    """
    raw = os.getenv("COPPER_COMPACT_WIDTH", "").strip()
    if not raw:
        return DEFAULT_COMPACT_WIDTH
    try:
        width = int(raw)
    except ValueError:
        raise ValueError(
            "COPPER_COMPACT_WIDTH must be a positive integer, got {!r}".format(raw)
        ) from None
    if width < 1:
        raise ValueError(
            "COPPER_COMPACT_WIDTH must be a positive integer, got {}".format(width)
        )
    return width
