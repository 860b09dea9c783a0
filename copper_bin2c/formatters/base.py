"""Abstract base formatter and shared declaration rendering.

WHY: Both layouts emit the same header comment, size constant, and
array declaration around a different body. This base class owns the
shared frame so a layout only decides how words are split into lines.

HOW: BaseFormatter is an ABC with two requirements: a ``name``
property and a ``body_lines()`` method. ``format()`` wraps the body in
the header and declarations. format_word() is the one hex formatter
every layout uses.

RULES:
- Words render as ``0x`` + exactly 4 lowercase hex digits
- Header is ``// <basename>`` plus `` (compact)`` when ``compact`` is set
- Size constant value is CopperList.word_count
- Body lines are indented by 4 spaces and joined by ``line_separator``
- Returned text always ends with a newline

To add a new layout:
1. Create a new file in formatters/
2. Subclass BaseFormatter
3. Implement name and body_lines()
4. Register in FORMATTERS dict in formatters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from copper_bin2c import config
from copper_bin2c.core.ir import CopperList

INDENT = "    "


def format_word(word: int) -> str:
    """Format one 16-bit word, e.g. ``0x01a3``."""
    return "0x{:04x}".format(word)


def _first_nonblank(*values: Optional[str]) -> str:
    """Return the first value that is not None or whitespace, stripped."""
    for value in values:
        if value and value.strip():
            return value.strip()
    return ""


class BaseFormatter(ABC):
    """Abstract base for copper list array layouts.

    Args:
        list_name: Array identifier; the size constant is ``<name>_size``.
        word_type: Element type used in both declarations.
    """

    compact = False
    line_separator = "\n"

    def __init__(
        self,
        list_name: Optional[str] = None,
        word_type: Optional[str] = None,
    ) -> None:
        self.list_name = _first_nonblank(list_name, config.COPPER_LIST_NAME, config.DEFAULT_LIST_NAME)
        self.word_type = _first_nonblank(word_type, config.COPPER_WORD_TYPE, config.DEFAULT_WORD_TYPE)

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable layout name, e.g. 'Compact'."""

    @abstractmethod
    def body_lines(self, copper_list: CopperList) -> List[str]:
        """Return the unindented body lines, already comma-joined within a line."""

    def header(self, copper_list: CopperList) -> str:
        marker = " (compact)" if self.compact else ""
        return "// {}{}".format(copper_list.source_filename, marker)

    def format(self, copper_list: CopperList) -> str:
        """Render the full array declaration for a copper list.

        Args:
            copper_list: The decoded pairs and source name.

        Returns:
            The complete text, newline-terminated, ready for stdout.
        """
        lines = [
            self.header(copper_list),
            "{} {}_size = {};".format(self.word_type, self.list_name, copper_list.word_count),
            "{} {} = [".format(self.word_type, self.list_name),
        ]
        body = self.line_separator.join(INDENT + line for line in self.body_lines(copper_list))
        if body:
            lines.append(body)
        lines.append("];")
        return "\n".join(lines) + "\n"
