"""Expanded layout: one copper instruction (word pair) per line.

WHY: This is the default layout. One pair per line keeps each line a
whole instruction, so the array reads like the copper program listing.

RULES:
- Line count equals pair count
- Each line is ``w1, w2`` in file order
- Lines are joined with ``,\\n``; only the last line lacks a trailing comma
"""

from __future__ import annotations

from typing import List

from copper_bin2c.core.ir import CopperList
from copper_bin2c.formatters.base import BaseFormatter, format_word


class ExpandedFormatter(BaseFormatter):
    """Formatter that prints each word pair on its own line."""

    compact = False
    line_separator = ",\n"

    @property
    def name(self) -> str:
        return "Expanded"

    def body_lines(self, copper_list: CopperList) -> List[str]:
        return [
            "{}, {}".format(format_word(pair.w1), format_word(pair.w2))
            for pair in copper_list.pairs
        ]
