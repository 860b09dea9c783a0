"""Compact layout: a fixed number of words per line, ignoring pair boundaries.

WHY: Long copper lists are unwieldy at two words per line. Compact mode
packs them into wider rows for embedding in source files.

HOW: Two explicit steps: flatten the pairs into one word sequence
(CopperList.flat_words), then chunk that sequence into runs of
``width`` words. Each run becomes one line.

RULES:
- Word order is preserved; w1 precedes w2 within each pair
- Every line but the last holds exactly ``width`` words (default 9)
- The last line holds the remainder, or ``width`` if it divides evenly
- Lines are joined with a bare newline and carry no trailing comma,
  matching the legacy bin2c.rb output
- Header is marked `` (compact)``
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from copper_bin2c import config
from copper_bin2c.core.ir import CopperList
from copper_bin2c.formatters.base import BaseFormatter, format_word


def chunk_words(words: Iterable[int], width: int) -> List[List[int]]:
    """Split a word sequence into consecutive runs of up to ``width`` words.

    Raises:
        ValueError: If width is less than 1.
    """
    if width < 1:
        raise ValueError("width must be at least 1, got {}".format(width))

    runs: List[List[int]] = []
    current: List[int] = []
    for word in words:
        current.append(word)
        if len(current) == width:
            runs.append(current)
            current = []
    if current:
        runs.append(current)
    return runs


class CompactFormatter(BaseFormatter):
    """Formatter that packs ``width`` words per line.

    Args:
        width: Words per line; defaults to COPPER_COMPACT_WIDTH (9).
    """

    compact = True
    line_separator = "\n"

    def __init__(
        self,
        list_name: Optional[str] = None,
        word_type: Optional[str] = None,
        width: Optional[int] = None,
    ) -> None:
        super().__init__(list_name=list_name, word_type=word_type)
        self.width = width if width is not None else config.load_compact_width()

    @property
    def name(self) -> str:
        return "Compact"

    def body_lines(self, copper_list: CopperList) -> List[str]:
        runs = chunk_words(copper_list.flat_words(), self.width)
        return [", ".join(format_word(w) for w in run) for run in runs]
