"""Intermediate representation dataclasses for a decoded copper list.

WHY: A copper instruction is two consecutive 16-bit words. Both output
layouts need the words in program order, but group them differently:
expanded mode prints one instruction per line, compact mode flattens
and re-chunks. The IR keeps the pair structure so either layout can be
derived without re-reading the file.

HOW: Two dataclasses:
  WordPair   : one 32-bit instruction as (w1, w2)
  CopperList : the ordered pairs plus the source file's base name

RULES:
- Words are unsigned 16-bit integers (0..0xffff), stored uninterpreted
- Pair order is file order; copper lists execute sequentially
- word_count is always 2 * pair_count (no half pairs exist)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class WordPair:
    """One copper instruction: two words read back to back.

    RULES:
    - w1 is the word that appeared first in the file
    - Immutable once read
    """

    w1: int
    w2: int

    def words(self) -> Tuple[int, int]:
        return (self.w1, self.w2)


@dataclass
class CopperList:
    """The complete decoded copper list handed to formatters.

    WHY: Formatters need the pairs and the name for the header comment;
    bundling them keeps the formatter interface to a single argument.

    RULES:
    - pairs: ordered by file offset
    - source_filename: base name only (directory stripped)
    """

    source_filename: str
    pairs: List[WordPair] = field(default_factory=list)

    @property
    def pair_count(self) -> int:
        return len(self.pairs)

    @property
    def word_count(self) -> int:
        """Number of 16-bit words, as emitted in the size constant."""
        return self.pair_count * 2

    def flat_words(self) -> Iterator[int]:
        """Yield every word in program order, w1 before w2 within a pair."""
        for pair in self.pairs:
            yield pair.w1
            yield pair.w2
