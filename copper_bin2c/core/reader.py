"""Binary reader that decodes a copper list file into word pairs.

WHY: The assembler emits copper programs as raw big-endian 16-bit words
with no header. The converter needs them as ordered (w1, w2) pairs.

HOW: resolve_input_path() expands and absolutises the user's path.
load_copper_list() checks the path exists, opens it in binary mode, and
hands the stream to read_word_pairs(), which reads two 2-byte words per
iteration and unpacks each with struct (">H").

RULES:
- The file is fully read and closed before anything is formatted
- A missing, unreadable, or OS-rejected path raises FileNotFoundError
  before any binary processing
- A trailing incomplete pair is dropped silently (logged at DEBUG only)
- Word values are never validated; any 16-bit pattern passes through
"""

from __future__ import annotations

import errno
import logging
import os
import struct
from pathlib import Path
from typing import BinaryIO, List, Union

from copper_bin2c.core.ir import CopperList, WordPair

logger = logging.getLogger(__name__)

_WORD = struct.Struct(">H")


def resolve_input_path(path: Union[str, Path]) -> Path:
    """Expand ``~`` and make the path absolute, without following symlinks."""
    return Path(os.path.abspath(os.path.expanduser(str(path))))


def read_word_pairs(stream: BinaryIO) -> List[WordPair]:
    """Decode a binary stream into word pairs until end of stream.

    WHY: Separated from file handling so decoding can be tested with
    in-memory streams.

    HOW: Each iteration reads two bytes for w1, then two for w2. A short
    read at either point ends the loop without emitting the pair, so
    inputs of 4k+1, 4k+2 and 4k+3 bytes all yield k pairs.

    Args:
        stream: A binary file-like object positioned at the first word.

    Returns:
        The pairs in stream order.
    """
    pairs: List[WordPair] = []
    dropped = 0

    while True:
        raw1 = stream.read(_WORD.size)
        if len(raw1) < _WORD.size:
            dropped = len(raw1)
            break
        raw2 = stream.read(_WORD.size)
        if len(raw2) < _WORD.size:
            dropped = len(raw1) + len(raw2)
            break
        (w1,) = _WORD.unpack(raw1)
        (w2,) = _WORD.unpack(raw2)
        pairs.append(WordPair(w1, w2))

    if dropped:
        logger.debug("Dropped %d trailing byte(s) after %d pairs", dropped, len(pairs))
    return pairs


def _is_readable_file(path: Path) -> bool:
    # is_file() raises on some OS errors (e.g. ENAMETOOLONG) instead of
    # returning False
    try:
        return path.is_file() and os.access(path, os.R_OK)
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def _not_found(path: Path) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))


def load_copper_list(path: Union[str, Path]) -> CopperList:
    """Read a copper list binary from disk.

    Args:
        path: Path to the binary file; resolved to an absolute path.

    Returns:
        A CopperList named after the file's base name.

    Raises:
        FileNotFoundError: If the resolved path is not an existing,
            readable file, including names the OS rejects outright.
            ``filename`` holds the resolved path.
    """
    resolved = resolve_input_path(path)
    if not _is_readable_file(resolved):
        raise _not_found(resolved)

    logger.debug("Reading copper list from %s", resolved)
    try:
        with open(resolved, "rb") as f:
            pairs = read_word_pairs(f)
    except OSError as e:
        logger.debug("Cannot read %s: %s", resolved, e)
        raise _not_found(resolved) from e

    logger.info("Read %d word pairs from %s", len(pairs), resolved.name)
    return CopperList(source_filename=resolved.name, pairs=pairs)
