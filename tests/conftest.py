"""Shared test fixtures for the copper_bin2c test suite.

WHY: Most tests need small binary files on disk or a ready-made
CopperList. Centralizing the helpers keeps byte layouts in one place.

HOW: write_bin is a factory fixture that writes bytes under tmp_path.
Words are packed big-endian with struct so test data reads as the
values it encodes. An autouse fixture pins configuration to defaults
so a developer's .env cannot change expected output.

RULES:
- All file I/O uses tmp_path for isolation.
- Expected text is written out literally, never built with the code under test.
"""

import struct
from typing import List

import pytest

from copper_bin2c import config
from copper_bin2c.core.ir import CopperList, WordPair


def pack_words(words: List[int]) -> bytes:
    """Pack 16-bit words big-endian, as the copper assembler does."""
    return struct.pack(">{}H".format(len(words)), *words)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Reset environment-driven settings to their defaults."""
    monkeypatch.setattr(config, "COPPER_LIST_NAME", config.DEFAULT_LIST_NAME)
    monkeypatch.setattr(config, "COPPER_WORD_TYPE", config.DEFAULT_WORD_TYPE)
    monkeypatch.delenv("COPPER_COMPACT_WIDTH", raising=False)


@pytest.fixture
def packed():
    """Expose pack_words to test modules."""
    return pack_words


@pytest.fixture
def write_bin(tmp_path):
    """Return a helper that writes raw bytes to tmp_path/<name>."""

    def _write(data: bytes, name: str = "test.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def two_pair_list():
    """Two instructions: (0x0001, 0x0002) and (0x0003, 0x0004)."""
    return CopperList(
        source_filename="test.bin",
        pairs=[WordPair(0x0001, 0x0002), WordPair(0x0003, 0x0004)],
    )


@pytest.fixture
def color_bar_list():
    """The 26-word color bar copper program as 13 pairs."""
    words = [
        0xC002, 0xD010, 0xD010, 0x8000, 0x27FF, 0xD002, 0x0800, 0x0801,
        0xFFFF, 0x1800, 0xC002, 0x07FF, 0xD01A, 0xF802, 0xF000, 0x2BFF,
        0x0111, 0x0222, 0x0333, 0x0444, 0x0555, 0x0444, 0x0333, 0x0222,
        0x0111, 0x0000,
    ]
    pairs = [WordPair(words[i], words[i + 1]) for i in range(0, len(words), 2)]
    return CopperList(source_filename="color_bar_table.bin", pairs=pairs)
