"""Unit tests for the configuration module.

WHY: The defaults must reproduce the classic bin2c.rb output, and a bad
compact width must fail before any output is printed.

RULES:
- Environment overrides are applied with monkeypatch.
"""

import pytest

from copper_bin2c import config


class TestDefaults:
    def test_messages(self):
        assert config.USAGE_TEXT == "Usage: bin2c.rb [-c] <binfile>"
        assert config.NOT_FOUND_TEMPLATE.format(path="/x/y.bin") == "Error: '/x/y.bin' not found"

    def test_declaration_defaults(self):
        assert config.DEFAULT_LIST_NAME == "copper_list"
        assert config.DEFAULT_WORD_TYPE == "uint16_t"
        assert config.DEFAULT_COMPACT_WIDTH == 9


class TestLoadCompactWidth:
    """load_compact_width() reads COPPER_COMPACT_WIDTH at call time."""

    def test_unset_uses_default(self):
        assert config.load_compact_width() == 9

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("COPPER_COMPACT_WIDTH", "  ")
        assert config.load_compact_width() == 9

    def test_override(self, monkeypatch):
        monkeypatch.setenv("COPPER_COMPACT_WIDTH", "16")
        assert config.load_compact_width() == 16

    @pytest.mark.parametrize("raw", ["0", "-3", "nine", "4.5"])
    def test_invalid_raises(self, monkeypatch, raw):
        monkeypatch.setenv("COPPER_COMPACT_WIDTH", raw)
        with pytest.raises(ValueError, match="COPPER_COMPACT_WIDTH"):
            config.load_compact_width()
