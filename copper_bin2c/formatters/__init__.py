"""Output layout registry.

WHY: The CLI picks a layout from the ``-c`` flag; library callers may
want to pick one by name. A central dict keeps both lookups in one place.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
get_formatter() picks a layout from the compact flag; render() is the
convenience function most library callers need.

RULES:
- Keys are lowercase layout names
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from copper_bin2c.core.ir import CopperList
from copper_bin2c.formatters.compact import CompactFormatter
from copper_bin2c.formatters.expanded import ExpandedFormatter

if TYPE_CHECKING:
    from copper_bin2c.formatters.base import BaseFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "expanded": ExpandedFormatter,
    "compact": CompactFormatter,
}


def get_formatter(compact: bool = False) -> BaseFormatter:
    """Instantiate the layout selected by the compact flag.

    Raises:
        ValueError: If the configured compact width is invalid.
    """
    key = "compact" if compact else "expanded"
    return FORMATTERS[key]()


def render(copper_list: CopperList, compact: bool = False) -> str:
    """Render a copper list in the compact or expanded layout."""
    return get_formatter(compact).format(copper_list)
