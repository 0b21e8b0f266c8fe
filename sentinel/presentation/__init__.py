"""
Presentation — Display layer for Branch Sentinel

Contains display and formatting:
- Symbols: Icon vocabulary (unicode/ascii)
- Display: Indicator state for tracked repositories (display.py)
- Prompts: Interactive pickers (prompts.py)

Only symbols are re-exported here; display depends on config, which
itself depends on symbols.
"""

from .symbols import (
    SymbolSet, get_symbols, safe_print, truncate_name,
    ICON_CHOICES, UNICODE, ASCII,
)

__all__ = [
    "SymbolSet", "get_symbols", "safe_print", "truncate_name",
    "ICON_CHOICES", "UNICODE", "ASCII",
]
