"""
Symbols — Visual vocabulary for the branch indicator

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via display.symbols setting.

Icons are referred to by symbolic name (e.g. "shield", "git-branch")
so configuration stays independent of the terminal's capabilities.
"""

import os
import sys
from dataclasses import dataclass
from typing import Dict, Optional


# Icons a user may pick for prod/dev/neutral
ICON_CHOICES = (
    "shield",
    "tools",
    "git-branch",
    "beaker",
    "rocket",
    "bug",
    "warning",
    "check",
    "circle-large-outline",
)

# Fixed icons (not user-configurable)
ICON_LOCAL = "lock"
ICON_UNKNOWN = "question"
ICON_SELECT = "list-selection"

DEFAULT_ICON_PROD = "shield"
DEFAULT_ICON_DEV = "tools"
DEFAULT_ICON_NEUTRAL = "git-branch"


# Unicode to ASCII replacements for terminals that cannot encode them
UNICODE_TO_ASCII = {
    '→': '->',
    '…': '...',
    '•': '*',
    '⎇': 'Y',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Branch and repository names come from the filesystem and may
    contain characters the terminal cannot encode.
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs for icons and separators."""
    icons: Dict[str, str]

    # Separators
    bullet: str       # between name and branch
    arrow: str
    ellipsis: str
    branch: str       # placeholder when no repo is detected

    # Status markers
    check_pass: str
    check_warn: str
    check_fail: str

    def icon(self, name: str) -> str:
        """Glyph for a symbolic icon name; unknown names render as (name)."""
        return self.icons.get(name, f"({name})")


UNICODE = SymbolSet(
    icons={
        "shield": "⛨",
        "tools": "⚒",
        "git-branch": "⎇",
        "beaker": "⚗",
        "rocket": "➚",
        "bug": "✸",
        "warning": "⚠",
        "check": "✓",
        "circle-large-outline": "○",
        "lock": "⚿",
        "question": "?",
        "list-selection": "☰",
    },
    bullet="•",
    arrow="→",
    ellipsis="…",
    branch="⎇",
    check_pass="✓",
    check_warn="⚠",
    check_fail="✗",
)

ASCII = SymbolSet(
    icons={
        "shield": "#",
        "tools": "%",
        "git-branch": "Y",
        "beaker": "b",
        "rocket": "^",
        "bug": "*",
        "warning": "!",
        "check": "v",
        "circle-large-outline": "o",
        "lock": "L",
        "question": "?",
        "list-selection": "=",
    },
    bullet="*",
    arrow="->",
    ellipsis="...",
    branch="Y",
    check_pass="[OK]",
    check_warn="[!]",
    check_fail="[X]",
)


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    if os.environ.get('SENTINEL_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('SENTINEL_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False
        if 'utf' in encoding_lower:
            return True

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()
    if 'utf-8' in lang or 'utf8' in lang or 'utf-8' in lc_all or 'utf8' in lc_all:
        return True

    if os.environ.get('TERM_PROGRAM', '') in ('vscode', 'iTerm.app', 'Apple_Terminal', 'Hyper'):
        return True

    return False


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get appropriate symbol set based on preference or auto-detection.

    Args:
        preference: "unicode", "ascii", or "auto" (None = auto)
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII


def truncate_name(name: str, max_length: int = 10, symbols: Optional[SymbolSet] = None) -> str:
    """
    Clip a repository name for inline display.

    Examples:
        truncate_name("api")                 -> "api"
        truncate_name("payments-gateway")    -> "payments-g…"
    """
    if len(name) <= max_length:
        return name
    ellipsis = symbols.ellipsis if symbols else UNICODE.ellipsis
    return name[:max_length] + ellipsis
