"""
Tests for Symbols — icon vocabulary and terminal fallback

These tests validate:
- Preference selection and environment detection
- Icon lookup for every configurable name
- Name truncation
- safe_print fallback for non-Unicode streams
"""

import io

import pytest

from sentinel.presentation.symbols import (
    UNICODE, ASCII, ICON_CHOICES, ICON_LOCAL, ICON_UNKNOWN, ICON_SELECT,
    get_symbols, supports_unicode, truncate_name, safe_print,
)


class TestGetSymbols:

    def test_explicit_preference(self):
        assert get_symbols("unicode") is UNICODE
        assert get_symbols("ascii") is ASCII

    def test_ascii_only_env(self, monkeypatch):
        monkeypatch.setenv("SENTINEL_ASCII_ONLY", "1")
        assert supports_unicode() is False
        assert get_symbols("auto") is ASCII

    def test_unicode_env(self, monkeypatch):
        monkeypatch.delenv("SENTINEL_ASCII_ONLY", raising=False)
        monkeypatch.setenv("SENTINEL_UNICODE", "yes")
        assert get_symbols(None) is UNICODE


class TestIcons:

    @pytest.mark.parametrize("symbols", [UNICODE, ASCII])
    def test_every_icon_has_a_glyph(self, symbols):
        for name in ICON_CHOICES + (ICON_LOCAL, ICON_UNKNOWN, ICON_SELECT):
            assert name in symbols.icons

    def test_unknown_icon_renders_name(self):
        assert UNICODE.icon("unicorn") == "(unicorn)"


class TestTruncate:

    def test_short_names_unchanged(self):
        assert truncate_name("api") == "api"
        assert truncate_name("0123456789") == "0123456789"

    def test_long_names_clipped(self):
        assert truncate_name("payments-gateway") == "payments-g…"
        assert truncate_name("payments-gateway", symbols=ASCII) == "payments-g..."


class AsciiStream(io.StringIO):
    """Stream that rejects anything outside ASCII, like a cp437 console."""
    encoding = "ascii"

    def write(self, s):
        s.encode("ascii")
        return super().write(s)


class TestSafePrint:

    def test_plain_output(self):
        out = io.StringIO()
        safe_print("api → main", file=out)
        assert out.getvalue() == "api → main\n"

    def test_falls_back_to_ascii_replacements(self):
        out = AsciiStream()
        safe_print("api → main…", file=out)
        assert out.getvalue() == "api -> main...\n"

    def test_replaces_unknown_characters(self):
        out = AsciiStream()
        safe_print("⛨ api", file=out)
        assert out.getvalue() == "? api\n"
