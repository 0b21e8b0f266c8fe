"""
Tests for Prompts — scripted terminal sessions

These tests validate:
- choose_one by number or name, cancel on blank / q / EOF
- choose_many keeps, clears or replaces the selection by number or label
- ask_text clears on blank input and keeps the value on "."
"""

import io

from sentinel.presentation.prompts import TerminalPrompter, PickItem
from sentinel.presentation.symbols import UNICODE


def scripted(*answers):
    """Prompter reading answers in order; EOF once they run out."""
    queue = list(answers)
    out = io.StringIO()

    def read(prompt):
        if not queue:
            raise EOFError
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    return TerminalPrompter(UNICODE, input_fn=read, output=out), out


class TestMessages:

    def test_warning_prefix(self):
        prompter, out = scripted()
        prompter.show_warning("Careful")
        assert out.getvalue() == "⚠ Careful\n"


class TestChooseOne:

    def test_by_number(self):
        prompter, out = scripted("2")
        assert prompter.choose_one(["shield", "tools"], "Pick icon for PROD") == "tools"
        assert "Pick icon for PROD" in out.getvalue()
        assert "2. ⚒ tools" in out.getvalue()

    def test_by_name(self):
        prompter, _ = scripted("shield")
        assert prompter.choose_one(["shield", "tools"], "Pick") == "shield"

    def test_cancel(self):
        for answer in ("", "q", EOFError(), KeyboardInterrupt()):
            prompter, _ = scripted(answer)
            assert prompter.choose_one(["shield"], "Pick") is None

    def test_out_of_range(self):
        prompter, _ = scripted("9")
        assert prompter.choose_one(["shield"], "Pick") is None


class TestChooseMany:

    ITEMS = [
        PickItem("api", "main", picked=True),
        PickItem("web", "dev"),
        PickItem("tools", "main", detail="local-only (no remote)"),
    ]

    def test_selects_numbers_in_order(self):
        prompter, _ = scripted("3, 1, 3")
        assert prompter.choose_many(self.ITEMS) == ["tools", "api"]

    def test_selects_by_label(self):
        prompter, _ = scripted("web, tools")
        assert prompter.choose_many(self.ITEMS) == ["web", "tools"]

    def test_mixes_numbers_and_labels(self):
        prompter, _ = scripted("2, api")
        assert prompter.choose_many(self.ITEMS) == ["web", "api"]

    def test_unknown_label_cancels(self):
        prompter, out = scripted("web, docs")
        assert prompter.choose_many(self.ITEMS) is None
        assert "Unknown selection: docs" in out.getvalue()

    def test_out_of_range_number_cancels(self):
        for answer in ("1, 4", "0"):
            prompter, _ = scripted(answer)
            assert prompter.choose_many(self.ITEMS) is None

    def test_blank_keeps_current_picks(self):
        prompter, _ = scripted("")
        assert prompter.choose_many(self.ITEMS) == ["api"]

    def test_dash_selects_nothing(self):
        prompter, _ = scripted("-")
        assert prompter.choose_many(self.ITEMS) == []

    def test_cancel(self):
        prompter, _ = scripted("q")
        assert prompter.choose_many(self.ITEMS) is None
        prompter, _ = scripted()
        assert prompter.choose_many(self.ITEMS) is None

    def test_renders_marks(self):
        prompter, out = scripted("")
        prompter.choose_many(self.ITEMS, placeholder="Select repos")
        text = out.getvalue()
        assert "[x] 1. api  main" in text
        assert "[ ] 3. tools  main  (local-only (no remote))" in text


class TestAskText:

    def test_answer(self):
        prompter, _ = scripted("main, release/*")
        assert prompter.ask_text("Rules", "PROD branches", "main") == "main, release/*"

    def test_blank_clears(self):
        prompter, _ = scripted("")
        assert prompter.ask_text("Rules", "PROD branches", "main") == ""

    def test_keep_word_keeps_value(self):
        prompter, out = scripted(".")
        assert prompter.ask_text("Rules", "PROD branches", "main") == "main"
        assert "Current: main  ('.' keeps it, blank clears)" in out.getvalue()

    def test_eof_cancels(self):
        prompter, _ = scripted()
        assert prompter.ask_text("Rules", "PROD branches", "main") is None
