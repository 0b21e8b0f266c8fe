"""
Prompts — Interactive primitives for commands

Every prompt returns None when the user cancels (Ctrl-C / Ctrl-D, or
'q' where noted). Commands treat None as "abandon the whole action".
"""

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .symbols import SymbolSet, get_symbols, safe_print


CANCEL_WORDS = ("q", "quit")
KEEP_WORD = "."


@dataclass
class PickItem:
    """One entry in a multi-select list."""
    label: str
    description: str = ""
    detail: Optional[str] = None
    picked: bool = False


class TerminalPrompter:
    """
    Terminal implementation of show-text / show-warning / choose.

    input_fn and output are injectable so tests can script a session.
    """

    def __init__(
        self,
        symbols: Optional[SymbolSet] = None,
        input_fn: Callable[[str], str] = input,
        output=None,
    ):
        self.symbols = symbols or get_symbols()
        self.input_fn = input_fn
        self.output = output

    def _print(self, text: str):
        safe_print(text, file=self.output or sys.stdout)

    def _read(self, prompt: str = "> ") -> Optional[str]:
        try:
            return self.input_fn(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            self._print("")
            return None

    def show_info(self, message: str):
        self._print(message)

    def show_warning(self, message: str):
        self._print(f"{self.symbols.check_warn} {message}")

    def choose_one(self, options: Sequence[str], title: str, placeholder: str = "") -> Optional[str]:
        """
        Single choice by number or exact name. Blank or 'q' cancels.
        """
        self._print(title)
        if placeholder:
            self._print(f"  ({placeholder})")
        for i, option in enumerate(options, 1):
            self._print(f"  {i}. {self.symbols.icon(option)} {option}")

        choice = self._read()
        if not choice or choice.lower() in CANCEL_WORDS:
            return None
        if choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return options[idx]
            return None
        return choice if choice in options else None

    def choose_many(self, items: Sequence[PickItem], placeholder: str = "") -> Optional[List[str]]:
        """
        Multi-select by comma-separated numbers or labels.

        Blank keeps the pre-picked entries, '-' selects nothing,
        'q' cancels. Any token that names no entry cancels too, so a
        typo never replaces the selection.
        """
        if placeholder:
            self._print(placeholder)
        for i, item in enumerate(items, 1):
            mark = "x" if item.picked else " "
            line = f"  [{mark}] {i}. {item.label}"
            if item.description:
                line += f"  {item.description}"
            if item.detail:
                line += f"  ({item.detail})"
            self._print(line)

        choice = self._read()
        if choice is None or choice.lower() in CANCEL_WORDS:
            return None
        if not choice:
            return [item.label for item in items if item.picked]
        if choice == "-":
            return []

        labels = [item.label for item in items]
        selected: List[str] = []
        for part in choice.split(","):
            part = part.strip()
            if not part:
                continue
            if part.isdigit() and 0 < int(part) <= len(items):
                label = labels[int(part) - 1]
            elif part in labels:
                label = part
            else:
                self._print(f"Unknown selection: {part}")
                return None
            if label not in selected:
                selected.append(label)
        return selected

    def ask_text(self, title: str, prompt: str, value: str = "") -> Optional[str]:
        """
        Free-text input. Blank clears, KEEP_WORD keeps the current value.
        """
        self._print(title)
        self._print(f"  {prompt}")
        self._print(f"  Current: {value or '(empty)'}  ('{KEEP_WORD}' keeps it, blank clears)")
        answer = self._read()
        if answer is None:
            return None
        if answer == KEEP_WORD:
            return value
        return answer
