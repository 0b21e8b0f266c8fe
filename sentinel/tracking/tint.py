"""
Tint — Workspace status bar colours following the active repository

The tint is three keys in workbench.color_customizations. Other keys in
that map belong to the user and are left untouched. Neutral removes the
three keys so the ambient theme shows through.

Writes are memoized twice:
- by mode: the same mode is never painted twice in a row
- by content: an unchanged map is never written back
"""

import logging
from typing import Dict, Optional, Any

import orjson

from ..config import COLOR_CUSTOMIZATIONS_KEY
from ..core.modes import Mode


BACKGROUND_KEY = "statusBar.background"
FOREGROUND_KEY = "statusBar.foreground"
DEBUGGING_BACKGROUND_KEY = "statusBar.debuggingBackground"
TINT_KEYS = (BACKGROUND_KEY, FOREGROUND_KEY, DEBUGGING_BACKGROUND_KEY)

TINT_FOREGROUND = "#ffffff"

# Neutral is absent: it clears the tint
TINT_BACKGROUNDS: Dict[Mode, str] = {
    Mode.PROD: "#7a1111",     # dark red
    Mode.DEV: "#0f6b2f",      # dark green
    Mode.UNKNOWN: "#b36b00",  # amber
    Mode.LOCAL: "#5b2b82",    # purple
}

logger = logging.getLogger('sentinel.tint')


def tint_colors(mode: Mode) -> Optional[Dict[str, str]]:
    """Colour triple for a mode, or None when the mode clears the tint."""
    background = TINT_BACKGROUNDS.get(mode)
    if background is None:
        return None
    return {
        BACKGROUND_KEY: background,
        FOREGROUND_KEY: TINT_FOREGROUND,
        DEBUGGING_BACKGROUND_KEY: background,
    }


def apply_tint(current: Dict[str, Any], mode: Mode) -> Dict[str, Any]:
    """New customization map with the tint for mode; current is not modified."""
    result = dict(current)
    colors = tint_colors(mode)
    if colors is None:
        for key in TINT_KEYS:
            result.pop(key, None)
    else:
        result.update(colors)
    return result


class TintStateMachine:
    """
    Paints or clears the tint for the active repository's mode.

    Call apply() once per update cycle. last_applied_mode is the mode
    most recently painted; None means "unknown, paint on next apply".
    """

    def __init__(self, store):
        self.store = store
        self.last_applied_mode: Optional[Mode] = None

    def reset(self):
        """Forget the painted mode (after the tint is toggled)."""
        self.last_applied_mode = None

    def apply(self, mode: Mode, enabled: bool = True) -> bool:
        """
        Bring the workspace tint in line with mode.

        Args:
            mode: Mode of the active repository
            enabled: Tint setting; when False the tint is cleared once

        Returns:
            True if the customization map was written
        """
        if enabled:
            if mode == self.last_applied_mode:
                return False
            target = mode
        else:
            if self.last_applied_mode == Mode.NEUTRAL:
                return False
            target = Mode.NEUTRAL

        wrote = self._paint(target)
        self.last_applied_mode = target
        return wrote

    def _paint(self, mode: Mode) -> bool:
        current = self.store.get(COLOR_CUSTOMIZATIONS_KEY, {}) or {}
        updated = apply_tint(current, mode)

        if orjson.dumps(current) == orjson.dumps(updated):
            logger.debug("Tint already %s, skipping write", mode.value)
            return False

        self.store.update(COLOR_CUSTOMIZATIONS_KEY, updated)
        logger.info("Tint set to %s", mode.value)
        return True
