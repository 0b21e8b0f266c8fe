"""Tracking layer: side effects that follow the active repository."""

from .tint import TintStateMachine, tint_colors, apply_tint, TINT_KEYS
from .advisory import WarningDeduplicator, warning_key, format_advisory

__all__ = [
    'TintStateMachine', 'tint_colors', 'apply_tint', 'TINT_KEYS',
    'WarningDeduplicator', 'warning_key', 'format_advisory',
]
