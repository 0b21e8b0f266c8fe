"""
Configuration — Workspace-scoped settings

All settings live in the workspace (.sentinel/config.yaml); nothing is
stored globally. Values are addressed with dot keys ("section.setting"):

    sentinel.enable_status_bar_tint   bool, default true
    sentinel.repo_rules               repo -> {prod, dev, neutral}
    sentinel.pinned_repos             list of repo names
    sentinel.icon_prod / icon_dev / icon_neutral
    sentinel.poll_interval            seconds between polls
    display.symbols                   unicode | ascii | auto
    workbench.color_customizations    written by the tint only

Environment overrides:
    SENTINEL_POLL_INTERVAL
"""

import os
import copy
import logging
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .core.rules import RuleSet, REPO_RULES_KEY
from .presentation.symbols import (
    ICON_CHOICES, DEFAULT_ICON_PROD, DEFAULT_ICON_DEV, DEFAULT_ICON_NEUTRAL, get_symbols,
)


TINT_ENABLED_KEY = "sentinel.enable_status_bar_tint"
PINNED_KEY = "sentinel.pinned_repos"
ICON_PROD_KEY = "sentinel.icon_prod"
ICON_DEV_KEY = "sentinel.icon_dev"
ICON_NEUTRAL_KEY = "sentinel.icon_neutral"
POLL_INTERVAL_KEY = "sentinel.poll_interval"
SYMBOLS_KEY = "display.symbols"
COLOR_CUSTOMIZATIONS_KEY = "workbench.color_customizations"

DEFAULT_POLL_INTERVAL = 2.0
TRUE_WORDS = ('true', '1', 'yes', 'on')
FALSE_WORDS = ('false', '0', 'no', 'off')

logger = logging.getLogger('sentinel.config')


class SentinelError(Exception):
    """Fatal setup problem (missing workspace, git unavailable)."""


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"
        return None


@dataclass
class IconConfig:
    """Icon names per rule mode."""
    prod: str = DEFAULT_ICON_PROD
    dev: str = DEFAULT_ICON_DEV
    neutral: str = DEFAULT_ICON_NEUTRAL


@dataclass
class SentinelConfig:
    """
    Typed snapshot of the workspace configuration.

    Read once per update cycle. Every field has a default so a missing
    or partial config file behaves like a fresh workspace. Values that
    cannot be read as their type fall back to the default with a
    warning in the log.
    """
    tint_enabled: bool = True
    icons: IconConfig = field(default_factory=IconConfig)
    repo_rules: Dict[str, RuleSet] = field(default_factory=dict)
    pinned_repos: List[str] = field(default_factory=list)
    poll_interval: float = DEFAULT_POLL_INTERVAL
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SentinelConfig':
        """Create from the raw YAML mapping."""
        sentinel = _section(data, "sentinel")
        display = _section(data, "display")

        pinned = sentinel.get("pinned_repos") or []
        if isinstance(pinned, str):
            pinned = pinned.split(",")
        elif not isinstance(pinned, list):
            logger.warning("Ignoring %s: expected a list, got %r", PINNED_KEY, pinned)
            pinned = []

        rules = sentinel.get("repo_rules") or {}
        if not isinstance(rules, dict):
            logger.warning("Ignoring %s: expected a mapping, got %r", REPO_RULES_KEY, rules)
            rules = {}

        return cls(
            tint_enabled=_to_bool(
                sentinel.get("enable_status_bar_tint", True), True, TINT_ENABLED_KEY),
            icons=IconConfig(
                prod=_to_icon(sentinel.get("icon_prod"), DEFAULT_ICON_PROD, ICON_PROD_KEY),
                dev=_to_icon(sentinel.get("icon_dev"), DEFAULT_ICON_DEV, ICON_DEV_KEY),
                neutral=_to_icon(sentinel.get("icon_neutral"), DEFAULT_ICON_NEUTRAL, ICON_NEUTRAL_KEY),
            ),
            repo_rules={str(name): RuleSet.from_dict(r) for name, r in rules.items()},
            pinned_repos=[str(name).strip() for name in pinned if name and str(name).strip()],
            poll_interval=_to_interval(
                sentinel.get("poll_interval", DEFAULT_POLL_INTERVAL), DEFAULT_POLL_INTERVAL, POLL_INTERVAL_KEY),
            display=_to_display(display.get("symbols", "auto")),
        )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring config section %s: expected a mapping, got %r", name, section)
        return {}
    return section


def _to_bool(value: Any, default: bool, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    logger.warning("Ignoring %s=%r: not a boolean, using %s", key, value, default)
    return default


def _to_interval(value: Any, default: float, key: str) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r: not a number, using %g", key, value, default)
        return default
    if seconds <= 0:
        logger.warning("Ignoring %s=%r: must be > 0, using %g", key, value, default)
        return default
    return seconds


def _to_icon(value: Any, default: str, key: str) -> str:
    if not value:
        return default
    name = str(value).strip()
    if name not in ICON_CHOICES:
        logger.warning("Ignoring %s=%r: unknown icon, using %s", key, value, default)
        return default
    return name


def _to_display(symbols: Any) -> DisplayConfig:
    config = DisplayConfig(symbols=str(symbols).strip().lower())
    error = config.validate()
    if error:
        logger.warning("Ignoring %s: %s", SYMBOLS_KEY, error)
        return DisplayConfig()
    return config


def _get_float_env(key: str, default: Optional[float]) -> Optional[float]:
    value = os.environ.get(key, "")
    if value:
        try:
            seconds = float(value)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", key, value)
            return default
        if seconds <= 0:
            logger.warning("Ignoring %s=%r: must be > 0", key, value)
            return default
        return seconds
    return default


class ConfigManager:
    """
    Key-value configuration store backed by .sentinel/config.yaml.

    get()/update() work on dot keys and are the only primitives the
    engine needs; snapshot() gives the typed view.
    """

    CONFIG_DIR = ".sentinel"
    CONFIG_FILE = "config.yaml"

    def __init__(self, workspace_dir: Optional[Path] = None):
        self.workspace_dir = Path(workspace_dir) if workspace_dir else Path.cwd()
        self._data: Optional[Dict[str, Any]] = None

    @property
    def config_path(self) -> Path:
        return self.workspace_dir / self.CONFIG_DIR / self.CONFIG_FILE

    def load(self) -> Dict[str, Any]:
        """Raw configuration mapping (cached until reload())."""
        if self._data is not None:
            return self._data

        data: Dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path) as f:
                    loaded = yaml.safe_load(f) or {}
                if isinstance(loaded, dict):
                    data = loaded
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring malformed config %s: %s", self.config_path, e)

        self._data = data
        return self._data

    def reload(self) -> Dict[str, Any]:
        """Drop the cache and re-read the file (picks up external edits)."""
        self._data = None
        return self.load()

    def save(self):
        """Write the whole mapping back to disk."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.safe_dump(self.load(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        logger.debug("Saved %s", self.config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dot key, or default. Returned containers are copies."""
        node: Any = self.load()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return copy.deepcopy(node)

    def update(self, key: str, value: Any):
        """Set a dot key and persist; None removes the key."""
        data = self.load()
        parts = key.split(".")
        node = data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child

        if value is None:
            node.pop(parts[-1], None)
        else:
            node[parts[-1]] = copy.deepcopy(value)
        self.save()

    def snapshot(self) -> SentinelConfig:
        """Typed configuration, with environment overrides applied."""
        config = SentinelConfig.from_dict(self.load())
        config.poll_interval = _get_float_env("SENTINEL_POLL_INTERVAL", config.poll_interval)
        return config

    def set(self, key: str, value: str) -> Optional[str]:
        """
        Set a user-facing setting from a string.

        Args:
            key: Dot-separated key (e.g., "sentinel.icon_prod")
            value: Value to set

        Returns:
            Error message or None if successful
        """
        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'sentinel.icon_prod')"

        if key == TINT_ENABLED_KEY:
            flag = value.strip().lower()
            if flag not in TRUE_WORDS + FALSE_WORDS:
                return f"Invalid boolean: {value}. Use one of: {', '.join(TRUE_WORDS + FALSE_WORDS)}"
            self.update(key, flag in TRUE_WORDS)
        elif key in (ICON_PROD_KEY, ICON_DEV_KEY, ICON_NEUTRAL_KEY):
            icon = value.strip()
            if icon not in ICON_CHOICES:
                return f"Unknown icon '{icon}'. Valid: {', '.join(ICON_CHOICES)}"
            self.update(key, icon)
        elif key == POLL_INTERVAL_KEY:
            try:
                seconds = float(value)
            except ValueError:
                return f"Invalid number: {value}"
            if seconds <= 0:
                return "sentinel.poll_interval must be > 0"
            self.update(key, seconds)
        elif key == PINNED_KEY:
            names = [n.strip() for n in value.split(",") if n.strip()]
            self.update(key, names)
        elif key == SYMBOLS_KEY:
            error = DisplayConfig(symbols=value).validate()
            if error:
                return error
            self.update(key, value)
        elif key in (REPO_RULES_KEY, COLOR_CUSTOMIZATIONS_KEY):
            return f"{key} is managed by 'sentinel rules' / 'sentinel mark' and the tint"
        else:
            valid = ", ".join((TINT_ENABLED_KEY, ICON_PROD_KEY, ICON_DEV_KEY, ICON_NEUTRAL_KEY,
                               POLL_INTERVAL_KEY, PINNED_KEY, SYMBOLS_KEY))
            return f"Unknown setting: {key}. Valid: {valid}"

        return None

    def display(self) -> str:
        """Format config for display."""
        config = self.snapshot()
        symbols = get_symbols(config.display.symbols)

        tint = f"{symbols.check_pass} Enabled" if config.tint_enabled else f"{symbols.check_fail} Disabled"
        lines = [
            "Configuration:",
            "",
            "Tint:",
            f"  Status bar tint: {tint}",
            "",
            "Icons:",
            f"  Prod: {config.icons.prod} {symbols.icon(config.icons.prod)}",
            f"  Dev: {config.icons.dev} {symbols.icon(config.icons.dev)}",
            f"  Neutral: {config.icons.neutral} {symbols.icon(config.icons.neutral)}",
            "",
            "Tracked repos:",
            f"  {', '.join(config.pinned_repos) if config.pinned_repos else '(none)'}",
            "",
            "Repo rules:",
        ]

        if not config.repo_rules:
            lines.append("  (none)")
        for name, rules in config.repo_rules.items():
            lines.append(f"  {name}:")
            lines.append(f"    prod: {', '.join(rules.prod) or '-'}")
            lines.append(f"    dev: {', '.join(rules.dev) or '-'}")
            lines.append(f"    neutral: {', '.join(rules.neutral) or '-'}")

        lines.extend([
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            f"  Poll interval: {config.poll_interval:g}s",
            "",
            "Config file:",
            f"  {self.config_path}",
        ])

        return "\n".join(lines)


# Convenience function
def get_config(workspace_dir: Optional[Path] = None) -> SentinelConfig:
    """Load configuration for a workspace."""
    return ConfigManager(workspace_dir).snapshot()
