"""
Tests for Configuration — workspace-scoped settings

These tests validate:
- Defaults for a fresh workspace
- Dot-key get/update persisted as YAML
- set() validation of user-facing keys
- Environment overrides
- Coercion of hand-edited values with logged fallbacks
"""

import yaml
import pytest

from sentinel.config import (
    ConfigManager, SentinelConfig, IconConfig, DisplayConfig, get_config,
    TINT_ENABLED_KEY, PINNED_KEY, ICON_PROD_KEY, POLL_INTERVAL_KEY, SYMBOLS_KEY,
    COLOR_CUSTOMIZATIONS_KEY, DEFAULT_POLL_INTERVAL,
)
from sentinel.core.rules import RuleSet, REPO_RULES_KEY


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path)


class TestDefaults:

    def test_fresh_workspace(self, manager):
        config = manager.snapshot()

        assert config.tint_enabled is True
        assert config.icons == IconConfig("shield", "tools", "git-branch")
        assert config.repo_rules == {}
        assert config.pinned_repos == []
        assert config.poll_interval == DEFAULT_POLL_INTERVAL
        assert config.display.symbols == "auto"

    def test_no_file_written_on_read(self, manager):
        manager.snapshot()
        assert not manager.config_path.exists()

    def test_get_config(self, tmp_path):
        assert isinstance(get_config(tmp_path), SentinelConfig)


class TestStore:

    def test_update_persists_yaml(self, manager):
        manager.update(PINNED_KEY, ["api", "web"])

        with open(manager.config_path) as f:
            data = yaml.safe_load(f)
        assert data["sentinel"]["pinned_repos"] == ["api", "web"]

    def test_round_trip_through_new_manager(self, manager, tmp_path):
        manager.update(REPO_RULES_KEY, {"api": {"prod": ["release/*"], "dev": [], "neutral": []}})
        manager.update(TINT_ENABLED_KEY, False)

        config = ConfigManager(tmp_path).snapshot()
        assert config.tint_enabled is False
        assert config.repo_rules == {"api": RuleSet(prod=["release/*"])}

    def test_get_returns_copies(self, manager):
        manager.update(PINNED_KEY, ["api"])
        pins = manager.get(PINNED_KEY)
        pins.append("web")
        assert manager.get(PINNED_KEY) == ["api"]

    def test_get_missing(self, manager):
        assert manager.get("sentinel.nothing", "x") == "x"
        assert manager.get(COLOR_CUSTOMIZATIONS_KEY) is None

    def test_update_none_removes(self, manager):
        manager.update(PINNED_KEY, ["api"])
        manager.update(PINNED_KEY, None)
        assert manager.get(PINNED_KEY) is None

    def test_reload_sees_external_edits(self, manager):
        manager.update(PINNED_KEY, ["api"])
        manager.config_path.write_text("sentinel:\n  pinned_repos: [docs]\n")

        assert manager.get(PINNED_KEY) == ["api"]
        manager.reload()
        assert manager.get(PINNED_KEY) == ["docs"]

    def test_malformed_file_is_ignored(self, manager):
        manager.config_path.parent.mkdir(parents=True)
        manager.config_path.write_text("sentinel: [unclosed\n")

        assert manager.snapshot().tint_enabled is True


class TestSet:

    def test_tint_flag(self, manager):
        assert manager.set(TINT_ENABLED_KEY, "off") is None
        assert manager.get(TINT_ENABLED_KEY) is False
        assert manager.set(TINT_ENABLED_KEY, "true") is None
        assert manager.get(TINT_ENABLED_KEY) is True

    def test_tint_flag_rejects_other_words(self, manager):
        assert "Invalid boolean" in manager.set(TINT_ENABLED_KEY, "maybe")
        assert manager.get(TINT_ENABLED_KEY) is None

    def test_icon(self, manager):
        assert manager.set(ICON_PROD_KEY, "rocket") is None
        assert manager.snapshot().icons.prod == "rocket"

    def test_unknown_icon(self, manager):
        error = manager.set(ICON_PROD_KEY, "unicorn")
        assert "Unknown icon" in error
        assert manager.get(ICON_PROD_KEY) is None

    def test_poll_interval(self, manager):
        assert manager.set(POLL_INTERVAL_KEY, "5") is None
        assert manager.snapshot().poll_interval == 5.0
        assert manager.set(POLL_INTERVAL_KEY, "0") is not None
        assert manager.set(POLL_INTERVAL_KEY, "soon") is not None

    def test_pinned_list(self, manager):
        assert manager.set(PINNED_KEY, "api, web,,") is None
        assert manager.get(PINNED_KEY) == ["api", "web"]

    def test_symbols(self, manager):
        assert manager.set(SYMBOLS_KEY, "ascii") is None
        assert manager.set(SYMBOLS_KEY, "emoji") is not None

    def test_managed_keys_rejected(self, manager):
        assert manager.set(REPO_RULES_KEY, "x") is not None
        assert manager.set(COLOR_CUSTOMIZATIONS_KEY, "x") is not None

    def test_bad_keys(self, manager):
        assert "Invalid key format" in manager.set("tint", "on")
        assert "Unknown setting" in manager.set("sentinel.colour", "red")


class TestCoercion:
    """Hand-edited values that do not parse fall back to defaults."""

    def write(self, manager, text):
        manager.config_path.parent.mkdir(parents=True)
        manager.config_path.write_text(text)

    def test_display_validate(self):
        assert DisplayConfig("unicode").validate() is None
        assert DisplayConfig("fancy").validate() is not None

    def test_quoted_false_disables_tint(self, manager):
        self.write(manager, 'sentinel:\n  enable_status_bar_tint: "false"\n')
        assert manager.snapshot().tint_enabled is False

    def test_boolean_words(self):
        for raw, expected in (("off", False), ("0", False), ("yes", True), ("ON", True), (0, False)):
            data = {"sentinel": {"enable_status_bar_tint": raw}}
            assert SentinelConfig.from_dict(data).tint_enabled is expected

    def test_unreadable_boolean_uses_default(self, caplog):
        config = SentinelConfig.from_dict({"sentinel": {"enable_status_bar_tint": "maybe"}})

        assert config.tint_enabled is True
        assert "enable_status_bar_tint" in caplog.text

    def test_non_numeric_interval_uses_default(self, manager, caplog):
        self.write(manager, "sentinel:\n  poll_interval: fast\n")

        assert manager.snapshot().poll_interval == DEFAULT_POLL_INTERVAL
        assert "poll_interval" in caplog.text

    def test_non_positive_interval_uses_default(self):
        for raw in (0, -1, "0"):
            config = SentinelConfig.from_dict({"sentinel": {"poll_interval": raw}})
            assert config.poll_interval == DEFAULT_POLL_INTERVAL

    def test_numeric_string_interval(self):
        assert SentinelConfig.from_dict({"sentinel": {"poll_interval": "0.5"}}).poll_interval == 0.5

    def test_unknown_icon_uses_default(self):
        config = SentinelConfig.from_dict({"sentinel": {"icon_prod": "unicorn", "icon_dev": "bug"}})
        assert config.icons == IconConfig("shield", "bug", "git-branch")

    def test_unknown_symbols_uses_auto(self):
        assert SentinelConfig.from_dict({"display": {"symbols": "fancy"}}).display.symbols == "auto"

    def test_malformed_sections_ignored(self):
        config = SentinelConfig.from_dict({
            "sentinel": {"pinned_repos": "web, docs", "repo_rules": ["api"]},
            "display": "ascii",
        })

        assert config.pinned_repos == ["web", "docs"]
        assert config.repo_rules == {}
        assert config.display.symbols == "auto"

    def test_rules_with_scalar_bucket(self):
        config = SentinelConfig.from_dict({"sentinel": {"repo_rules": {"api": {"prod": "main", "dev": 3}}}})
        assert config.repo_rules["api"] == RuleSet(prod=["main"])


class TestEnvironment:

    def test_poll_interval_override(self, manager, monkeypatch):
        monkeypatch.setenv("SENTINEL_POLL_INTERVAL", "0.5")
        assert manager.snapshot().poll_interval == 0.5

    def test_non_numeric_override_ignored(self, manager, monkeypatch):
        monkeypatch.setenv("SENTINEL_POLL_INTERVAL", "fast")
        assert manager.snapshot().poll_interval == DEFAULT_POLL_INTERVAL

    def test_non_positive_override_ignored(self, manager, monkeypatch):
        monkeypatch.setenv("SENTINEL_POLL_INTERVAL", "0")
        assert manager.snapshot().poll_interval == DEFAULT_POLL_INTERVAL


class TestDisplay:

    def test_lists_settings(self, manager):
        manager.update(SYMBOLS_KEY, "ascii")
        manager.update(REPO_RULES_KEY, {"api": {"prod": ["main"], "dev": [], "neutral": []}})

        text = manager.display()

        assert "[OK] Enabled" in text
        assert "  api:" in text
        assert "    prod: main" in text
        assert "    dev: -" in text
        assert str(manager.config_path) in text
