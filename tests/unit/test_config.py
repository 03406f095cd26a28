"""
Unit Tests for Unchecked Manager Configuration
==============================================

Tests for RoleManagerConfig and env-based loading.
"""

import pytest
from pydantic import ValidationError

from bit_roles import HasAllMode, RoleManagerConfig, UncheckedRoleManager, get_config
from bit_roles.config import clear_config


class TestRoleManagerConfig:
    """Tests for the config model."""

    def test_defaults(self):
        config = RoleManagerConfig()

        assert config.has_all_mode is HasAllMode.CONJUNCTION
        assert config.atomic_batches is False

    def test_is_frozen(self):
        config = RoleManagerConfig()

        with pytest.raises(ValidationError):
            config.atomic_batches = True

    def test_rejects_unknown_mode(self):
        with pytest.raises(ValidationError):
            RoleManagerConfig(has_all_mode="first")


class TestFromEnv:
    """Tests for loading config from BIT_ROLES_* variables."""

    def test_no_env_gives_defaults(self):
        assert get_config() == RoleManagerConfig()

    @pytest.mark.parametrize("raw", ["last", "LAST", " last "])
    def test_has_all_mode(self, monkeypatch, raw):
        monkeypatch.setenv("BIT_ROLES_HAS_ALL_MODE", raw)

        assert RoleManagerConfig.from_env().has_all_mode is HasAllMode.LAST

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("1", True), ("false", False), ("0", False)],
    )
    def test_atomic_batches(self, monkeypatch, raw, expected):
        monkeypatch.setenv("BIT_ROLES_ATOMIC_BATCHES", raw)

        assert RoleManagerConfig.from_env().atomic_batches is expected

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("BIT_ROLES_ATOMIC_BATCHES", "sometimes")

        with pytest.raises(ValidationError):
            RoleManagerConfig.from_env()

    def test_get_config_is_cached(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("BIT_ROLES_HAS_ALL_MODE", "last")

        assert get_config() is first

        clear_config()
        assert get_config().has_all_mode is HasAllMode.LAST


class TestManagerConfig:
    """Managers resolve config lazily unless given one."""

    def test_explicit_config_wins(self, monkeypatch):
        monkeypatch.setenv("BIT_ROLES_HAS_ALL_MODE", "last")
        config = RoleManagerConfig()

        roles = UncheckedRoleManager.empty(config=config)

        assert roles.config is config

    def test_default_config_is_global(self):
        assert UncheckedRoleManager.empty().config is get_config()
