"""
Pytest Configuration and Shared Fixtures
=========================================

Common fixtures used across all test modules.

For Developers:
    - Import fixtures by name in test files (pytest auto-discovers conftest.py)
    - Role enums live in tests/fixtures/roles.py
    - The unchecked manager config is cached process-wide; the autouse
      fixture below clears it so env changes in one test never leak
"""

import os

import pytest

from bit_roles import (
    HasAllMode,
    RoleManager,
    RoleManagerConfig,
    UncheckedRoleManager,
    clear_config,
)
from bit_roles.config import ATOMIC_BATCHES_ENV, HAS_ALL_MODE_ENV
from tests.fixtures.roles import ComplexPermission, Permission

# Unit tests run against the default config unless a test opts in
os.environ.pop(HAS_ALL_MODE_ENV, None)
os.environ.pop(ATOMIC_BATCHES_ENV, None)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables and cached config around each test.

    Ensures tests don't pollute each other's environment.
    """
    original_env = os.environ.copy()
    clear_config()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    clear_config()


@pytest.fixture
def empty_roles() -> RoleManager[Permission]:
    """Checked manager with no roles."""
    return Permission.empty()


@pytest.fixture
def unchecked_roles() -> UncheckedRoleManager[ComplexPermission]:
    """Unchecked manager with no roles and the default config."""
    return ComplexPermission.empty()


@pytest.fixture
def atomic_config() -> RoleManagerConfig:
    """Config with all-or-nothing batch mutations."""
    return RoleManagerConfig(atomic_batches=True)


@pytest.fixture
def legacy_has_all_config() -> RoleManagerConfig:
    """Config reproducing the last-result try_has_all behaviour."""
    return RoleManagerConfig(has_all_mode=HasAllMode.LAST)
