"""Runtime configuration for unchecked role managers.

Settings are read from environment variables once and cached:

- BIT_ROLES_HAS_ALL_MODE: "conjunction" (default) or "last".
  "last" reproduces the historical try_has_all behaviour, which returns
  the result of the last evaluated role instead of the AND of all roles.
- BIT_ROLES_ATOMIC_BATCHES: "true" to pre-validate batch mutations so a
  failing batch leaves the manager untouched. Defaults to "false":
  elements applied before the failing one stay applied.

Managers can also be handed an explicit RoleManagerConfig, which bypasses
the environment entirely.
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

HAS_ALL_MODE_ENV = "BIT_ROLES_HAS_ALL_MODE"
ATOMIC_BATCHES_ENV = "BIT_ROLES_ATOMIC_BATCHES"


class HasAllMode(StrEnum):
    """Evaluation strategy for UncheckedRoleManager.try_has_all."""

    CONJUNCTION = "conjunction"
    LAST = "last"


class RoleManagerConfig(BaseModel):
    """Behaviour switches for unchecked role managers."""

    model_config = ConfigDict(frozen=True)

    has_all_mode: HasAllMode = HasAllMode.CONJUNCTION
    atomic_batches: bool = False

    @classmethod
    def from_env(cls) -> RoleManagerConfig:
        """Build a config from BIT_ROLES_* environment variables.

        Raises:
            pydantic.ValidationError: If a variable holds an unsupported value
        """
        values: dict[str, str] = {}
        if HAS_ALL_MODE_ENV in os.environ:
            values["has_all_mode"] = os.environ[HAS_ALL_MODE_ENV].strip().lower()
        if ATOMIC_BATCHES_ENV in os.environ:
            values["atomic_batches"] = os.environ[ATOMIC_BATCHES_ENV].strip()
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_config() -> RoleManagerConfig:
    """Get the process-wide config, loading it from the environment once."""
    config = RoleManagerConfig.from_env()
    logger.debug(
        "Loaded bit roles config",
        extra={
            "has_all_mode": config.has_all_mode.value,
            "atomic_batches": config.atomic_batches,
        },
    )
    return config


def clear_config() -> None:
    """Drop the cached config so the next get_config() rereads env. Used in tests."""
    get_config.cache_clear()
