"""Unchecked role manager.

Same operation surface as RoleManager, but every role is revalidated when
it is used, so role types may compute their magnitudes and raw integers
can be passed as roles.

Two surfaces are exposed:

- try_* methods accept RoleValues (bare roles are wrapped as Role) and
  raise InvalidRoleError for a magnitude that is neither zero nor a power
  of two. A failing single-role call leaves the bitmask unchanged.
- add_one, has_all, ... accept bare roles and raise
  UnexpectedInvalidRoleError instead. Callers of this surface are expected
  to have mapped their roles to valid magnitudes already.

Batch mutations are applied in order and stop at the first invalid role.
Roles applied before it stay applied unless the config enables
atomic_batches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, Self, TypeVar

from bit_roles.base import BaseRoleManager
from bit_roles.config import HasAllMode, RoleManagerConfig, get_config
from bit_roles.errors import InvalidRoleError, UnexpectedInvalidRoleError
from bit_roles.role_value import Role, RoleValue
from bit_roles.validation import validate_role

logger = logging.getLogger(__name__)

R = TypeVar("R")

RoleInput = RoleValue[R] | R

_INVALID_ROLE = "`role` is invalid"
_INVALID_ROLES = "`roles` contain invalid values"


class UncheckedRoleManager(BaseRoleManager, Generic[R]):
    """Bitmask of roles whose magnitudes are validated on every call."""

    __slots__ = ("_config",)

    def __init__(
        self, value: int = 0, *, config: RoleManagerConfig | None = None
    ) -> None:
        super().__init__(value)
        self._config = config

    @classmethod
    def empty(cls, *, config: RoleManagerConfig | None = None) -> Self:
        """Create a manager holding no roles."""
        return cls(0, config=config)

    @classmethod
    def from_value(
        cls, value: int, *, config: RoleManagerConfig | None = None
    ) -> Self:
        """Create a manager from a stored role combination (not validated)."""
        return cls(value, config=config)

    @property
    def config(self) -> RoleManagerConfig:
        return self._config if self._config is not None else get_config()

    @staticmethod
    def _validate(role: RoleInput[R]) -> int:
        return validate_role(RoleValue.of(role).magnitude)

    # ------------------------------------------------------------------
    # Fallible surface
    # ------------------------------------------------------------------

    def try_add_one(self, role: RoleInput[R]) -> Self:
        """Add a role.

        Raises:
            InvalidRoleError: If the role magnitude is invalid. The bitmask
                is left unchanged.
        """
        self._value |= self._validate(role)
        return self

    def try_add_all(self, roles: Iterable[RoleInput[R]]) -> Self:
        """Add each role in order.

        Raises:
            InvalidRoleError: On the first invalid role. Earlier roles stay
                added unless atomic_batches is enabled.
        """
        if self.config.atomic_batches:
            for magnitude in [self._validate(role) for role in roles]:
                self._value |= magnitude
            return self

        for role in roles:
            self.try_add_one(role)
        return self

    def try_remove_one(self, role: RoleInput[R]) -> Self:
        """Remove a role.

        Raises:
            InvalidRoleError: If the role magnitude is invalid. The bitmask
                is left unchanged.
        """
        self._value &= ~self._validate(role)
        return self

    def try_remove_all(self, roles: Iterable[RoleInput[R]]) -> Self:
        """Remove each role in order.

        Raises:
            InvalidRoleError: On the first invalid role. Earlier roles stay
                removed unless atomic_batches is enabled.
        """
        if self.config.atomic_batches:
            for magnitude in [self._validate(role) for role in roles]:
                self._value &= ~magnitude
            return self

        for role in roles:
            self.try_remove_one(role)
        return self

    def try_has_one(self, role: RoleInput[R]) -> bool:
        """Check whether the role is present. A role mapping to 0 never is.

        Raises:
            InvalidRoleError: If the role magnitude is invalid
        """
        return self._value & self._validate(role) != 0

    def try_has_all(self, roles: Iterable[RoleInput[R]]) -> bool:
        """Check whether every role is present.

        With the default "conjunction" mode every role is validated before
        the bitmask is read, then the result is the AND over all roles (True
        for no roles). The "last" mode evaluates every role and returns the
        result for the last one (False for no roles).

        Raises:
            InvalidRoleError: On the first invalid role
        """
        if self.config.has_all_mode is HasAllMode.LAST:
            flag = False
            for role in roles:
                flag = self.try_has_one(role)
            return flag

        magnitudes = [self._validate(role) for role in roles]
        return all(self._value & magnitude != 0 for magnitude in magnitudes)

    def try_has_any(self, roles: Iterable[RoleInput[R]]) -> bool:
        """Check whether at least one role is present (False for no roles).

        Stops at the first present role, so roles after it are not
        validated.

        Raises:
            InvalidRoleError: On the first invalid role evaluated
        """
        for role in roles:
            if self.try_has_one(role):
                return True
        return False

    def try_not_one(self, role: RoleInput[R]) -> bool:
        return not self.try_has_one(role)

    def try_not_all(self, roles: Iterable[RoleInput[R]]) -> bool:
        return not self.try_has_all(roles)

    def try_not_any(self, roles: Iterable[RoleInput[R]]) -> bool:
        return not self.try_has_any(roles)

    # ------------------------------------------------------------------
    # Convenience surface
    # ------------------------------------------------------------------

    def _expect(self, message: str, method: Any, arg: Any) -> Any:
        try:
            return method(arg)
        except InvalidRoleError as e:
            logger.warning(
                "Invalid role reached unchecked manager",
                extra={"value": e.value, "operation": method.__name__},
            )
            raise UnexpectedInvalidRoleError(message) from e

    @staticmethod
    def _to_role_values(roles: Iterable[R]) -> list[Role[R]]:
        return [Role(role) for role in roles]

    def add_one(self, role: R) -> Self:
        return self._expect(_INVALID_ROLE, self.try_add_one, Role(role))

    def add_all(self, roles: Iterable[R]) -> Self:
        return self._expect(
            _INVALID_ROLES, self.try_add_all, self._to_role_values(roles)
        )

    def remove_one(self, role: R) -> Self:
        return self._expect(_INVALID_ROLE, self.try_remove_one, Role(role))

    def remove_all(self, roles: Iterable[R]) -> Self:
        return self._expect(
            _INVALID_ROLES, self.try_remove_all, self._to_role_values(roles)
        )

    def has_one(self, role: R) -> bool:
        return self._expect(_INVALID_ROLE, self.try_has_one, Role(role))

    def has_all(self, roles: Iterable[R]) -> bool:
        return self._expect(
            _INVALID_ROLES, self.try_has_all, self._to_role_values(roles)
        )

    def has_any(self, roles: Iterable[R]) -> bool:
        return self._expect(
            _INVALID_ROLES, self.try_has_any, self._to_role_values(roles)
        )

    def not_one(self, role: R) -> bool:
        return self._expect(_INVALID_ROLE, self.try_not_one, Role(role))

    def not_all(self, roles: Iterable[R]) -> bool:
        return self._expect(
            _INVALID_ROLES, self.try_not_all, self._to_role_values(roles)
        )

    def not_any(self, roles: Iterable[R]) -> bool:
        return self._expect(
            _INVALID_ROLES, self.try_not_any, self._to_role_values(roles)
        )
