"""Checked role manager.

Every operation is infallible: role types bound through the @bit_role
decorator have had each of their values validated when the class was
defined, so no magnitude reaching this manager needs checking again.

Usage:
    from bit_roles import bit_role

    @bit_role
    class Permission(IntEnum):
        NONE = 0
        SEND_MESSAGE = 1
        EDIT_MESSAGE = 2

    roles = Permission.empty().add_one(Permission.SEND_MESSAGE)
    roles.has_one(Permission.EDIT_MESSAGE)  # False
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, Self, TypeVar

from bit_roles.base import BaseRoleManager
from bit_roles.validation import role_magnitude

R = TypeVar("R")


class RoleManager(BaseRoleManager, Generic[R]):
    """Bitmask of roles whose magnitudes were validated at definition time."""

    __slots__ = ()

    def add_one(self, role: R) -> Self:
        """Add a role. Returns self for chaining."""
        self._value |= role_magnitude(role)
        return self

    def add_all(self, roles: Iterable[R]) -> Self:
        """Add each role in order."""
        for role in roles:
            self.add_one(role)
        return self

    def remove_one(self, role: R) -> Self:
        """Remove a role. Returns self for chaining."""
        self._value &= ~role_magnitude(role)
        return self

    def remove_all(self, roles: Iterable[R]) -> Self:
        """Remove each role in order."""
        for role in roles:
            self.remove_one(role)
        return self

    def has_one(self, role: R) -> bool:
        """Check whether the role is present.

        A role mapping to 0 is never present.
        """
        return self._value & role_magnitude(role) != 0

    def has_all(self, roles: Iterable[R]) -> bool:
        """Check whether every role is present (True for no roles)."""
        return all(self.has_one(role) for role in roles)

    def has_any(self, roles: Iterable[R]) -> bool:
        """Check whether at least one role is present (False for no roles)."""
        return any(self.has_one(role) for role in roles)

    def not_one(self, role: R) -> bool:
        return not self.has_one(role)

    def not_all(self, roles: Iterable[R]) -> bool:
        return not self.has_all(roles)

    def not_any(self, roles: Iterable[R]) -> bool:
        return not self.has_any(roles)
