"""Role values for the unchecked manager.

A RoleValue is either a symbolic role (Role) or a raw integer magnitude
(Raw). Both normalise to an integer through the same rule, and two role
values are equal whenever their magnitudes are equal:

    >>> Role(Permission.EDIT_MESSAGE) == Raw(2)
    True
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bit_roles.validation import role_magnitude, validate_role

R = TypeVar("R")


class RoleValue(ABC, Generic[R]):
    """Tagged union of a symbolic role or a raw integer magnitude."""

    __slots__ = ()

    @property
    @abstractmethod
    def magnitude(self) -> int:
        """Normalised integer magnitude of the role."""

    @staticmethod
    def from_role(role: R) -> Role[R]:
        """Wrap a role without validating it."""
        return Role(role)

    @staticmethod
    def try_from_role(role: R) -> Role[R]:
        """Wrap a role, validating its magnitude.

        Raises:
            InvalidRoleError: If the role maps to neither zero nor a power of two
        """
        value = Role(role)
        validate_role(value.magnitude)
        return value

    @staticmethod
    def from_int(value: int) -> Raw:
        """Wrap a raw magnitude without validating it."""
        return Raw(value)

    @staticmethod
    def try_from_int(value: int) -> Raw:
        """Wrap a raw magnitude, validating it.

        Raises:
            InvalidRoleError: If the value is neither zero nor a power of two
        """
        return Raw(validate_role(operator.index(value)))

    from_usize = from_int
    try_from_usize = try_from_int

    @staticmethod
    def of(value: Any) -> RoleValue[Any]:
        """Return value if it already is a RoleValue, else wrap it as a Role."""
        if isinstance(value, RoleValue):
            return value
        return Role(value)

    def __int__(self) -> int:
        return self.magnitude

    def __index__(self) -> int:
        return self.magnitude

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoleValue):
            return NotImplemented
        return self.magnitude == other.magnitude

    def __hash__(self) -> int:
        return hash(self.magnitude)


@dataclass(frozen=True, eq=False)
class Role(RoleValue[R]):
    """A symbolic role, normalised through role_magnitude()."""

    role: R

    @property
    def magnitude(self) -> int:
        return role_magnitude(self.role)


@dataclass(frozen=True, eq=False)
class Raw(RoleValue[Any]):
    """A raw integer role magnitude."""

    value: int

    @property
    def magnitude(self) -> int:
        return operator.index(self.value)
