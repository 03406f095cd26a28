"""Shared state for role managers.

A manager holds exactly one field: the integer bitmask of the roles it
contains. The role type it was created for is a typing-only parameter
(``RoleManager[Permission]``) with no runtime representation, so two
managers compare equal whenever their bitmasks are equal.
"""

from __future__ import annotations

import operator
from typing import Self


class BaseRoleManager:
    """Integer bitmask container shared by checked and unchecked managers."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = operator.index(value)

    @classmethod
    def empty(cls) -> Self:
        """Create a manager holding no roles."""
        return cls(0)

    @classmethod
    def from_value(cls, value: int) -> Self:
        """Create a manager from a stored role combination.

        The value is a combination of roles rather than a single role, so
        it is not validated.
        """
        return cls(value)

    def get_value(self) -> int:
        """Get the current bitmask."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseRoleManager):
            return NotImplemented
        return self._value == other._value

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value:#b})"
