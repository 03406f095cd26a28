"""Role magnitude validation.

A single role is stored as one bit of an integer mask. Its magnitude is
valid when it is zero (the "no role" sentinel) or has exactly one bit set.
Combinations of roles (the state held by a manager) have no such
restriction.
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any

from bit_roles.errors import InvalidRoleError


def is_valid_role(magnitude: int) -> bool:
    """Check whether a magnitude is a legal single-role value.

    Args:
        magnitude: Integer magnitude of the role

    Returns:
        True if the magnitude is zero or a power of two. Negative
        integers are never valid.

    Examples:
        >>> is_valid_role(0), is_valid_role(4), is_valid_role(5)
        (True, True, False)
    """
    return magnitude == 0 or (magnitude > 0 and magnitude & (magnitude - 1) == 0)


def validate_role(magnitude: int) -> int:
    """Return the magnitude unchanged or raise InvalidRoleError."""
    if not is_valid_role(magnitude):
        raise InvalidRoleError(magnitude)
    return magnitude


def role_magnitude(role: Any) -> int:
    """Map a symbolic role to its integer magnitude.

    Integer-like roles (plain ints, IntEnum/IntFlag members, classes
    implementing ``__index__``) map through ``operator.index``. Roles that
    compute their magnitude implement ``__int__``. Plain Enum members with
    an integer value map to that value.

    Args:
        role: The symbolic role

    Returns:
        The integer magnitude (not validated)

    Raises:
        TypeError: If the role has no integer mapping
    """
    # bool is an int subclass and float has __int__, neither is a role
    if isinstance(role, (bool, float)):
        raise TypeError(f"{type(role).__name__} is not a valid role")

    role_cls = type(role)
    if hasattr(role_cls, "__index__"):
        return operator.index(role)
    if hasattr(role_cls, "__int__"):
        return int(role)
    if isinstance(role, Enum) and isinstance(role.value, int):
        return role.value

    raise TypeError(
        f"cannot map role {role!r} of type {role_cls.__name__} to an integer"
    )
