"""Definition-time binding of role enums to managers.

Python has no compile step, so role values are checked when the role
class is defined instead. Decorating an enum with @bit_role validates every
member value once and attaches ``empty()`` / ``from_value()`` constructors
returning a checked RoleManager. A malformed role type raises at import
time and never produces a manager.

Usage:
    @bit_role
    class Permission(IntEnum):
        NONE = 0
        SEND_MESSAGE = 1
        EDIT_MESSAGE = 2

    @bit_role_unchecked
    class Scope(Enum):
        NONE = 0
        READ = 1
        WRITE = 2

        def __int__(self) -> int:
            return self.value

Role tables that are not enums can be checked the same way at startup with
check_role_values().
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from bit_roles.base import BaseRoleManager
from bit_roles.checked import RoleManager
from bit_roles.errors import InvalidRoleError, RoleDefinitionError
from bit_roles.unchecked import UncheckedRoleManager
from bit_roles.validation import is_valid_role, role_magnitude

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=type[Enum])

# Member names that would be shadowed by the generated constructors
RESERVED_NAMES: frozenset[str] = frozenset({"empty", "from_value"})

_checked_role_types: set[type[Enum]] = set()
_unchecked_role_types: set[type[Enum]] = set()


def check_role_values(values: Mapping[str, Any], type_name: str) -> None:
    """Validate a name -> value role table.

    Args:
        values: Mapping of variant name to its declared value
        type_name: Name of the role type, used in error messages

    Raises:
        RoleDefinitionError: If a value is not an integer
        InvalidRoleError: If a value is negative or not zero/power of two
    """
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise RoleDefinitionError(
                f"`{name}` in the `{type_name}` enum must have an integer value, "
                f"got {value!r}"
            )
        if not is_valid_role(value):
            logger.warning(
                "Rejected role definition",
                extra={"role_type": type_name, "variant": name, "value": value},
            )
            raise InvalidRoleError(value, variant=name, role_type=type_name)


def _require_enum(cls: Any) -> None:
    if not (isinstance(cls, type) and issubclass(cls, Enum)):
        raise RoleDefinitionError("this decorator can only be used with enums")


def _bind(cls: type[Enum], manager_cls: type[BaseRoleManager]) -> None:
    clashes = RESERVED_NAMES & cls.__members__.keys()
    if clashes:
        raise RoleDefinitionError(
            f"`{cls.__name__}` cannot declare members named {sorted(clashes)}"
        )

    def empty(role_cls: type[Enum], **kwargs: Any) -> Any:
        return manager_cls.empty(**kwargs)

    def from_value(role_cls: type[Enum], value: int, **kwargs: Any) -> Any:
        return manager_cls.from_value(value, **kwargs)

    empty.__doc__ = f"Create an empty {manager_cls.__name__} for {cls.__name__}."
    from_value.__doc__ = (
        f"Create a {manager_cls.__name__} for {cls.__name__} from a stored value."
    )
    setattr(cls, "empty", classmethod(empty))
    setattr(cls, "from_value", classmethod(from_value))


def bit_role(cls: E) -> E:
    """Bind a role enum to the checked RoleManager.

    Every member value must be an int that is zero or a power of two. The
    magnitude managers read from each member (role_magnitude, which prefers
    __index__ and __int__ over .value) is checked too.

    Raises:
        RoleDefinitionError: If cls is not an enum, a member value is not
            an integer, or a member is named ``empty``/``from_value``
        InvalidRoleError: If a member value or the magnitude it maps to is
            negative or neither zero nor a power of two
    """
    _require_enum(cls)
    members = cls.__members__.items()
    check_role_values({name: member.value for name, member in members}, cls.__name__)
    check_role_values(
        {name: role_magnitude(member) for name, member in members}, cls.__name__
    )
    _bind(cls, RoleManager)
    _checked_role_types.add(cls)
    logger.debug(
        "Registered checked role type",
        extra={"role_type": cls.__name__, "variants": len(cls.__members__)},
    )
    return cls


def bit_role_unchecked(cls: E) -> E:
    """Bind a role enum to the UncheckedRoleManager.

    Member values are not inspected. Each role is validated when it is
    used, so members may compute their magnitude through ``__int__`` or
    ``__index__``.

    Raises:
        RoleDefinitionError: If cls is not an enum or a member is named
            ``empty``/``from_value``
    """
    _require_enum(cls)
    _bind(cls, UncheckedRoleManager)
    _unchecked_role_types.add(cls)
    logger.debug(
        "Registered unchecked role type",
        extra={"role_type": cls.__name__, "variants": len(cls.__members__)},
    )
    return cls


def is_checked_role_type(cls: Any) -> bool:
    """Check whether cls passed @bit_role validation."""
    return isinstance(cls, type) and cls in _checked_role_types


def is_unchecked_role_type(cls: Any) -> bool:
    """Check whether cls was bound with @bit_role_unchecked."""
    return isinstance(cls, type) and cls in _unchecked_role_types
