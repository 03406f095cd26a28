"""Role error types.

A single error kind is surfaced for bad role magnitudes (InvalidRoleError).
The remaining types describe how that failure reached the caller:

- RoleDefinitionError: a role type is structurally malformed and cannot
  be bound to a manager at all.
- UnexpectedInvalidRoleError: the unchecked convenience surface met an
  invalid magnitude. This indicates a programming mistake, not bad input.
"""

from __future__ import annotations


class RoleError(Exception):
    """Base class for all bit role errors."""


class InvalidRoleError(RoleError, ValueError):
    """Raised when a role magnitude is neither zero nor a power of two.

    When raised while a role type is being defined, ``variant`` and
    ``role_type`` identify the offending member. This causes the module
    declaring the role type to fail at import time.
    """

    def __init__(
        self,
        value: int,
        variant: str | None = None,
        role_type: str | None = None,
    ) -> None:
        self.value = value
        self.variant = variant
        self.role_type = role_type
        message = f"invalid role value: `{value}` is neither zero nor a power of two"
        if variant is not None:
            message = f"[`{variant}`]: {message}"
        if role_type is not None:
            message = f"{message} (in `{role_type}`)"
        super().__init__(message)


class RoleDefinitionError(RoleError, TypeError):
    """Raised when a role type cannot be bound to a manager.

    Covers non-enum classes, members without an integer value and
    members whose names collide with the generated constructors.
    """


class UnexpectedInvalidRoleError(RoleError, RuntimeError):
    """Raised by the unchecked convenience surface on an invalid role.

    The originating InvalidRoleError is available as ``__cause__``.
    """
