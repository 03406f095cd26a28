"""Granular role and permission management based on bit flags."""

from bit_roles.base import BaseRoleManager
from bit_roles.checked import RoleManager
from bit_roles.config import (
    HasAllMode,
    RoleManagerConfig,
    clear_config,
    get_config,
)
from bit_roles.definitions import (
    bit_role,
    bit_role_unchecked,
    check_role_values,
    is_checked_role_type,
    is_unchecked_role_type,
)
from bit_roles.errors import (
    InvalidRoleError,
    RoleDefinitionError,
    RoleError,
    UnexpectedInvalidRoleError,
)
from bit_roles.role_value import Raw, Role, RoleValue
from bit_roles.unchecked import UncheckedRoleManager
from bit_roles.validation import is_valid_role, role_magnitude, validate_role

__all__ = [
    # Validation
    "is_valid_role",
    "role_magnitude",
    "validate_role",
    # Role values
    "Raw",
    "Role",
    "RoleValue",
    # Managers
    "BaseRoleManager",
    "RoleManager",
    "UncheckedRoleManager",
    # Definitions
    "bit_role",
    "bit_role_unchecked",
    "check_role_values",
    "is_checked_role_type",
    "is_unchecked_role_type",
    # Config
    "HasAllMode",
    "RoleManagerConfig",
    "clear_config",
    "get_config",
    # Errors
    "InvalidRoleError",
    "RoleDefinitionError",
    "RoleError",
    "UnexpectedInvalidRoleError",
]
