"""Domain enumerations and role rules."""

import enum


class UserRole(str, enum.Enum):
    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"


# Roles allowed to read their team's reports
MANAGER_ROLES: frozenset[UserRole] = frozenset({UserRole.MANAGER, UserRole.ADMIN})
