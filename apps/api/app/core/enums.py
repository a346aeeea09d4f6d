"""Enum definitions for daily report constants."""

from enum import Enum


class AppRole(str, Enum):
    """
    Application roles with increasing privilege levels.

    - STAFF: Sees only tabs open to everyone or to their scheduling roles
    - MANAGER: Facility manager, sees every active tab
    - ADMIN: Facility admin, sees every active tab
    """
    STAFF = "staff"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def has_value(cls, value: str) -> bool:
        """Check if value is a valid role."""
        return value in cls._value2member_map_


# Roles that bypass per-tab scheduling role restrictions
TAB_BYPASS_ROLES: frozenset[str] = frozenset({AppRole.ADMIN.value, AppRole.MANAGER.value})


class FormFieldType(str, Enum):
    """Field types a form template can declare."""
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    BOOLEAN = "boolean"


# Field types whose value only counts when it is exactly True
BOOLEAN_FIELD_TYPES: frozenset[str] = frozenset({FormFieldType.CHECKBOX.value, FormFieldType.BOOLEAN.value})


class ReportStatus(str, Enum):
    """Daily report lifecycle status."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
