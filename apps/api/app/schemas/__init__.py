"""Pydantic schemas for API request/response models."""

from app.schemas.daily_report import (
    DailyReportTab,
    FormTemplate,
    FormTemplateField,
    OverallProgress,
    TabCompletionStatus,
    TabFormData,
    TabRoleRestriction,
    TabSubmissionSummary,
    TabVisibilityRead,
    UserRoleContext,
)

__all__ = [
    "DailyReportTab",
    "FormTemplate",
    "FormTemplateField",
    "OverallProgress",
    "TabCompletionStatus",
    "TabFormData",
    "TabRoleRestriction",
    "TabSubmissionSummary",
    "TabVisibilityRead",
    "UserRoleContext",
]
