"""Schemas for daily report tabs, form templates and tab progress."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.core.enums import ReportStatus


# ============================================================================
# Tab configuration
# ============================================================================


class ScheduleRoleSummary(BaseModel):
    id: UUID
    name: str
    color: str | None = None


class TabRoleRestriction(BaseModel):
    """A scheduling role a tab is restricted to."""

    id: UUID | None = None
    role_id: UUID
    role: ScheduleRoleSummary | None = None


class DailyReportTab(BaseModel):
    """A named section of a daily report, optionally gated by scheduling role."""

    id: UUID
    tab_name: str = Field(..., min_length=1, max_length=200)
    tab_key: str | None = Field(None, max_length=100)
    display_order: int = 0
    is_active: bool = True
    is_required: bool = False
    form_template_id: UUID | None = None
    icon: str | None = None
    roles: list[TabRoleRestriction] | None = None

    @property
    def restricted_role_ids(self) -> set[UUID]:
        return {r.role_id for r in self.roles or []}


# ============================================================================
# Form templates
# ============================================================================


class FormTemplateField(BaseModel):
    field_name: str = Field(..., min_length=1, max_length=100)
    field_label: str | None = Field(None, max_length=200)
    # Unknown types are accepted and treated as value fields
    field_type: str = "text"
    is_required: bool = False
    default_value: Any = None
    field_options: list[Any] | None = None
    placeholder_text: str | None = None
    help_text: str | None = None


class FormTemplate(BaseModel):
    """Current snapshot of a reusable form definition."""

    id: UUID
    template_name: str | None = None
    form_type: str | None = None
    description: str | None = None
    category: str | None = None
    configuration: list[FormTemplateField] = Field(default_factory=list)
    is_system_template: bool = False

    @field_validator("configuration")
    @classmethod
    def unique_field_names(cls, v: list[FormTemplateField]) -> list[FormTemplateField]:
        seen: set[str] = set()
        for field in v:
            if field.field_name in seen:
                raise ValueError(f"Duplicate field_name in template: {field.field_name}")
            seen.add(field.field_name)
        return v


# ============================================================================
# Tab form data (per report, per tab)
# ============================================================================


class TabFormData(BaseModel):
    """
    Raw per-tab payload as posted by the report form.

    Template-backed tabs fill `fields`; free-form tabs fill `checklist`
    and `notes`. Which shape counts is decided by the tab's template.
    """

    checklist: dict[str, bool] = Field(default_factory=dict)
    notes: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# Derived view models
# ============================================================================


class TabCompletionStatus(BaseModel):
    tab_id: UUID
    tab_name: str
    is_required: bool
    is_complete: bool
    completed_items: int
    total_items: int
    percent_complete: int


class OverallProgress(BaseModel):
    completed: int = 0
    total: int = 0
    percent: int = 0


class TabSubmissionSummary(BaseModel):
    """Completion status for every evaluated tab plus report-wide aggregates."""

    tab_statuses: list[TabCompletionStatus]
    overall_progress: OverallProgress
    required_tabs_complete: bool
    incomplete_required_tabs: list[TabCompletionStatus]


class UserRoleContext(BaseModel):
    """Roles used to decide which tabs a user sees."""

    scheduling_role_ids: list[UUID] = Field(default_factory=list)
    app_role: str | None = None


class TabVisibilityRead(BaseModel):
    tabs: list[DailyReportTab]
    all_tabs: list[DailyReportTab]
    user_role_ids: list[UUID]
    app_role: str | None
    is_admin: bool
    is_manager: bool
    can_view_all_tabs: bool


# ============================================================================
# Request / response bodies
# ============================================================================


class TabVisibilityRequest(BaseModel):
    tabs: list[DailyReportTab]
    scheduling_role_ids: list[UUID] = Field(default_factory=list)
    # All application role rows held by the user; the highest one wins
    app_roles: list[str] = Field(default_factory=list)
    user_id: UUID | None = None
    facility_id: UUID | None = None


class TabCompletionRequest(BaseModel):
    tabs: list[DailyReportTab]
    form_data: dict[UUID, TabFormData] = Field(default_factory=dict)
    form_templates: list[FormTemplate] = Field(default_factory=list)
    report_id: UUID | None = None


class DailyReportProgressRequest(TabVisibilityRequest):
    form_data: dict[UUID, TabFormData] = Field(default_factory=dict)
    form_templates: list[FormTemplate] = Field(default_factory=list)
    report_id: UUID | None = None


class DailyReportProgressRead(BaseModel):
    visibility: TabVisibilityRead
    summary: TabSubmissionSummary


class ReportSubmissionCheckRequest(DailyReportProgressRequest):
    status: ReportStatus = ReportStatus.SUBMITTED


class ReportSubmissionCheckRead(BaseModel):
    can_submit: bool
    status: ReportStatus
    missing_tabs: list[str]
    summary: TabSubmissionSummary
