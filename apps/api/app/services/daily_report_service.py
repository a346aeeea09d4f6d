"""Daily report progress: visibility, tab completion and the submission gate."""

import logging
from collections.abc import Mapping, Sequence
from uuid import UUID

from app.core.enums import ReportStatus
from app.schemas.daily_report import (
    DailyReportProgressRead,
    DailyReportTab,
    FormTemplate,
    ReportSubmissionCheckRead,
    TabFormData,
    TabSubmissionSummary,
    UserRoleContext,
)
from app.services import tab_completion_service, tab_visibility_service

logger = logging.getLogger(__name__)


class DailyReportServiceError(Exception):
    """Base exception for daily report service errors."""

    pass


class RequiredTabsIncompleteError(DailyReportServiceError):
    """Report submitted while required tabs are still incomplete."""

    def __init__(self, tab_names: list[str]):
        self.tab_names = tab_names
        super().__init__(
            "Please complete the following required tabs: " + ", ".join(tab_names)
        )


def build_role_context(
    scheduling_role_ids: Sequence[UUID],
    app_roles: Sequence[str],
) -> UserRoleContext:
    return UserRoleContext(
        scheduling_role_ids=list(scheduling_role_ids),
        app_role=tab_visibility_service.resolve_app_role(app_roles),
    )


def build_report_progress(
    tabs: Sequence[DailyReportTab],
    context: UserRoleContext,
    form_data: Mapping[UUID, TabFormData],
    form_templates: Sequence[FormTemplate],
) -> DailyReportProgressRead:
    """
    Progress for the tabs a user can see.

    Tabs are narrowed to active ones in display order, filtered by role,
    and only the visible tabs are evaluated for completion.
    """
    active_tabs = tab_visibility_service.order_active_tabs(tabs)
    visibility = tab_visibility_service.build_tab_visibility(active_tabs, context)
    summary = tab_completion_service.summarize_tab_progress(
        visibility.tabs, form_data, form_templates
    )
    return DailyReportProgressRead(visibility=visibility, summary=summary)


def ensure_report_submittable(summary: TabSubmissionSummary, status: ReportStatus | str) -> None:
    """
    Block final submission while required tabs are incomplete.

    Drafts are always accepted.

    Raises:
        RequiredTabsIncompleteError: status is submitted and required tabs are missing
    """
    status_str = status.value if hasattr(status, "value") else status
    if status_str != ReportStatus.SUBMITTED.value:
        return
    if summary.required_tabs_complete:
        return
    raise RequiredTabsIncompleteError([s.tab_name for s in summary.incomplete_required_tabs])


def check_report_submission(
    tabs: Sequence[DailyReportTab],
    context: UserRoleContext,
    form_data: Mapping[UUID, TabFormData],
    form_templates: Sequence[FormTemplate],
    status: ReportStatus = ReportStatus.SUBMITTED,
) -> ReportSubmissionCheckRead:
    """Evaluate a report draft and say whether it may be saved with `status`."""
    progress = build_report_progress(tabs, context, form_data, form_templates)
    try:
        ensure_report_submittable(progress.summary, status)
    except RequiredTabsIncompleteError as e:
        logger.info(f"Report submission blocked: {len(e.tab_names)} required tabs incomplete")
        return ReportSubmissionCheckRead(
            can_submit=False,
            status=status,
            missing_tabs=e.tab_names,
            summary=progress.summary,
        )
    return ReportSubmissionCheckRead(
        can_submit=True,
        status=status,
        missing_tabs=[],
        summary=progress.summary,
    )
