"""
Daily report tab endpoints.

Stateless: every request carries the tab, template and form data snapshot
it is evaluated against. Protected by X-Internal-Secret header.
"""
import logging

from fastapi import APIRouter, Depends, Header, HTTPException

from app.core.config import settings
from app.core.structured_logging import build_log_context
from app.schemas.daily_report import (
    DailyReportProgressRead,
    DailyReportProgressRequest,
    ReportSubmissionCheckRead,
    ReportSubmissionCheckRequest,
    TabCompletionRequest,
    TabSubmissionSummary,
    TabVisibilityRead,
    TabVisibilityRequest,
)
from app.services import daily_report_service, tab_completion_service, tab_visibility_service

logger = logging.getLogger(__name__)


def verify_internal_secret(x_internal_secret: str = Header(...)):
    """Verify the internal secret header."""
    expected = settings.INTERNAL_SECRET
    if not expected:
        raise HTTPException(status_code=501, detail="INTERNAL_SECRET not configured")
    if x_internal_secret != expected:
        raise HTTPException(status_code=403, detail="Invalid internal secret")


router = APIRouter(
    prefix="/daily-reports",
    tags=["daily-reports"],
    dependencies=[Depends(verify_internal_secret)],
)


@router.post("/tabs/visible", response_model=TabVisibilityRead)
def visible_tabs(
    data: TabVisibilityRequest,
    x_request_id: str | None = Header(None),
):
    """
    Tabs the user may see.

    Admins and managers see every tab; other users see unrestricted tabs
    and tabs restricted to one of their scheduling roles.
    """
    context = daily_report_service.build_role_context(data.scheduling_role_ids, data.app_roles)
    result = tab_visibility_service.build_tab_visibility(data.tabs, context)
    logger.info(
        f"Tab visibility: {len(result.tabs)}/{len(result.all_tabs)} visible",
        extra=build_log_context(
            user_id=data.user_id,
            facility_id=data.facility_id,
            request_id=x_request_id,
            route="/daily-reports/tabs/visible",
            method="POST",
        ),
    )
    return result


@router.post("/tabs/completion", response_model=TabSubmissionSummary)
def tab_completion(data: TabCompletionRequest):
    """Per-tab completion status and overall progress for the given tabs."""
    return tab_completion_service.summarize_tab_progress(
        data.tabs, data.form_data, data.form_templates
    )


@router.post("/progress", response_model=DailyReportProgressRead)
def report_progress(
    data: DailyReportProgressRequest,
    x_request_id: str | None = Header(None),
):
    """Visible tabs for the user and completion of those tabs."""
    context = daily_report_service.build_role_context(data.scheduling_role_ids, data.app_roles)
    progress = daily_report_service.build_report_progress(
        data.tabs, context, data.form_data, data.form_templates
    )
    logger.info(
        f"Report progress: {progress.summary.overall_progress.completed}"
        f"/{progress.summary.overall_progress.total} tabs complete",
        extra=build_log_context(
            user_id=data.user_id,
            facility_id=data.facility_id,
            report_id=data.report_id,
            request_id=x_request_id,
            route="/daily-reports/progress",
            method="POST",
        ),
    )
    return progress


@router.post("/submission-check", response_model=ReportSubmissionCheckRead)
def submission_check(data: ReportSubmissionCheckRequest):
    """
    Check that a report can be saved with the requested status.

    Returns 422 listing the incomplete required tabs when a final
    submission is attempted too early. Drafts always pass.
    """
    context = daily_report_service.build_role_context(data.scheduling_role_ids, data.app_roles)
    progress = daily_report_service.build_report_progress(
        data.tabs, context, data.form_data, data.form_templates
    )
    try:
        daily_report_service.ensure_report_submittable(progress.summary, data.status)
    except daily_report_service.RequiredTabsIncompleteError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "missing_tabs": e.tab_names},
        )
    return ReportSubmissionCheckRead(
        can_submit=True,
        status=data.status,
        missing_tabs=[],
        summary=progress.summary,
    )
