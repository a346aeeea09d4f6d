"""Service layer modules."""

from app.services.tab_completion_service import summarize_tab_progress
from app.services.tab_visibility_service import (
    filter_visible_tabs,
    order_active_tabs,
    resolve_app_role,
)
from app.services.daily_report_service import (
    RequiredTabsIncompleteError,
    build_report_progress,
    ensure_report_submittable,
)

__all__ = [
    "summarize_tab_progress",
    "filter_visible_tabs",
    "order_active_tabs",
    "resolve_app_role",
    "RequiredTabsIncompleteError",
    "build_report_progress",
    "ensure_report_submittable",
]
