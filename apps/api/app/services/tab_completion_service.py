"""Tab completion tracking for daily reports.

Derives, from the tabs a user is filling in, their per-tab form data and
the current form templates:
- a completion status per tab (same order as the input tabs)
- overall progress across tabs
- whether every required tab is complete, and which ones are not

Pure computation: no I/O, and no exceptions for well-typed input. Unknown
field types count as value fields, and a tab whose template id does not
resolve falls back to the free-form checklist.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from app.core.config import settings
from app.core.enums import BOOLEAN_FIELD_TYPES
from app.schemas.daily_report import (
    DailyReportTab,
    FormTemplate,
    FormTemplateField,
    OverallProgress,
    TabCompletionStatus,
    TabFormData,
    TabSubmissionSummary,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateFields:
    """Payload of a tab backed by a form template."""

    template: FormTemplate
    values: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Checklist:
    """Payload of a free-form tab: checked items plus free-text notes."""

    items: Mapping[str, bool] = field(default_factory=dict)
    notes: str | None = None


TabPayload = TemplateFields | Checklist


def percent_of(part: int, whole: int) -> int:
    """Integer percentage rounded half-up; 0 when there is nothing to count."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def index_templates(templates: Sequence[FormTemplate]) -> dict[UUID, FormTemplate]:
    """Map template id -> template. The first template wins on duplicate ids."""
    by_id: dict[UUID, FormTemplate] = {}
    for template in templates:
        by_id.setdefault(template.id, template)
    return by_id


def resolve_tab_payload(
    tab: DailyReportTab,
    data: TabFormData | None,
    templates_by_id: Mapping[UUID, FormTemplate],
) -> TabPayload:
    """Pick the payload shape for a tab from its template assignment."""
    data = data or TabFormData()
    template = templates_by_id.get(tab.form_template_id) if tab.form_template_id else None
    if template is not None:
        return TemplateFields(template=template, values=data.fields)
    if tab.form_template_id:
        logger.debug(
            "Template %s for tab %s not found, using free-form checklist",
            tab.form_template_id,
            tab.id,
        )
    return Checklist(items=data.checklist, notes=data.notes)


def is_field_filled(template_field: FormTemplateField, values: Mapping[str, Any]) -> bool:
    """Checkbox fields count only when exactly True; others when non-empty."""
    if template_field.field_name not in values:
        return False
    value = values[template_field.field_name]
    if template_field.field_type in BOOLEAN_FIELD_TYPES:
        return value is True
    return value is not None and value != ""


def _template_status(tab: DailyReportTab, payload: TemplateFields) -> TabCompletionStatus:
    fields = payload.template.configuration
    filled = [is_field_filled(f, payload.values) for f in fields]
    completed = sum(filled)
    required = [ok for f, ok in zip(fields, filled) if f.is_required]

    # With required fields only they decide; otherwise any filled field does
    is_complete = all(required) if required else completed > 0

    return TabCompletionStatus(
        tab_id=tab.id,
        tab_name=tab.tab_name,
        is_required=tab.is_required,
        is_complete=is_complete,
        completed_items=completed,
        total_items=len(fields),
        percent_complete=percent_of(completed, len(fields)),
    )


def _checklist_status(
    tab: DailyReportTab,
    payload: Checklist,
    default_checklist_size: int,
) -> TabCompletionStatus:
    item_count = len(payload.items)
    completed = sum(1 for checked in payload.items.values() if checked)
    has_notes = bool((payload.notes or "").strip())

    if item_count:
        percent = percent_of(completed, item_count)
    else:
        percent = 100 if has_notes else 0

    return TabCompletionStatus(
        tab_id=tab.id,
        tab_name=tab.tab_name,
        is_required=tab.is_required,
        is_complete=completed > 0 or has_notes,
        completed_items=completed,
        # An untouched checklist has no keys yet; assume the default size
        total_items=item_count or default_checklist_size,
        percent_complete=percent,
    )


def compute_tab_status(
    tab: DailyReportTab,
    data: TabFormData | None,
    templates_by_id: Mapping[UUID, FormTemplate],
    default_checklist_size: int | None = None,
) -> TabCompletionStatus:
    """Completion status for a single tab."""
    if default_checklist_size is None:
        default_checklist_size = settings.DEFAULT_CHECKLIST_SIZE

    payload = resolve_tab_payload(tab, data, templates_by_id)
    if isinstance(payload, TemplateFields):
        return _template_status(tab, payload)
    return _checklist_status(tab, payload, default_checklist_size)


def compute_tab_statuses(
    tabs: Sequence[DailyReportTab],
    form_data: Mapping[UUID, TabFormData],
    form_templates: Sequence[FormTemplate],
    default_checklist_size: int | None = None,
) -> list[TabCompletionStatus]:
    """Completion status per tab, in input order. Missing form data counts as empty."""
    templates_by_id = index_templates(form_templates)
    return [
        compute_tab_status(tab, form_data.get(tab.id), templates_by_id, default_checklist_size)
        for tab in tabs
    ]


def overall_progress(statuses: Sequence[TabCompletionStatus]) -> OverallProgress:
    completed = sum(1 for s in statuses if s.is_complete)
    return OverallProgress(
        completed=completed,
        total=len(statuses),
        percent=percent_of(completed, len(statuses)),
    )


def incomplete_required_tabs(statuses: Sequence[TabCompletionStatus]) -> list[TabCompletionStatus]:
    return [s for s in statuses if s.is_required and not s.is_complete]


def summarize_tab_progress(
    tabs: Sequence[DailyReportTab],
    form_data: Mapping[UUID, TabFormData],
    form_templates: Sequence[FormTemplate],
    default_checklist_size: int | None = None,
) -> TabSubmissionSummary:
    """
    Evaluate every tab and aggregate report-wide progress.

    required_tabs_complete is vacuously True when no tab is required.
    """
    statuses = compute_tab_statuses(tabs, form_data, form_templates, default_checklist_size)
    incomplete = incomplete_required_tabs(statuses)
    return TabSubmissionSummary(
        tab_statuses=statuses,
        overall_progress=overall_progress(statuses),
        required_tabs_complete=not incomplete,
        incomplete_required_tabs=incomplete,
    )
