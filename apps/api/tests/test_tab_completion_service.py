import uuid

from app.schemas.daily_report import (
    DailyReportTab,
    FormTemplate,
    FormTemplateField,
    TabFormData,
)
from app.services import tab_completion_service
from app.services.tab_completion_service import Checklist, TemplateFields


def _tab(name="Front Desk", *, is_required=False, form_template_id=None) -> DailyReportTab:
    return DailyReportTab(
        id=uuid.uuid4(),
        tab_name=name,
        is_required=is_required,
        form_template_id=form_template_id,
    )


def _template(*fields) -> FormTemplate:
    """Fields as (field_name, field_type, is_required)."""
    return FormTemplate(
        id=uuid.uuid4(),
        template_name="Zamboni Log",
        configuration=[
            FormTemplateField(field_name=name, field_type=ftype, is_required=req)
            for name, ftype, req in fields
        ],
    )


def _status(tab, data, templates=(), default_checklist_size=5):
    return tab_completion_service.compute_tab_status(
        tab,
        data,
        tab_completion_service.index_templates(list(templates)),
        default_checklist_size,
    )


# =============================================================================
# Template-backed tabs
# =============================================================================


def test_template_tab_three_required_two_filled_is_incomplete() -> None:
    template = _template(
        ("ice_temp", "number", True),
        ("operator", "text", True),
        ("edger_used", "checkbox", True),
    )
    tab = _tab(form_template_id=template.id)
    data = TabFormData(fields={"ice_temp": 24, "operator": "Sam"})

    status = _status(tab, data, [template])

    assert status.is_complete is False
    assert status.completed_items == 2
    assert status.total_items == 3
    assert status.percent_complete == 67


def test_template_tab_complete_when_required_filled_regardless_of_optional() -> None:
    template = _template(
        ("operator", "text", True),
        ("comments", "textarea", False),
        ("double_cut", "checkbox", False),
    )
    tab = _tab(form_template_id=template.id)

    status = _status(tab, TabFormData(fields={"operator": "Sam"}), [template])

    assert status.is_complete is True
    assert status.completed_items == 1
    assert status.percent_complete == 33


def test_template_tab_without_required_fields_needs_one_filled_field() -> None:
    template = _template(("comments", "textarea", False), ("lights_on", "checkbox", False))
    tab = _tab(form_template_id=template.id)

    empty = _status(tab, TabFormData(), [template])
    filled = _status(tab, TabFormData(fields={"lights_on": True}), [template])

    assert empty.is_complete is False
    assert empty.completed_items == 0
    assert filled.is_complete is True
    assert filled.percent_complete == 50


def test_checkbox_counts_only_exact_true() -> None:
    template = _template(("a", "checkbox", True), ("b", "checkbox", True), ("c", "boolean", True))
    tab = _tab(form_template_id=template.id)
    data = TabFormData(fields={"a": "true", "b": 1, "c": True})

    status = _status(tab, data, [template])

    assert status.completed_items == 1
    assert status.is_complete is False


def test_value_fields_count_unless_missing_none_or_empty_string() -> None:
    template = _template(
        ("zero", "number", False),
        ("false_value", "select", False),
        ("blank", "text", False),
        ("null", "text", False),
        ("missing", "text", False),
        ("spaces", "text", False),
    )
    tab = _tab(form_template_id=template.id)
    data = TabFormData(fields={"zero": 0, "false_value": False, "blank": "", "null": None, "spaces": " "})

    status = _status(tab, data, [template])

    assert status.completed_items == 3
    assert status.total_items == 6
    assert status.percent_complete == 50


def test_unknown_field_type_uses_value_branch() -> None:
    template = _template(("signature", "ink_pad", True))
    tab = _tab(form_template_id=template.id)

    status = _status(tab, TabFormData(fields={"signature": "JS"}), [template])

    assert status.is_complete is True


def test_template_without_fields_is_incomplete_with_zero_percent() -> None:
    template = _template()
    tab = _tab(form_template_id=template.id)

    status = _status(tab, TabFormData(checklist={"a": True}), [template])

    assert status.total_items == 0
    assert status.percent_complete == 0
    assert status.is_complete is False


def test_template_tab_ignores_checklist_and_notes() -> None:
    template = _template(("operator", "text", True))
    tab = _tab(form_template_id=template.id)
    data = TabFormData(checklist={"a": True}, notes="All good")

    status = _status(tab, data, [template])

    assert status.is_complete is False
    assert status.completed_items == 0


# =============================================================================
# Free-form tabs
# =============================================================================


def test_free_form_checklist_counts_checked_items() -> None:
    tab = _tab()
    data = TabFormData(checklist={"a": True, "b": False, "c": True})

    status = _status(tab, data)

    assert status.completed_items == 2
    assert status.total_items == 3
    assert status.percent_complete == 67
    assert status.is_complete is True


def test_free_form_empty_checklist_whitespace_notes_uses_fallback_size() -> None:
    status = _status(_tab(), TabFormData(checklist={}, notes="  "))

    assert status.total_items == 5
    assert status.is_complete is False
    assert status.percent_complete == 0


def test_free_form_notes_only_is_complete_at_full_percent() -> None:
    status = _status(_tab(), TabFormData(notes="Lobby mopped"))

    assert status.is_complete is True
    assert status.completed_items == 0
    assert status.total_items == 5
    assert status.percent_complete == 100


def test_free_form_notes_with_unchecked_items_uses_checklist_percent() -> None:
    status = _status(_tab(), TabFormData(checklist={"a": False, "b": False}, notes="See log"))

    assert status.is_complete is True
    assert status.percent_complete == 0


def test_free_form_ignores_template_fields() -> None:
    status = _status(_tab(), TabFormData(fields={"operator": "Sam"}))

    assert status.is_complete is False
    assert status.completed_items == 0


def test_missing_form_data_is_treated_as_empty() -> None:
    status = _status(_tab(), None)

    assert status.is_complete is False
    assert status.total_items == 5


def test_configurable_fallback_size() -> None:
    status = _status(_tab(), TabFormData(), default_checklist_size=0)

    assert status.total_items == 0
    assert status.percent_complete == 0


def test_unresolved_template_falls_back_to_checklist() -> None:
    tab = _tab(form_template_id=uuid.uuid4())
    data = TabFormData(checklist={"a": True}, fields={"operator": "Sam"})

    payload = tab_completion_service.resolve_tab_payload(tab, data, {})
    status = _status(tab, data)

    assert isinstance(payload, Checklist)
    assert status.is_complete is True
    assert status.total_items == 1


def test_resolve_payload_uses_template_when_assigned() -> None:
    template = _template(("operator", "text", True))
    tab = _tab(form_template_id=template.id)

    payload = tab_completion_service.resolve_tab_payload(
        tab, TabFormData(checklist={"a": True}), {template.id: template}
    )

    assert isinstance(payload, TemplateFields)
    assert payload.template is template


def test_required_flag_copied_from_tab() -> None:
    status = _status(_tab(is_required=True), TabFormData())

    assert status.is_required is True


# =============================================================================
# Rounding
# =============================================================================


def test_percent_rounds_half_up() -> None:
    assert tab_completion_service.percent_of(1, 8) == 13
    assert tab_completion_service.percent_of(2, 3) == 67
    assert tab_completion_service.percent_of(1, 3) == 33
    assert tab_completion_service.percent_of(1, 200) == 1
    assert tab_completion_service.percent_of(0, 0) == 0
    assert tab_completion_service.percent_of(4, 4) == 100


def test_percent_complete_stays_within_bounds() -> None:
    for total in range(1, 12):
        for done in range(total + 1):
            value = tab_completion_service.percent_of(done, total)
            assert isinstance(value, int)
            assert 0 <= value <= 100


# =============================================================================
# Aggregation
# =============================================================================


def test_summary_preserves_order_and_aggregates() -> None:
    template = _template(("operator", "text", True))
    front = _tab("Front Desk", is_required=True)
    zamboni = _tab("Zamboni", is_required=True, form_template_id=template.id)
    pro_shop = _tab("Pro Shop")
    form_data = {front.id: TabFormData(notes="Quiet day")}

    summary = tab_completion_service.summarize_tab_progress(
        [front, zamboni, pro_shop], form_data, [template]
    )

    assert [s.tab_name for s in summary.tab_statuses] == ["Front Desk", "Zamboni", "Pro Shop"]
    assert summary.overall_progress.completed == 1
    assert summary.overall_progress.total == 3
    assert summary.overall_progress.percent == 33
    assert summary.required_tabs_complete is False
    assert [s.tab_name for s in summary.incomplete_required_tabs] == ["Zamboni"]


def test_summary_without_required_tabs_is_vacuously_complete() -> None:
    tabs = [_tab("Concessions"), _tab("Locker Rooms")]

    summary = tab_completion_service.summarize_tab_progress(tabs, {}, [])

    assert summary.required_tabs_complete is True
    assert summary.incomplete_required_tabs == []
    assert summary.overall_progress.percent == 0


def test_summary_of_no_tabs_is_zero_progress() -> None:
    summary = tab_completion_service.summarize_tab_progress([], {}, [])

    assert summary.tab_statuses == []
    assert summary.overall_progress.completed == 0
    assert summary.overall_progress.total == 0
    assert summary.overall_progress.percent == 0
    assert summary.required_tabs_complete is True


def test_summary_is_repeatable() -> None:
    tabs = [_tab("A", is_required=True), _tab("B")]
    form_data = {tabs[1].id: TabFormData(checklist={"x": True})}

    first = tab_completion_service.summarize_tab_progress(tabs, form_data, [])
    second = tab_completion_service.summarize_tab_progress(tabs, form_data, [])

    assert first == second
