"""Role-based daily report tab visibility.

Admins and managers see every tab they are handed. Everyone else sees
tabs with no role restrictions plus tabs restricted to at least one of
their scheduling roles. A user without a scheduling staff record has no
role ids, so restricted tabs stay hidden.
"""

from collections.abc import Iterable, Sequence
from uuid import UUID

from app.core.enums import TAB_BYPASS_ROLES, AppRole
from app.schemas.daily_report import DailyReportTab, TabVisibilityRead, UserRoleContext


def resolve_app_role(role_names: Sequence[str]) -> str | None:
    """Effective application role: admin > manager > first role held."""
    if AppRole.ADMIN.value in role_names:
        return AppRole.ADMIN.value
    if AppRole.MANAGER.value in role_names:
        return AppRole.MANAGER.value
    return role_names[0] if role_names else None


def can_view_all_tabs(app_role: str | None) -> bool:
    return app_role in TAB_BYPASS_ROLES


def order_active_tabs(tabs: Iterable[DailyReportTab]) -> list[DailyReportTab]:
    """Active tabs by display_order; ties broken by id so the order is total."""
    return sorted((t for t in tabs if t.is_active), key=lambda t: (t.display_order, t.id))


def is_tab_visible(tab: DailyReportTab, scheduling_role_ids: set[UUID]) -> bool:
    restricted = tab.restricted_role_ids
    if not restricted:
        return True
    return not restricted.isdisjoint(scheduling_role_ids)


def filter_visible_tabs(
    tabs: Sequence[DailyReportTab],
    scheduling_role_ids: Iterable[UUID],
    app_role: str | None,
) -> list[DailyReportTab]:
    """
    Tabs visible to a user, in input order.

    Does not sort and does not drop inactive tabs; callers hand in tabs
    already prepared by order_active_tabs().
    """
    if can_view_all_tabs(app_role):
        return list(tabs)

    role_ids = set(scheduling_role_ids)
    return [tab for tab in tabs if is_tab_visible(tab, role_ids)]


def build_tab_visibility(
    tabs: Sequence[DailyReportTab],
    context: UserRoleContext,
) -> TabVisibilityRead:
    """Visible tabs plus the role flags the report screen needs."""
    return TabVisibilityRead(
        tabs=filter_visible_tabs(tabs, context.scheduling_role_ids, context.app_role),
        all_tabs=list(tabs),
        user_role_ids=list(context.scheduling_role_ids),
        app_role=context.app_role,
        is_admin=context.app_role == AppRole.ADMIN.value,
        is_manager=context.app_role == AppRole.MANAGER.value,
        can_view_all_tabs=can_view_all_tabs(context.app_role),
    )
