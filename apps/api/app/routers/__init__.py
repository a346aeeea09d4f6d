"""API routers."""

from app.routers.daily_reports import router as daily_reports_router

__all__ = [
    "daily_reports_router",
]
