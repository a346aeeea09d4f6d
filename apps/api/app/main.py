"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper())


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Facility Ops API",
    description="Daily report tab visibility and completion tracking",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENV == "dev" else None,
    redoc_url="/redoc" if settings.ENV == "dev" else None,
)

# CORS middleware - must be added before routers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Internal-Secret", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)

# ============================================================================
# Routers
# ============================================================================

# Daily report tabs (visibility, completion, submission gate)
from app.routers import daily_reports
app.include_router(daily_reports.router)


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
def health():
    """Health check endpoint. Returns environment info."""
    return {"status": "ok", "env": settings.ENV, "version": settings.VERSION}
