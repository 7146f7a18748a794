"""Main FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from prodfloor.api import errors, jobs
from prodfloor.core import settings, setup_logging
from prodfloor.core.logging import get_logger
from prodfloor.db import SessionLocal, seed_default_data
from prodfloor.domain.exceptions import DomainError

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs.router, prefix=settings.api_prefix)


@app.on_event("startup")
async def seed_defaults() -> None:
    """Seed sample jobs on startup; log and continue on failure."""
    if settings.testing:
        return
    db = SessionLocal()
    try:
        seed_default_data(db)
    except Exception as exc:  # pragma: no cover - best effort
        logger.warning("Skipping default seed (operation error): %s", exc)
    finally:
        db.close()


@app.get("/health")
async def health() -> dict:
    """Basic health check endpoint (alias for /health/live)."""
    return {"status": "healthy"}


@app.get("/health/live")
async def health_live() -> dict:
    """Liveness probe endpoint; only verifies the app responds."""
    return {"status": "healthy"}


@app.get("/health/ready")
async def health_ready():
    """Readiness check with database status.

    Returns 503 when the database cannot answer a trivial query.
    """
    status = {"database": {"status": "healthy"}}
    overall_healthy = True

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as e:
        status["database"] = {"status": "unhealthy", "error": str(e)}
        overall_healthy = False

    result = {
        "status": "healthy" if overall_healthy else "unhealthy",
        "dependencies": status,
    }
    if overall_healthy:
        return result
    return JSONResponse(status_code=503, content=result)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
    }


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
    )
