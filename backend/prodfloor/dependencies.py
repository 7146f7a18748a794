"""Shared FastAPI dependency factories."""

from fastapi import Depends
from sqlalchemy.orm import Session

from prodfloor.core.config import settings
from prodfloor.db import get_db
from prodfloor.repositories import JobRepository
from prodfloor.services import JobListingService


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_job_repository(session: Session = Depends(get_session)) -> JobRepository:
    return JobRepository(session)


def get_job_listing_service(
    repository: JobRepository = Depends(get_job_repository),
) -> JobListingService:
    return JobListingService(repository, page_size=settings.jobs_page_size)
