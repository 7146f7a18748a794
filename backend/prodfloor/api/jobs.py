"""Job API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from prodfloor.dependencies import get_job_listing_service
from prodfloor.schemas.job import JobResponse, JobsListResponse
from prodfloor.services.job_service import JobListingService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobsListResponse)
def list_jobs(
    category: Optional[str] = Query(None),
    page: int = Query(1),
    service: JobListingService = Depends(get_job_listing_service),
) -> JobsListResponse:
    """List one page of jobs, optionally restricted to a job type."""
    view = service.list(category, page)
    return JobsListResponse.model_validate(view)


@router.get("/categories", response_model=list[str])
def list_categories(
    service: JobListingService = Depends(get_job_listing_service),
) -> list[str]:
    """Distinct job types, for building category navigation."""
    return service.categories()


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int,
    service: JobListingService = Depends(get_job_listing_service),
) -> JobResponse:
    """Get job details."""
    job = service.get_job(job_id)
    return JobResponse.model_validate(job)
