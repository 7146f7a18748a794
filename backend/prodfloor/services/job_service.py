"""Job listing services."""

from __future__ import annotations

from typing import Optional

from prodfloor.core.config import settings
from prodfloor.core.logging import LoggerAdapter, get_logger
from prodfloor.db import Job
from prodfloor.domain.exceptions import NotFoundError
from prodfloor.domain.jobs import JobLookup, JobSource, JobsListView, PagingInfo

logger = get_logger(__name__)


class JobListingService:
    """Pages and filters jobs from a read-only job source.

    ``page_size`` is fixed per instance. Listing never raises: unknown
    categories, empty sources and out-of-range pages all yield an empty
    page with accurate totals.
    """

    def __init__(self, source: JobSource, page_size: Optional[int] = None) -> None:
        if page_size is None:
            page_size = settings.jobs_page_size
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.source = source
        self.page_size = page_size

    # ------------------------------------------------------------------
    # Queries

    def list(self, category: Optional[str] = None, page: int = 1) -> JobsListView:
        """Return page ``page`` (1-based) of jobs whose type equals ``category``.

        ``None`` disables the filter; any string, including ``""``, must
        match ``job_type`` exactly.
        """
        log = LoggerAdapter(logger, {"category": category, "page": page})

        # Sources may hand back a one-shot iterator; read it exactly once.
        jobs = [job for job in self.source.jobs() if category is None or job.job_type == category]

        skip = max((page - 1) * self.page_size, 0)
        page_jobs = jobs[skip : skip + self.page_size]
        paging_info = PagingInfo(
            current_page=page,
            items_per_page=self.page_size,
            total_items=len(jobs),
        )

        log.debug(
            "Listed jobs",
            extra={
                "returned": len(page_jobs),
                "total_items": paging_info.total_items,
                "total_pages": paging_info.total_pages,
            },
        )
        return JobsListView(jobs=page_jobs, paging_info=paging_info, current_category=category)

    def categories(self) -> list[str]:
        """Distinct job types present in the source, sorted."""
        return sorted({job.job_type for job in self.source.jobs() if job.job_type is not None})

    def get_job(self, job_id: int) -> Job:
        """Look a job up by id, scanning ``jobs()`` when the source has no direct lookup."""
        if isinstance(self.source, JobLookup):
            job = self.source.get_by_id(job_id)
        else:
            job = next((job for job in self.source.jobs() if job.id == job_id), None)
        if not job:
            raise NotFoundError(f"Job {job_id} not found")
        return job
