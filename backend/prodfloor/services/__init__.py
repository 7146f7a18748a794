"""Service layer entry points."""

from .job_service import JobListingService

__all__ = ["JobListingService"]
