"""Schemas module initialization."""

from .job import JobResponse, JobsListResponse, PagingInfoResponse

__all__ = ["JobResponse", "JobsListResponse", "PagingInfoResponse"]
