"""Domain layer primitives (value objects, protocols, exceptions)."""

from . import exceptions, jobs
from .jobs import JobSource, JobsListView, PagingInfo

__all__ = ["JobSource", "JobsListView", "PagingInfo", "exceptions", "jobs"]
