"""Repository layer for persistence access."""

from .job_repository import InMemoryJobRepository, JobRepository

__all__ = ["InMemoryJobRepository", "JobRepository"]
