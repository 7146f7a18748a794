"""API module initialization."""

from . import errors, jobs

__all__ = ["errors", "jobs"]
