"""Job persistence helpers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlalchemy.orm import Session

from prodfloor.db import Job
from prodfloor.repositories.base import SQLAlchemyRepository


class JobRepository(SQLAlchemyRepository[Job]):
    """Session-backed job source.

    Yields every job in primary-key order. Filtering and paging belong to
    the listing service, so nothing beyond ordering is pushed into SQL.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def jobs(self) -> Sequence[Job]:
        return self.session.query(Job).order_by(Job.id.asc()).all()

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self.session.query(Job).filter(Job.id == job_id).first()


class InMemoryJobRepository:
    """Job source over jobs already held in memory, kept in given order."""

    def __init__(self, jobs: Iterable[Job] = ()) -> None:
        self._jobs = tuple(jobs)

    def jobs(self) -> Sequence[Job]:
        return self._jobs

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return next((job for job in self._jobs if job.id == job_id), None)
