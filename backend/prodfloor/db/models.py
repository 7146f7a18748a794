"""Database models."""

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Job(Base):
    """Job model."""

    __tablename__ = "jobs"
    __table_args__ = (Index("ix_jobs_job_type", "job_type"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # NULL and "" are distinct; only an exact match filters a listing
    job_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"Job(id={self.id!r}, name={self.name!r}, job_type={self.job_type!r})"
