"""Database utility helpers."""

from __future__ import annotations

from prodfloor.core import settings
from prodfloor.core.logging import get_logger
from prodfloor.db.models import Base, Job
from prodfloor.db.session import SessionLocal

logger = get_logger(__name__)

SAMPLE_JOBS = [
    {"name": "M2000 controller retrofit", "job_type": "M2000"},
    {"name": "M4000 traction upgrade", "job_type": "M4000"},
    {"name": "ElmHydro pump station", "job_type": "ElmHydro"},
    {"name": "M2000 door operator", "job_type": "M2000"},
    {"name": "ElmTract machine room", "job_type": "ElmTract"},
    {"name": "M4000 group dispatch", "job_type": "M4000"},
]


def seed_default_data(db_session) -> None:
    """Insert sample jobs when the table is empty (idempotent)."""
    if settings.environment.lower() == "production":
        logger.info("Skipping default seed in production environment")
        return
    bind = db_session.get_bind()
    if bind is not None:
        Base.metadata.create_all(bind=bind)

    if db_session.query(Job.id).first() is not None:
        logger.debug("Jobs table already populated; skipping seed")
        return

    for entry in SAMPLE_JOBS:
        db_session.add(Job(**entry))
    db_session.commit()
    logger.info("Seeded %d sample jobs", len(SAMPLE_JOBS))


def seed_with_new_session() -> None:
    """Helper used by scripts to seed using a fresh session."""
    db = SessionLocal()
    try:
        seed_default_data(db)
    finally:
        db.close()
