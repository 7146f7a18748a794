"""Database module initialization."""

from .models import Base, Job
from .session import SessionLocal, engine, get_db
from .utils import seed_default_data

__all__ = [
    "Base",
    "Job",
    "get_db",
    "engine",
    "SessionLocal",
    "seed_default_data",
]
