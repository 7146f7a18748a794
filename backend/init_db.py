"""Database initialization entrypoint."""

from prodfloor.db.utils import seed_with_new_session


def init_db() -> None:
    """Create tables and seed sample jobs using a fresh session."""
    seed_with_new_session()


if __name__ == "__main__":
    init_db()
