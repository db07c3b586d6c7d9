from contextlib import contextmanager
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel
from ..core.config import settings


# Helper function to ensure URL format is correct
def get_db_url():
    url = settings.DATABASE_URL
    if not url:
        return "sqlite:///./organizer.db"
    # Only the sync drivers are used
    return url.replace("+aiosqlite", "").replace("+asyncpg", "").replace("postgres://", "postgresql://")


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores declared ON DELETE rules unless the pragma is set per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


db_url = get_db_url()

# --- CONFIGURATION FOR SQLITE ---
if db_url.startswith("sqlite"):
    sync_engine = create_engine(
        db_url,
        echo=settings.DB_ECHO,
        connect_args={"check_same_thread": False}
    )
    enable_sqlite_foreign_keys(sync_engine)

# --- CONFIGURATION FOR POSTGRESQL ---
else:
    sync_engine = create_engine(
        db_url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10
    )


def create_db_and_tables(engine: Engine = sync_engine) -> None:
    # Table models must be imported so they register on the metadata
    from .. import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# Dependency: one session per request
def get_session():
    with Session(sync_engine) as session:
        yield session


@contextmanager
def atomic(session: Session):
    """Commit once at the end of the block; roll back everything on any error."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
