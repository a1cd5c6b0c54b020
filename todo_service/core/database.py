import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from todo_service.core.config import settings

logger = logging.getLogger(__name__)

# Create the SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
    echo=settings.DEBUG,
)

# Create sessionmaker factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create a base class for our models
Base = declarative_base()


# Dependency to get a database session, one per request
def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Scope a unit of work on ``session``.

    Commits when the block exits normally. Any exception raised inside the
    block (or by the commit itself) rolls the session back and is re-raised
    unchanged, so store faults still reach the caller.
    """
    try:
        yield session
        session.commit()
    except Exception as exc:
        # the traceback is left to whoever handles the re-raised error
        logger.error("Transaction failed, rolling back: %r", exc)
        session.rollback()
        raise


# init db
def init_db() -> None:
    # important: ensures models are registered before creating tables
    import todo_service.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized")


# seed_db() - ONLY loads data, and only into an empty table
def seed_db(session_factory=SessionLocal, seed_file: Path | None = None) -> int:
    from todo_service.models import Todo

    seed_file = Path(seed_file or settings.SEED_FILE)
    session = session_factory()
    try:
        if session.query(Todo).count() > 0:
            logger.info("Skipping seed, todos table is not empty")
            return 0
        if not seed_file.exists():
            logger.warning("Seed file %s not found", seed_file)
            return 0

        todos_data = json.loads(seed_file.read_text())
        with transaction(session):
            session.add_all(Todo(**todo_data) for todo_data in todos_data)
        logger.info("Loaded %d todos", len(todos_data))
        return len(todos_data)
    finally:
        session.close()
