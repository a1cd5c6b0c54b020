import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import todo_service.models  # noqa: F401 - registers Todo on Base.metadata
from todo_service.core.database import Base, get_db
from todo_service.main import app


@pytest.fixture()
def _engine():
    # one shared in-memory connection so every session sees the same tables
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def _SessionLocal(_engine):
    return sessionmaker(bind=_engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db_session(_SessionLocal):
    session = _SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(_SessionLocal):
    def _get_test_db():
        db = _SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    # no context manager: the lifespan hook would touch the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()
