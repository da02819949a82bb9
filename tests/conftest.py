"""Pytest fixtures: an in-memory seeded database and an API client bound to it."""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.db.database import create_tables, get_db
from src.db.seed import seed_database


@pytest.fixture
def engine():
    """Fresh in-memory SQLite engine; one shared connection so every session sees the same data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def empty_db(engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db(empty_db: Session) -> Session:
    """Session over a database holding the seed data."""
    seed_database(empty_db)
    return empty_db


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    from src.api.app import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_commit(db: Session, monkeypatch) -> Session:
    """Seeded session whose commits fail the way a dropped connection would."""

    def commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", commit)
    return db


@pytest.fixture
def drop_tables(db: Session):
    """Drop tables (children first) so later reads hit a storage error."""

    def drop(*tables):
        for table in tables:
            db.execute(text(f"DROP TABLE {table}"))
        db.commit()

    return drop
