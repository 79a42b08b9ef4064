"""Pytest fixtures shared by unit and integration tests.

Provides:
- An in-memory SQLite engine with all tables created
- A database session per test
- A product repository bound to that session
- A FastAPI TestClient whose get_db dependency uses the test engine

Usage:
    def test_find(product_repository):
        product_repository.create(Product("1", "Pen", 2.5))
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from models.base import Base
from infrastructure.repositories.product_repository import SqlAlchemyProductRepository


@pytest.fixture(scope="function")
def db_engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory database for each test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database, including sessions opened by TestClient threads.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine: Engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def product_repository(db_session: Session) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(db_session)


@pytest.fixture(scope="function")
def client(db_engine: Engine):
    """TestClient for the FastAPI app backed by the test database.

    The client is not entered as a context manager, so the lifespan hook
    (which creates tables on the configured DATABASE_URL) does not run.
    """
    from fastapi.testclient import TestClient

    from database import get_db
    from main import app

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
