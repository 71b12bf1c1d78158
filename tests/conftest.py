"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before and dropped after every
test, and each test's session is rolled back.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from beer_bank.main import app
from beer_bank.models import Base
from beer_bank.models.base import get_db
from beer_bank.repositories.account_repository import (
    InMemoryAccountRepository,
    SqlAlchemyAccountRepository,
)
from beer_bank.services.ledger_service import LedgerService


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct repository testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository():
    return InMemoryAccountRepository()


@pytest.fixture
def service(repository):
    """LedgerService over an in-memory repository."""
    return LedgerService(repository)


@pytest.fixture
def sql_service(db_session):
    """LedgerService over the SQLite test database."""
    return LedgerService(SqlAlchemyAccountRepository(db_session))


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    get_db is overridden so the app uses the test session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
