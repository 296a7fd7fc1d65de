"""Shared test fixtures."""

import os

# Keep the app's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

from fintrack.database import Base, get_db
from fintrack.main import app
from fintrack.models.record import Record  # noqa: F401
from fintrack.schemas.category import CategoryCreate
from fintrack.schemas.record import BulkResponse, FetchResponse, RecordResponse
from fintrack.schemas.transaction import TransactionCreate, TransactionType
from fintrack.services.category_service import CategoryService
from fintrack.services.transaction_service import TransactionService
from fintrack.store import RecordStore, SQLRecordStore


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def store(db_session):
    """Record store over the test database."""
    return SQLRecordStore(db_session)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class FailingStore(RecordStore):
    """Record store whose every request fails."""

    message = "record store unavailable"

    def fetch_records(self, table, params=None):
        return FetchResponse(success=False, message=self.message)

    def get_record_by_id(self, table, record_id, fields=None):
        return RecordResponse(success=False, message=self.message)

    def create_record(self, table, records):
        return BulkResponse(success=False, message=self.message)

    def update_record(self, table, records):
        return BulkResponse(success=False, message=self.message)

    def delete_record(self, table, record_ids):
        return BulkResponse(success=False, message=self.message)


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def sample_categories(store):
    """Create the Food and Salary categories."""
    service = CategoryService(store)
    return [
        service.create(CategoryCreate(name="Food")),
        service.create(CategoryCreate(name="Salary")),
    ]


@pytest.fixture
def sample_transactions(store, sample_categories):
    """January income and expenses plus one February expense."""
    service = TransactionService(store)
    rows = [
        ("Paycheck", "1000.00", TransactionType.income, date(2024, 1, 1), "Salary"),
        ("Groceries", "20.00", TransactionType.expense, date(2024, 1, 5), "Food"),
        ("Snacks", "5.00", TransactionType.expense, date(2024, 1, 9), "Food"),
        ("Rent", "375.00", TransactionType.expense, date(2024, 1, 15), None),
        ("Dinner", "42.50", TransactionType.expense, date(2024, 2, 3), "Food"),
    ]
    return [
        service.create(TransactionCreate(
            description=description,
            amount=Decimal(amount),
            type=txn_type,
            date=txn_date,
            category=category
        ))
        for description, amount, txn_type, txn_date, category in rows
    ]
