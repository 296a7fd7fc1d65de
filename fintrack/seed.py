"""
Seed script for default categories.
"""

import logging

from fintrack.database import SessionLocal, init_db
from fintrack.schemas.record import FetchParams, PagingInfo
from fintrack.services.category_service import TABLE
from fintrack.store import RecordStore, SQLRecordStore
from fintrack.store.base import RecordStoreError

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "Income",
    "Housing",
    "Utilities",
    "Transportation",
    "Groceries",
    "Dining",
    "Shopping",
    "Entertainment",
    "Health",
    "Travel",
    "Savings",
    "Other",
]


def seed_categories(store: RecordStore) -> int:
    """
    Insert the default categories when none exist yet.
    Returns the number of categories created.
    """
    existing = store.fetch_records(TABLE, FetchParams(paging_info=PagingInfo(limit=1)))
    if not existing.success:
        raise RecordStoreError(existing.message or "Failed to fetch categories")
    if existing.total > 0:
        logger.info(f"Categories already seeded ({existing.total} categories exist)")
        return 0

    response = store.create_record(TABLE, [
        {"Name": name, "name_c": name} for name in DEFAULT_CATEGORIES
    ])
    if not response.success:
        raise RecordStoreError(response.message or "Failed to seed categories")

    created = sum(1 for r in response.results if r.success)
    logger.info(f"Successfully seeded {created} categories")
    return created


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        seed_categories(SQLRecordStore(db))
    finally:
        db.close()


if __name__ == "__main__":
    main()
