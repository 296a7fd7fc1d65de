"""Service for the category lookup table."""

import logging
from typing import Any, Dict, List, Optional

from fintrack.schemas.category import Category, CategoryCreate
from fintrack.schemas.record import FetchParams, OrderBy, WhereCondition, Operator
from fintrack.services.records import checked_data, first_successful, text
from fintrack.store.base import RecordStore

logger = logging.getLogger(__name__)

TABLE = "categories_c"
FIELDS = ["Name", "name_c", "CreatedOn"]


def category_from_record(record: Dict[str, Any]) -> Category:
    """Map a ``categories_c`` record; the name falls back to the record Name."""
    return Category(
        id=record["Id"],
        name=text(record.get("name_c") or record.get("Name")),
        created_at=record.get("CreatedOn")
    )


class CategoryService:
    """CRUD over categories, plus name lookup for the other services."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> List[Category]:
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=FIELDS,
            order_by=[OrderBy(field_name="name_c")]
        ))
        return [category_from_record(r) for r in checked_data(response, "categories")]

    def get_by_name(self, name: str) -> Optional[Category]:
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=FIELDS,
            where=[WhereCondition(field_name="name_c", operator=Operator.equal_to, values=[name])]
        ))
        records = checked_data(response, "categories")
        return category_from_record(records[0]) if records else None

    def find_lookup(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Lookup value referencing the category called ``name``.
        Returns None when no such category exists.
        """
        category = self.get_by_name(name)
        if category is None:
            logger.warning(f"Category {name!r} not found")
            return None
        return {"Id": category.id, "Name": category.name}

    def create(self, data: CategoryCreate) -> Optional[Category]:
        response = self.store.create_record(TABLE, [{
            "Name": data.name,
            "name_c": data.name
        }])
        created = first_successful(response, "create", "categories")
        return category_from_record(created) if created else None
