"""Service for transactions and the analytics computed from them."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from fintrack.schemas.record import FetchParams, Operator, OrderBy, SortType, WhereCondition, WhereGroup
from fintrack.schemas.summary import BreakdownResult, TrendResult
from fintrack.schemas.transaction import Transaction, TransactionCreate, TransactionType, TransactionUpdate
from fintrack.services.analytics import category_breakdown, income_expense_trend
from fintrack.services.category_service import CategoryService
from fintrack.services.records import (
    checked_data,
    checked_record,
    first_successful,
    lookup_name,
    text,
    to_decimal,
)
from fintrack.store.base import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

TABLE = "transactions_c"
FIELDS = ["Name", "amount_c", "type_c", "date_c", "description_c", "notes_c", "category_c", "CreatedOn"]
NEWEST_FIRST = [OrderBy(field_name="date_c", sort_type=SortType.desc)]


def transaction_from_record(record: Dict[str, Any]) -> Transaction:
    """
    Map a ``transactions_c`` record.

    Defaults: description falls back to Name, amount to 0, type to expense,
    notes to "" and category to "" when the lookup is empty.
    """
    try:
        txn_type = TransactionType(record.get("type_c") or TransactionType.expense)
    except ValueError:
        logger.debug(f"Unknown transaction type {record.get('type_c')!r}, using expense")
        txn_type = TransactionType.expense

    return Transaction(
        id=record["Id"],
        description=text(record.get("description_c") or record.get("Name")),
        amount=to_decimal(record.get("amount_c")),
        type=txn_type,
        date=record.get("date_c"),
        notes=text(record.get("notes_c")),
        category=lookup_name(record.get("category_c")),
        created_at=record.get("CreatedOn")
    )


class TransactionService:
    """Transactions stored in the ``transactions_c`` table."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.categories = CategoryService(store)

    def _fetch(self, params: FetchParams, what: str) -> List[Transaction]:
        response = self.store.fetch_records(TABLE, params)
        return [transaction_from_record(r) for r in checked_data(response, what)]

    def get_all(self) -> List[Transaction]:
        return self._fetch(FetchParams(fields=FIELDS, order_by=NEWEST_FIRST), "transactions")

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        response = self.store.get_record_by_id(TABLE, transaction_id, fields=FIELDS)
        record = checked_record(response, f"transaction {transaction_id}")
        return transaction_from_record(record) if record else None

    def get_by_month(self, month: str) -> List[Transaction]:
        """Transactions dated within ``month`` (YYYY-MM), newest first."""
        return self._fetch(FetchParams(
            fields=FIELDS,
            where=[WhereCondition(field_name="date_c", operator=Operator.starts_with, values=[month])],
            order_by=NEWEST_FIRST
        ), "transactions by month")

    def get_by_category(self, category: str) -> List[Transaction]:
        return self._fetch(FetchParams(
            fields=FIELDS,
            where_groups=[WhereGroup(conditions=[
                WhereCondition(field_name="category_c.Name", operator=Operator.equal_to, values=[category])
            ])],
            order_by=NEWEST_FIRST
        ), "transactions by category")

    def create(self, data: TransactionCreate) -> Optional[Transaction]:
        category = self.categories.find_lookup(data.category) if data.category else None

        response = self.store.create_record(TABLE, [{
            "Name": data.description,
            "description_c": data.description,
            "amount_c": data.amount,
            "type_c": data.type.value,
            "date_c": data.date.isoformat(),
            "notes_c": data.notes or "",
            "category_c": category
        }])
        created = first_successful(response, "create", "transactions")
        return transaction_from_record(created) if created else None

    def update(self, transaction_id: int, data: TransactionUpdate) -> Optional[Transaction]:
        changes = data.model_dump(exclude_unset=True)
        update_data: Dict[str, Any] = {"Id": int(transaction_id)}

        if changes.get("description"):
            update_data["Name"] = changes["description"]
            update_data["description_c"] = changes["description"]
        if changes.get("amount") is not None:
            update_data["amount_c"] = changes["amount"]
        if changes.get("type") is not None:
            update_data["type_c"] = TransactionType(changes["type"]).value
        if changes.get("date") is not None:
            update_data["date_c"] = changes["date"].isoformat()
        if "notes" in changes:
            update_data["notes_c"] = changes["notes"] or ""
        if changes.get("category"):
            # An unknown category leaves the current one in place
            category = self.categories.find_lookup(changes["category"])
            if category:
                update_data["category_c"] = category

        response = self.store.update_record(TABLE, [update_data])
        updated = first_successful(response, "update", "transactions")
        return transaction_from_record(updated) if updated else None

    def delete(self, transaction_id: int) -> bool:
        response = self.store.delete_record(TABLE, [int(transaction_id)])
        return first_successful(response, "delete", "transactions") is not None

    def get_income_expense_trend(self, months: Sequence[str]) -> TrendResult:
        """
        Income/expense/net per month, one fetch per month.
        A failed fetch yields an empty trend with ``error`` set.
        """
        items = []
        try:
            for month in months:
                items.extend(income_expense_trend(self.get_by_month(month), [month]))
        except RecordStoreError as e:
            logger.error(f"Error getting income expense trend: {e}")
            return TrendResult(error=str(e))

        return TrendResult(items=items)

    def get_category_breakdown(self, month: str) -> BreakdownResult:
        try:
            transactions = self.get_by_month(month)
        except RecordStoreError as e:
            logger.error(f"Error getting category breakdown: {e}")
            return BreakdownResult(month=month, error=str(e))

        return BreakdownResult(month=month, items=category_breakdown(transactions, month))
