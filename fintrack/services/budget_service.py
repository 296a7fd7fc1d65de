"""Service for monthly category budgets."""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fintrack.schemas.budget import Budget, BudgetCreate, BudgetUpdate
from fintrack.schemas.record import FetchParams, Operator, OrderBy, SortType, WhereCondition, WhereGroup
from fintrack.schemas.summary import BudgetSummaryResult
from fintrack.services.analytics import summarize_budgets
from fintrack.services.category_service import CategoryService
from fintrack.services.records import checked_data, checked_record, first_successful, lookup_name, to_decimal
from fintrack.store.base import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

TABLE = "budgets_c"
FIELDS = ["Name", "month_c", "monthly_limit_c", "spent_c", "rollover_c", "category_c"]


def budget_from_record(record: Dict[str, Any]) -> Budget:
    """Map a ``budgets_c`` record. Amounts default to 0, category to ""."""
    return Budget(
        id=record["Id"],
        category=lookup_name(record.get("category_c")),
        month=record.get("month_c"),
        monthly_limit=to_decimal(record.get("monthly_limit_c")),
        spent=to_decimal(record.get("spent_c")),
        rollover=to_decimal(record.get("rollover_c"))
    )


class BudgetService:
    """Budgets stored in the ``budgets_c`` table, one per category and month."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.categories = CategoryService(store)

    def get_all(self) -> List[Budget]:
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=FIELDS,
            order_by=[OrderBy(field_name="month_c", sort_type=SortType.desc)]
        ))
        return [budget_from_record(r) for r in checked_data(response, "budgets")]

    def get_by_id(self, budget_id: int) -> Optional[Budget]:
        response = self.store.get_record_by_id(TABLE, budget_id, fields=FIELDS)
        record = checked_record(response, f"budget {budget_id}")
        return budget_from_record(record) if record else None

    def get_by_month(self, month: str) -> List[Budget]:
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=FIELDS,
            where=[WhereCondition(field_name="month_c", operator=Operator.equal_to, values=[month])]
        ))
        return [budget_from_record(r) for r in checked_data(response, "budgets by month")]

    def create(self, data: BudgetCreate) -> Optional[Budget]:
        category = self.categories.find_lookup(data.category)

        response = self.store.create_record(TABLE, [{
            "Name": f"{data.category} - {data.month}",
            "month_c": data.month,
            "monthly_limit_c": data.monthly_limit,
            "spent_c": 0,
            "rollover_c": 0,
            "category_c": category
        }])
        created = first_successful(response, "create", "budgets")
        return budget_from_record(created) if created else None

    def update(self, budget_id: int, data: BudgetUpdate) -> Optional[Budget]:
        changes = data.model_dump(exclude_unset=True)
        update_data: Dict[str, Any] = {"Id": int(budget_id)}

        if changes.get("monthly_limit") is not None:
            update_data["monthly_limit_c"] = changes["monthly_limit"]
        if changes.get("spent") is not None:
            update_data["spent_c"] = changes["spent"]
        if changes.get("rollover") is not None:
            update_data["rollover_c"] = changes["rollover"]
        if changes.get("month"):
            update_data["month_c"] = changes["month"]
        if changes.get("category"):
            category = self.categories.find_lookup(changes["category"])
            if category:
                update_data["category_c"] = category

        response = self.store.update_record(TABLE, [update_data])
        updated = first_successful(response, "update", "budgets")
        return budget_from_record(updated) if updated else None

    def update_spent(self, category: str, month: str, amount: Decimal) -> Optional[Budget]:
        """
        Set the spent amount of the budget for ``category`` in ``month``.
        Returns None when there is no such budget.
        """
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=["category_c"],
            where=[WhereCondition(field_name="month_c", operator=Operator.equal_to, values=[month])],
            where_groups=[WhereGroup(conditions=[
                WhereCondition(field_name="category_c.Name", operator=Operator.equal_to, values=[category])
            ])]
        ))
        found = checked_data(response, "budget for spent update")
        if not found:
            return None

        response = self.store.update_record(TABLE, [{"Id": found[0]["Id"], "spent_c": amount}])
        updated = first_successful(response, "update spent amount of", "budgets")
        return budget_from_record(updated) if updated else None

    def delete(self, budget_id: int) -> bool:
        response = self.store.delete_record(TABLE, [int(budget_id)])
        return first_successful(response, "delete", "budgets") is not None

    def get_budget_summary(self, month: str) -> BudgetSummaryResult:
        """Summary of the budgets for ``month``; a failed fetch sets ``error``."""
        try:
            budgets = self.get_by_month(month)
        except RecordStoreError as e:
            logger.error(f"Error getting budget summary: {e}")
            return BudgetSummaryResult(month=month, error=str(e))

        return BudgetSummaryResult(month=month, summary=summarize_budgets(budgets))
