"""Service for savings goals and their contributions."""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fintrack.schemas.goal import Priority, SavingsGoal, SavingsGoalCreate, SavingsGoalUpdate
from fintrack.schemas.record import FetchParams, OrderBy, SortType
from fintrack.schemas.summary import GoalsSummaryResult
from fintrack.services.analytics import summarize_goals
from fintrack.services.records import checked_data, checked_record, first_successful, text, to_decimal
from fintrack.store.base import RecordNotFoundError, RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

TABLE = "savingsGoals_c"
FIELDS = ["Name", "name_c", "target_amount_c", "current_amount_c", "deadline_c", "priority_c", "CreatedOn"]


def goal_from_record(record: Dict[str, Any]) -> SavingsGoal:
    """
    Map a ``savingsGoals_c`` record.

    Defaults: name falls back to Name, amounts to 0, priority to medium.
    """
    try:
        priority = Priority(record.get("priority_c") or Priority.medium)
    except ValueError:
        logger.debug(f"Unknown goal priority {record.get('priority_c')!r}, using medium")
        priority = Priority.medium

    return SavingsGoal(
        id=record["Id"],
        name=text(record.get("name_c") or record.get("Name")),
        target_amount=to_decimal(record.get("target_amount_c")),
        current_amount=to_decimal(record.get("current_amount_c")),
        deadline=record.get("deadline_c"),
        priority=priority,
        created_at=record.get("CreatedOn")
    )


class SavingsGoalService:
    """Savings goals stored in the ``savingsGoals_c`` table."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_all(self) -> List[SavingsGoal]:
        response = self.store.fetch_records(TABLE, FetchParams(
            fields=FIELDS,
            order_by=[OrderBy(field_name="priority_c", sort_type=SortType.asc)]
        ))
        return [goal_from_record(r) for r in checked_data(response, "savings goals")]

    def get_by_id(self, goal_id: int) -> Optional[SavingsGoal]:
        response = self.store.get_record_by_id(TABLE, goal_id, fields=FIELDS)
        record = checked_record(response, f"savings goal {goal_id}")
        return goal_from_record(record) if record else None

    def create(self, data: SavingsGoalCreate) -> Optional[SavingsGoal]:
        response = self.store.create_record(TABLE, [{
            "Name": data.name,
            "name_c": data.name,
            "target_amount_c": data.target_amount,
            "current_amount_c": 0,
            "deadline_c": data.deadline.isoformat() if data.deadline else None,
            "priority_c": data.priority.value
        }])
        created = first_successful(response, "create", "savings goals")
        return goal_from_record(created) if created else None

    def update(self, goal_id: int, data: SavingsGoalUpdate) -> Optional[SavingsGoal]:
        changes = data.model_dump(exclude_unset=True)
        update_data: Dict[str, Any] = {"Id": int(goal_id)}

        if changes.get("name"):
            update_data["Name"] = changes["name"]
            update_data["name_c"] = changes["name"]
        if changes.get("target_amount") is not None:
            update_data["target_amount_c"] = changes["target_amount"]
        if changes.get("current_amount") is not None:
            update_data["current_amount_c"] = changes["current_amount"]
        if changes.get("deadline"):
            update_data["deadline_c"] = changes["deadline"].isoformat()
        if changes.get("priority"):
            update_data["priority_c"] = Priority(changes["priority"]).value

        response = self.store.update_record(TABLE, [update_data])
        updated = first_successful(response, "update", "savings goals")
        return goal_from_record(updated) if updated else None

    def add_contribution(self, goal_id: int, amount: Decimal) -> Optional[SavingsGoal]:
        """
        Add ``amount`` (negative to withdraw) to a goal's current amount.

        This reads the goal and writes the new total back. There is no
        version check between the two steps, so concurrent contributions
        to the same goal can overwrite each other (last write wins).
        """
        goal = self.get_by_id(goal_id)
        if goal is None:
            raise RecordNotFoundError(f"Savings goal {goal_id} not found")

        new_amount = goal.current_amount + to_decimal(amount)

        response = self.store.update_record(TABLE, [{
            "Id": int(goal_id),
            "current_amount_c": new_amount
        }])
        updated = first_successful(response, "add contribution to", "savings goals")
        if not updated:
            return None

        return goal.model_copy(update={
            "current_amount": to_decimal(updated.get("current_amount_c"))
        })

    def delete(self, goal_id: int) -> bool:
        response = self.store.delete_record(TABLE, [int(goal_id)])
        return first_successful(response, "delete", "savings goals") is not None

    def get_goals_summary(self) -> GoalsSummaryResult:
        """Summary across all goals; a failed fetch sets ``error``."""
        try:
            goals = self.get_all()
        except RecordStoreError as e:
            logger.error(f"Error getting goals summary: {e}")
            return GoalsSummaryResult(error=str(e))

        return GoalsSummaryResult(summary=summarize_goals(goals))
