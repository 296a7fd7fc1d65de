"""
Pydantic schemas package.
"""

from fintrack.schemas.budget import (
    Budget,
    BudgetCreate,
    BudgetUpdate,
    BudgetSpentUpdate,
)
from fintrack.schemas.category import (
    Category,
    CategoryCreate,
)
from fintrack.schemas.goal import (
    Priority,
    SavingsGoal,
    SavingsGoalCreate,
    SavingsGoalUpdate,
    ContributionCreate,
)
from fintrack.schemas.summary import (
    BudgetSummary,
    GoalsSummary,
    MonthTrend,
    CategoryAmount,
    BudgetSummaryResult,
    GoalsSummaryResult,
    TrendResult,
    BreakdownResult,
    DashboardSummary,
)
from fintrack.schemas.transaction import (
    TransactionType,
    Transaction,
    TransactionCreate,
    TransactionUpdate,
)

__all__ = [
    "Budget",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetSpentUpdate",
    "Category",
    "CategoryCreate",
    "Priority",
    "SavingsGoal",
    "SavingsGoalCreate",
    "SavingsGoalUpdate",
    "ContributionCreate",
    "BudgetSummary",
    "GoalsSummary",
    "MonthTrend",
    "CategoryAmount",
    "BudgetSummaryResult",
    "GoalsSummaryResult",
    "TrendResult",
    "BreakdownResult",
    "DashboardSummary",
    "TransactionType",
    "Transaction",
    "TransactionCreate",
    "TransactionUpdate",
]
