"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import List, Optional

from fintrack.config import settings
from fintrack.dependencies import get_budget_service, get_savings_goal_service, get_transaction_service
from fintrack.schemas.budget import MONTH_PATTERN
from fintrack.schemas.summary import DashboardSummary
from fintrack.services.budget_service import BudgetService
from fintrack.services.savings_goal_service import SavingsGoalService
from fintrack.services.transaction_service import TransactionService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def trailing_months(month: str, count: int) -> List[str]:
    """The ``count`` months ending with ``month``, oldest first."""
    year, m = map(int, month.split('-'))
    months = []
    for i in range(count - 1, -1, -1):
        mm = m - i
        y = year
        while mm <= 0:
            mm += 12
            y -= 1
        months.append(f"{y:04d}-{mm:02d}")
    return months


@router.get("/summary", response_model=DashboardSummary)
def get_dashboard_summary(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    transactions: TransactionService = Depends(get_transaction_service),
    budgets: BudgetService = Depends(get_budget_service),
    goals: SavingsGoalService = Depends(get_savings_goal_service)
):
    """
    Get dashboard summary for a month (defaults to the current month).
    Returns: budgets, goals, by_category, trend
    """
    if not month:
        month = date.today().strftime("%Y-%m")

    return DashboardSummary(
        month=month,
        budgets=budgets.get_budget_summary(month),
        goals=goals.get_goals_summary(),
        by_category=transactions.get_category_breakdown(month),
        trend=transactions.get_income_expense_trend(
            trailing_months(month, settings.dashboard_trend_months)
        )
    )
