"""
Summary schemas produced by the aggregation layer.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class BudgetSummary(BaseModel):
    total_budget: float = 0
    total_spent: float = 0
    remaining: float = 0
    percentage: float = 0
    categories: int = 0


class GoalsSummary(BaseModel):
    total_target_amount: float = 0
    total_current_amount: float = 0
    total_remaining: float = 0
    overall_progress: float = 0
    active_goals_count: int = 0
    completed_goals_count: int = 0
    total_goals_count: int = 0


class MonthTrend(BaseModel):
    month: str
    income: float
    expenses: float
    net: float


class CategoryAmount(BaseModel):
    category: str
    amount: float


# Service-level results. ``error`` is set when the collection could not be
# fetched, in which case the summary is the empty one.

class BudgetSummaryResult(BaseModel):
    month: str
    summary: BudgetSummary = Field(default_factory=BudgetSummary)
    error: Optional[str] = None


class GoalsSummaryResult(BaseModel):
    summary: GoalsSummary = Field(default_factory=GoalsSummary)
    error: Optional[str] = None


class TrendResult(BaseModel):
    items: List[MonthTrend] = Field(default_factory=list)
    error: Optional[str] = None


class BreakdownResult(BaseModel):
    month: str
    items: List[CategoryAmount] = Field(default_factory=list)
    error: Optional[str] = None


class DashboardSummary(BaseModel):
    month: str
    budgets: BudgetSummaryResult
    goals: GoalsSummaryResult
    by_category: BreakdownResult
    trend: TrendResult
