"""
Summary statistics over already-fetched budgets, goals and transactions.

Every function here is a pure reduction: it reads its input, never mutates
it, and never raises. Missing or malformed amounts count as 0 and a zero
denominator yields a percentage of 0.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from fintrack.schemas.budget import Budget
from fintrack.schemas.goal import SavingsGoal
from fintrack.schemas.summary import BudgetSummary, CategoryAmount, GoalsSummary, MonthTrend
from fintrack.schemas.transaction import Transaction, TransactionType
from fintrack.services.records import to_decimal

UNCATEGORIZED = "Uncategorized"


def percent_of(part: Decimal, whole: Decimal) -> float:
    """part / whole * 100, or 0 when whole is not positive."""
    if whole > 0:
        return float(part / whole * 100)
    return 0.0


def in_month(transaction: Transaction, month: str) -> bool:
    """A transaction belongs to a month when its ISO date starts with YYYY-MM."""
    return str(transaction.date or "").startswith(month)


def summarize_budgets(budgets: Iterable[Budget]) -> BudgetSummary:
    """
    Totals for a month's budgets.
    The caller filters the budgets down to one month beforehand.
    """
    budgets = list(budgets)
    total_budget = sum((to_decimal(b.monthly_limit) for b in budgets), Decimal("0"))
    total_spent = sum((to_decimal(b.spent) for b in budgets), Decimal("0"))

    return BudgetSummary(
        total_budget=float(total_budget),
        total_spent=float(total_spent),
        remaining=float(total_budget - total_spent),
        percentage=percent_of(total_spent, total_budget),
        categories=len(budgets)
    )


def is_completed(goal: SavingsGoal) -> bool:
    """A goal is completed once the saved amount reaches its target."""
    return to_decimal(goal.current_amount) >= to_decimal(goal.target_amount)


def summarize_goals(goals: Iterable[SavingsGoal]) -> GoalsSummary:
    """Totals and progress across all savings goals."""
    goals = list(goals)
    total_target = sum((to_decimal(g.target_amount) for g in goals), Decimal("0"))
    total_current = sum((to_decimal(g.current_amount) for g in goals), Decimal("0"))
    completed = sum(1 for g in goals if is_completed(g))

    return GoalsSummary(
        total_target_amount=float(total_target),
        total_current_amount=float(total_current),
        total_remaining=float(total_target - total_current),
        overall_progress=percent_of(total_current, total_target),
        active_goals_count=len(goals) - completed,
        completed_goals_count=completed,
        total_goals_count=len(goals)
    )


def month_totals(transactions: Iterable[Transaction], month: str) -> MonthTrend:
    """Income, expenses and net of the transactions dated in ``month``."""
    income = Decimal("0")
    expenses = Decimal("0")
    for t in transactions:
        if not in_month(t, month):
            continue
        if t.type == TransactionType.income:
            income += to_decimal(t.amount)
        elif t.type == TransactionType.expense:
            expenses += to_decimal(t.amount)

    return MonthTrend(
        month=month,
        income=float(income),
        expenses=float(expenses),
        net=float(income - expenses)
    )


def income_expense_trend(transactions: Iterable[Transaction], months: Sequence[str]) -> List[MonthTrend]:
    """
    Income, expenses and net per month, in the order ``months`` was given.
    """
    transactions = list(transactions)
    return [month_totals(transactions, month) for month in months]


def category_breakdown(transactions: Iterable[Transaction], month: str) -> List[CategoryAmount]:
    """
    Expense totals per category for one month, in order of first appearance.
    """
    totals: Dict[str, Decimal] = {}
    for t in transactions:
        if t.type != TransactionType.expense or not in_month(t, month):
            continue
        category = t.category or UNCATEGORIZED
        totals[category] = totals.get(category, Decimal("0")) + to_decimal(t.amount)

    return [
        CategoryAmount(category=category, amount=float(amount))
        for category, amount in totals.items()
    ]
