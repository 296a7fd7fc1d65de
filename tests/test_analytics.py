"""Tests for the budget, goal and transaction summaries."""

from decimal import Decimal

from fintrack.schemas.budget import Budget
from fintrack.schemas.goal import SavingsGoal
from fintrack.schemas.transaction import Transaction, TransactionType
from fintrack.services.analytics import (
    category_breakdown,
    income_expense_trend,
    percent_of,
    summarize_budgets,
    summarize_goals,
)


def make_budget(id, limit, spent, category="Food", month="2024-01"):
    return Budget(
        id=id,
        category=category,
        month=month,
        monthly_limit=Decimal(str(limit)),
        spent=Decimal(str(spent))
    )


def make_goal(id, target, current):
    return SavingsGoal(
        id=id,
        name=f"Goal {id}",
        target_amount=Decimal(str(target)),
        current_amount=Decimal(str(current))
    )


def make_txn(id, txn_type, amount, txn_date, category=""):
    return Transaction(
        id=id,
        description=f"Transaction {id}",
        amount=Decimal(str(amount)),
        type=txn_type,
        date=txn_date,
        category=category
    )


class TestPercentOf:
    """Test zero-safe percentages."""

    def test_regular(self):
        """Should return part of whole as a percentage."""
        assert percent_of(Decimal("1"), Decimal("4")) == 25.0

    def test_zero_denominator(self):
        """Zero whole should give exactly 0."""
        assert percent_of(Decimal("50"), Decimal("0")) == 0.0


class TestSummarizeBudgets:
    """Test budget totals."""

    def test_scenario(self):
        """Over-spending one budget still sums across all."""
        summary = summarize_budgets([make_budget(1, 500, 600), make_budget(2, 300, 100)])
        assert summary.total_budget == 800
        assert summary.total_spent == 700
        assert summary.remaining == 100
        assert summary.percentage == 87.5
        assert summary.categories == 2

    def test_empty(self):
        """Empty input should give an all-zero summary."""
        summary = summarize_budgets([])
        assert summary.model_dump() == {
            "total_budget": 0,
            "total_spent": 0,
            "remaining": 0,
            "percentage": 0,
            "categories": 0,
        }

    def test_zero_limit(self):
        """Spending against zero limits should not divide by zero."""
        summary = summarize_budgets([make_budget(1, 0, 40)])
        assert summary.percentage == 0
        assert summary.remaining == -40

    def test_negative_remaining(self):
        """Over budget is reported as negative remaining."""
        summary = summarize_budgets([make_budget(1, 100, 150)])
        assert summary.remaining == -50
        assert summary.percentage == 150.0

    def test_additivity(self):
        """Summarizing a concatenation equals combining the two summaries."""
        first = [make_budget(1, 500, 600), make_budget(2, 300, 100)]
        second = [make_budget(3, 200, 50)]
        a, b = summarize_budgets(first), summarize_budgets(second)
        combined = summarize_budgets(first + second)

        assert combined.total_budget == a.total_budget + b.total_budget
        assert combined.total_spent == a.total_spent + b.total_spent
        assert combined.categories == a.categories + b.categories
        assert combined.percentage == 75.0

    def test_does_not_mutate(self):
        """Input list and items should be unchanged and results repeatable."""
        budgets = [make_budget(1, 500, 600), make_budget(2, 300, 100)]
        snapshot = [b.model_copy() for b in budgets]

        assert summarize_budgets(budgets) == summarize_budgets(budgets)
        assert budgets == snapshot


class TestSummarizeGoals:
    """Test savings goal totals and counts."""

    def test_scenario(self):
        """One complete and one active goal."""
        summary = summarize_goals([make_goal(1, 1000, 1000), make_goal(2, 500, 200)])
        assert summary.total_target_amount == 1500
        assert summary.total_current_amount == 1200
        assert summary.total_remaining == 300
        assert summary.overall_progress == 80
        assert summary.active_goals_count == 1
        assert summary.completed_goals_count == 1
        assert summary.total_goals_count == 2

    def test_empty(self):
        """No goals should give zero progress."""
        summary = summarize_goals([])
        assert summary.overall_progress == 0
        assert summary.total_goals_count == 0

    def test_zero_targets(self):
        """Zero targets count as completed and give zero progress."""
        summary = summarize_goals([make_goal(1, 0, 0)])
        assert summary.overall_progress == 0
        assert summary.completed_goals_count == 1
        assert summary.active_goals_count == 0

    def test_partition(self):
        """Active and completed goals should always add up to the total."""
        goals = [
            make_goal(1, 100, 99.99),
            make_goal(2, 100, 100),
            make_goal(3, 100, 250),
            make_goal(4, 50, 0),
            make_goal(5, 0, 10),
        ]
        summary = summarize_goals(goals)
        assert summary.active_goals_count == 2
        assert summary.completed_goals_count == 3
        assert summary.active_goals_count + summary.completed_goals_count == summary.total_goals_count

    def test_overfunded_remaining_is_negative(self):
        """Saving past the target gives negative remaining."""
        summary = summarize_goals([make_goal(1, 100, 150)])
        assert summary.total_remaining == -50
        assert summary.overall_progress == 150.0

    def test_additivity(self):
        """Sums and counts add across concatenated inputs; progress is recomputed."""
        first = [make_goal(1, 1000, 1000), make_goal(2, 500, 200)]
        second = [make_goal(3, 500, 100)]
        a, b = summarize_goals(first), summarize_goals(second)
        combined = summarize_goals(first + second)

        assert combined.total_target_amount == a.total_target_amount + b.total_target_amount
        assert combined.total_current_amount == a.total_current_amount + b.total_current_amount
        assert combined.active_goals_count == a.active_goals_count + b.active_goals_count
        assert combined.completed_goals_count == a.completed_goals_count + b.completed_goals_count
        assert combined.total_goals_count == a.total_goals_count + b.total_goals_count
        assert combined.overall_progress == 65.0


class TestIncomeExpenseTrend:
    """Test per-month income and expense totals."""

    def test_scenario(self):
        """A month with no transactions should report zeros."""
        transactions = [
            make_txn(1, TransactionType.income, 1000, "2024-01-02"),
            make_txn(2, TransactionType.expense, 250, "2024-01-10"),
            make_txn(3, TransactionType.expense, 150, "2024-01-31"),
        ]
        trend = income_expense_trend(transactions, ["2024-01", "2024-02"])
        assert [t.model_dump() for t in trend] == [
            {"month": "2024-01", "income": 1000, "expenses": 400, "net": 600},
            {"month": "2024-02", "income": 0, "expenses": 0, "net": 0},
        ]

    def test_keeps_requested_order(self):
        """Output follows the order months were requested in."""
        transactions = [
            make_txn(1, TransactionType.expense, 10, "2024-01-02"),
            make_txn(2, TransactionType.expense, 30, "2024-03-02"),
        ]
        trend = income_expense_trend(transactions, ["2024-03", "2024-01"])
        assert [t.month for t in trend] == ["2024-03", "2024-01"]
        assert [t.expenses for t in trend] == [30, 10]

    def test_negative_net(self):
        """Spending more than earned gives a negative net."""
        transactions = [
            make_txn(1, TransactionType.income, 100, "2024-05-01"),
            make_txn(2, TransactionType.expense, 300, "2024-05-02"),
        ]
        assert income_expense_trend(transactions, ["2024-05"])[0].net == -200

    def test_no_months(self):
        """No months requested gives an empty trend."""
        assert income_expense_trend([make_txn(1, TransactionType.income, 5, "2024-01-01")], []) == []

    def test_does_not_mutate(self):
        """Input is unchanged and repeated calls give the same trend."""
        transactions = [
            make_txn(1, TransactionType.income, 100, "2024-05-01"),
            make_txn(2, TransactionType.expense, 30, "2024-06-02"),
        ]
        snapshot = [t.model_copy() for t in transactions]
        months = ["2024-05", "2024-06"]

        assert income_expense_trend(transactions, months) == income_expense_trend(transactions, months)
        assert transactions == snapshot
        assert months == ["2024-05", "2024-06"]


class TestCategoryBreakdown:
    """Test expense totals by category."""

    def test_scenario(self):
        """Income is excluded from the breakdown."""
        transactions = [
            make_txn(1, TransactionType.expense, 20, "2024-01-05", "Food"),
            make_txn(2, TransactionType.expense, 5, "2024-01-06", "Food"),
            make_txn(3, TransactionType.income, 100, "2024-01-07", "Food"),
        ]
        breakdown = category_breakdown(transactions, "2024-01")
        assert [b.model_dump() for b in breakdown] == [{"category": "Food", "amount": 25}]

    def test_uncategorized(self):
        """Missing categories are grouped as Uncategorized."""
        transactions = [make_txn(1, TransactionType.expense, 12, "2024-01-05", "")]
        breakdown = category_breakdown(transactions, "2024-01")
        assert breakdown[0].category == "Uncategorized"
        assert breakdown[0].amount == 12

    def test_first_appearance_order(self):
        """Categories keep the order they first appear in, not amount order."""
        transactions = [
            make_txn(1, TransactionType.expense, 1, "2024-01-01", "Coffee"),
            make_txn(2, TransactionType.expense, 500, "2024-01-02", "Rent"),
            make_txn(3, TransactionType.expense, 2, "2024-01-03", "Coffee"),
        ]
        breakdown = category_breakdown(transactions, "2024-01")
        assert [b.category for b in breakdown] == ["Coffee", "Rent"]
        assert [b.amount for b in breakdown] == [3, 500]

    def test_other_months_excluded(self):
        """Only transactions of the requested month are counted."""
        transactions = [
            make_txn(1, TransactionType.expense, 20, "2024-01-05", "Food"),
            make_txn(2, TransactionType.expense, 99, "2024-02-05", "Food"),
        ]
        assert category_breakdown(transactions, "2024-01")[0].amount == 20
        assert category_breakdown(transactions, "2023-12") == []

    def test_does_not_mutate(self):
        """Input is unchanged and repeated calls give the same breakdown."""
        transactions = [
            make_txn(1, TransactionType.expense, 20, "2024-01-05", "Food"),
            make_txn(2, TransactionType.expense, 7, "2024-01-06", ""),
        ]
        snapshot = [t.model_copy() for t in transactions]

        assert category_breakdown(transactions, "2024-01") == category_breakdown(transactions, "2024-01")
        assert transactions == snapshot
        assert transactions[1].category == ""
