"""
FastAPI dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from fintrack.database import get_db
from fintrack.store import RecordStore, SQLRecordStore
from fintrack.services.budget_service import BudgetService
from fintrack.services.category_service import CategoryService
from fintrack.services.savings_goal_service import SavingsGoalService
from fintrack.services.transaction_service import TransactionService


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    """
    Dependency for the record store backing every service.
    """
    return SQLRecordStore(db)


def get_transaction_service(store: RecordStore = Depends(get_record_store)) -> TransactionService:
    return TransactionService(store)


def get_budget_service(store: RecordStore = Depends(get_record_store)) -> BudgetService:
    return BudgetService(store)


def get_savings_goal_service(store: RecordStore = Depends(get_record_store)) -> SavingsGoalService:
    return SavingsGoalService(store)


def get_category_service(store: RecordStore = Depends(get_record_store)) -> CategoryService:
    return CategoryService(store)
