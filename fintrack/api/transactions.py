"""
Transaction API endpoints.
"""

import re

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from fintrack.dependencies import get_transaction_service
from fintrack.schemas.budget import MONTH_PATTERN
from fintrack.schemas.summary import BreakdownResult, TrendResult
from fintrack.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from fintrack.services.transaction_service import TransactionService
from fintrack.store.base import RecordStoreError

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[Transaction])
def list_transactions(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    category: Optional[str] = None,
    service: TransactionService = Depends(get_transaction_service)
):
    """List transactions, newest first, optionally for one month or category"""
    try:
        if month:
            transactions = service.get_by_month(month)
        elif category:
            transactions = service.get_by_category(category)
        else:
            return service.get_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if month and category:
        transactions = [t for t in transactions if t.category == category]
    return transactions


@router.get("/trend", response_model=TrendResult)
def get_income_expense_trend(
    months: List[str] = Query(..., description="YYYY-MM months, in display order"),
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Income, expenses and net for each requested month.
    Returns: {items: [{month, income, expenses, net}, ...], error}
    """
    invalid = [m for m in months if not re.match(MONTH_PATTERN, m)]
    if invalid:
        raise HTTPException(status_code=422, detail=f"Invalid month: {invalid[0]}")
    return service.get_income_expense_trend(months)


@router.get("/breakdown", response_model=BreakdownResult)
def get_category_breakdown(
    month: str = Query(..., pattern=MONTH_PATTERN, description="YYYY-MM format"),
    service: TransactionService = Depends(get_transaction_service)
):
    """Expense totals per category for a month"""
    return service.get_category_breakdown(month)


@router.get("/{transaction_id}", response_model=Transaction)
def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service)
):
    """Get a single transaction"""
    try:
        transaction = service.get_by_id(transaction_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("", response_model=Transaction, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service)
):
    """Create a transaction"""
    try:
        created = service.create(transaction)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not created:
        raise HTTPException(status_code=502, detail="Failed to create transaction")
    return created


@router.patch("/{transaction_id}", response_model=Transaction)
def update_transaction(
    transaction_id: int,
    update: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service)
):
    """Update a transaction"""
    try:
        if not service.get_by_id(transaction_id):
            raise HTTPException(status_code=404, detail="Transaction not found")
        updated = service.update(transaction_id, update)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not updated:
        raise HTTPException(status_code=502, detail="Failed to update transaction")
    return updated


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service)
):
    """Delete a transaction"""
    try:
        deleted = service.delete(transaction_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return None
