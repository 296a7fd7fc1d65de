"""
Budget API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from fintrack.dependencies import get_budget_service
from fintrack.schemas.budget import MONTH_PATTERN, Budget, BudgetCreate, BudgetSpentUpdate, BudgetUpdate
from fintrack.schemas.summary import BudgetSummaryResult
from fintrack.services.budget_service import BudgetService
from fintrack.store.base import RecordStoreError

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get("", response_model=List[Budget])
def list_budgets(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    service: BudgetService = Depends(get_budget_service)
):
    """List budgets, latest month first, or those of one month."""
    try:
        if month:
            return service.get_by_month(month)
        return service.get_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/summary", response_model=BudgetSummaryResult)
def get_budget_summary(
    month: str = Query(..., pattern=MONTH_PATTERN, description="YYYY-MM format"),
    service: BudgetService = Depends(get_budget_service)
):
    """
    Get budget totals for a month.
    Returns: total_budget, total_spent, remaining, percentage, categories
    """
    return service.get_budget_summary(month)


@router.put("/spent", response_model=Budget)
def update_spent(
    update: BudgetSpentUpdate,
    service: BudgetService = Depends(get_budget_service)
):
    """Set the spent amount for a category's budget in a month."""
    try:
        budget = service.update_spent(update.category, update.month, update.amount)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.get("/{budget_id}", response_model=Budget)
def get_budget(
    budget_id: int,
    service: BudgetService = Depends(get_budget_service)
):
    """Get a specific budget."""
    try:
        budget = service.get_by_id(budget_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.post("", response_model=Budget, status_code=201)
def create_budget(
    budget: BudgetCreate,
    service: BudgetService = Depends(get_budget_service)
):
    """Create a budget for a category and month."""
    try:
        created = service.create(budget)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not created:
        raise HTTPException(status_code=502, detail="Failed to create budget")
    return created


@router.patch("/{budget_id}", response_model=Budget)
def update_budget(
    budget_id: int,
    update: BudgetUpdate,
    service: BudgetService = Depends(get_budget_service)
):
    """Update a budget."""
    try:
        if not service.get_by_id(budget_id):
            raise HTTPException(status_code=404, detail="Budget not found")
        updated = service.update(budget_id, update)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not updated:
        raise HTTPException(status_code=502, detail="Failed to update budget")
    return updated


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: int,
    service: BudgetService = Depends(get_budget_service)
):
    """Delete a budget."""
    try:
        deleted = service.delete(budget_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Budget not found")
    return None
