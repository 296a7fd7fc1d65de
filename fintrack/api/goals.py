"""
Savings goal API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from fintrack.dependencies import get_savings_goal_service
from fintrack.schemas.goal import ContributionCreate, SavingsGoal, SavingsGoalCreate, SavingsGoalUpdate
from fintrack.schemas.summary import GoalsSummaryResult
from fintrack.services.savings_goal_service import SavingsGoalService
from fintrack.store.base import RecordNotFoundError, RecordStoreError

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=List[SavingsGoal])
def list_goals(service: SavingsGoalService = Depends(get_savings_goal_service)):
    """List all savings goals."""
    try:
        return service.get_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/summary", response_model=GoalsSummaryResult)
def get_goals_summary(service: SavingsGoalService = Depends(get_savings_goal_service)):
    """
    Get totals and progress across all goals.
    Returns: target/current/remaining totals, overall_progress, goal counts
    """
    return service.get_goals_summary()


@router.get("/{goal_id}", response_model=SavingsGoal)
def get_goal(
    goal_id: int,
    service: SavingsGoalService = Depends(get_savings_goal_service)
):
    """Get a specific savings goal."""
    try:
        goal = service.get_by_id(goal_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not goal:
        raise HTTPException(status_code=404, detail="Savings goal not found")
    return goal


@router.post("", response_model=SavingsGoal, status_code=201)
def create_goal(
    goal: SavingsGoalCreate,
    service: SavingsGoalService = Depends(get_savings_goal_service)
):
    """Create a savings goal starting from zero."""
    try:
        created = service.create(goal)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not created:
        raise HTTPException(status_code=502, detail="Failed to create savings goal")
    return created


@router.patch("/{goal_id}", response_model=SavingsGoal)
def update_goal(
    goal_id: int,
    update: SavingsGoalUpdate,
    service: SavingsGoalService = Depends(get_savings_goal_service)
):
    """Update a savings goal."""
    try:
        if not service.get_by_id(goal_id):
            raise HTTPException(status_code=404, detail="Savings goal not found")
        updated = service.update(goal_id, update)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not updated:
        raise HTTPException(status_code=502, detail="Failed to update savings goal")
    return updated


@router.post("/{goal_id}/contributions", response_model=SavingsGoal)
def add_contribution(
    goal_id: int,
    contribution: ContributionCreate,
    service: SavingsGoalService = Depends(get_savings_goal_service)
):
    """Add to (or withdraw from) a goal's current amount."""
    try:
        goal = service.add_contribution(goal_id, contribution.amount)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Savings goal not found")
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not goal:
        raise HTTPException(status_code=502, detail="Failed to add contribution")
    return goal


@router.delete("/{goal_id}", status_code=204)
def delete_goal(
    goal_id: int,
    service: SavingsGoalService = Depends(get_savings_goal_service)
):
    """Delete a savings goal."""
    try:
        deleted = service.delete(goal_id)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Savings goal not found")
    return None
