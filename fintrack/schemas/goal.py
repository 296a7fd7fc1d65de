"""
Savings goal schemas.
"""

import enum
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class SavingsGoal(BaseModel):
    """A savings goal; completed once current_amount reaches target_amount."""
    id: int
    name: str = ""
    target_amount: Decimal = Decimal("0")
    current_amount: Decimal = Decimal("0")
    deadline: Optional[str] = None
    priority: Priority = Priority.medium
    created_at: Optional[str] = None


class SavingsGoalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    target_amount: Decimal = Field(..., ge=0)
    deadline: Optional[date] = None
    priority: Priority = Priority.medium


class SavingsGoalUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    target_amount: Optional[Decimal] = Field(None, ge=0)
    current_amount: Optional[Decimal] = None
    deadline: Optional[date] = None
    priority: Optional[Priority] = None


class ContributionCreate(BaseModel):
    """Amount to add to a goal; negative amounts withdraw."""
    amount: Decimal
