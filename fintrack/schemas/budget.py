"""
Budget schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class Budget(BaseModel):
    """Spending limit for one category in one month."""
    id: int
    category: str = ""
    month: Optional[str] = None
    monthly_limit: Decimal = Decimal("0")
    spent: Decimal = Decimal("0")
    rollover: Decimal = Decimal("0")


class BudgetCreate(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    month: str = Field(..., pattern=MONTH_PATTERN)
    monthly_limit: Decimal = Field(..., ge=0)


class BudgetUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    month: Optional[str] = Field(None, pattern=MONTH_PATTERN)
    monthly_limit: Optional[Decimal] = Field(None, ge=0)
    spent: Optional[Decimal] = None
    rollover: Optional[Decimal] = None


class BudgetSpentUpdate(BaseModel):
    """Set the spent amount of the budget for a category and month."""
    category: str = Field(..., min_length=1, max_length=100)
    month: str = Field(..., pattern=MONTH_PATTERN)
    amount: Decimal
