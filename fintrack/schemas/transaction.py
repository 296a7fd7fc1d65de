"""
Transaction schemas.
"""

import datetime
import enum
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal


class TransactionType(str, enum.Enum):
    """Transaction direction. Amounts are never negative; the type carries the sign."""
    income = "income"
    expense = "expense"


class Transaction(BaseModel):
    id: int
    description: str = ""
    amount: Decimal = Decimal("0")
    type: TransactionType = TransactionType.expense
    date: Optional[str] = None
    notes: str = ""
    category: str = ""
    created_at: Optional[str] = None


class TransactionCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)
    type: TransactionType
    date: datetime.date
    notes: Optional[str] = ""
    category: Optional[str] = None


class TransactionUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, ge=0)
    type: Optional[TransactionType] = None
    date: Optional[datetime.date] = None
    notes: Optional[str] = None
    category: Optional[str] = None
