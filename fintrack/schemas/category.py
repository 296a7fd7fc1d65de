"""
Category schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional


class Category(BaseModel):
    id: int
    name: str
    created_at: Optional[str] = None


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
