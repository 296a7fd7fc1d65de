"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from fintrack.dependencies import get_category_service
from fintrack.schemas.category import Category, CategoryCreate
from fintrack.services.category_service import CategoryService
from fintrack.store.base import RecordStoreError

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
def list_categories(service: CategoryService = Depends(get_category_service)):
    """List all categories."""
    try:
        return service.get_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("", response_model=Category, status_code=201)
def create_category(
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    """Create a new category."""
    try:
        if service.get_by_name(category.name):
            raise HTTPException(status_code=409, detail="Category already exists")
        created = service.create(category)
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if not created:
        raise HTTPException(status_code=502, detail="Failed to create category")
    return created
