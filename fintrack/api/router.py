"""
Main API router.
"""

from fastapi import APIRouter
from fintrack.api import budgets, categories, dashboard, goals, transactions

api_router = APIRouter()

api_router.include_router(categories.router)
api_router.include_router(transactions.router)
api_router.include_router(budgets.router)
api_router.include_router(goals.router)
api_router.include_router(dashboard.router)
