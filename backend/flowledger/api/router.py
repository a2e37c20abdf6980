"""
Main API router.
"""

from fastapi import APIRouter
from flowledger.api import ai, budgets, categories, settings, statistics, transactions

api_router = APIRouter()

api_router.include_router(transactions.router)
api_router.include_router(categories.router)
api_router.include_router(budgets.router)
api_router.include_router(statistics.router)
api_router.include_router(ai.router)
api_router.include_router(settings.router)
