"""
Top-level API router.

Aggregates domain routers under a unified prefix.  When new domains
are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import recipes

router = APIRouter()

router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])
