"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, recipes

router = APIRouter()

router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])
router.include_router(health.router, prefix="/health", tags=["health"])
