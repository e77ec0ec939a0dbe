"""
Top‑level router.

Aggregates the endpoint routers: ``/health`` at the root and the user
collection under ``/api/users``.  When new endpoints are added, update
this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
