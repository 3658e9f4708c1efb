"""
Top-level API router.

Aggregates the resource routers under their path prefixes.  The
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import expenses, health, routes, trip_requests

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(trip_requests.router, prefix="/trip-requests", tags=["trip-requests"])
router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
router.include_router(routes.router, prefix="/routes", tags=["routes"])
