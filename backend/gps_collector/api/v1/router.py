"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from gps_collector.api.v1.routes import points

api_router = APIRouter()

api_router.include_router(points.router, prefix="/points", tags=["Points"])
