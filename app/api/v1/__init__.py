"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    health,
    nutrition,
    progress,
    progression,
    tools,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["nutrition"])
api_router.include_router(progression.router, prefix="/progression", tags=["progression"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
