"""API router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, health
from app.config import settings

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router, prefix=settings.functions_prefix, tags=["Authentication"])
