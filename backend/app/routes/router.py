"""API router - aggregates all route modules."""

from fastapi import APIRouter

from app.routes import admin, candies

api_router = APIRouter()

api_router.include_router(candies.router, prefix="/candies", tags=["candies"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
