"""API v1 router aggregation."""

from fastapi import APIRouter

from tenantscope.api.v1.endpoints import context, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(context.router, prefix="/context", tags=["context"])
