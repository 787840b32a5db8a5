"""API v1 router composition."""

from fastapi import APIRouter

from priority_delivery.api.v1.endpoints import admin, priority_delivery

api_router: APIRouter = APIRouter()
api_router.include_router(priority_delivery.router, prefix="/priority-delivery", tags=["priority-delivery"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
