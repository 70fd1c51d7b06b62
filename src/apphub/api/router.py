"""Master API router mounted at /api."""

from fastapi import APIRouter
from apphub.api.routes import (
    analytics,
    apps,
    categories,
    files,
    health,
    requisitions,
    transfer,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(apps.router)
api_router.include_router(categories.router)
api_router.include_router(requisitions.router)
api_router.include_router(analytics.router)
api_router.include_router(transfer.router)
api_router.include_router(files.router)
