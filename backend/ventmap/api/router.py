"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from ventmap.api import health, overlaps

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(overlaps.router)
