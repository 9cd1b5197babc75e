"""API Router — Search, upload, and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from openfinder.api.endpoints.health import router as health_router
from openfinder.api.endpoints.search import router as search_router
from openfinder.api.endpoints.upload import router as upload_router

router = APIRouter()
router.include_router(search_router)
router.include_router(upload_router)
router.include_router(health_router)
