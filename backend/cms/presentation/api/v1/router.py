"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from cms.presentation.api.v1.endpoints.health import router as health_router
from cms.presentation.api.v1.endpoints.content_types import router as content_types_router
from cms.presentation.api.v1.endpoints.content import router as content_router
from cms.presentation.api.v1.endpoints.site_content import router as site_content_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(content_types_router)
router.include_router(content_router)
router.include_router(site_content_router)
