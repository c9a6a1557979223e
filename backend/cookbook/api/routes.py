from fastapi import APIRouter

from cookbook.api.entries import router as entries_router
from cookbook.api.health import router as health_router
from cookbook.api.summary import router as summary_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(entries_router)
router.include_router(summary_router)
