"""API v1 router aggregation."""
from fastapi import APIRouter

from agentcast.api.v1.preferences import router as preferences_router
from agentcast.api.v1.coverage import router as coverage_router
from agentcast.api.v1.regions import router as regions_router
from agentcast.api.v1.broadcasts import router as broadcasts_router
from agentcast.api.v1.onboarding import router as onboarding_router

router = APIRouter()

router.include_router(preferences_router)
router.include_router(coverage_router)
router.include_router(regions_router)
router.include_router(broadcasts_router)
router.include_router(onboarding_router)
