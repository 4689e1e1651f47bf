"""Process and database status for the Vehicles API.

GET /health/ answers as long as the app is serving requests. GET /health/ready
also runs a query against the cars database and answers 503 when it fails.
"""

from fastapi import APIRouter, status

from vehicles_api.api.responses import UTF8JSONResponse
from vehicles_api.config import get_settings
from vehicles_api.infrastructure import database

router = APIRouter(
    prefix="/health", tags=["health"], default_response_class=UTF8JSONResponse,
)


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": "vehicles-api",
        "version": get_settings().api_version,
    }


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return UTF8JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
