"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from phongnews.database.base import KVStore
from phongnews.database.connections import get_store
from phongnews.schemas.common import OkResponse, ReadinessResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    response_model=OkResponse,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running; the store is not contacted.
    """
    return OkResponse()


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check with the store",
)
async def readiness_check(store: KVStore = Depends(get_store)):
    """
    Readiness check that pings the key-value store.
    """
    try:
        healthy = await store.ping()
        store_status = "healthy" if healthy else "unhealthy: unexpected ping reply"
    except Exception as e:
        store_status = f"unhealthy: {str(e)}"

    return ReadinessResponse(ok=store_status == "healthy", store=store_status)
