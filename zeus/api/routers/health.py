"""Health endpoint router for liveness checks."""

from fastapi import APIRouter

from zeus.domain import HealthInfo


def api_create_health_router() -> APIRouter:
    """Create health-check router reporting liveness with a UTC timestamp.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthInfo)
    async def api_health_status() -> HealthInfo:
        """Return healthy state stamped with the current UTC time.

        Returns:
            HealthInfo: Fresh health payload for operational checks.
        """

        return HealthInfo()

    return router
