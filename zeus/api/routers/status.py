"""Root status router for service identification."""

from fastapi import APIRouter

from zeus.domain import StatusInfo


def api_create_status_router() -> APIRouter:
    """Create the router exposing the root status endpoint.

    Returns:
        APIRouter: Router exposing `/` endpoint.
    """

    router = APIRouter(tags=["status"])

    @router.get("/", response_model=StatusInfo)
    async def api_root_status() -> StatusInfo:
        """Return service name, version and running state."""

        return StatusInfo()

    return router
