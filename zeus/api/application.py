"""FastAPI application factory for the Zeus Orchestrator service."""

from fastapi import FastAPI

from zeus.domain import SERVICE_NAME, SERVICE_VERSION

from .routers import api_create_health_router, api_create_status_router


def create_api_application() -> FastAPI:
    """Create the FastAPI application instance for the service.

    The route table is fixed: `GET /` and `GET /health`. Other paths and
    methods fall through to the framework's 404 and 405 responses.

    Returns:
        FastAPI: Framework application instance with both routers mounted.
    """

    application = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
    application.include_router(api_create_status_router())
    application.include_router(api_create_health_router())
    return application
