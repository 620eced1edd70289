"""Typed response models returned by the service endpoints.

Both records are immutable and built fresh for every request.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SERVICE_NAME = "Zeus Orchestrator"
SERVICE_VERSION = "0.1.0"


def domain_utc_now_rfc3339() -> str:
    """Return the current UTC time as an RFC3339 string with `+00:00` offset.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00.123456+00:00`.
    """

    return datetime.now(timezone.utc).isoformat()


class StatusInfo(BaseModel):
    """Service identification payload for the root endpoint.

    Attributes:
        service: Human-readable service name.
        version: Service version string.
        status: Running state label.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"examples": [{"service": SERVICE_NAME, "version": SERVICE_VERSION, "status": "running"}]},
    )

    service: Literal["Zeus Orchestrator"] = SERVICE_NAME
    version: Literal["0.1.0"] = SERVICE_VERSION
    status: Literal["running"] = "running"


class HealthInfo(BaseModel):
    """Health payload for operational checks.

    Attributes:
        status: Always `healthy` while the process can answer.
        timestamp: UTC time the payload was built, RFC3339 formatted.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["healthy"] = "healthy"
    timestamp: str = Field(default_factory=domain_utc_now_rfc3339, examples=["2026-10-19T12:00:00.123456+00:00"])
