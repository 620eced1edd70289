"""Domain models used across application layer boundaries."""

from .models import SERVICE_NAME, SERVICE_VERSION, HealthInfo, StatusInfo, domain_utc_now_rfc3339

__all__ = ["SERVICE_NAME", "SERVICE_VERSION", "HealthInfo", "StatusInfo", "domain_utc_now_rfc3339"]
