"""Tests for response value objects."""

from datetime import datetime

import pytest

from zeus.domain import HealthInfo, StatusInfo, domain_utc_now_rfc3339


def test_domain_status_info_serializes_constant_fields() -> None:
    """Serialize the fixed service identification fields in order.

    Returns:
        None: Assertions validate serialized output.

    Raises:
        AssertionError: Raised when output differs.
    """

    assert StatusInfo().model_dump_json() == '{"service":"Zeus Orchestrator","version":"0.1.0","status":"running"}'


def test_domain_health_info_builds_fresh_timestamp() -> None:
    """Stamp each health record with its own UTC time.

    Returns:
        None: Assertions validate timestamp format.

    Raises:
        AssertionError: Raised when timestamp is not UTC RFC3339.
    """

    health = HealthInfo()

    assert health.status == "healthy"
    assert health.timestamp.endswith("+00:00")
    assert "T" in health.timestamp
    assert datetime.fromisoformat(health.timestamp) <= datetime.fromisoformat(domain_utc_now_rfc3339())


def test_domain_records_are_frozen() -> None:
    """Reject mutation of response records.

    Returns:
        None: Assertions validate immutability.

    Raises:
        AssertionError: Raised when assignment succeeds.
    """

    with pytest.raises(ValueError):
        StatusInfo().status = "stopped"
    with pytest.raises(ValueError):
        HealthInfo().status = "sick"
