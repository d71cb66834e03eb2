"""Test configuration for the Health Ledger contracts."""

from datetime import datetime, timezone

import pytest

from health_ledger.config import Settings
from health_ledger.contracts import (
    HealthDataSharingContract,
    HealthMarketplaceContract,
    PersonalHealthDataContract,
    WearableDeviceContract,
    create_contract_suite,
)

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "access_control: mark test as covering the operation gate"
    )
    config.addinivalue_line(
        "markers", "audit_required: mark test as asserting audit log events"
    )


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clock():
    """Deterministic clock returning FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def data_sharing(settings, clock):
    """Fresh health data sharing contract."""
    return HealthDataSharingContract(settings, clock)


@pytest.fixture
def marketplace(settings, clock):
    """Fresh marketplace contract."""
    return HealthMarketplaceContract(settings, clock)


@pytest.fixture
def personal_health(settings, clock):
    """Fresh personal health data contract."""
    return PersonalHealthDataContract(settings, clock)


@pytest.fixture
def wearable(settings, clock):
    """Fresh wearable contract where doctor1 is a privileged viewer."""
    return WearableDeviceContract(settings, clock, privileged_viewers=["doctor1"])


@pytest.fixture
def suite(settings, clock):
    """Fresh, fully wired contract suite."""
    return create_contract_suite(settings, clock)
