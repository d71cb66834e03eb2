"""Wearable device registrations and the metrics they report."""

from datetime import datetime
from typing import List, Union

from pydantic import Field

from .base import LedgerRecord, utc_now

Reading = Union[int, float]


class DeviceRegistration(LedgerRecord):
    """A device registered by its owner under a caller-chosen device id."""

    owner: str
    device_type: str
    last_synced: datetime = Field(default_factory=utc_now)


class HealthMetrics(LedgerRecord):
    """Latest metrics synced for a patient."""

    heart_rate: List[Reading] = Field(default_factory=list)
    steps: Reading
    sleep_hours: Reading
    last_updated: datetime = Field(default_factory=utc_now)
