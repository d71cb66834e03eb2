"""Anonymized data shared for incentives."""

from datetime import datetime

from pydantic import Field

from .base import LedgerRecord, utc_now


class SharedDataRecord(LedgerRecord):
    """One anonymized data entry contributed by a patient."""

    patient_id: str
    data_type: str
    anonymized_data: str
    shared_at: datetime = Field(default_factory=utc_now)
