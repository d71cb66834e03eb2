"""Personal health records."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import LedgerRecord, utc_now


class HealthRecord(LedgerRecord):
    """A patient's health record, keyed by the patient principal."""

    genetic_data: Optional[str] = None
    medical_history: Optional[str] = None
    current_medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=utc_now)
