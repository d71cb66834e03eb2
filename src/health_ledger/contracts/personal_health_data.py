"""Personal health data management contract."""

from typing import Any, Optional, Sequence

from health_ledger.config import Settings
from health_ledger.core import (
    KEEP,
    ContractResult,
    ErrorCode,
    KeyedRecordTable,
    PermissionTable,
    apply_optional,
    authorize,
)
from health_ledger.models import HealthRecord
from health_ledger.utils.logging import audit_logger, get_logger

from .base import Clock, LedgerContract

logger = get_logger(__name__)


class PersonalHealthDataContract(LedgerContract):
    """Patients keep one health record each and decide who may read it.

    Records are keyed by the patient principal. A requester can read a
    patient's record only after the patient granted them access; the
    patient can always read their own.
    """

    contract_name = "personal-health-data"

    def __init__(
        self, settings: Optional[Settings] = None, clock: Optional[Clock] = None
    ) -> None:
        """Initialize the personal health data contract."""
        super().__init__(settings, clock)
        self._records: KeyedRecordTable[str, HealthRecord] = KeyedRecordTable(
            "health_records"
        )
        self._permissions = PermissionTable()

    def _reset_state(self) -> None:
        self._records.clear()
        self._permissions.reset()

    def update_health_record(
        self,
        sender: str,
        genetic_data: Any = KEEP,
        medical_history: Any = KEEP,
        current_medications: Sequence[str] = (),
        allergies: Sequence[str] = (),
    ) -> ContractResult[None]:
        """Create or update the sender's own health record.

        ``genetic_data`` and ``medical_history`` are optional patches: pass
        ``KEEP`` (or None, or an empty string) to retain the stored value,
        ``CLEAR`` to erase it. Medications and allergies always replace the
        stored lists.
        """
        with self._lock:
            existing = self._records.read(sender) or HealthRecord()
            record = HealthRecord(
                genetic_data=apply_optional(genetic_data, existing.genetic_data),
                medical_history=apply_optional(
                    medical_history, existing.medical_history
                ),
                current_medications=list(current_medications),
                allergies=list(allergies),
                last_updated=self._now(),
            )
            self._records.create(sender, record)

        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=sender,
            action="update_health_record",
        )
        return self._succeed("update_health_record")

    def grant_data_access(self, sender: str, requester: str) -> ContractResult[None]:
        """Let ``requester`` read the sender's health record."""
        with self._lock:
            self._permissions.grant(sender, requester)
        logger.info("Granted data access", patient_id=sender, requester=requester)
        return self._succeed("grant_data_access")

    def revoke_data_access(self, sender: str, requester: str) -> ContractResult[None]:
        """Withdraw ``requester``'s access to the sender's health record."""
        with self._lock:
            self._permissions.revoke(sender, requester)
        logger.info("Revoked data access", patient_id=sender, requester=requester)
        return self._succeed("revoke_data_access")

    def get_health_record(
        self, sender: str, patient_id: str
    ) -> ContractResult[HealthRecord]:
        """Read a patient's record as ``sender``.

        Returns the record (None if the patient has none yet) when the
        sender is the patient or holds a grant, else ``NOT_FOUND``.
        """
        with self._lock:
            decision = authorize(
                sender,
                principal=patient_id,
                grants=self._permissions.check,
                deny_with=ErrorCode.NOT_FOUND,
            )
            if not decision:
                return self._deny(
                    "get_health_record",
                    sender,
                    patient_id,
                    ErrorCode.NOT_FOUND,
                    "no access granted by patient",
                )
            record = self._records.read(patient_id)

        audit_logger.log_access(
            principal=sender,
            contract=self.contract_name,
            resource_id=patient_id,
            action=f"get_health_record:{decision.rule}",
        )
        return self._succeed("get_health_record", record)

    def check_data_access(
        self, patient_id: str, requester: str
    ) -> ContractResult[bool]:
        """Report whether ``requester`` currently holds a grant from the patient."""
        return self._succeed(
            "check_data_access", self.has_data_access(patient_id, requester)
        )

    def has_data_access(self, patient_id: str, requester: str) -> bool:
        """Plain boolean form of :meth:`check_data_access` for other contracts."""
        with self._lock:
            return self._permissions.check(patient_id, requester)
