"""Wearable device integration contract."""

from typing import FrozenSet, Iterable, Optional, Sequence

from health_ledger.config import Settings
from health_ledger.core import (
    ContractResult,
    ErrorCode,
    KeyedRecordTable,
    authorize,
)
from health_ledger.core.gate import GrantCheck
from health_ledger.models import DeviceRegistration, HealthMetrics
from health_ledger.models.wearable import Reading
from health_ledger.utils.logging import audit_logger, get_logger

from .base import Clock, LedgerContract

logger = get_logger(__name__)


class WearableDeviceContract(LedgerContract):
    """Registers wearables and stores the latest metrics they sync.

    Metrics are keyed by the device owner. Reading someone else's metrics
    requires either membership in ``privileged_viewers`` or a grant reported
    by ``access_checker`` (normally the personal health data contract).
    """

    contract_name = "wearable-device-integration"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        privileged_viewers: Optional[Iterable[str]] = None,
        access_checker: Optional[GrantCheck] = None,
    ) -> None:
        """Initialize the wearable device contract.

        Args:
            settings: Settings to read contract parameters from
            clock: Source of record timestamps
            privileged_viewers: Principals allowed to read any patient's
                metrics, defaults to ``settings.privileged_viewers``
            access_checker: ``(patient_id, requester) -> bool`` grant lookup
        """
        super().__init__(settings, clock)
        if privileged_viewers is None:
            privileged_viewers = self.settings.privileged_viewers
        self.privileged_viewers: FrozenSet[str] = frozenset(privileged_viewers)
        self._access_checker = access_checker
        self._devices: KeyedRecordTable[str, DeviceRegistration] = (
            KeyedRecordTable("devices")
        )
        self._metrics: KeyedRecordTable[str, HealthMetrics] = KeyedRecordTable(
            "health_metrics"
        )

    def _reset_state(self) -> None:
        self._devices.clear()
        self._metrics.clear()

    def link_access_checker(self, access_checker: Optional[GrantCheck]) -> None:
        """Set (or clear) the grant lookup used by :meth:`get_health_metrics`."""
        with self._lock:
            self._access_checker = access_checker

    def register_device(
        self, sender: str, device_id: str, device_type: str
    ) -> ContractResult[None]:
        """Register ``device_id`` to ``sender``.

        Registering an existing device id replaces the previous registration.
        """
        with self._lock:
            previous = self._devices.read(device_id)
            self._devices.create(
                device_id,
                DeviceRegistration(
                    owner=sender, device_type=device_type, last_synced=self._now()
                ),
            )

        if previous is not None and previous.owner != sender:
            logger.warning(
                "Device re-registered to a new owner",
                device_id=device_id,
                previous_owner=previous.owner,
                owner=sender,
            )
        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=device_id,
            action="register_device",
            new_value={"deviceType": device_type},
        )
        return self._succeed("register_device")

    def update_health_metrics(
        self,
        sender: str,
        device_id: str,
        heart_rate: Sequence[Reading],
        steps: Reading,
        sleep_hours: Reading,
    ) -> ContractResult[None]:
        """Replace the sender's metrics with data synced from ``device_id``.

        The device must exist and belong to the sender, else ``NOT_FOUND``
        and the stored metrics are left as they were.
        """
        with self._lock:
            device = self._devices.read(device_id)
            if device is None:
                return self._deny(
                    "update_health_metrics",
                    sender,
                    device_id,
                    ErrorCode.NOT_FOUND,
                    "device is not registered",
                )
            decision = authorize(
                sender, owner=device.owner, deny_with=ErrorCode.NOT_FOUND
            )
            if not decision:
                return self._deny(
                    "update_health_metrics",
                    sender,
                    device_id,
                    ErrorCode.NOT_FOUND,
                    "device belongs to another principal",
                )

            now = self._now()
            self._metrics.create(
                sender,
                HealthMetrics(
                    heart_rate=list(heart_rate),
                    steps=steps,
                    sleep_hours=sleep_hours,
                    last_updated=now,
                ),
            )

            def _touch(registration: DeviceRegistration) -> None:
                registration.last_synced = now

            self._devices.update(device_id, _touch)

        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=sender,
            action="update_health_metrics",
            new_value={"deviceId": device_id, "steps": steps},
        )
        return self._succeed("update_health_metrics")

    def get_health_metrics(
        self, sender: str, patient_id: str
    ) -> ContractResult[HealthMetrics]:
        """Read a patient's latest metrics as ``sender``.

        Allowed for the patient, for a privileged viewer, or for a requester
        the linked access checker reports as granted; else ``NOT_FOUND``.
        """
        with self._lock:
            decision = authorize(
                sender,
                principal=patient_id,
                grants=self._access_checker,
                privileged=self.privileged_viewers,
                deny_with=ErrorCode.NOT_FOUND,
            )
            if not decision:
                return self._deny(
                    "get_health_metrics",
                    sender,
                    patient_id,
                    ErrorCode.NOT_FOUND,
                    "not the patient or an authorized viewer",
                )
            metrics = self._metrics.read(patient_id)

        audit_logger.log_access(
            principal=sender,
            contract=self.contract_name,
            resource_id=patient_id,
            action=f"get_health_metrics:{decision.rule}",
        )
        return self._succeed("get_health_metrics", metrics)

    def get_device_info(self, device_id: str) -> ContractResult[DeviceRegistration]:
        """Return the device registration, or None if the id is unknown."""
        with self._lock:
            device = self._devices.read(device_id)
        return self._succeed("get_device_info", device)
