"""Base contract class for common functionality."""

import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Optional

from health_ledger.config import Settings, get_settings
from health_ledger.core import ContractResult, ErrorCode
from health_ledger.models.base import utc_now
from health_ledger.utils.logging import audit_logger, get_logger
from health_ledger.utils.monitoring import record_contract_call

Clock = Callable[[], datetime]

logger = get_logger(__name__)


class LedgerContract(ABC):
    """Base class for the in-process contracts.

    Every public operation runs under ``self._lock`` so calls are applied
    one at a time, the way a ledger executes transactions.
    """

    contract_name = "contract"

    def __init__(
        self, settings: Optional[Settings] = None, clock: Optional[Clock] = None
    ) -> None:
        """Initialize contract state.

        Args:
            settings: Settings to read contract parameters from
            clock: Source of record timestamps, defaults to UTC now
        """
        self.settings = settings or get_settings()
        self._clock: Clock = clock or utc_now
        self._lock = threading.RLock()

    def reset(self) -> None:
        """Return the contract to its freshly deployed state."""
        with self._lock:
            self._reset_state()
        logger.debug("Contract state reset", contract=self.contract_name)

    @abstractmethod
    def _reset_state(self) -> None:
        """Drop every record, grant, balance and counter."""

    def _now(self) -> datetime:
        return self._clock()

    def _succeed(self, operation: str, value: Any = None) -> ContractResult[Any]:
        record_contract_call(self.contract_name, operation)
        return ContractResult.ok(value)

    def _deny(
        self,
        operation: str,
        principal: str,
        resource_id: Any,
        error: ErrorCode,
        reason: str,
    ) -> ContractResult[Any]:
        audit_logger.log_denied(
            principal=principal,
            contract=self.contract_name,
            resource_id=resource_id,
            action=operation,
            error_code=int(error),
            reason=reason,
        )
        record_contract_call(self.contract_name, operation, error)
        return ContractResult.fail(error)
