"""Health data sharing and incentives contract."""

from typing import Optional

from health_ledger.config import Settings
from health_ledger.core import (
    Balance,
    ContractResult,
    ErrorCode,
    KeyedRecordTable,
    SequentialIdAllocator,
    TokenLedger,
    authorize,
)
from health_ledger.models import SharedDataRecord
from health_ledger.utils.logging import audit_logger, get_logger

from .base import Clock, LedgerContract

logger = get_logger(__name__)


class HealthDataSharingContract(LedgerContract):
    """Patients share anonymized data and earn tokens for it.

    Each shared entry credits the sharer with ``settings.data_sharing_reward``
    tokens. The contract owner can issue additional rewards to anyone.
    """

    contract_name = "health-data-sharing"

    def __init__(
        self, settings: Optional[Settings] = None, clock: Optional[Clock] = None
    ) -> None:
        """Initialize the data sharing contract."""
        super().__init__(settings, clock)
        self.contract_owner = self.settings.contract_owner
        self.sharing_reward = self.settings.data_sharing_reward
        self._data_ids = SequentialIdAllocator()
        self._shared_data: KeyedRecordTable[int, SharedDataRecord] = (
            KeyedRecordTable("shared_data")
        )
        self._balances = TokenLedger()

    def _reset_state(self) -> None:
        self._data_ids.reset()
        self._shared_data.clear()
        self._balances.reset()

    def share_anonymized_data(
        self, sender: str, data_type: str, anonymized_data: str
    ) -> ContractResult[int]:
        """Store an anonymized data entry and reward the sender.

        Returns:
            Result carrying the new data id
        """
        with self._lock:
            record = SharedDataRecord(
                patient_id=sender,
                data_type=data_type,
                anonymized_data=anonymized_data,
                shared_at=self._now(),
            )
            data_id = self._data_ids.next_id()
            self._shared_data.create(data_id, record)
            balance = self._balances.credit(sender, self.sharing_reward)

        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=data_id,
            action="share_anonymized_data",
            new_value={"dataType": data_type},
        )
        logger.info(
            "Shared anonymized data",
            data_id=data_id,
            data_type=data_type,
            balance=balance,
        )
        return self._succeed("share_anonymized_data", data_id)

    def reward_data_sharing(
        self, sender: str, recipient: str, amount: Balance
    ) -> ContractResult[None]:
        """Credit ``recipient`` with ``amount`` tokens; contract owner only."""
        with self._lock:
            decision = authorize(
                sender,
                privileged=(self.contract_owner,),
                deny_with=ErrorCode.NOT_ADMIN,
            )
            if not decision:
                return self._deny(
                    "reward_data_sharing",
                    sender,
                    recipient,
                    ErrorCode.NOT_ADMIN,
                    "sender is not the contract owner",
                )
            old_balance = self._balances.balance_of(recipient)
            new_balance = self._balances.credit(recipient, amount)

        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=recipient,
            action="reward_data_sharing",
            old_value=old_balance,
            new_value=new_balance,
        )
        return self._succeed("reward_data_sharing")

    def get_shared_data(self, data_id: int) -> ContractResult[SharedDataRecord]:
        """Return the shared data entry, or None if the id is unknown."""
        with self._lock:
            record = self._shared_data.read(data_id)
        return self._succeed("get_shared_data", record)

    def get_token_balance(self, account: str) -> ContractResult[Balance]:
        """Return the token balance of ``account`` (0 if never credited)."""
        with self._lock:
            balance = self._balances.balance_of(account)
        return self._succeed("get_token_balance", balance)

    def has_token_account(self, account: str) -> bool:
        """Whether ``account`` has ever been credited."""
        with self._lock:
            return self._balances.has_account(account)
