"""Token balances keyed by principal."""

from typing import Dict, Union

Balance = Union[int, float]


class TokenLedger:
    """Token balances; unknown principals hold 0.

    Amounts are applied as given, without validation.
    """

    def __init__(self) -> None:
        """Initialize an empty ledger."""
        self._balances: Dict[str, Balance] = {}

    def balance_of(self, principal: str) -> Balance:
        """Return the balance of ``principal``."""
        return self._balances.get(principal, 0)

    def has_account(self, principal: str) -> bool:
        """Whether ``principal`` has ever been credited."""
        return principal in self._balances

    def credit(self, principal: str, amount: Balance) -> Balance:
        """Add ``amount`` to the balance and return the new balance."""
        self._balances[principal] = self.balance_of(principal) + amount
        return self._balances[principal]

    def reset(self) -> None:
        """Drop every balance."""
        self._balances.clear()
