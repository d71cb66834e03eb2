"""Directed, revocable permission edges between principals."""

from typing import Dict, Tuple

Edge = Tuple[str, str]


class PermissionTable:
    """Maps ``(owner, counterparty)`` pairs to a grant flag.

    Revoking keeps the edge as an explicit ``False``; :meth:`check` cannot
    tell a revoked edge from one that never existed.
    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._edges: Dict[Edge, bool] = {}

    def grant(self, owner: str, counterparty: str) -> None:
        """Allow ``counterparty`` to act on ``owner``'s resources."""
        self._edges[(owner, counterparty)] = True

    def revoke(self, owner: str, counterparty: str) -> None:
        """Withdraw a grant."""
        self._edges[(owner, counterparty)] = False

    def check(self, owner: str, counterparty: str) -> bool:
        """Return True only for an edge that is currently granted."""
        return self._edges.get((owner, counterparty), False)

    def reset(self) -> None:
        """Drop every edge."""
        self._edges.clear()
