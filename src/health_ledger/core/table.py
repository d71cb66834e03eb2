"""Keyed record tables."""

import copy
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

from health_ledger.utils.exceptions import RecordNotFoundError

K = TypeVar("K", bound=Hashable)
R = TypeVar("R")


class KeyedRecordTable(Generic[K, R]):
    """Mapping from an identifier to a record.

    Reads hand out deep copies so a caller can never change a stored record
    without going through :meth:`update`.
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty table.

        Args:
            name: Table name used in error messages
        """
        self.name = name
        self._rows: Dict[K, R] = {}

    def create(self, key: K, record: R) -> None:
        """Store ``record`` under ``key``, replacing any existing entry."""
        self._rows[key] = copy.deepcopy(record)

    def read(self, key: K) -> Optional[R]:
        """Return a copy of the record at ``key``, or None if absent."""
        record = self._rows.get(key)
        if record is None:
            return None
        return copy.deepcopy(record)

    def update(self, key: K, mutator: Callable[[R], None]) -> R:
        """Apply ``mutator`` to the record at ``key`` and store the result.

        The mutator works on a copy; the stored record is replaced only if
        it returns without raising.

        Raises:
            RecordNotFoundError: ``key`` is not in the table
        """
        if key not in self._rows:
            raise RecordNotFoundError(key, self.name)
        working = copy.deepcopy(self._rows[key])
        mutator(working)
        self._rows[key] = working
        return copy.deepcopy(working)

    def clear(self) -> None:
        """Drop every record."""
        self._rows.clear()
