"""Optional-field patch markers.

An optional field in an update is either left alone (``KEEP``), erased
(``CLEAR``) or replaced by a new value. ``None`` and the empty string are
treated as ``KEEP``.
"""

from typing import Any, Optional


class _PatchMarker:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


KEEP = _PatchMarker("KEEP")
CLEAR = _PatchMarker("CLEAR")


def apply_optional(new: Any, old: Optional[Any]) -> Optional[Any]:
    """Merge one optional field of an update into the stored value."""
    if new is CLEAR:
        return None
    if new is KEEP or new is None or new == "":
        return old
    return new
