"""Sequential identifier allocation."""


class SequentialIdAllocator:
    """Issues strictly increasing integer ids starting at 1.

    Ids are never reused; the counter only goes back to 1 on :meth:`reset`.
    """

    def __init__(self) -> None:
        """Initialize the allocator."""
        self._last = 0

    def next_id(self) -> int:
        """Allocate the next id."""
        self._last += 1
        return self._last

    def reset(self) -> None:
        """Restart numbering from 1."""
        self._last = 0
