"""Per-run identifiers for generated local resources."""

from __future__ import annotations


class ResourceIDAllocator:
    """Hand out ``0, 1, 2, ...`` for naming generated locals (``color<id>``).

    One allocator belongs to exactly one generation run.  ``generate_file``
    creates a fresh one per call, so repeated runs over the same input give
    byte-identical text and concurrent runs never share a counter.
    """

    def __init__(self) -> None:
        self._next = 0

    def next(self) -> int:
        uid = self._next
        self._next += 1
        return uid

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._next

    def __repr__(self) -> str:
        return f"ResourceIDAllocator(issued={self._next})"
