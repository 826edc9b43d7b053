"""Identifier allocation service.

IdAllocator is a stateful service that hands out sequential record ids for
`create` calls that do not supply one.
"""

from __future__ import annotations

from collections.abc import Callable


class IdAllocator:
    """Allocates sequential ids starting at 1. The counter never goes back.

    With `is_taken` supplied, ids already occupied in the store are skipped,
    so auto-assigned ids cannot collide with explicitly created ones. Without
    it the counter advances blindly and collisions surface at insert time.

    Args:
        start: First id to hand out (default 1).
        is_taken: Optional predicate reporting whether an id is occupied.
    """

    def __init__(self, start: int = 1, is_taken: Callable[[int], bool] | None = None):
        if start < 1:
            raise ValueError(f"start must be a positive integer, got {start}")
        self._next_id = start
        self._is_taken = is_taken

    @property
    def next_id(self) -> int:
        """The counter's current value, which may be occupied."""
        return self._next_id

    def peek(self) -> int:
        """The id the next `allocate` call will return, without consuming it."""
        if self._is_taken is not None:
            while self._is_taken(self._next_id):
                self._next_id += 1
        return self._next_id

    def allocate(self) -> int:
        """Allocate the next id.

        Returns:
            Newly allocated id.
        """
        allocated = self.peek()
        self._next_id += 1
        return allocated
