"""
History Manager for Undo/Redo

Keeps applied operations on two bounded stacks:
- Undo stack: operations that can be reverted
- Redo stack: reverted operations that can be re-applied
- Each stack holds at most `capacity` records; pushing onto a full stack
  evicts the oldest record and reports it

Classes:
    BoundedStack: Fixed-capacity LIFO with oldest-eviction
    OperationHistory: Undo and redo stacks plus the redo policy
"""

from collections import deque
from typing import Callable, Deque, Iterator, Optional, Tuple
import logging

from PE_Libs.ImageEditingLib.patch_models import OperationRecord
from PE_Libs.constants import REDO_STACK_NAME, STACK_SIZE, UNDO_STACK_NAME
from PE_Libs.errors import EmptyHistoryError

logger = logging.getLogger(__name__)

EvictionCallback = Callable[[str, OperationRecord], None]


class BoundedStack:
    """
    LIFO stack of OperationRecords with a fixed capacity.

    Example:
        >>> stack = BoundedStack("undo", capacity=2)
        >>> stack.push(a); stack.push(b)
        >>> stack.push(c)   # returns a, which was evicted
        >>> stack.pop()     # c
    """

    def __init__(
        self,
        name: str,
        capacity: int = STACK_SIZE,
        on_evict: Optional[EvictionCallback] = None,
    ):
        """
        Args:
            name: Stack name used in errors and log messages
            capacity: Maximum number of records (>= 1)
            on_evict: Called as on_evict(name, record) when a record is evicted

        Raises:
            ValueError: If capacity is not an integer >= 1
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")

        self.name = name
        self.capacity = capacity
        self.on_evict = on_evict
        self._items: Deque[OperationRecord] = deque(maxlen=self.capacity)

    def push(self, record: OperationRecord) -> Optional[OperationRecord]:
        """
        Push a record on top, evicting the oldest one if the stack is full.

        Returns:
            The evicted record, or None if nothing was evicted

        Raises:
            ValueError: If record is not an OperationRecord
        """
        if not isinstance(record, OperationRecord):
            raise ValueError(f"Expected OperationRecord, got {type(record)}")

        evicted = self._items[0] if self.is_full() else None
        self._items.append(record)

        if evicted is not None:
            logger.warning(
                f"{self.name} stack full ({self.capacity}), discarded oldest operation: "
                f"{evicted.describe()}"
            )
            if self.on_evict is not None:
                self.on_evict(self.name, evicted)

        return evicted

    def pop(self) -> OperationRecord:
        """
        Remove and return the top record.

        Raises:
            EmptyHistoryError: If the stack is empty
        """
        if not self._items:
            raise EmptyHistoryError(self.name)
        return self._items.pop()

    def peek(self) -> OperationRecord:
        """Return the top record without removing it."""
        if not self._items:
            raise EmptyHistoryError(self.name)
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OperationRecord]:
        """Iterate from the oldest (bottom) record to the newest (top)."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedStack(name={self.name!r}, size={len(self)}, capacity={self.capacity})"


class OperationHistory:
    """Manages undo/redo history for one editing session."""

    def __init__(
        self,
        capacity: int = STACK_SIZE,
        clear_redo_on_apply: bool = False,
        on_evict: Optional[EvictionCallback] = None,
    ):
        """
        Initialize history manager

        Args:
            capacity: Maximum records per stack (default 10)
            clear_redo_on_apply: Empty the redo stack whenever a new operation
                is recorded. Off by default: redo survives new operations.
            on_evict: Called as on_evict(stack_name, record) on eviction
        """
        self.clear_redo_on_apply = bool(clear_redo_on_apply)
        self.undo_stack = BoundedStack(UNDO_STACK_NAME, capacity, on_evict)
        self.redo_stack = BoundedStack(REDO_STACK_NAME, self.undo_stack.capacity, on_evict)
        self.capacity = self.undo_stack.capacity

    def record_applied(self, record: OperationRecord) -> Optional[OperationRecord]:
        """
        Record a freshly applied operation on the undo stack.

        Returns:
            The record evicted from the undo stack, if any
        """
        evicted = self.undo_stack.push(record)
        if self.clear_redo_on_apply and len(self.redo_stack):
            logger.debug(f"Cleared {len(self.redo_stack)} redo operation(s) after new apply")
            self.redo_stack.clear()
        return evicted

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def depth(self) -> Tuple[int, int]:
        """(undo_count, redo_count)"""
        return len(self.undo_stack), len(self.redo_stack)

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def get_stats(self) -> dict:
        """
        Get statistics about history usage

        Returns:
            dict: undo/redo counts, capacity and whether the undo stack is full
        """
        return {
            "undo_count": len(self.undo_stack),
            "redo_count": len(self.redo_stack),
            "limit": self.capacity,
            "undo_full": self.undo_stack.is_full(),
            "clear_redo_on_apply": self.clear_redo_on_apply,
        }
