"""Last-in-first-out stack.

Single-threaded by construction. Callers sharing a stack across threads
must hold their own lock around each operation.
"""

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when pop or peek is called on an empty stack."""


class Stack(Generic[T]):
    """LIFO collection whose top is the end of an internal list."""

    def __init__(self) -> None:
        """Initialize an empty stack."""
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Add a value to the top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("Cannot pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("Cannot peek into an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every value from the stack."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
