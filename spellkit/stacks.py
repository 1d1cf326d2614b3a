"""Two last-in, first-out stacks of integers: bounded and unbounded."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push a value; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    data: int
    next: _Node | None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: int) -> None:
        """Push a value on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Remove every value from the stack."""
        self._top = None
        self._size = 0

    def __len__(self) -> int:
        return self._size


def array_demo(argv: Sequence[str] | None = None) -> int:
    """Push 1, 2, 3 onto a bounded stack, pop once, then show the new top."""
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    print(stack.pop())
    print(stack.peek())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Push three values onto a linked stack, peek, then pop them all."""
    stack = LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    print(f"Top of stack: {stack.peek()}")
    while not stack.is_empty():
        print(f"Popped: {stack.pop()}")
    if stack.is_empty():
        print("Stack is now empty.")
    stack.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())