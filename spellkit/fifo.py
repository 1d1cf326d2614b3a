"""A first-in, first-out queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class Queue:
    """FIFO queue: values leave in the order they were enqueued."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def enqueue(self, value: int) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front.

        Raises IndexError when the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def clear(self) -> None:
        """Discard every value in the queue."""
        self._items.clear()

    def drain(self) -> Iterator[int]:
        """Dequeue values one by one until the queue is empty."""
        while self._items:
            yield self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Enqueue three values and print them as they are dequeued."""
    queue = Queue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    for value in queue.drain():
        print(f"Dequeued: {value}")
    queue.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())