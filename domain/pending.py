from collections import deque

from .records import Record


class PendingQueue:
    """FIFO of added records waiting to be processed."""

    def __init__(self) -> None:
        self._items: deque[Record] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, record: Record) -> None:
        self._items.append(record)

    def drain_all(self) -> list[Record]:
        drained: list[Record] = []
        while self._items:
            drained.append(self._items.popleft())
        return drained
