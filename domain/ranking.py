import heapq
from itertools import count

from .errors import EmptyStructureError
from .records import Record


class RankingHeap:
    """Max-heap of records ordered by amount.

    Equal amounts are ranked by insertion order, earliest first.
    """

    def __init__(self) -> None:
        self._heap: list[tuple] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, record: Record) -> None:
        heapq.heappush(self._heap, (-record.amount, next(self._sequence), record))

    def peek_max(self) -> Record:
        if not self._heap:
            raise EmptyStructureError("No transactions to display.")
        return self._heap[0][2]
