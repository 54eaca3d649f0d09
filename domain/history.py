from collections.abc import Iterable, Iterator

from .errors import EmptyLogError, NotFoundError
from .records import Record, SortKey


def _sort_key(key: SortKey):
    if key is SortKey.AMOUNT:
        return lambda record: record.amount
    if key is SortKey.LABEL:
        return lambda record: record.label
    raise ValueError(f"Unsupported sort key: {key!r}")


class HistoryLog:
    """Ordered sequence of active records."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def append(self, record: Record) -> None:
        self._records.append(record)

    def remove_last(self) -> Record:
        if not self._records:
            raise EmptyLogError("History log is empty")
        return self._records.pop()

    def remove_latest(self, record: Record) -> Record:
        """Remove the most recent entry equal to ``record``.

        Matches ``remove_last`` unless the log was reordered after the record was added.
        """
        if not self._records:
            raise EmptyLogError("History log is empty")
        for index in range(len(self._records) - 1, -1, -1):
            if self._records[index] == record:
                return self._records.pop(index)
        raise NotFoundError(f"Record not in history: {record.display()}")

    def all(self) -> list[Record]:
        return list(self._records)

    def sort_by(self, key: SortKey) -> None:
        # list.sort is stable: equal keys keep their relative order
        self._records.sort(key=_sort_key(key))
