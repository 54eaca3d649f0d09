import logging
from collections.abc import Iterable
from decimal import Decimal

from domain.aggregates import AggregateIndex, LedgerSummary
from domain.errors import NotFoundError
from domain.history import HistoryLog
from domain.pending import PendingQueue
from domain.ranking import RankingHeap
from domain.records import Category, Record, SortKey
from domain.undo import UndoRedoController
from domain.validation import parse_amount

logger = logging.getLogger(__name__)


class TransactionStore:
    """In-memory ledger keeping history, totals, ranking, queue and undo state in step.

    ``undo`` and ``redo`` only revise the history log and the aggregate index.
    The ranking heap and the pending queue keep every record that was ever added,
    so ``peek_max`` may return a record that has since been undone.
    """

    def __init__(self) -> None:
        self._history = HistoryLog()
        self._aggregates = AggregateIndex()
        self._ranking = RankingHeap()
        self._pending = PendingQueue()
        self._undo = UndoRedoController()

    def __len__(self) -> int:
        return len(self._history)

    @property
    def can_undo(self) -> bool:
        return self._undo.can_undo

    @property
    def can_redo(self) -> bool:
        return self._undo.can_redo

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def restore(self, records: Iterable[Record]) -> int:
        """Bulk-load persisted records without queueing them or making them undoable."""
        restored = 0
        for record in records:
            self._history.append(record)
            self._aggregates.add(record.category, record.amount)
            self._ranking.push(record)
            restored += 1
        logger.info("Restored %s records", restored)
        return restored

    def add(self, category: Category | str, label: str, amount: Decimal | float | str) -> Record:
        record = Record(category=category, label=label, amount=amount)
        self._history.append(record)
        self._aggregates.add(record.category, record.amount)
        self._ranking.push(record)
        self._pending.enqueue(record)
        self._undo.record_add(record)
        logger.info(
            "Transaction added category=%s label=%s amount=%s",
            record.category.value,
            record.label,
            record.amount,
        )
        return record

    def undo(self) -> Record:
        record = self._undo.pop_undo()
        self._history.remove_latest(record)
        self._aggregates.subtract(record.category, record.amount)
        logger.info("Undone: %s", record.display())
        return record

    def redo(self) -> Record:
        record = self._undo.pop_redo()
        self._history.append(record)
        self._aggregates.add(record.category, record.amount)
        logger.info("Redone: %s", record.display())
        return record

    def list_all(self) -> list[Record]:
        return self._history.all()

    def report(self) -> LedgerSummary:
        return self._aggregates.report()

    def totals(self) -> dict[str, Decimal]:
        return self._aggregates.totals()

    def drain_queue(self) -> list[Record]:
        drained = self._pending.drain_all()
        logger.debug("Drained %s pending records", len(drained))
        return drained

    def peek_max(self) -> Record:
        return self._ranking.peek_max()

    def min_record(self) -> Record:
        records = self._history.all()
        if not records:
            raise NotFoundError("No transactions to display.")
        # min() keeps the first of equal amounts
        return min(records, key=lambda record: record.amount)

    def sort_by(self, key: SortKey | str) -> None:
        sort_key = SortKey(key)
        self._history.sort_by(sort_key)
        logger.debug("History sorted by %s", sort_key.value)

    def find_by_label_substring(self, text: str) -> list[Record]:
        return [record for record in self._history if text in record.label]

    def find_by_amount(self, value: Decimal | float | str) -> list[Record]:
        amount = parse_amount(value)
        return [record for record in self._history if record.amount == amount]

    def snapshot(self) -> tuple[Record, ...]:
        return tuple(self._history.all())
