from __future__ import annotations

import logging

from app.store import TransactionStore
from backup import create_backup
from config import BACKUP_ON_SAVE
from domain.errors import (
    EmptyLogError,
    EmptyStructureError,
    NothingToRedoError,
    NotFoundError,
    PersistenceError,
    StoreNotInitializedError,
)
from domain.records import Category, SortKey
from domain.reports import records_table, summary_table
from storage.base import Storage

logger = logging.getLogger(__name__)

NO_TRANSACTIONS = "No transactions to display."


class LedgerSession:
    """Owns a TransactionStore for one interactive run.

    ``open`` restores the store from storage and ``close`` writes the snapshot back.
    As a context manager the snapshot is written however the block exits.
    """

    def __init__(self, storage: Storage, *, backup_on_save: bool = BACKUP_ON_SAVE) -> None:
        self._storage = storage
        self._backup_on_save = backup_on_save
        self._store: TransactionStore | None = None
        self.load_error: str | None = None
        self.save_error: str | None = None

    def __enter__(self) -> "LedgerSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._store is not None:
            self.close()

    @property
    def store(self) -> TransactionStore:
        if self._store is None:
            raise StoreNotInitializedError("Ledger session is not open")
        return self._store

    @property
    def is_open(self) -> bool:
        return self._store is not None

    def open(self) -> TransactionStore:
        store = TransactionStore()
        try:
            records = self._storage.load()
        except PersistenceError as exc:
            logger.exception("Failed to load transactions from %s", self._storage.file_path)
            self.load_error = str(exc)
            records = []
        store.restore(records)
        self._store = store
        return store

    def close(self) -> bool:
        """Persist the snapshot. Returns False when the write failed."""
        snapshot = self.store.snapshot()
        self._store = None
        # An unreadable data file is always backed up before it is overwritten.
        if self._backup_on_save or self.load_error is not None:
            try:
                create_backup(self._storage.file_path)
            except OSError:
                logger.exception("Failed to back up %s", self._storage.file_path)
                if self.load_error is not None:
                    self.save_error = (
                        f"Backup of unreadable {self._storage.file_path} failed, file left unchanged"
                    )
                    return False
        try:
            self._storage.store(snapshot)
        except PersistenceError as exc:
            logger.error("Failed to save %s transactions: %s", len(snapshot), exc)
            self.save_error = str(exc)
            return False
        logger.info("Saved %s transactions to %s", len(snapshot), self._storage.file_path)
        return True

    def add_transaction(self, category: Category | str, label: str, amount: str) -> str:
        try:
            record = self.store.add(category, label, amount)
        except ValueError as exc:
            return f"Invalid input: {exc}"
        return f"Added {record.display()}"

    def view_transactions(self) -> str:
        records = self.store.list_all()
        if not records:
            return NO_TRANSACTIONS
        return records_table(records)

    def generate_report(self) -> str:
        return summary_table(self.store.report())

    def undo(self) -> str:
        try:
            record = self.store.undo()
        except EmptyLogError as exc:
            return str(exc)
        return f"Undone: {record.display()}"

    def redo(self) -> str:
        try:
            record = self.store.redo()
        except NothingToRedoError as exc:
            return str(exc)
        return f"Redone: {record.display()}"

    def process_queue(self) -> str:
        drained = self.store.drain_queue()
        if not drained:
            return "No pending transactions."
        return "\n".join(f"Processing transaction: {record.display()}" for record in drained)

    def highest(self) -> str:
        try:
            record = self.store.peek_max()
        except EmptyStructureError:
            return NO_TRANSACTIONS
        return f"Highest transaction: {record.display()}"

    def lowest(self) -> str:
        try:
            record = self.store.min_record()
        except NotFoundError:
            return NO_TRANSACTIONS
        return f"Lowest transaction: {record.display()}"

    def sort_by(self, key: SortKey) -> str:
        self.store.sort_by(key)
        name = "amount" if key is SortKey.AMOUNT else "description"
        return f"Transactions sorted by {name}."

    def search_by_description(self, text: str) -> str:
        matches = self.store.find_by_label_substring(text)
        if not matches:
            return f"No transactions found with description containing: {text}"
        return records_table(matches)

    def search_by_amount(self, amount: str) -> str:
        try:
            matches = self.store.find_by_amount(amount)
        except ValueError as exc:
            return f"Invalid input: {exc}"
        if not matches:
            return f"No transactions found with amount: ${amount.strip()}"
        return records_table(matches)
