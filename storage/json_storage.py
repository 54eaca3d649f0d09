from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable

from domain.errors import PersistenceError
from domain.records import Record

from .base import Storage

logger = logging.getLogger(__name__)


def _record_to_dict(record: Record) -> dict:
    return {
        "category": record.category.value,
        "label": record.label,
        "amount": str(record.amount),
    }


class JsonStorage(Storage):
    """JSON document ``{"transactions": [...]}`` with amounts kept as decimal strings."""

    def __init__(self, file_path: str = "transactions.json") -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> str:
        return self._file_path

    def load(self) -> list[Record]:
        try:
            with open(self._file_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Data file %s not found, starting with empty ledger", self._file_path)
            return []
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Corrupted JSON in {self._file_path}") from exc
        except UnicodeDecodeError as exc:
            raise PersistenceError(f"{self._file_path} is not valid UTF-8 text") from exc
        except OSError as exc:
            raise PersistenceError(f"Unable to open {self._file_path} for reading") from exc

        if isinstance(data, list):
            items = data
        elif isinstance(data, dict):
            items = data.get("transactions", [])
            if not isinstance(items, list):
                raise PersistenceError(
                    f"Unexpected transactions value in {self._file_path}: {type(items).__name__}"
                )
        else:
            raise PersistenceError(f"Unexpected JSON root in {self._file_path}")

        records: list[Record] = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning("Skipping non-dict transaction at index %s", index)
                continue
            try:
                records.append(
                    Record(
                        category=item.get("category", ""),
                        label=item.get("label", ""),
                        amount=item.get("amount", ""),
                    )
                )
            except ValueError as exc:
                logger.warning("Skipping invalid transaction at index %s: %s", index, exc)
        return records

    def store(self, records: Iterable[Record]) -> None:
        payload = {"transactions": [_record_to_dict(record) for record in records]}
        directory = os.path.dirname(self._file_path) or "."
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".transactions_", suffix=".json", dir=directory)
        except OSError as exc:
            raise PersistenceError(f"Unable to open {self._file_path} for writing") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._file_path)
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(f"Unable to write {self._file_path}") from exc
        finally:
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                logger.exception("Failed to cleanup temporary file during save: %s", tmp_path)
