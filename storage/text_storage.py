from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable

from domain.errors import PersistenceError
from domain.records import Record

from .base import Storage

logger = logging.getLogger(__name__)
DELIMITER = ","


def encode_record(record: Record) -> str:
    return DELIMITER.join([record.category.value, record.label, str(record.amount)])


def decode_line(line: str) -> Record:
    """Parse ``category,label,amount``.

    Labels are not escaped; the category ends at the first delimiter and the
    amount starts after the last one, so embedded commas stay in the label.
    """
    text = line.rstrip("\r\n")
    category, sep, rest = text.partition(DELIMITER)
    if not sep:
        raise ValueError("expected 3 comma-separated fields")
    label, sep, amount = rest.rpartition(DELIMITER)
    if not sep:
        raise ValueError("expected 3 comma-separated fields")
    return Record(category=category, label=label, amount=amount)


class TextFileStorage(Storage):
    """Comma-delimited flat file, one record per line."""

    def __init__(self, file_path: str = "transactions.txt") -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> str:
        return self._file_path

    def load(self) -> list[Record]:
        try:
            with open(self._file_path, encoding="utf-8") as f:
                lines = f.readlines()
        except FileNotFoundError:
            logger.warning("Data file %s not found, starting with empty ledger", self._file_path)
            return []
        except UnicodeDecodeError as exc:
            raise PersistenceError(f"{self._file_path} is not valid UTF-8 text") from exc
        except OSError as exc:
            raise PersistenceError(f"Unable to open {self._file_path} for reading") from exc

        records: list[Record] = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                records.append(decode_line(line))
            except ValueError as exc:
                logger.warning("Skipping invalid line %s in %s: %s", line_no, self._file_path, exc)
        return records

    def store(self, records: Iterable[Record]) -> None:
        directory = os.path.dirname(self._file_path) or "."
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".transactions_", suffix=".txt", dir=directory)
        except OSError as exc:
            raise PersistenceError(f"Unable to open {self._file_path} for writing") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                for record in records:
                    f.write(encode_record(record) + "\n")
            os.replace(tmp_path, self._file_path)
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(f"Unable to write {self._file_path}") from exc
        finally:
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                logger.exception("Failed to cleanup temporary file during save: %s", tmp_path)
