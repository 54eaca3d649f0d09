from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from domain.records import Record


class Storage(Protocol):
    """Persistence contract for the ledger: one load at startup, one store at shutdown."""

    @property
    def file_path(self) -> str:
        ...

    def load(self) -> list[Record]:
        ...

    def store(self, records: Iterable[Record]) -> None:
        ...
