from .errors import EmptyLogError, NothingToRedoError
from .records import Record


class UndoRedoController:
    """Undo and redo stacks of added records.

    The controller only moves records between its two stacks; callers apply the
    matching change to the history log and aggregate index.
    """

    def __init__(self) -> None:
        self._undo: list[Record] = []
        self._redo: list[Record] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def record_add(self, record: Record) -> None:
        self._undo.append(record)
        self._redo.clear()

    def pop_undo(self) -> Record:
        if not self._undo:
            raise EmptyLogError("Nothing to undo.")
        record = self._undo.pop()
        self._redo.append(record)
        return record

    def pop_redo(self) -> Record:
        if not self._redo:
            raise NothingToRedoError("Nothing to redo.")
        record = self._redo.pop()
        self._undo.append(record)
        return record
