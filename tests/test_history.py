import pytest

from domain.errors import EmptyLogError
from domain.history import HistoryLog
from domain.records import Category, Record, SortKey


def _rec(label: str, amount: str, category: Category = Category.EXPENSE) -> Record:
    return Record(category, label, amount)


class TestHistoryLog:
    def test_append_keeps_order(self):
        log = HistoryLog()
        log.append(_rec("a", "1"))
        log.append(_rec("b", "2"))
        assert [r.label for r in log.all()] == ["a", "b"]
        assert len(log) == 2

    def test_all_returns_copy(self):
        log = HistoryLog([_rec("a", "1")])
        log.all().clear()
        assert len(log) == 1

    def test_remove_last_on_empty_raises(self):
        with pytest.raises(EmptyLogError):
            HistoryLog().remove_last()

    def test_remove_last(self):
        log = HistoryLog([_rec("a", "1"), _rec("b", "2")])
        assert log.remove_last().label == "b"
        assert [r.label for r in log] == ["a"]

    def test_remove_latest_after_reorder(self):
        log = HistoryLog([_rec("big", "50"), _rec("small", "1")])
        log.sort_by(SortKey.AMOUNT)
        removed = log.remove_latest(_rec("big", "50"))
        assert removed.label == "big"
        assert [r.label for r in log] == ["small"]

    def test_sort_by_amount_is_stable(self):
        log = HistoryLog([_rec("x", "5"), _rec("y", "1"), _rec("z", "5"), _rec("w", "1")])
        log.sort_by(SortKey.AMOUNT)
        assert [r.label for r in log] == ["y", "w", "x", "z"]

    def test_sort_by_label(self):
        log = HistoryLog([_rec("Rent", "1"), _rec("Coffee", "2"), _rec("Salary", "3")])
        log.sort_by(SortKey.LABEL)
        assert [r.label for r in log] == ["Coffee", "Rent", "Salary"]
