from dataclasses import dataclass
from decimal import Decimal

from .records import Category

ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerSummary:
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense


class AggregateIndex:
    """Running amount totals per category."""

    def __init__(self) -> None:
        self._totals: dict[str, Decimal] = {}

    def add(self, category: Category | str, amount: Decimal) -> None:
        key = _key(category)
        self._totals[key] = self._totals.get(key, ZERO) + amount

    def subtract(self, category: Category | str, amount: Decimal) -> None:
        key = _key(category)
        self._totals[key] = self._totals.get(key, ZERO) - amount

    def totals(self) -> dict[str, Decimal]:
        return dict(self._totals)

    def report(self) -> LedgerSummary:
        # Only the two recognised categories take part in the summary.
        total_income = ZERO
        total_expense = ZERO
        for key, amount in self._totals.items():
            if key == Category.INCOME.value:
                total_income += amount
            elif key == Category.EXPENSE.value:
                total_expense += amount
        return LedgerSummary(total_income=total_income, total_expense=total_expense)


def _key(category: Category | str) -> str:
    if isinstance(category, Category):
        return category.value
    return str(category)
