from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .validation import normalize_label, parse_amount


class Category(str, Enum):
    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        if isinstance(value, cls):
            return value
        name = str(value or "").strip().lower()
        for category in cls:
            if category.value.lower() == name:
                return category
        raise ValueError(f"Unknown category: {value!r}")


class SortKey(str, Enum):
    AMOUNT = "amount"
    LABEL = "label"


@dataclass(frozen=True)
class Record:
    category: Category
    label: str
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", Category.parse(self.category))
        object.__setattr__(self, "label", normalize_label(self.label))
        object.__setattr__(self, "amount", parse_amount(self.amount))

    @property
    def is_income(self) -> bool:
        return self.category is Category.INCOME

    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the category."""
        if self.is_income:
            return self.amount
        return -self.amount

    def display(self) -> str:
        return f"{self.category.value}: {self.label} - ${self.amount:.2f}"
