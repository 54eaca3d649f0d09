from collections.abc import Iterable
from decimal import Decimal

from prettytable import PrettyTable

from .aggregates import LedgerSummary
from .records import Record

RECORD_HEADERS = ["#", "Type", "Description", "Amount ($)"]
SUMMARY_HEADERS = ["Item", "Amount ($)"]


def format_amount(value: Decimal) -> str:
    if value < 0:
        return f"({abs(value):.2f})"
    return f"{value:.2f}"


def records_table(records: Iterable[Record]) -> str:
    table = PrettyTable()
    table.field_names = RECORD_HEADERS
    table.align["Description"] = "l"
    table.align["Amount ($)"] = "r"
    for position, record in enumerate(records, start=1):
        table.add_row(
            [position, record.category.value, record.label, format_amount(record.amount)]
        )
    return str(table)


def summary_table(summary: LedgerSummary) -> str:
    table = PrettyTable()
    table.field_names = SUMMARY_HEADERS
    table.align["Item"] = "l"
    table.align["Amount ($)"] = "r"
    table.add_row(["Total Income", format_amount(summary.total_income)])
    table.add_row(["Total Expenses", format_amount(summary.total_expense)], divider=True)
    table.add_row(["Remaining Balance", format_amount(summary.balance)])
    return str(table)
