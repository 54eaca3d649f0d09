from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from app.session import LedgerSession
from bootstrap import STORAGE_FORMATS, bootstrap_storage, configure_logging
from config import BACKUP_ON_SAVE, LOG_LEVEL, STORAGE_FORMAT
from domain.records import Category, SortKey

logger = logging.getLogger(__name__)

EXIT_CHOICE = "14"
MENU = """
Personal Budget Tracker
1. Add Income
2. Add Expense
3. View Transactions
4. Generate Report
5. Undo Last Transaction
6. Redo Last Transaction
7. Process Transaction Queue
8. Print Highest Transaction
9. Print Lowest Transaction
10. Sort Transactions by Amount
11. Sort Transactions by Description
12. Search Transactions by Description
13. Search Transactions by Amount
14. Exit"""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Personal budget tracker.")
    parser.add_argument(
        "--data-file",
        default=None,
        help="Path to the transactions file (default depends on --format)",
    )
    parser.add_argument(
        "--format",
        choices=STORAGE_FORMATS,
        default=STORAGE_FORMAT,
        help=f"Storage format (default: {STORAGE_FORMAT})",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="Do not copy the data file to backups/ before saving",
    )
    return parser.parse_args(argv)


def handle_choice(
    session: LedgerSession,
    choice: str,
    read: Callable[[str], str],
) -> str | None:
    if choice in ("1", "2"):
        category = Category.INCOME if choice == "1" else Category.EXPENSE
        label = read("Enter description: ")
        amount = read("Enter amount: ")
        return session.add_transaction(category, label, amount)
    if choice == "3":
        return session.view_transactions()
    if choice == "4":
        return session.generate_report()
    if choice == "5":
        return session.undo()
    if choice == "6":
        return session.redo()
    if choice == "7":
        return session.process_queue()
    if choice == "8":
        return session.highest()
    if choice == "9":
        return session.lowest()
    if choice == "10":
        return session.sort_by(SortKey.AMOUNT)
    if choice == "11":
        return session.sort_by(SortKey.LABEL)
    if choice == "12":
        return session.search_by_description(read("Enter description to search: "))
    if choice == "13":
        return session.search_by_amount(read("Enter amount to search: "))
    if choice == EXIT_CHOICE:
        return None
    return "Invalid choice. Please try again."


def run_menu(
    session: LedgerSession,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    read = read or input
    write = write or print
    while True:
        write(MENU)
        try:
            choice = read("Enter your choice: ").strip()
        except EOFError:
            return
        try:
            message = handle_choice(session, choice, read)
        except EOFError:
            return
        if message is None:
            return
        write(message)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    storage = bootstrap_storage(args.format, args.data_file)
    backup_on_save = BACKUP_ON_SAVE and not args.no_backup

    session = LedgerSession(storage, backup_on_save=backup_on_save)
    with session:
        if session.load_error:
            print(f"Unable to load transactions: {session.load_error}")
        try:
            run_menu(session)
        except KeyboardInterrupt:
            print()
            logger.info("Interrupted, saving transactions")
    if session.save_error:
        print(f"Unable to save transactions: {session.save_error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
