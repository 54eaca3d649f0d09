from __future__ import annotations

import pytest

import main
from app.session import LedgerSession
from storage.text_storage import TextFileStorage


def _reader(answers: list[str]):
    queue = list(answers)

    def read(prompt: str) -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


@pytest.fixture
def session(tmp_path):
    session = LedgerSession(TextFileStorage(str(tmp_path / "t.txt")), backup_on_save=False)
    session.open()
    return session


def test_run_menu_add_and_report(session) -> None:
    output: list[str] = []
    main.run_menu(
        session,
        read=_reader(["1", "Salary", "1000.00", "2", "Rent", "400.00", "4", "14"]),
        write=output.append,
    )
    report = output[-1]
    assert "1000.00" in report
    assert "400.00" in report
    assert "600.00" in report


def test_run_menu_invalid_choice(session) -> None:
    output: list[str] = []
    main.run_menu(session, read=_reader(["42", "14"]), write=output.append)
    assert "Invalid choice. Please try again." in output


def test_run_menu_stops_on_eof(session) -> None:
    output: list[str] = []
    main.run_menu(session, read=_reader(["1", "Coffee"]), write=output.append)
    assert len(session.store) == 0


def test_handle_choice_sort_and_search(session) -> None:
    read = _reader([])
    session.add_transaction("Expense", "b", "2")
    session.add_transaction("Expense", "a", "1")
    assert main.handle_choice(session, "11", read) == "Transactions sorted by description."
    assert [r.label for r in session.store.list_all()] == ["a", "b"]
    assert main.handle_choice(session, "13", _reader(["3"])) == (
        "No transactions found with amount: $3"
    )
    assert main.handle_choice(session, "14", read) is None


def test_main_persists_on_exit(tmp_path, monkeypatch, capsys) -> None:
    path = tmp_path / "transactions.txt"
    monkeypatch.setattr("builtins.input", _reader(["2", "Rent", "400", "14"]))
    code = main.main(["--data-file", str(path), "--no-backup"])
    assert code == 0
    assert path.read_text(encoding="utf-8") == "Expense,Rent,400\n"
    assert "Personal Budget Tracker" in capsys.readouterr().out


def test_main_json_format(tmp_path, monkeypatch) -> None:
    path = tmp_path / "transactions.json"
    monkeypatch.setattr("builtins.input", _reader(["1", "Salary", "10", "14"]))
    assert main.main(["--format", "json", "--data-file", str(path), "--no-backup"]) == 0
    assert '"label": "Salary"' in path.read_text(encoding="utf-8")
