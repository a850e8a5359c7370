from datetime import date

import pytest

from employee_roster.cli import employee_menu as menu
from employee_roster.logic.roster import RosterStore
from employee_roster.models.employee import Employee, EmployeeType


def feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


@pytest.fixture
def store():
    return RosterStore([
        Employee("Ann", date(1980, 1, 1), EmployeeType.EXEMPT),
        Employee("Ben", date(1981, 2, 2), EmployeeType.PART_TIME),
    ])


def test_add_employee(monkeypatch, store, capsys):
    feed(monkeypatch, ["Cat", "1990-05-06", "2"])
    menu.add_employee(store)
    assert store.count() == 3
    assert store.record_at(2) == Employee("Cat", date(1990, 5, 6), EmployeeType.NON_EXEMPT)
    assert "Employee added." in capsys.readouterr().out


def test_edit_employee_keeps_defaults(monkeypatch, store):
    # row 2, new name, empty answers keep the current dob and type
    feed(monkeypatch, ["2", "Benjamin", "", ""])
    menu.edit_employee(store)
    assert store.record_at(1) == Employee("Benjamin", date(1981, 2, 2), EmployeeType.PART_TIME)
    assert store.count() == 2


def test_bad_date_and_type_are_reprompted(monkeypatch, store):
    feed(monkeypatch, ["Cat", "06/05/1990", "1990-05-06", "9", "x", "3"])
    menu.add_employee(store)
    assert store.record_at(2).employee_type is EmployeeType.PART_TIME


def test_cancel_leaves_roster_untouched(monkeypatch, store, capsys):
    before = store.employees()
    feed(monkeypatch, ["1", "Zed", "cancel"])
    menu.edit_employee(store)
    assert store.employees() == before
    assert "Cancelled." in capsys.readouterr().out


def test_delete_employee(monkeypatch, store):
    feed(monkeypatch, ["1"])
    menu.delete_employee(store)
    assert [e.name for e in store.employees()] == ["Ben"]


def test_delete_out_of_range_row(monkeypatch, store, capsys):
    feed(monkeypatch, ["7"])
    menu.delete_employee(store)
    assert store.count() == 2
    assert "No employee in that row." in capsys.readouterr().out


def test_menu_loop(monkeypatch, store, capsys):
    feed(monkeypatch, ["1", "4", "2", "back", "0"])
    result = menu.employee_menu(store)
    assert result is store
    out = capsys.readouterr().out
    assert "1 | Ann | Exempt Full Time | Jan 01, 1980" in out
    assert [e.name for e in store.employees()] == ["Ann"]
    assert "Back to menu." in out


def test_main_runs_text_menu(monkeypatch):
    from employee_roster.main import main

    feed(monkeypatch, ["0"])
    assert main(["--cli"]) == 0


@pytest.mark.parametrize("answer", ["²", "x", "0"])
def test_delete_rejects_non_row_answers(monkeypatch, store, capsys, answer):
    feed(monkeypatch, [answer])
    menu.delete_employee(store)
    assert store.count() == 2
    out = capsys.readouterr().out
    assert "Enter a row number." in out or "No employee in that row." in out


def test_out_of_range_row_logs_no_warning(monkeypatch, store, caplog):
    feed(monkeypatch, ["7"])
    with caplog.at_level("WARNING"):
        menu.edit_employee(store)
    assert caplog.records == []


def test_menu_survives_superscript_digit(monkeypatch, store, capsys):
    feed(monkeypatch, ["4", "²", "0"])
    menu.employee_menu(store)
    assert store.count() == 2
    assert "Enter a row number." in capsys.readouterr().out


def test_type_prompt_reprompts_on_superscript_and_accepts_labels(monkeypatch, store, capsys):
    feed(monkeypatch, ["Cat", "", "²", "non-exempt full time"])
    menu.add_employee(store)
    assert store.record_at(2).employee_type is EmployeeType.NON_EXEMPT
    assert "Pick one of the listed numbers or names." in capsys.readouterr().out
