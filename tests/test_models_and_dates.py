from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from employee_roster.models.employee import Employee, EmployeeType
from employee_roster.utils.date_helper import default_date_of_birth, format_date, parse_date


def test_default_date_of_birth_is_june_15_forty_years_back():
    assert default_date_of_birth(date(2026, 10, 19)) == date(1986, 6, 15)
    assert default_date_of_birth(date(2024, 2, 29)) == date(1984, 6, 15)
    assert default_date_of_birth(date(2000, 1, 1)) == date(1960, 6, 15)


def test_format_and_parse_date():
    assert format_date(date(1986, 6, 15)) == "Jun 15, 1986"
    assert parse_date(" 1986-06-15 ") == date(1986, 6, 15)
    with pytest.raises(ValueError):
        parse_date("15/06/1986")


def test_employee_type_labels():
    assert [t.label for t in EmployeeType] == [
        "Exempt Full Time", "Non-exempt Full Time", "Part Time"
    ]
    assert str(EmployeeType.PART_TIME) == "Part Time"


def test_employee_type_from_label():
    assert EmployeeType.from_label("part time") is EmployeeType.PART_TIME
    assert EmployeeType.from_label("NON_EXEMPT") is EmployeeType.NON_EXEMPT
    with pytest.raises(ValueError):
        EmployeeType.from_label("contractor")


def test_employee_is_immutable():
    e = Employee("Ada", date(1986, 6, 15), EmployeeType.EXEMPT)
    with pytest.raises(FrozenInstanceError):
        e.name = "Eve"
