# models/employee.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class EmployeeType(Enum):
    EXEMPT = "exempt"
    NON_EXEMPT = "nonExempt"
    PART_TIME = "partTime"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_label(cls, text: str) -> "EmployeeType":
        """Resolve a display label or variant name, case-insensitively."""
        t = (text or "").strip().lower()
        for et in cls:
            if t in (et.label.lower(), et.name.lower(), et.value.lower()):
                return et
        raise ValueError(f"Unknown employee type: {text!r}")


_LABELS = {
    EmployeeType.EXEMPT: "Exempt Full Time",
    EmployeeType.NON_EXEMPT: "Non-exempt Full Time",
    EmployeeType.PART_TIME: "Part Time",
}


@dataclass(frozen=True)
class Employee:
    name: str
    date_of_birth: date
    employee_type: EmployeeType
