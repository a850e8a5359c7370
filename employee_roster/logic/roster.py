# logic/roster.py
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Tuple

from employee_roster.exceptions import OutOfRange
from employee_roster.logic.form import CommitResult, EmployeeForm
from employee_roster.models.employee import Employee

logger = logging.getLogger(__name__)


class RosterStore:
    """
    Ordered in-memory employee list. Insertion order = display order.
    Duplicate names are allowed.
    """
    def __init__(self, employees: Optional[Iterable[Employee]] = None):
        self._employees: List[Employee] = list(employees or [])

    def __len__(self) -> int:
        return len(self._employees)

    # ---------- read ----------
    def count(self) -> int:
        return len(self._employees)

    def record_at(self, index: int) -> Employee:
        self._check_index(index)
        return self._employees[index]

    def employees(self) -> Tuple[Employee, ...]:
        return tuple(self._employees)

    def rows(self) -> List[Tuple[str, str]]:
        """(name, type label) per row, in display order."""
        return [(e.name, e.employee_type.label) for e in self._employees]

    # ---------- forms ----------
    def open_form_for_create(self, today: date | None = None, on_save=None) -> EmployeeForm:
        return EmployeeForm.for_create(today=today, on_save=on_save)

    def open_form_for_edit(self, index: int, on_save=None) -> EmployeeForm:
        employee = self.record_at(index)
        return EmployeeForm.for_edit(employee, index, on_save=on_save)

    # ---------- mutate ----------
    def remove_at(self, index: int) -> Employee:
        self._check_index(index)
        removed = self._employees.pop(index)
        logger.info("removed %r at %d (count=%d)", removed.name, index, len(self._employees))
        return removed

    def reconcile(self, employee: Employee, source_index: Optional[int]) -> int:
        """
        Put a committed employee back into the roster. Returns its position.
        - source_index None: append.
        - otherwise: replace whatever sits at source_index now.

        Replacement is by position, not identity. If the roster changed
        between opening the form and committing it, the record now at
        source_index is the one replaced.
        """
        if source_index is None:
            self._employees.append(employee)
            pos = len(self._employees) - 1
            logger.info("added %r at %d", employee.name, pos)
            return pos

        self._check_index(source_index)
        # single slot assignment == remove + insert at the same position
        self._employees[source_index] = employee
        logger.info("replaced index %d with %r", source_index, employee.name)
        return source_index

    def save(self, result: CommitResult) -> int:
        return self.reconcile(result.employee, result.source_index)

    def _check_index(self, index):
        count = len(self._employees)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
            logger.warning("rejected index %r (count=%d)", index, count)
            raise OutOfRange(index, count)
