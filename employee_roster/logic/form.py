# logic/form.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, Optional

from employee_roster.exceptions import FormClosed, ValidationError
from employee_roster.models.employee import Employee, EmployeeType
from employee_roster.utils.date_helper import default_date_of_birth

logger = logging.getLogger(__name__)

NEW_EMPLOYEE_TITLE = "New Employee"


@dataclass
class Draft:
    name: str = ""
    date_of_birth: Optional[date] = None     # None -> default_date_of_birth() when the form opens
    employee_type: Optional[EmployeeType] = None
    source_index: Optional[int] = None       # roster position being edited, None = create


@dataclass(frozen=True)
class CommitResult:
    employee: Employee
    source_index: Optional[int]


class EmployeeForm:
    """
    Single-use add/edit form for one employee.
    open -> set_*()* -> commit() | cancel() -> closed

    The form never touches the roster. commit() hands back a CommitResult
    (and passes it to `on_save` if one was given); the caller reconciles it.
    """

    def __init__(self, draft: Draft, title: str,
                 on_save: Callable[[CommitResult], object] | None = None):
        self._draft = replace(draft)
        if self._draft.date_of_birth is None:
            self._draft.date_of_birth = default_date_of_birth()
        self._title = title
        self._on_save = on_save
        self._closed = False

    @classmethod
    def for_create(cls, today: date | None = None, on_save=None) -> "EmployeeForm":
        draft = Draft(date_of_birth=default_date_of_birth(today))
        logger.debug("open create form (default dob %s)", draft.date_of_birth)
        return cls(draft, NEW_EMPLOYEE_TITLE, on_save)

    @classmethod
    def for_edit(cls, employee: Employee, source_index: int, on_save=None) -> "EmployeeForm":
        draft = Draft(
            name=employee.name,
            date_of_birth=employee.date_of_birth,
            employee_type=employee.employee_type,
            source_index=source_index,
        )
        logger.debug("open edit form for index %d", source_index)
        return cls(draft, employee.name, on_save)

    # ---------- state ----------
    @property
    def title(self) -> str:
        return self._title

    @property
    def draft(self) -> Draft:
        return replace(self._draft)

    @property
    def source_index(self) -> Optional[int]:
        return self._draft.source_index

    @property
    def is_edit(self) -> bool:
        return self._draft.source_index is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # ---------- field updates ----------
    def set_name(self, text: str):
        self._ensure_open()
        self._draft.name = text if text is not None else ""

    def set_date_of_birth(self, value: date):
        self._ensure_open()
        if isinstance(value, datetime):
            value = value.date()
        if not isinstance(value, date):
            raise TypeError(f"date_of_birth must be a date, got {type(value).__name__}")
        # no range check: future dates and any age are accepted
        self._draft.date_of_birth = value

    def set_employee_type(self, employee_type: EmployeeType):
        self._ensure_open()
        if not isinstance(employee_type, EmployeeType):
            raise TypeError(f"employee_type must be an EmployeeType, got {employee_type!r}")
        self._draft.employee_type = employee_type

    # ---------- validation ----------
    def missing_fields(self) -> list[str]:
        missing = []
        if not self._draft.name:
            missing.append("name")
        if self._draft.employee_type is None:
            missing.append("employee_type")
        return missing

    def is_valid(self) -> bool:
        return not self.missing_fields()

    # ---------- finish ----------
    def commit(self) -> CommitResult:
        self._ensure_open()
        missing = self.missing_fields()
        if missing:
            logger.info("commit rejected, missing %s", ", ".join(missing))
            raise ValidationError(missing)

        d = self._draft
        result = CommitResult(
            employee=Employee(name=d.name, date_of_birth=d.date_of_birth,
                              employee_type=d.employee_type),
            source_index=d.source_index,
        )
        # a failing on_save (e.g. stale index) leaves the form open
        if self._on_save is not None:
            self._on_save(result)
        self._closed = True
        logger.debug("form committed: %s", result)
        return result

    def cancel(self):
        self._ensure_open()
        self._closed = True
        logger.debug("form cancelled")

    def _ensure_open(self):
        if self._closed:
            raise FormClosed("form is already committed or cancelled")
