# exceptions.py


class OutOfRange(IndexError):
    """Roster index outside [0, count)."""

    def __init__(self, index, count: int):
        super().__init__(f"index {index!r} out of range for roster of {count}")
        self.index = index
        self.count = count


class ValidationError(ValueError):
    """Raised by EmployeeForm.commit() when required fields are missing."""

    def __init__(self, missing: list[str]):
        super().__init__("missing required field(s): " + ", ".join(missing))
        self.missing = missing


class FormClosed(RuntimeError):
    """The form was already committed or cancelled."""


# CLI navigation signals
class CancelAction(Exception):
    pass


class GoBackAction(Exception):
    pass
