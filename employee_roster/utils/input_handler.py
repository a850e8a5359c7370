# utils/input_handler.py
from employee_roster.exceptions import CancelAction, GoBackAction


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low == "cancel":
            raise CancelAction()
        if low == "back":
            raise GoBackAction()

        if not v and default is not None:
            return default   # empty keeps the shown value
        if not v and allow_empty:
            return ""
        if not v:
            print("Enter a value, or 'cancel' / 'back'.")
            continue
        return v
