# cli/employee_menu.py
from employee_roster.exceptions import (
    CancelAction, GoBackAction, ValidationError
)
from employee_roster.logic.form import EmployeeForm
from employee_roster.logic.roster import RosterStore
from employee_roster.models.employee import EmployeeType
from employee_roster.utils.date_helper import format_date, parse_date, INPUT_FORMAT
from employee_roster.utils.input_handler import get_input

TYPE_OPTIONS = list(EmployeeType)


def employee_menu(store: RosterStore | None = None) -> RosterStore:
    store = store if store is not None else RosterStore()
    while True:
        print("\n[Employees]")
        print("1. List employees")
        print("2. Add employee")
        print("3. Edit employee")
        print("4. Delete employee")
        print("0. Quit")

        try:
            choice = get_input("Choice")
            if choice == "1":
                show_employees(store)
            elif choice == "2":
                add_employee(store)
            elif choice == "3":
                edit_employee(store)
            elif choice == "4":
                delete_employee(store)
            elif choice == "0":
                break
            else:
                print("Invalid choice.")
        except (CancelAction, GoBackAction):
            print("Back to menu.")
    return store


def show_employees(store: RosterStore):
    print("\n[Employee list]")
    if not store.count():
        print("(empty)")
        return
    for i, emp in enumerate(store.employees(), start=1):
        print(f"{i} | {emp.name} | {emp.employee_type.label} | {format_date(emp.date_of_birth)}")


def add_employee(store: RosterStore):
    form = store.open_form_for_create(on_save=store.save)
    if _run_form(form):
        print("Employee added.")


def edit_employee(store: RosterStore):
    index = _ask_row(store, "Row to edit")
    if index is None:
        return
    form = store.open_form_for_edit(index, on_save=store.save)
    if _run_form(form):
        print("Employee updated.")


def delete_employee(store: RosterStore):
    index = _ask_row(store, "Row to delete")
    if index is None:
        return
    removed = store.remove_at(index)
    print(f"Deleted {removed.name}.")


# ---------- helpers ----------
def _ask_row(store: RosterStore, prompt: str):
    raw = get_input(prompt)
    if not raw.isdecimal():
        print("Enter a row number.")
        return None
    index = int(raw) - 1
    if not 0 <= index < store.count():
        print("No employee in that row.")
        return None
    return index


def _run_form(form: EmployeeForm) -> bool:
    """Prompt until the form commits. False if the user cancelled."""
    print(f"\n[{form.title}]")
    try:
        while True:
            _prompt_fields(form)
            try:
                form.commit()
                return True
            except ValidationError as e:
                print(f"Missing: {', '.join(e.missing)}")
    except (CancelAction, GoBackAction):
        form.cancel()
        print("Cancelled.")
        return False


def _prompt_fields(form: EmployeeForm):
    draft = form.draft
    form.set_name(get_input("Name", default=draft.name or None))

    while True:
        raw = get_input(f"Date of birth ({INPUT_FORMAT})",
                        default=draft.date_of_birth.isoformat())
        try:
            form.set_date_of_birth(parse_date(raw))
            break
        except ValueError:
            print("Use the YYYY-MM-DD format.")

    for i, et in enumerate(TYPE_OPTIONS, start=1):
        print(f"  {i}. {et.label}")
    current = str(TYPE_OPTIONS.index(draft.employee_type) + 1) if draft.employee_type else None
    while True:
        chosen = _parse_type(get_input("Type (number or name)", default=current))
        if chosen is not None:
            form.set_employee_type(chosen)
            break
        print("Pick one of the listed numbers or names.")


def _parse_type(raw: str):
    """'3' or 'part time' -> EmployeeType; None if neither."""
    if raw.isdecimal():
        n = int(raw)
        return TYPE_OPTIONS[n - 1] if 1 <= n <= len(TYPE_OPTIONS) else None
    try:
        return EmployeeType.from_label(raw)
    except ValueError:
        return None
