# gui/employee_detail.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QPushButton, QDateEdit, QMessageBox
)

from employee_roster.exceptions import OutOfRange, ValidationError
from employee_roster.gui.employee_type_picker import pick_employee_type
from employee_roster.logic.form import EmployeeForm
from employee_roster.models.employee import EmployeeType
from employee_roster.utils.date_helper import format_date

TYPE_PLACEHOLDER = "Not Set"
MIN_DATE = QDate(100, 1, 1)   # Qt default minimum is 1752-09-14


class EmployeeDetailDialog(QDialog):
    """
    Add/edit dialog driving one EmployeeForm.
    Save is enabled only while the form is valid. Whatever the form's
    on_save does (normally RosterStore.save) runs when Save is pressed.
    """
    def __init__(self, form: EmployeeForm, parent=None):
        super().__init__(parent)
        self.form = form
        self.setWindowTitle(form.title)
        self.resize(420, 260)
        self._picking_date = False

        self._build_ui()
        self._update_view()
        self._update_save_button_state()

    # ---------- UI ----------
    def _build_ui(self):
        root = QVBoxLayout(self)
        grid = QGridLayout()
        r = 0

        grid.addWidget(QLabel("Name*"), r, 0)
        self.txt_name = QLineEdit()
        self.txt_name.setPlaceholderText("Full name")
        grid.addWidget(self.txt_name, r, 1); r += 1

        grid.addWidget(QLabel("Date of birth"), r, 0)
        self.btn_dob = QPushButton()
        self.btn_dob.setFlat(True)
        grid.addWidget(self.btn_dob, r, 1); r += 1

        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setMinimumDate(MIN_DATE)
        self.date_edit.setVisible(False)
        grid.addWidget(self.date_edit, r, 1); r += 1

        grid.addWidget(QLabel("Type*"), r, 0)
        self.btn_type = QPushButton()
        self.btn_type.setFlat(True)
        grid.addWidget(self.btn_type, r, 1); r += 1

        root.addLayout(grid)
        root.addStretch(1)

        action_row = QHBoxLayout()
        self.btn_cancel = QPushButton("Cancel")
        self.btn_save = QPushButton("Save")
        action_row.addWidget(self.btn_cancel)
        action_row.addStretch(1)
        action_row.addWidget(self.btn_save)
        root.addLayout(action_row)

        self.txt_name.textChanged.connect(self._on_name_changed)
        self.btn_dob.clicked.connect(self.toggle_date_picker)
        self.date_edit.dateChanged.connect(self._on_date_changed)
        self.btn_type.clicked.connect(self._on_type_clicked)
        self.btn_save.clicked.connect(self._on_save_clicked)
        self.btn_cancel.clicked.connect(self.reject)

    def _update_view(self):
        draft = self.form.draft
        self.txt_name.setText(draft.name)
        d = draft.date_of_birth
        self.date_edit.setDate(QDate(d.year, d.month, d.day))
        self.btn_dob.setText(format_date(d))
        self._show_type(draft.employee_type)

    def _show_type(self, employee_type: EmployeeType | None):
        self.btn_type.setText(employee_type.label if employee_type else TYPE_PLACEHOLDER)

    def _update_save_button_state(self):
        self.btn_save.setEnabled(self.form.is_valid())

    # ---------- date picker row ----------
    @property
    def picking_date(self) -> bool:
        return self._picking_date

    @picking_date.setter
    def picking_date(self, value: bool):
        self._picking_date = value
        self.date_edit.setVisible(value)

    def toggle_date_picker(self):
        self.picking_date = not self.picking_date

    # ---------- signals ----------
    def _on_name_changed(self, text: str):
        self.form.set_name(text)
        self._update_save_button_state()

    def _on_date_changed(self, qdate: QDate):
        d = qdate.toPython()
        self.form.set_date_of_birth(d)
        self.btn_dob.setText(format_date(d))

    def _on_type_clicked(self):
        chosen = pick_employee_type(self, self.form.draft.employee_type)
        if chosen is not None:
            self.select_type(chosen)

    def select_type(self, employee_type: EmployeeType):
        self.form.set_employee_type(employee_type)
        self._show_type(employee_type)
        self._update_save_button_state()

    def _on_save_clicked(self):
        try:
            self.form.commit()
        except ValidationError as e:
            QMessageBox.warning(self, "Check", f"Required: {', '.join(e.missing)}")
            return
        except OutOfRange:
            QMessageBox.warning(self, "Error", "The employee being edited no longer exists.")
            return
        self.accept()

    def reject(self):
        if not self.form.closed:
            self.form.cancel()
        super().reject()
