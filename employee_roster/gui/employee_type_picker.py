# gui/employee_type_picker.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QVBoxLayout, QListWidget, QListWidgetItem, QLabel

from employee_roster.models.employee import EmployeeType


class EmployeeTypeDialog(QDialog):
    """Single-choice list of employee types. Clicking a row picks it and closes."""
    def __init__(self, current: EmployeeType | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Employee Type")
        self.resize(320, 240)
        self.selected_type = current

        v = QVBoxLayout(self)
        v.addWidget(QLabel("Select a type"))
        self.list = QListWidget()
        for et in EmployeeType:
            item = QListWidgetItem(et.label)
            item.setData(Qt.UserRole, et)
            if et is current:
                item.setCheckState(Qt.Checked)
            self.list.addItem(item)
        v.addWidget(self.list)

        self.list.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item: QListWidgetItem):
        self.choose(item.data(Qt.UserRole))

    def choose(self, employee_type: EmployeeType):
        self.selected_type = employee_type
        self.accept()


def pick_employee_type(parent=None, current: EmployeeType | None = None) -> EmployeeType | None:
    dlg = EmployeeTypeDialog(current, parent)
    if dlg.exec() == QDialog.Accepted:
        return dlg.selected_type
    return None
