# gui/employee_list.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QTableWidget, QTableWidgetItem, QMessageBox, QDialog
)
from PySide6.QtWidgets import QAbstractItemView

from employee_roster.gui.employee_detail import EmployeeDetailDialog
from employee_roster.logic.roster import RosterStore


class EmployeeListWindow(QMainWindow):
    """
    Master list. Double-click a row to edit it, "+ Add" for a new employee.
    """
    def __init__(self, store: RosterStore | None = None):
        super().__init__()
        self.setWindowTitle("Employee Roster")
        self.resize(560, 640)
        self.store = store if store is not None else RosterStore()

        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)

        root.addWidget(QLabel("Employees"))
        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Name", "Type"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        root.addWidget(self.table)

        btn_row = QHBoxLayout()
        self.btn_add = QPushButton("+ Add")
        self.btn_del = QPushButton("Delete")
        btn_row.addWidget(self.btn_add)
        btn_row.addWidget(self.btn_del)
        btn_row.addStretch(1)
        root.addLayout(btn_row)

        self.table.cellDoubleClicked.connect(self._on_row_double_clicked)
        self.btn_add.clicked.connect(self._on_add_clicked)
        self.btn_del.clicked.connect(self._on_delete_clicked)

    def refresh(self):
        self.table.setRowCount(0)
        for name, type_label in self.store.rows():
            r = self.table.rowCount()
            self.table.insertRow(r)
            self.table.setItem(r, 0, QTableWidgetItem(name))
            self.table.setItem(r, 1, QTableWidgetItem(type_label))
        self.table.resizeColumnsToContents()

    # ---------- navigation ----------
    def open_detail(self, row: int | None = None) -> EmployeeDetailDialog:
        if row is None:
            form = self.store.open_form_for_create(on_save=self.store.save)
        else:
            form = self.store.open_form_for_edit(row, on_save=self.store.save)
        return EmployeeDetailDialog(form, self)

    def _show_detail(self, row: int | None):
        dlg = self.open_detail(row)
        if dlg.exec() == QDialog.Accepted:
            self.refresh()

    def _on_add_clicked(self):
        self.table.clearSelection()
        self._show_detail(None)

    def _on_row_double_clicked(self, row, _col):
        self._show_detail(row)

    def _on_delete_clicked(self):
        row = self.table.currentRow()
        if row < 0:
            QMessageBox.information(self, "Notice", "Select an employee to delete.")
            return
        name = self.store.record_at(row).name
        if QMessageBox.question(self, "Confirm", f"Delete {name}?") != QMessageBox.Yes:
            return
        self.delete_row(row)

    def delete_row(self, row: int):
        self.store.remove_at(row)
        self.refresh()
