# main.py
import argparse
import logging
import sys

from employee_roster.logic.roster import RosterStore


def main(argv=None):
    parser = argparse.ArgumentParser(prog="employee-roster")
    parser.add_argument("--cli", action="store_true", help="text menu instead of the window")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = RosterStore()
    if args.cli:
        from employee_roster.cli.employee_menu import employee_menu
        employee_menu(store)
        return 0

    from PySide6.QtWidgets import QApplication
    from employee_roster.gui.employee_list import EmployeeListWindow

    app = QApplication(sys.argv[:1])
    window = EmployeeListWindow(store)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
