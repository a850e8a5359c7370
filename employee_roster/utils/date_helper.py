# utils/date_helper.py
from datetime import date, datetime

DEFAULT_DOB_YEARS_BACK = 40
DEFAULT_DOB_MONTH = 6
DEFAULT_DOB_DAY = 15

DISPLAY_FORMAT = "%b %d, %Y"   # Jun 15, 1986
INPUT_FORMAT = "%Y-%m-%d"


def default_date_of_birth(today: date | None = None) -> date:
    """
    New-employee default: June 15th, 40 years before `today`.
    - Only the year of `today` matters, so the result never lands on a
      non-existent day (no Feb 29 issue).
    """
    today = today or date.today()
    return date(today.year - DEFAULT_DOB_YEARS_BACK, DEFAULT_DOB_MONTH, DEFAULT_DOB_DAY)


def format_date(d: date) -> str:
    return d.strftime(DISPLAY_FORMAT)


def parse_date(text: str) -> date:
    """'1986-06-15' -> date(1986, 6, 15). ValueError on anything else."""
    return datetime.strptime(text.strip(), INPUT_FORMAT).date()
