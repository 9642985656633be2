"""I/O utilities for CSV import into the roster store."""

from .import_csv import import_holidays_csv, import_staff_csv, import_vacations_csv

__all__ = [
    "import_staff_csv",
    "import_vacations_csv",
    "import_holidays_csv",
]
