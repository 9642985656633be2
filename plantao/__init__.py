"""On-call ("plantão") calendar generation.

Modules:
- models: roster, vacation, holiday and day records
- config: load configuration (JSON or YAML)
- constraints: calendar predicates (weekend, holiday, vacation, same day)
- scoring: candidate filtering and shift-count fairness
- engine: calendar generation, holiday bridging and manual reassignment
- holidays: merging national and custom holiday lists
- validator: post-generation checks and summaries
- data_io: CSV helpers and plain-record export
- domain: SQLAlchemy store for staff, vacations and custom holidays
- cli: command-line interface entrypoints
"""

from .engine import generate_calendar, generate_calendar_range, reassign
from .models import Day, Holiday, StaffMember, VacationInterval

__all__ = [
    "generate_calendar",
    "generate_calendar_range",
    "reassign",
    "Day",
    "Holiday",
    "StaffMember",
    "VacationInterval",
]
