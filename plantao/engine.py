"""On-call calendar generation.

A month is built in two passes. The first walks every day, skips days that
need no coverage (weekdays that are not holidays) and gives each coverage day
to the eligible staff member with the fewest shifts so far. The second pass
"bridges" weekday holidays that touch a covered weekend so the same person
holds the whole stretch.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import PlantaoConfig
from .constraints import (
    days_in_month,
    holiday_dates,
    is_on_vacation,
    is_same_day,
    is_weekend,
    week_number,
)
from .holidays import holidays_in_month
from .models import Day, Holiday, StaffMember, coerce_holidays, coerce_roster
from .scoring import filter_candidates, pick_fairest

logger = logging.getLogger(__name__)


def generate_calendar(
    year: int,
    month: int,
    roster: Iterable[Any],
    holidays: Iterable[Any],
    *,
    rng: Optional[random.Random] = None,
    cfg: Optional[PlantaoConfig] = None,
) -> List[Day]:
    """
    Assign a staff member to every weekend and holiday of a month.

    Args:
        year: Calendar year
        month: 0-indexed month (0 = January)
        roster: StaffMember objects or ``{id, name, vacations}`` mappings
        holidays: Holiday objects or ``{date, name, type}`` mappings
        rng: Random source for the initial roster shuffle
        cfg: Optional PlantaoConfig (seed and rule toggles)

    Returns:
        One Day per calendar day, ascending. Days without coverage, or where
        nobody was eligible, have ``staff_member=None``.
    """
    cfg = cfg or PlantaoConfig()
    staff = coerce_roster(roster)
    holiday_list = coerce_holidays(holidays)
    days = [Day(date=d) for d in days_in_month(year, month)]

    if not staff:
        logger.info("Empty roster for %04d-%02d; calendar left unassigned", year, month + 1)
        return days

    if rng is None:
        rng = random.Random(cfg.seed)

    holiday_set = holiday_dates(holiday_list)
    shift_counts: Dict[str, int] = {p.id: 0 for p in staff}
    last_weekend_worked: Dict[str, int] = {}

    shuffled = list(staff)
    rng.shuffle(shuffled)

    for day in days:
        weekend = is_weekend(day.date)
        if not weekend and day.date not in holiday_set:
            continue

        candidates = filter_candidates(
            day.date,
            shuffled,
            shift_counts,
            last_weekend_worked,
            avoid_consecutive_weekends=cfg.avoid_consecutive_weekends,
        )
        if not candidates:
            logger.warning("No eligible staff for %s; day left unassigned", day.date.isoformat())
            continue

        chosen = pick_fairest(candidates, shift_counts)
        day.staff_member = chosen
        shift_counts[chosen.id] = shift_counts.get(chosen.id, 0) + 1
        if weekend:
            last_weekend_worked[chosen.id] = week_number(day.date)
        logger.debug(
            "%s -> %s (%d candidates, %d shifts)",
            day.date.isoformat(),
            chosen.name,
            len(candidates),
            shift_counts[chosen.id],
        )

    if cfg.bridge_holidays:
        bridge_holidays(days, holiday_list)

    logger.info(
        "Generated %04d-%02d: %d coverage days assigned across %d staff",
        year,
        month + 1,
        sum(1 for d in days if d.staff_member is not None),
        len(staff),
    )
    return days


def bridge_holidays(days: List[Day], holidays: Iterable[Holiday]) -> int:
    """Give weekday holidays next to a covered weekend day the weekend's assignee.

    A holiday followed by a covered weekend day (a Friday holiday) takes that
    day's assignee; otherwise one preceded by a covered weekend day (a Monday
    holiday) takes the previous day's. Holidays on a weekend are left alone,
    and a neighbour whose assignee is on vacation on the holiday is skipped.
    Mutates ``days`` in place and returns the number of bridged days.
    """
    holiday_set = holiday_dates(holidays)
    bridged = 0
    for i, current in enumerate(days):
        if current.date not in holiday_set or is_weekend(current.date):
            continue
        prev_day = days[i - 1] if i > 0 else None
        next_day = days[i + 1] if i < len(days) - 1 else None

        if _can_bridge(next_day, current.date):
            current.staff_member = next_day.staff_member
        elif _can_bridge(prev_day, current.date):
            current.staff_member = prev_day.staff_member
        else:
            continue
        bridged += 1
        logger.debug("Bridged holiday %s to %s", current.date.isoformat(), current.staff_member.name)
    return bridged


def _can_bridge(neighbour: Optional[Day], holiday: date) -> bool:
    return (
        neighbour is not None
        and is_weekend(neighbour.date)
        and neighbour.staff_member is not None
        and not is_on_vacation(holiday, neighbour.staff_member.vacations)
    )


def reassign(
    days: Sequence[Day],
    target: Any,
    new_staff_id: Optional[str],
    roster: Iterable[Any],
) -> List[Day]:
    """Manually override one day's assignee.

    Returns a new list; the Day matching ``target`` is replaced by a copy
    holding the roster member with ``new_staff_id`` (``None`` when the id is
    ``None`` or unknown). Every other entry is passed through as-is. No
    counts, weekend tracking or bridging are recomputed.
    """
    member: Optional[StaffMember] = None
    if new_staff_id is not None:
        member = next((p for p in coerce_roster(roster) if p.id == new_staff_id), None)
        if member is None:
            logger.warning("Reassign to unknown staff id %r; clearing %s", new_staff_id, target)

    out: List[Day] = []
    for day in days:
        if is_same_day(day.date, target):
            out.append(replace(day, staff_member=member))
        else:
            out.append(day)
    return out


def generate_calendar_range(
    year: int,
    start_month: int,
    end_month: int,
    roster: Iterable[Any],
    holidays: Iterable[Any],
    *,
    rng: Optional[random.Random] = None,
    cfg: Optional[PlantaoConfig] = None,
) -> Dict[int, List[Day]]:
    """Generate several months of one year, each independently.

    Months are 0-indexed and may be given in either order. Counts and weekend
    tracking restart every month, and each month sees only its own holidays.
    """
    cfg = cfg or PlantaoConfig()
    if rng is None:
        rng = random.Random(cfg.seed)
    staff = coerce_roster(roster)
    holiday_list = coerce_holidays(holidays)
    first, last = min(start_month, end_month), max(start_month, end_month)
    return {
        m: generate_calendar(year, m, staff, holidays_in_month(holiday_list, year, m), rng=rng, cfg=cfg)
        for m in range(first, last + 1)
    }


def find_day(days: Sequence[Day], target: Any) -> Optional[Day]:
    for day in days:
        if is_same_day(day.date, target):
            return day
    return None
