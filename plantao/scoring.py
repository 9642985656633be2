from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Mapping, Sequence

from .constraints import is_on_vacation, is_weekend, week_number
from .models import Day, StaffMember


def worked_previous_weekend(staff_id: str, d: date, last_weekend_worked: Mapping[str, int]) -> bool:
    return last_weekend_worked.get(staff_id) == week_number(d) - 1


def filter_candidates(
    d: date,
    shuffled_roster: Sequence[StaffMember],
    shift_counts: Mapping[str, int],
    last_weekend_worked: Mapping[str, int],
    avoid_consecutive_weekends: bool = True,
) -> List[StaffMember]:
    """Staff eligible for ``d``, in shuffled roster order.

    Vacation is a hard exclusion. Having worked the previous weekend is a soft
    one: those people are dropped only when a rested alternative exists whose
    shift count is as low as anyone's in the pool, so the rule never empties
    the pool and never overrides fairness.
    """
    available = [p for p in shuffled_roster if not is_on_vacation(d, p.vacations)]
    if not available or not avoid_consecutive_weekends or not is_weekend(d):
        return available

    rested = [p for p in available if not worked_previous_weekend(p.id, d, last_weekend_worked)]
    if not rested or len(rested) == len(available):
        return available

    lowest_available = min(shift_counts.get(p.id, 0) for p in available)
    lowest_rested = min(shift_counts.get(p.id, 0) for p in rested)
    if lowest_rested > lowest_available:
        return available
    return rested


def pick_fairest(candidates: Sequence[StaffMember], shift_counts: Mapping[str, int]) -> StaffMember:
    # min() keeps the first of equal keys, so ties go to roster order
    return min(candidates, key=lambda p: shift_counts.get(p.id, 0))


def shift_counts(days: Iterable[Day]) -> Counter:
    return Counter(day.staff_member.id for day in days if day.staff_member is not None)


def fairness_spread(days: Iterable[Day], roster: Sequence[StaffMember]) -> int:
    """Max minus min shifts per roster member (members with no shift count as 0)."""
    if not roster:
        return 0
    counts = shift_counts(days)
    per_staff: Dict[str, int] = {p.id: counts.get(p.id, 0) for p in roster}
    return max(per_staff.values()) - min(per_staff.values())
