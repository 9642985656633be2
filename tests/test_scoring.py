from datetime import date

from plantao.models import Day, StaffMember, VacationInterval
from plantao.scoring import fairness_spread, filter_candidates, pick_fairest, shift_counts


SAT_13 = date(2024, 1, 13)  # week_number 1, previous weekend is week 0


def _staff(*ids):
    return [StaffMember(id=i, name=i.upper()) for i in ids]


def test_vacation_is_a_hard_exclusion():
    a, b = _staff("a", "b")
    a.vacations.append(VacationInterval(id="v", start_date="2024-01-13", end_date="2024-01-13"))
    assert filter_candidates(SAT_13, [a, b], {}, {}) == [b]
    a_only = filter_candidates(SAT_13, [a], {}, {})
    assert a_only == []


def test_previous_weekend_worker_dropped_when_rested_alternative_is_as_fair():
    a, b = _staff("a", "b")
    counts = {"a": 1, "b": 1}
    last = {"a": 0}
    assert filter_candidates(SAT_13, [a, b], counts, last) == [b]


def test_previous_weekend_worker_kept_when_alternative_is_behind_on_fairness():
    a, b = _staff("a", "b")
    counts = {"a": 0, "b": 1}
    last = {"a": 0}
    assert filter_candidates(SAT_13, [a, b], counts, last) == [a, b]


def test_adjacency_rule_never_empties_pool():
    a, b = _staff("a", "b")
    b.vacations.append(VacationInterval(id="v", start_date="2024-01-01", end_date="2024-01-31"))
    last = {"a": 0}
    assert filter_candidates(SAT_13, [a, b], {"a": 3}, last) == [a]


def test_adjacency_rule_only_on_weekends_and_can_be_disabled():
    a, b = _staff("a", "b")
    last = {"a": 0}
    friday = date(2024, 1, 12)
    assert filter_candidates(friday, [a, b], {}, last) == [a, b]
    assert filter_candidates(SAT_13, [a, b], {}, last, avoid_consecutive_weekends=False) == [a, b]


def test_pick_fairest_prefers_lowest_count_then_order():
    a, b, c = _staff("a", "b", "c")
    assert pick_fairest([a, b, c], {"a": 2, "b": 1, "c": 1}) is b
    assert pick_fairest([c, b, a], {}) is c


def test_counts_and_spread():
    a, b, c = _staff("a", "b", "c")
    days = [
        Day(date=date(2024, 1, 6), staff_member=a),
        Day(date=date(2024, 1, 7), staff_member=a),
        Day(date=date(2024, 1, 8)),
        Day(date=date(2024, 1, 13), staff_member=b),
    ]
    assert shift_counts(days) == {"a": 2, "b": 1}
    assert fairness_spread(days, [a, b, c]) == 2
    assert fairness_spread(days, []) == 0
