"""Filter/sort projection, aggregate statistics and department options.

All functions are pure: they read the records they are given and return new
objects, so the board can be re-derived from scratch after every change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any

from staffboard.models.employee import NO_DEPARTMENT, Employee
from staffboard.models.view import ALL_DEPARTMENTS, Criteria, SortKey, Statistics

_SEARCH_FIELDS = ("name", "email", "role", "department")

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y/%m/%d", "%m/%d/%Y")


def parse_date(value: str | None) -> date | None:
    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue
    return None


def matches_search(record: Employee, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    return any(needle in (getattr(record, field) or "").lower() for field in _SEARCH_FIELDS)


def matches_department(record: Employee, department: str) -> bool:
    return department == ALL_DEPARTMENTS or record.department == department


def _compare_dates(left: Employee, right: Employee) -> int:
    a = parse_date(left.date_joined)
    b = parse_date(right.date_joined)
    # Unparsable dates compare equal to everything.
    if a is None or b is None or a == b:
        return 0
    return -1 if a < b else 1


def _name_key(record: Employee) -> tuple[str, str]:
    return (record.name.casefold(), record.name)


def _sort_key(sort: SortKey) -> tuple[Callable[[Employee], Any] | None, bool]:
    if sort in (SortKey.NAME_ASC, SortKey.NAME_DESC):
        return _name_key, sort is SortKey.NAME_DESC
    if sort in (SortKey.SALARY_ASC, SortKey.SALARY_DESC):
        return (lambda r: r.salary), sort is SortKey.SALARY_DESC
    return None, sort is SortKey.DATE_DESC


def sort_records(records: Iterable[Employee], sort: SortKey) -> list[Employee]:
    """Stable sort; records comparing equal keep their input order."""
    items = list(records)
    key, descending = _sort_key(sort)
    if key is not None:
        # sorted(reverse=True) keeps equal elements in their original order.
        return sorted(items, key=key, reverse=descending)

    # Dates need a comparator: unparsable dates are equal to every other date,
    # which a plain key function cannot express.
    if descending:
        return sorted(items, key=cmp_to_key(lambda a, b: _compare_dates(b, a)))
    return sorted(items, key=cmp_to_key(_compare_dates))


def compute_projection(records: Sequence[Employee], criteria: Criteria) -> list[Employee]:
    filtered = [
        record
        for record in records
        if matches_search(record, criteria.search) and matches_department(record, criteria.department)
    ]
    return sort_records(filtered, criteria.sort)


def compute_statistics(records: Sequence[Employee]) -> Statistics:
    count = len(records)
    total_salary = sum((record.salary or 0.0) for record in records)
    avg_salary = total_salary / count if count > 0 else 0.0
    departments = {record.department for record in records if record.department != NO_DEPARTMENT}
    return Statistics(
        count=count,
        total_salary=total_salary,
        avg_salary=avg_salary,
        department_count=len(departments),
    )


def compute_department_options(
    records: Sequence[Employee],
    selected: str = ALL_DEPARTMENTS,
) -> tuple[list[str], str]:
    """Return the sorted department options and the selection to keep.

    The previous selection survives only if it is still one of the options.
    """
    options = sorted({record.department for record in records if record.department != NO_DEPARTMENT})
    effective = selected if selected in options else ALL_DEPARTMENTS
    return options, effective
