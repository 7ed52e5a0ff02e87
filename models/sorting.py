"""Sorting of vaccination records for the status table."""

import locale
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from .calculations import Instant, as_instant, calc_due_date, check_status
from .vaccination_due import VaccinationDue
from .vaccination_record import VaccinationRecord

SORT_KEYS = ("urgency", "status", "dueDate")
DIRECTIONS = ("asc", "desc")
DEFAULT_SORT = "urgency"
DEFAULT_DIRECTION = "asc"


def use_user_collation() -> bool:
    """
    Collate status labels by the locale named in the environment.

    Returns False and keeps the C locale (plain code-point order) when the
    environment names a locale that is not installed.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        return False
    return True


@dataclass(frozen=True)
class TableRequest:
    """Sort column and direction requested for a vaccination table."""

    sort_by: str = DEFAULT_SORT
    direction: str = DEFAULT_DIRECTION

    @classmethod
    def from_args(cls, sort_by: Optional[str], direction: Optional[str]) -> "TableRequest":
        """Build from loosely-typed input, falling back to defaults for unknown values."""
        if sort_by not in SORT_KEYS:
            sort_by = DEFAULT_SORT
        if direction not in DIRECTIONS:
            direction = DEFAULT_DIRECTION
        return cls(sort_by=sort_by, direction=direction)

    def toggled(self, column: str) -> "TableRequest":
        """Request produced by clicking a column header."""
        if column == self.sort_by:
            return TableRequest(column, "desc" if self.direction == "asc" else "asc")
        return TableRequest(column, "asc")


def evaluate_records(
    records: Sequence[VaccinationRecord],
    sort_by: str = DEFAULT_SORT,
    direction: str = DEFAULT_DIRECTION,
    now: Optional[Instant] = None,
    use_type_interval: bool = False,
) -> List[VaccinationDue]:
    """
    Classify and sort records for display.

    The current time is sampled once so every row is judged against the same instant.

    Args:
        sort_by: "urgency", "status" or "dueDate"
        direction: "asc" or "desc" (ignored for urgency)

    Status labels are compared with the process LC_COLLATE setting; entry
    points call use_user_collation() to adopt the user's locale.
    """
    now = as_instant(now if now is not None else datetime.now())
    results = [check_status(r, now, use_type_interval) for r in records]
    reverse = direction == "desc"

    if sort_by == "urgency":
        return sorted(results, key=lambda s: s.urgency)
    elif sort_by == "status":
        return sorted(results, key=lambda s: locale.strxfrm(s.status.label), reverse=reverse)
    elif sort_by == "dueDate":
        # Never-completed records sort as if due one year from today
        synthetic_due = calc_due_date(now.date())
        return sorted(
            results, key=lambda s: s.due_date or synthetic_due, reverse=reverse
        )
    return results


def sort_records(
    records: Sequence[VaccinationRecord],
    sort_by: str = DEFAULT_SORT,
    direction: str = DEFAULT_DIRECTION,
    now: Optional[Instant] = None,
    use_type_interval: bool = False,
) -> List[VaccinationRecord]:
    """Return a new list of records in display order. The input is left unchanged."""
    return [
        s.record
        for s in evaluate_records(records, sort_by, direction, now, use_type_interval)
    ]
