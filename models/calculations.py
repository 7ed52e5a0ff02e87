"""Helper functions for vaccination due date and status calculations."""

from datetime import date, datetime, time, timedelta
from dateutil.relativedelta import relativedelta
from typing import Optional, Union

from .status import Status
from .vaccination_due import VaccinationDue
from .vaccination_record import VaccinationRecord

DEFAULT_INTERVAL_MONTHS = 12

Instant = Union[date, datetime]


def calc_due_date(
    completed_at: Optional[Instant], interval_months: Optional[int] = None
) -> Optional[date]:
    """
    Calculate next due date: completion date + interval months (default one year).

    Month and day are preserved. Days past the end of the target month carry
    over, so 29 Feb 2024 + 1 year is 1 Mar 2025 rather than 28 Feb.
    """
    if completed_at is None:
        return None
    if isinstance(completed_at, datetime):
        completed_at = completed_at.date()
    months = DEFAULT_INTERVAL_MONTHS if interval_months is None else int(interval_months)
    first_of_month = completed_at.replace(day=1) + relativedelta(months=months)
    return first_of_month + timedelta(days=completed_at.day - 1)


def as_instant(now: Instant) -> datetime:
    """Treat a bare date as midnight at the start of that day."""
    if isinstance(now, datetime):
        return now
    return datetime.combine(now, time.min)


def is_overdue(due_date: date, now: Instant) -> bool:
    """True once the start of the due date has passed."""
    now = as_instant(now)
    return datetime.combine(due_date, time.min, tzinfo=now.tzinfo) < now


def check_status(
    record: VaccinationRecord, now: Instant, use_type_interval: bool = False
) -> VaccinationDue:
    """
    Classify a record as COMPLETED, DUE_SOON or OVERDUE at the given instant.

    - Never completed: DUE_SOON with no due date
    - Completed and due date passed: OVERDUE
    - Otherwise: COMPLETED

    With use_type_interval the vaccination type's interval (months) replaces
    the fixed one-year interval.
    """
    if not record.is_completed:
        return VaccinationDue(record=record, status=Status.DUE_SOON)

    interval = None
    if use_type_interval and record.type is not None:
        interval = record.type.interval
    due_date = calc_due_date(record.completed_at, interval)
    overdue = is_overdue(due_date, now)

    return VaccinationDue(
        record=record,
        status=Status.OVERDUE if overdue else Status.COMPLETED,
        due_date=due_date,
        is_overdue=overdue,
    )


def urgency_score(record: VaccinationRecord, now: Instant, use_type_interval: bool = False) -> int:
    """Urgency for default ordering: completed 0, due soon 1, overdue 2."""
    return check_status(record, now, use_type_interval).status.urgency
