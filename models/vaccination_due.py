"""VaccinationDue dataclass for calculated vaccination status."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, TYPE_CHECKING

from .status import Status

if TYPE_CHECKING:
    from .vaccination_record import VaccinationRecord


@dataclass(frozen=True)
class VaccinationDue:
    """Calculated status and due date for a vaccination record."""

    record: "VaccinationRecord"
    status: Status
    due_date: Optional[date] = None
    is_overdue: bool = False

    @property
    def last_completed(self) -> Optional[date]:
        return self.record.completed_at

    @property
    def urgency(self) -> int:
        return self.status.urgency

    @property
    def can_mark_complete(self) -> bool:
        """Only records that are not currently up to date can be marked complete."""
        return self.status != Status.COMPLETED
