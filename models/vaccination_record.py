"""VaccinationRecord class for a single pet vaccination."""

from datetime import date, datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .vaccination_type import VaccinationType


class VaccinationRecord:
    """
    A vaccination logged for a pet.

    completed_at is None until the vaccination has been administered.
    The type is resolved from type_id once the registry is loaded.
    """

    def __init__(
            self,
            id: int,
            type_id: int,
            completed_at: Optional[date] = None,
            pet_id: Optional[int] = None,
            type: Optional["VaccinationType"] = None,
    ):
        self.id = id
        self.type_id = type_id
        self.completed_at = _to_date(completed_at)
        self.pet_id = pet_id
        self.type = type

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def type_name(self) -> str:
        """Vaccination type name, falling back to the raw id if unresolved."""
        return self.type.name if self.type else f"type #{self.type_id}"


def _to_date(value) -> Optional[date]:
    """Accept a date, datetime or ISO string and return a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
