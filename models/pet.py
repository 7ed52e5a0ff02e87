"""Pet class for the animals whose vaccinations are tracked."""

from datetime import date
from typing import List, Optional

from .vaccination_record import VaccinationRecord, _to_date


def calculate_pet_age(birth_date: date, today: Optional[date] = None) -> int:
    """Age in whole years, counting 365.25 days per year."""
    today = today or date.today()
    return int((today - birth_date).days // 365.25)


class Pet:
    """A pet and its vaccination records."""

    def __init__(
        self,
        id: int,
        name: str,
        species: str,
        breed: Optional[str],
        birth_date: str,
        records: Optional[List[VaccinationRecord]] = None,
    ):
        self.id = id
        self.name = name
        self.species = species
        self.breed = breed
        self.birth_date = _to_date(birth_date)
        self.records = records or []
        for record in self.records:
            record.pet_id = id

    def age_on(self, today: Optional[date] = None) -> Optional[int]:
        if self.birth_date is None:
            return None
        return calculate_pet_age(self.birth_date, today)

    def get_record(self, record_id: int) -> Optional[VaccinationRecord]:
        for record in self.records:
            if record.id == record_id:
                return record
        return None
