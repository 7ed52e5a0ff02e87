"""PetRegistry - the aggregate of pets and vaccination types from a data file."""

from typing import List, Optional

from .pet import Pet
from .vaccination_record import VaccinationRecord
from .vaccination_type import VaccinationType


class PetRegistry:
    """All pets and the vaccination types their records refer to."""

    def __init__(
        self,
        vaccination_types: Optional[List[VaccinationType]] = None,
        pets: Optional[List[Pet]] = None,
    ):
        self.vaccination_types = vaccination_types or []
        self.pets = pets or []
        # Resolve record type ids to type objects
        types_by_id = {t.id: t for t in self.vaccination_types}
        for record in self.records:
            record.type = types_by_id.get(record.type_id)

    @property
    def records(self) -> List[VaccinationRecord]:
        """Every record across all pets."""
        return [r for pet in self.pets for r in pet.records]

    def get_pet(self, pet_id: int) -> Optional[Pet]:
        for pet in self.pets:
            if pet.id == pet_id:
                return pet
        return None

    def get_type(self, type_id: int) -> Optional[VaccinationType]:
        for vtype in self.vaccination_types:
            if vtype.id == type_id:
                return vtype
        return None

    def get_record(self, record_id: int) -> Optional[VaccinationRecord]:
        for pet in self.pets:
            record = pet.get_record(record_id)
            if record is not None:
                return record
        return None

    def types_sorted(self) -> List[VaccinationType]:
        """Vaccination types in alphabetical order, for selection lists."""
        return sorted(self.vaccination_types, key=lambda t: t.name)
