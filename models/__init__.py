"""
Pet vaccination tracking models.

This package provides data models for tracking pet vaccinations:
- Status: Vaccination status (COMPLETED, DUE_SOON, OVERDUE) with urgency score
- VaccinationType: Kinds of vaccination and their nominal interval
- VaccinationRecord: A vaccination logged for a pet
- Pet: An animal and its records
- PetRegistry: All pets and types loaded from a data file
- VaccinationDue: Calculated status and due date
"""

from .status import Status
from .vaccination_type import VaccinationType
from .vaccination_record import VaccinationRecord
from .pet import Pet, calculate_pet_age
from .registry import PetRegistry
from .vaccination_due import VaccinationDue
from .errors import MissingFieldError, NotFoundError
from .calculations import calc_due_date, check_status, is_overdue, urgency_score
from .sorting import TableRequest, evaluate_records, sort_records
from .loader import (
    load_registry,
    update_record_completion,
    add_record,
    save_registry,
    require_fields,
)

__all__ = [
    "Status",
    "VaccinationType",
    "VaccinationRecord",
    "Pet",
    "PetRegistry",
    "VaccinationDue",
    "MissingFieldError",
    "NotFoundError",
    "calc_due_date",
    "calculate_pet_age",
    "check_status",
    "is_overdue",
    "urgency_score",
    "TableRequest",
    "evaluate_records",
    "sort_records",
    "load_registry",
    "update_record_completion",
    "add_record",
    "save_registry",
    "require_fields",
]
