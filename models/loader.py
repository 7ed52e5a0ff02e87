"""YAML loading and saving utilities for pet vaccination data."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import MissingFieldError, NotFoundError
from .pet import Pet
from .registry import PetRegistry
from .vaccination_record import VaccinationRecord, _to_date
from .vaccination_type import VaccinationType

logger = logging.getLogger(__name__)


def _parse_object(
    dct: Dict[str, Any]
) -> Union[VaccinationType, VaccinationRecord, Pet, PetRegistry, dict]:
    """Parse dictionary into appropriate object type."""
    # Pet (checked before type, both carry a name)
    if "species" in dct:
        return Pet(
            dct["id"],
            dct["name"],
            dct["species"],
            dct.get("breed"),
            dct.get("birthDate"),
            dct.get("records"),
        )
    # Vaccination type
    elif "name" in dct and "interval" in dct:
        return VaccinationType(dct["id"], dct["name"], dct["interval"])
    # Vaccination record
    elif "typeId" in dct:
        return VaccinationRecord(
            dct["id"],
            dct["typeId"],
            dct.get("completedAt"),
        )
    # Top-level registry
    elif "pets" in dct or "vaccinationTypes" in dct:
        return PetRegistry(dct.get("vaccinationTypes"), dct.get("pets"))
    else:
        return dct


def load_registry(filename: Union[str, Path]) -> PetRegistry:
    """Load pets and vaccination types from a YAML file."""
    with open(filename, "rb") as fp:
        raw = yaml.load(fp, Loader=yaml.SafeLoader)
    if not raw:
        return PetRegistry()
    # Unquoted YAML dates arrive as date objects; default=str keeps them ISO
    json_data = json.dumps(raw, indent=4, default=str)
    return json.loads(json_data, object_hook=_parse_object)


def require_fields(**fields: Any) -> None:
    """Raise MissingFieldError naming every field that is empty, None or 0 (ids start at 1)."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise MissingFieldError(missing)


def _read(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader) or {}


def _write(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def _format_date(value: Union[str, date]) -> str:
    return _to_date(value).isoformat()


def update_record_completion(
    filename: Union[str, Path], record_id: int, completed_at: Union[str, date]
) -> VaccinationRecord:
    """
    Set the completion date of an existing record (re-vaccination).

    Loads the raw YAML, overwrites completedAt on the matching record,
    writes back to the file and returns the reloaded record.
    """
    require_fields(completedAt=completed_at)
    data = _read(filename)

    for pet in data.get("pets") or []:
        for record in pet.get("records") or []:
            if record.get("id") == record_id:
                record["completedAt"] = _format_date(completed_at)
                _write(filename, data)
                logger.info("Record %s completed at %s", record_id, record["completedAt"])
                return load_registry(filename).get_record(record_id)

    raise NotFoundError(f"Vaccination record {record_id} not found")


def add_record(
    filename: Union[str, Path],
    pet_id: int,
    type_id: int,
    completed_at: Union[str, date],
) -> VaccinationRecord:
    """
    Append a new vaccination record to a pet.

    Loads the raw YAML, checks the pet and vaccination type exist, appends
    the record with the next free id, writes back and returns the new record.
    """
    require_fields(petId=pet_id, typeId=type_id, completedAt=completed_at)
    pet_id = int(pet_id)
    type_id = int(type_id)
    data = _read(filename)

    if not any(t.get("id") == type_id for t in data.get("vaccinationTypes") or []):
        raise NotFoundError(f"Vaccination type {type_id} not found")

    pet = next((p for p in data.get("pets") or [] if p.get("id") == pet_id), None)
    if pet is None:
        raise NotFoundError(f"Pet {pet_id} not found")

    existing_ids = [
        r.get("id", 0) for p in data.get("pets") or [] for r in p.get("records") or []
    ]
    record_id = max(existing_ids, default=0) + 1

    if pet.get("records") is None:
        pet["records"] = []
    pet["records"].append(
        {"id": record_id, "typeId": type_id, "completedAt": _format_date(completed_at)}
    )

    _write(filename, data)
    logger.info("Added record %s (type %s) for pet %s", record_id, type_id, pet_id)
    return load_registry(filename).get_record(record_id)


def _type_to_dict(vtype: VaccinationType) -> Dict[str, Any]:
    """Serialize a VaccinationType to the YAML dict format (camelCase keys)."""
    return {"id": vtype.id, "name": vtype.name, "interval": vtype.interval}


def _record_to_dict(record: VaccinationRecord) -> Dict[str, Any]:
    """Serialize a VaccinationRecord; completedAt stays null when never completed."""
    return {
        "id": record.id,
        "typeId": record.type_id,
        "completedAt": record.completed_at.isoformat() if record.completed_at else None,
    }


def _pet_to_dict(pet: Pet) -> Dict[str, Any]:
    """Serialize a Pet and its records."""
    d: Dict[str, Any] = {"id": pet.id, "name": pet.name, "species": pet.species}
    if pet.breed is not None:
        d["breed"] = pet.breed
    if pet.birth_date is not None:
        d["birthDate"] = pet.birth_date.isoformat()
    d["records"] = [_record_to_dict(r) for r in pet.records]
    return d


def save_registry(filename: Union[str, Path], registry: PetRegistry) -> None:
    """Write a whole registry to a YAML file, replacing its contents."""
    data = {
        "vaccinationTypes": [_type_to_dict(t) for t in registry.vaccination_types],
        "pets": [_pet_to_dict(p) for p in registry.pets],
    }
    _write(filename, data)
    logger.info(
        "Saved %d pets and %d vaccination types to %s",
        len(registry.pets),
        len(registry.vaccination_types),
        filename,
    )
