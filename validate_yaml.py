#!/usr/bin/env python3
"""Validate pet vaccination YAML files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def validate_pets_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single pets YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        errors.extend(check_references(data))
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def check_references(data: dict) -> list[str]:
    """Check ids are unique and every record points at a known vaccination type."""
    errors = []
    type_ids = [t["id"] for t in data["vaccinationTypes"]]
    if len(type_ids) != len(set(type_ids)):
        errors.append("Duplicate vaccination type id")

    pet_ids = [p["id"] for p in data["pets"]]
    if len(pet_ids) != len(set(pet_ids)):
        errors.append("Duplicate pet id")

    record_ids = []
    for pet in data["pets"]:
        for record in pet.get("records") or []:
            record_ids.append(record["id"])
            if record["typeId"] not in type_ids:
                errors.append(
                    f"Record {record['id']} of pet {pet['id']} has unknown typeId {record['typeId']}"
                )
    if len(record_ids) != len(set(record_ids)):
        errors.append("Duplicate record id")
    return errors


def main():
    """Validate all YAML files in the pets/ directory."""
    schema = load_schema()
    pets_dir = Path(__file__).parent / "pets"

    if not pets_dir.exists():
        print(f"Error: pets directory not found: {pets_dir}")
        return 1

    yaml_files = list(pets_dir.glob("*.yaml")) + list(pets_dir.glob("*.yml"))

    if not yaml_files:
        print(f"Warning: No YAML files found in {pets_dir}")
        return 0

    all_valid = True
    for filepath in sorted(yaml_files):
        errors = validate_pets_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
