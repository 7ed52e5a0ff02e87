#!/usr/bin/env python3
"""Tests for validate_yaml schema validation."""
from pathlib import Path

from validate_yaml import check_references, load_schema, validate_pets_file

VALID_YAML = """
vaccinationTypes:
  - id: 1
    name: Rabies
    interval: 12
pets:
  - id: 1
    name: Max
    species: Dog
    birthDate: '2022-05-10'
    records:
      - id: 1
        typeId: 1
        completedAt: '2024-07-15'
      - id: 2
        typeId: 1
        completedAt: null
"""


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "pets" in schema["properties"]
        assert "vaccinationTypes" in schema["properties"]


class TestValidatePetsFile:
    """Tests for validate_pets_file function."""

    def test_valid_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text(VALID_YAML)
        assert validate_pets_file(path, load_schema()) == []

    def test_bundled_sample_is_valid(self):
        path = Path(__file__).parent.parent / "pets" / "pets.yaml"
        assert validate_pets_file(path, load_schema()) == []

    def test_missing_required_pet_field_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID_YAML.replace("    species: Dog\n", ""))
        errors = validate_pets_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)

    def test_bad_completed_at_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID_YAML.replace("'2024-07-15'", "'15/07/2024'"))
        errors = validate_pets_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)

    def test_unknown_type_reference_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text(VALID_YAML.replace("typeId: 1\n        completedAt: null", "typeId: 7\n        completedAt: null"))
        errors = validate_pets_file(path, load_schema())
        assert errors == ["Record 2 of pet 1 has unknown typeId 7"]

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("pets:\n  - name: [unclosed\n")
        errors = validate_pets_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        errors = validate_pets_file(tmp_path / "does_not_exist.yaml", load_schema())
        assert len(errors) >= 1
        assert any("Error" in e for e in errors)


class TestCheckReferences:
    """Tests for check_references."""

    def test_duplicate_ids(self):
        data = {
            "vaccinationTypes": [{"id": 1}, {"id": 1}],
            "pets": [
                {"id": 1, "records": [{"id": 1, "typeId": 1}]},
                {"id": 1, "records": [{"id": 1, "typeId": 1}]},
            ],
        }
        errors = check_references(data)
        assert "Duplicate vaccination type id" in errors
        assert "Duplicate pet id" in errors
        assert "Duplicate record id" in errors
