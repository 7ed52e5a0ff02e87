#!/usr/bin/env python3
"""Tests for vax CLI formatting, table helpers and commands."""
from datetime import date

import pytest
import yaml

from models import Pet, Status, VaccinationDue, VaccinationRecord, VaccinationType, load_registry
import vax
from vax import format_pet_header, main, make_status_table, sample_registry


@pytest.fixture
def pets_file(tmp_path):
    path = tmp_path / "pets.yaml"
    assert main([str(path), "seed"]) == 0
    return path


class TestFormatPetHeader:
    """Tests for format_pet_header."""

    def test_with_breed_and_age(self):
        pet = Pet(1, "Max", "Dog", "Golden Retriever", "2022-05-10")
        assert format_pet_header(pet, date(2025, 8, 1)) == "Max (Dog) | Golden Retriever | 3 years old"

    def test_without_breed_singular_year(self):
        pet = Pet(2, "Luna", "Cat", None, "2024-03-20")
        assert format_pet_header(pet, date(2025, 8, 1)) == "Luna (Cat) | 1 year old"


class TestMakeStatusTable:
    """Tests for make_status_table."""

    def test_empty_list_returns_empty_rows(self):
        assert make_status_table([]) == []

    def test_completed_row(self):
        record = VaccinationRecord(5, 1, "2025-03-15", type=VaccinationType(1, "Rabies"))
        svc = VaccinationDue(record=record, status=Status.COMPLETED, due_date=date(2026, 3, 15))
        assert make_status_table([svc]) == [["5", "Rabies", "Completed", "15/03/2025", "15/03/2026"]]

    def test_due_soon_row_uses_dashes(self):
        record = VaccinationRecord(6, 2, None, type=VaccinationType(2, "FVRCP"))
        svc = VaccinationDue(record=record, status=Status.DUE_SOON)
        assert make_status_table([svc]) == [["6", "FVRCP", "Due Soon", "-", "-"]]


class TestSeedCommand:
    """Tests for the seed command."""

    def test_writes_sample_data(self, pets_file):
        registry = load_registry(pets_file)
        assert [p.name for p in registry.pets] == ["Max", "Luna", "Buddy"]
        assert [t.name for t in registry.types_sorted()] == ["Distemper", "FVRCP", "Rabies"]
        assert registry.get_record(4).completed_at is None

    def test_refuses_to_overwrite(self, pets_file, capsys):
        assert main([str(pets_file), "seed"]) == 1
        assert "already exists" in capsys.readouterr().out

    def test_force_overwrites(self, pets_file):
        pets_file.write_text("pets: []\nvaccinationTypes: []\n")
        assert main([str(pets_file), "seed", "--force"]) == 0
        assert len(load_registry(pets_file).pets) == 3

    def test_sample_registry_ids_unique(self):
        ids = [r.id for r in sample_registry().records]
        assert len(ids) == len(set(ids))


class TestStatusCommand:
    """Tests for the status command."""

    def test_shows_each_pet(self, pets_file, capsys):
        assert main([str(pets_file), "status", "--as-of", "2025-08-01"]) == 0
        out = capsys.readouterr().out
        assert "As of: 01/08/2025" in out
        assert "Max (Dog) | Golden Retriever" in out
        assert "Luna (Cat) | Siamese" in out
        assert "Buddy (Dog) | Mixed Breed" in out
        assert "Overdue" in out
        assert "Due Soon" in out
        assert "15/08/2024" in out

    def test_filter_by_pet_name(self, pets_file, capsys):
        assert main([str(pets_file), "status", "--pet", "luna", "--as-of", "2025-08-01"]) == 0
        out = capsys.readouterr().out
        assert "Luna" in out
        assert "Max" not in out

    def test_unknown_pet(self, pets_file, capsys):
        assert main([str(pets_file), "status", "--pet", "rex"]) == 1

    def test_use_interval_flag(self, pets_file, capsys):
        assert main([str(pets_file), "status", "--use-interval", "--as-of", "2025-08-01"]) == 0
        assert "PER-TYPE INTERVALS" in capsys.readouterr().out

    def test_rejects_unknown_sort(self, pets_file):
        with pytest.raises(SystemExit):
            main([str(pets_file), "status", "--sort", "name"])

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.yaml"), "status"]) == 1
        assert "File not found" in capsys.readouterr().out


class TestTypesCommand:
    """Tests for the types command."""

    def test_lists_types_alphabetically(self, pets_file, capsys):
        assert main([str(pets_file), "types"]) == 0
        out = capsys.readouterr().out
        assert out.index("Distemper") < out.index("FVRCP") < out.index("Rabies")
        assert "12 mo" in out


class TestCompleteCommand:
    """Tests for the complete command."""

    def test_marks_record_complete(self, pets_file, capsys):
        assert main([str(pets_file), "complete", "4", "--date", "2025-06-01"]) == 0
        assert "Record updated." in capsys.readouterr().out
        assert load_registry(pets_file).get_record(4).completed_at == date(2025, 6, 1)

    def test_dry_run(self, pets_file, capsys):
        assert main([str(pets_file), "complete", "4", "--date", "2025-06-01", "--dry-run"]) == 0
        assert "dry run" in capsys.readouterr().out
        assert load_registry(pets_file).get_record(4).completed_at is None

    def test_unknown_record(self, pets_file, capsys):
        assert main([str(pets_file), "complete", "99"]) == 1
        assert "Unknown record id 99" in capsys.readouterr().out

    def test_invalid_date(self, pets_file, capsys):
        assert main([str(pets_file), "complete", "4", "--date", "01/06/2025"]) == 1
        assert "Error" in capsys.readouterr().out


class TestAddCommand:
    """Tests for the add command."""

    def test_adds_record(self, pets_file, capsys):
        assert main([str(pets_file), "add", "1", "3", "--date", "2025-06-01"]) == 0
        assert "Record 7 saved." in capsys.readouterr().out
        record = load_registry(pets_file).get_record(7)
        assert record.pet_id == 1
        assert record.type.name == "FVRCP"

    def test_dry_run(self, pets_file):
        before = yaml.safe_load(pets_file.read_text())
        assert main([str(pets_file), "add", "1", "3", "--dry-run"]) == 0
        assert yaml.safe_load(pets_file.read_text()) == before

    def test_unknown_type_lists_available(self, pets_file, capsys):
        assert main([str(pets_file), "add", "1", "9"]) == 1
        out = capsys.readouterr().out
        assert "Unknown vaccination type id 9" in out
        assert "Rabies" in out

    def test_unknown_pet(self, pets_file, capsys):
        assert main([str(pets_file), "add", "9", "1"]) == 1
        assert "Unknown pet id 9" in capsys.readouterr().out


class TestMain:
    """Tests for main entry point setup."""

    def test_adopts_user_collation(self, pets_file, monkeypatch):
        calls = []
        monkeypatch.setattr(vax, "use_user_collation", lambda: calls.append(True))
        assert main([str(pets_file), "status", "--sort", "status"]) == 0
        assert calls == [True]
