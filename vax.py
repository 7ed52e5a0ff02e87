#!/usr/bin/env python3
"""
Unified CLI for pet vaccination tracking.

Commands:
  status   - Show each pet's vaccinations with status and due date
  types    - List available vaccination types
  complete - Mark a vaccination record as completed
  add      - Log a new vaccination for a pet
  seed     - Write sample pets and vaccination types to the data file
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from models import (
    MissingFieldError,
    NotFoundError,
    Pet,
    PetRegistry,
    VaccinationDue,
    VaccinationRecord,
    VaccinationType,
    add_record,
    evaluate_records,
    load_registry,
    save_registry,
    update_record_completion,
)
from models.formatting import format_date_uk
from models.sorting import DIRECTIONS, SORT_KEYS, use_user_collation

# =============================================================================
# Formatting helpers
# =============================================================================


def format_pet_header(pet: Pet, today: Optional[date] = None) -> str:
    """Pet name with species, breed and age, e.g. 'Max (Dog) | Golden Retriever | 4 years old'."""
    parts = [f"{pet.name} ({pet.species})"]
    if pet.breed:
        parts.append(pet.breed)
    age = pet.age_on(today)
    if age is not None:
        parts.append(f"{age} year{'' if age == 1 else 's'} old")
    return " | ".join(parts)


# =============================================================================
# Status command
# =============================================================================


def make_status_table(results: List[VaccinationDue]) -> List[List[str]]:
    """Convert classified records to table rows."""
    rows = []
    for svc in results:
        rows.append(
            [
                str(svc.record.id),
                svc.record.type_name,
                svc.status.label,
                format_date_uk(svc.last_completed),
                format_date_uk(svc.due_date),
            ]
        )
    return rows


def _select_pets(registry: PetRegistry, pet: Optional[str]) -> List[Pet]:
    """Filter pets by id or case-insensitive name."""
    if not pet:
        return registry.pets
    return [
        p for p in registry.pets if str(p.id) == pet or p.name.lower() == pet.lower()
    ]


def cmd_status(args):
    """Show each pet's vaccinations with status and due date."""
    registry = load_registry(args.data_file)
    as_of = date.fromisoformat(args.as_of) if args.as_of else None
    today = as_of or date.today()

    pets = _select_pets(registry, args.pet)
    if not pets:
        print("No pets found. Add some pets to get started!")
        return 0 if not args.pet else 1

    if args.use_interval:
        print("Mode: PER-TYPE INTERVALS (type interval replaces one year)")
    print(f"As of: {format_date_uk(today)}")
    print()

    headers = ["ID", "Vaccination", "Status", "Last Completed", "Due Date"]
    for pet in pets:
        print(format_pet_header(pet, today))
        if not pet.records:
            print("  No vaccinations recorded.")
            print()
            continue
        results = evaluate_records(
            pet.records,
            sort_by=args.sort,
            direction=args.direction,
            now=as_of,
            use_type_interval=args.use_interval,
        )
        print(tabulate(make_status_table(results), headers=headers, tablefmt="simple"))
        print()

    return 0


# =============================================================================
# Types command
# =============================================================================


def cmd_types(args):
    """List available vaccination types."""
    registry = load_registry(args.data_file)

    rows = [[str(t.id), t.name, f"{t.interval} mo"] for t in registry.types_sorted()]
    if not rows:
        print("No vaccination types defined.")
        return 0

    print(tabulate(rows, headers=["ID", "Name", "Interval"], tablefmt="simple"))
    return 0


# =============================================================================
# Complete command
# =============================================================================


def cmd_complete(args):
    """Mark a vaccination record as completed."""
    registry = load_registry(args.data_file)

    record = registry.get_record(args.record_id)
    if record is None:
        print(f"Error: Unknown record id {args.record_id}")
        return 1

    completed_at = args.date or date.today().isoformat()
    pet = registry.get_pet(record.pet_id)

    print(f"Marking vaccination complete in {args.data_file}:")
    print(f"  Pet:         {pet.name if pet else '-'}")
    print(f"  Vaccination: {record.type_name}")
    print(f"  Previously:  {format_date_uk(record.completed_at)}")
    print(f"  Completed:   {format_date_uk(date.fromisoformat(completed_at))}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    update_record_completion(args.data_file, args.record_id, completed_at)
    print("Record updated.")
    return 0


# =============================================================================
# Add command
# =============================================================================


def cmd_add(args):
    """Log a new vaccination for a pet."""
    registry = load_registry(args.data_file)

    pet = registry.get_pet(args.pet_id)
    vtype = registry.get_type(args.type_id)
    if pet is None:
        print(f"Error: Unknown pet id {args.pet_id}")
        return 1
    if vtype is None:
        print(f"Error: Unknown vaccination type id {args.type_id}")
        print("\nAvailable types:")
        for t in registry.types_sorted():
            print(f"  {t.id}: {t.name}")
        return 1

    completed_at = args.date or date.today().isoformat()

    print(f"Adding vaccination to {args.data_file}:")
    print(f"  Pet:         {pet.name}")
    print(f"  Vaccination: {vtype.name}")
    print(f"  Completed:   {format_date_uk(date.fromisoformat(completed_at))}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    record = add_record(args.data_file, pet.id, vtype.id, completed_at)
    print(f"Record {record.id} saved.")
    return 0


# =============================================================================
# Seed command
# =============================================================================


def sample_registry() -> PetRegistry:
    """Three pets with a mix of completed, pending and overdue vaccinations."""
    distemper = VaccinationType(1, "Distemper", 12)
    rabies = VaccinationType(2, "Rabies", 12)
    fvrcp = VaccinationType(3, "FVRCP", 12)

    pets = [
        Pet(1, "Max", "Dog", "Golden Retriever", "2022-05-10", [
            VaccinationRecord(1, distemper.id, "2024-07-15"),
            VaccinationRecord(2, rabies.id, "2024-01-20"),
        ]),
        Pet(2, "Luna", "Cat", "Siamese", "2021-03-20", [
            VaccinationRecord(3, fvrcp.id, "2024-03-25"),
            VaccinationRecord(4, rabies.id, None),
        ]),
        Pet(3, "Buddy", "Dog", "Mixed Breed", "2020-08-15", [
            VaccinationRecord(5, distemper.id, "2023-08-15"),
            VaccinationRecord(6, rabies.id, "2023-08-15"),
        ]),
    ]
    return PetRegistry([distemper, rabies, fvrcp], pets)


def cmd_seed(args):
    """Write sample pets and vaccination types to the data file."""
    if args.data_file.exists() and not args.force:
        print(f"Error: {args.data_file} already exists (use --force to overwrite)")
        return 1

    registry = sample_registry()
    save_registry(args.data_file, registry)
    print(
        f"Seed complete. Created pets: {', '.join(p.name for p in registry.pets)}"
    )
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pet vaccination tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s pets/pets.yaml status
  %(prog)s pets/pets.yaml status --sort dueDate --direction desc
  %(prog)s pets/pets.yaml status --pet luna --use-interval
  %(prog)s pets/pets.yaml types
  %(prog)s pets/pets.yaml complete 4 --date 2025-06-01
  %(prog)s pets/pets.yaml add 1 3 --date 2025-06-01
  %(prog)s pets/pets.yaml seed --force
""",
    )
    parser.add_argument(
        "data_file",
        type=Path,
        help="Path to pets YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="Show each pet's vaccinations with status and due date"
    )
    status_parser.add_argument(
        "--sort",
        choices=SORT_KEYS,
        default="urgency",
        help="Sort order (default: urgency)",
    )
    status_parser.add_argument(
        "--direction",
        choices=DIRECTIONS,
        default="asc",
        help="Sort direction for status and dueDate (default: asc)",
    )
    status_parser.add_argument(
        "--pet",
        type=str,
        help="Only show the pet with this id or name",
    )
    status_parser.add_argument(
        "--as-of",
        type=str,
        help="Evaluate status as of date YYYY-MM-DD (default: today)",
    )
    status_parser.add_argument(
        "--use-interval",
        action="store_true",
        help="Use each vaccination type's interval instead of one year",
    )

    # Types subcommand
    subparsers.add_parser("types", help="List available vaccination types")

    # Complete subcommand
    complete_parser = subparsers.add_parser(
        "complete", help="Mark a vaccination record as completed"
    )
    complete_parser.add_argument("record_id", type=int, help="Vaccination record id")
    complete_parser.add_argument(
        "--date",
        type=str,
        help="Completion date in YYYY-MM-DD format (default: today)",
    )
    complete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without saving",
    )

    # Add subcommand
    add_parser = subparsers.add_parser("add", help="Log a new vaccination for a pet")
    add_parser.add_argument("pet_id", type=int, help="Pet id")
    add_parser.add_argument("type_id", type=int, help="Vaccination type id")
    add_parser.add_argument(
        "--date",
        type=str,
        help="Completion date in YYYY-MM-DD format (default: today)",
    )
    add_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be added without saving",
    )

    # Seed subcommand
    seed_parser = subparsers.add_parser(
        "seed", help="Write sample pets and vaccination types"
    )
    seed_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing data file",
    )

    return parser


def main(argv=None):
    use_user_collation()
    args = build_parser().parse_args(argv)

    # Validate data file exists (seed creates it)
    if args.command != "seed" and not args.data_file.exists():
        print(f"Error: File not found: {args.data_file}")
        return 1

    # Dispatch to command handler
    try:
        if args.command == "status":
            return cmd_status(args)
        elif args.command == "types":
            return cmd_types(args)
        elif args.command == "complete":
            return cmd_complete(args)
        elif args.command == "add":
            return cmd_add(args)
        elif args.command == "seed":
            return cmd_seed(args)
    except (MissingFieldError, NotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
