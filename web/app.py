"""Flask web application for pet vaccination tracking."""

import logging
import os
from datetime import datetime
from pathlib import Path

from flask import Flask, render_template, request, redirect, url_for, flash, jsonify

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.errors import MissingFieldError, NotFoundError
from models.formatting import format_date_uk
from models.loader import load_registry, update_record_completion, add_record
from models.sorting import TableRequest, evaluate_records, use_user_collation
from models.status import Status

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Path to the pets data file (relative to project root by default)
app.config["DATA_FILE"] = Path(
    os.environ.get("PETVAX_DATA_FILE", Path(__file__).parent.parent / "pets" / "pets.yaml")
)
app.config["USE_TYPE_INTERVAL"] = (
    os.environ.get("PETVAX_USE_TYPE_INTERVAL", "").lower() == "true"
)
use_user_collation()


def get_data_file() -> Path:
    return Path(app.config["DATA_FILE"])


def status_badge_color(status: Status) -> str:
    """Get Tailwind color classes for status badge."""
    colors = {
        Status.OVERDUE: "bg-red-100 text-red-800 border-red-200",
        Status.DUE_SOON: "bg-yellow-100 text-yellow-800 border-yellow-200",
        Status.COMPLETED: "bg-green-100 text-green-800 border-green-200",
    }
    return colors.get(status, "bg-gray-100 text-gray-800")


def sort_indicator(table: TableRequest, column: str) -> str:
    """Arrow shown next to a sortable column header."""
    if table.sort_by != column:
        return "↕"
    return "▲" if table.direction == "asc" else "▼"


# Register template filters
app.jinja_env.filters["format_date_uk"] = format_date_uk
app.jinja_env.filters["status_badge_color"] = status_badge_color
app.jinja_env.globals["sort_indicator"] = sort_indicator


def table_request_from_args() -> TableRequest:
    return TableRequest.from_args(request.args.get("sort"), request.args.get("direction"))


# =============================================================================
# HTML pages
# =============================================================================


@app.route("/")
def index():
    """Dashboard showing every pet with its sorted vaccination table."""
    registry = load_registry(get_data_file())
    table = table_request_from_args()
    now = datetime.now()

    pets = []
    for pet in registry.pets:
        pets.append({
            "pet": pet,
            "age": pet.age_on(now.date()),
            "rows": evaluate_records(
                pet.records,
                table.sort_by,
                table.direction,
                now=now,
                use_type_interval=app.config["USE_TYPE_INTERVAL"],
            ),
        })

    return render_template(
        "index.html",
        pets=pets,
        table=table,
        vaccination_types=registry.types_sorted(),
        today=now.date().isoformat(),
    )


@app.route("/record/<int:record_id>/complete", methods=["POST"])
def complete_record(record_id: int):
    """Handle mark-complete form submission."""
    completed_at = request.form.get("completed_at") or None
    table = table_request_from_args()
    back = url_for("index", sort=table.sort_by, direction=table.direction)

    try:
        record = update_record_completion(get_data_file(), record_id, completed_at)
    except MissingFieldError:
        flash("Please enter a completion date", "error")
        return redirect(back)
    except (NotFoundError, ValueError) as e:
        flash(str(e), "error")
        return redirect(back)

    flash(f"Marked {record.type_name} complete", "success")
    return redirect(back)


@app.route("/pet/<int:pet_id>/vaccinations", methods=["POST"])
def add_vaccination(pet_id: int):
    """Handle add-vaccination form submission."""
    type_id = request.form.get("type_id") or None
    completed_at = request.form.get("completed_at") or None
    table = table_request_from_args()
    back = url_for("index", sort=table.sort_by, direction=table.direction)

    try:
        record = add_record(get_data_file(), pet_id, type_id, completed_at)
    except MissingFieldError:
        flash("Please select a vaccination type and completion date", "error")
        return redirect(back)
    except (NotFoundError, ValueError) as e:
        flash(str(e), "error")
        return redirect(back)

    flash(f"Added vaccination: {record.type_name}", "success")
    return redirect(back)


# =============================================================================
# JSON API
# =============================================================================


def _json_body() -> dict:
    """Request JSON as a dict. Anything else is treated as an empty body."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _type_json(vtype):
    return {"id": vtype.id, "name": vtype.name, "interval": vtype.interval}


def _record_json(record):
    return {
        "id": record.id,
        "petId": record.pet_id,
        "typeId": record.type_id,
        "completedAt": record.completed_at.isoformat() if record.completed_at else None,
        "type": _type_json(record.type) if record.type else None,
    }


def _pet_json(pet):
    return {
        "id": pet.id,
        "name": pet.name,
        "species": pet.species,
        "breed": pet.breed,
        "birthDate": pet.birth_date.isoformat() if pet.birth_date else None,
        "records": [_record_json(r) for r in pet.records],
    }


@app.route("/api/pets")
def api_pets():
    """All pets with their records and vaccination types."""
    try:
        registry = load_registry(get_data_file())
    except Exception:
        logger.exception("Error fetching pets")
        return jsonify({"error": "Failed to fetch pets"}), 500
    return jsonify([_pet_json(p) for p in registry.pets])


@app.route("/api/vaccination-types")
def api_vaccination_types():
    """Vaccination types (id, name) in alphabetical order."""
    try:
        registry = load_registry(get_data_file())
    except Exception:
        logger.exception("Error fetching vaccination types")
        return jsonify({"error": "Failed to fetch vaccination types"}), 500
    return jsonify([{"id": t.id, "name": t.name} for t in registry.types_sorted()])


@app.route("/api/vaccination-records", methods=["POST"])
def api_create_record():
    """
    Create a vaccination record.

    Expected body: {"petId": int, "typeId": int, "completedAt": ISO date}
    """
    body = _json_body()
    try:
        record = add_record(
            get_data_file(), body.get("petId"), body.get("typeId"), body.get("completedAt")
        )
    except MissingFieldError as e:
        return jsonify({"error": str(e)}), 400
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except ValueError as e:
        return jsonify({"error": f"Invalid vaccination record: {e}"}), 400
    except Exception:
        logger.exception("Error creating vaccination record")
        return jsonify({"error": "Failed to create vaccination record"}), 500
    return jsonify(_record_json(record)), 201


@app.route("/api/vaccinations/<int:record_id>", methods=["PATCH"])
def api_update_record(record_id: int):
    """Set completedAt on an existing record. Body: {"completedAt": ISO date}"""
    body = _json_body()
    try:
        record = update_record_completion(get_data_file(), record_id, body.get("completedAt"))
    except MissingFieldError as e:
        return jsonify({"error": str(e)}), 400
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except ValueError as e:
        return jsonify({"error": f"Invalid completion date: {e}"}), 400
    except Exception:
        logger.exception("Error updating vaccination record")
        return jsonify({"error": "Failed to update vaccination record"}), 500
    return jsonify(_record_json(record))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
