"""Display formatting shared by the CLI and web tables."""

from datetime import date
from typing import Optional


def format_date_uk(value: Optional[date]) -> str:
    """Format a date as DD/MM/YYYY for display."""
    return value.strftime("%d/%m/%Y") if value is not None else "-"
