"""
Display helpers for bills (fixed French locale).

- format_date: "2021-04-01" -> "1 Avr. 21"
- format_status: "pending" -> "En attente"
"""
from datetime import datetime
from typing import Any

from src.bills.exceptions import MalformedRecordError
from src.bills.schemas import BillStatus

# French short month names cut to 3 letters (June and July both give "Jui")
MONTH_LABELS = ("Jan", "Fév", "Mar", "Avr", "Mai", "Jui", "Jui", "Aoû", "Sep", "Oct", "Nov", "Déc")

STATUS_LABELS = {
    BillStatus.PENDING.value: "En attente",
    BillStatus.ACCEPTED.value: "Accepté",
    BillStatus.REFUSED.value: "Refusé",
}


def format_date(value: Any) -> str:
    """
    Format an ISO date (``YYYY-MM-DD`` or full ISO datetime) as ``D Mon. YY``.

    Raises:
        MalformedRecordError: If the value is not a parsable ISO date
    """
    if not isinstance(value, str):
        raise MalformedRecordError(f"Date must be a string, got {type(value).__name__}", record=value)
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise MalformedRecordError(f"Invalid date: {value!r}", record=value) from e

    return f"{parsed.day} {MONTH_LABELS[parsed.month - 1]}. {parsed:%y}"


def format_status(status: Any) -> Any:
    if isinstance(status, str):
        return STATUS_LABELS.get(status, status)
    return status
