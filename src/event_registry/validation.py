"""Field checks performed by the router before anything reaches the store."""

import re
from datetime import UTC, datetime
from typing import Any

from event_registry.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_fields(values: dict[str, Any], message: str) -> None:
    """Raise ValidationError if any value is missing or empty."""
    if any(value is None or value == "" for value in values.values()):
        raise ValidationError(message, code="MISSING_FIELDS")


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email format.", code="INVALID_EMAIL")


def parse_date_of_birth(value: str, now: datetime | None = None) -> datetime:
    """Parse an ISO-8601 date of birth and reject dates in the future.

    Naive values are read as UTC.
    """
    try:
        dob = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError("Invalid date of birth.", code="INVALID_DOB") from e

    if dob.tzinfo is None:
        dob = dob.replace(tzinfo=UTC)

    if dob > (now or datetime.now(UTC)):
        raise ValidationError("Date of birth cannot be in the future.", code="FUTURE_DOB")
    return dob
