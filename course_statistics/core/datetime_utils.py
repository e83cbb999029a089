from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic.functional_serializers import PlainSerializer

from course_statistics.core.exceptions import DataError


def _serialize_utc_datetime(v: datetime | None) -> str | None:
    if v is None:
        return None
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    return v.isoformat()


UTCDatetime = Annotated[datetime, PlainSerializer(_serialize_utc_datetime)]


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; aware ones are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_timestamp(value: Any, field: str | None = None) -> datetime:
    """Parse a data-store timestamp into an aware datetime.

    Accepts datetime instances and ISO 8601 strings (date-only strings mean
    midnight). Anything else, including empty strings, raises DataError so an
    invalid date never silently lands inside or outside every window.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str) and value.strip():
        try:
            return ensure_utc(datetime.fromisoformat(value.strip()))
        except ValueError as e:
            raise DataError(f"Unparseable timestamp: {value!r}", field=field) from e
    raise DataError(f"Invalid timestamp: {value!r}", field=field)
