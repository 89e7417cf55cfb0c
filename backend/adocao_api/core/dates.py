"""Module: dates."""

from datetime import UTC, datetime

# Brazilian display form used in every adoption response.
DISPLAY_FORMAT = "%d/%m/%Y %H:%M:%S"


def utcnow() -> datetime:
    # Naive UTC, matching the plain DateTime columns.
    return datetime.now(UTC).replace(tzinfo=None)


def format_date(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)
