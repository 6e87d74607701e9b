from datetime import UTC, date, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(UTC).replace(tzinfo=None)


def today() -> date:
    return utcnow().date()
