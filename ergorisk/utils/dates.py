from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC so mixed inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
