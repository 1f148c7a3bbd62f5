from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (DateTime columns carry no tzinfo)"""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Normalize an aware or naive datetime to naive UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def format_instant(value: datetime) -> str:
    """Render an instant as ISO-8601 UTC with a trailing Z"""
    return to_naive_utc(value).isoformat() + "Z"


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant into naive UTC"""
    return to_naive_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
