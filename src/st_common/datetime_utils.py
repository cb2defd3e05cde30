"""UTC datetime utilities."""

from datetime import datetime, timezone

_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_display(ts: datetime) -> str:
    """Render a timestamp for history listings: '2024-05-01 13:45:00'."""
    return ts.strftime(_DISPLAY_FORMAT)
