"""Timestamp formatting utilities."""

from datetime import datetime

RELATIVE_UNITS = ((86400, "d"), (3600, "h"), (60, "m"), (1, "s"))


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat()


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Format an ISO 8601 timestamp for session log lines.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string
        relative: If True, show elapsed time (e.g., "2h ago"),
                  otherwise "2025-11-13 18:45:40"

    Returns:
        Human-readable timestamp, or the input unchanged if it does not parse
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp)
    except (ValueError, TypeError):
        return iso_timestamp

    if relative:
        return _format_elapsed(dt)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _format_elapsed(dt: datetime) -> str:
    """Largest whole unit between dt and now, e.g. "15m ago" or "3s from now"."""
    seconds = int((datetime.now() - dt).total_seconds())
    suffix = "ago" if seconds >= 0 else "from now"
    seconds = abs(seconds)

    for unit_seconds, unit in RELATIVE_UNITS:
        if seconds >= unit_seconds:
            return f"{seconds // unit_seconds}{unit} {suffix}"
    return f"0s {suffix}"
