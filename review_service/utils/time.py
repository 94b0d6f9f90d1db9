from datetime import datetime, timezone as dt_tz


def to_iso(dt):
    """Millisecond ISO-8601 in UTC with a trailing Z, e.g. 2025-01-01T00:00:00.000Z"""
    return dt.astimezone(dt_tz.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_tz.utc)
    return dt.astimezone(dt_tz.utc)
