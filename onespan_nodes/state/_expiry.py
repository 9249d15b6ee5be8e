"""
Event expiry — parsing the expiry timestamp written by the event-creating node.
"""

from __future__ import annotations

from datetime import datetime, timezone

_MILLIS_THRESHOLD = 10**11


def parse_expiry(value: object) -> datetime | None:
    """
    Parse an expiry value into an aware UTC datetime.

    Accepts ISO-8601 text (a trailing "Z" is UTC, naive values are UTC)
    and epoch numbers in seconds or milliseconds. Returns None when the
    value cannot be read as a point in time.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        seconds = value / 1000 if abs(value) >= _MILLIS_THRESHOLD else value
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.isascii() and text.isdigit():
        return parse_expiry(int(text))
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def has_expired(value: object, now: datetime | None = None) -> bool:
    """
    True when the expiry lies strictly in the past.

    No expiry at all means the event never times out. A value that is
    present but unreadable counts as expired.
    """
    if value is None:
        return False
    expiry = parse_expiry(value)
    if expiry is None:
        return True
    current = now if now is not None else datetime.now(timezone.utc)
    return expiry < current


__all__ = ("parse_expiry", "has_expired")
