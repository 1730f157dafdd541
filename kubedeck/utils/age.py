"""Human readable resource ages."""

from __future__ import annotations

from datetime import datetime, timezone

from kubedeck.constants.values import NA


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a Kubernetes RFC3339 timestamp (``2024-01-02T03:04:05Z``)."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_duration(seconds: float) -> str:
    """Format a duration using its largest unit: 5s, 3m, 2h, 4d."""
    total = max(0, int(seconds))
    if total < 60:
        return f"{total}s"
    if total < 3600:
        return f"{total // 60}m"
    if total < 86400:
        return f"{total // 3600}h"
    return f"{total // 86400}d"


_DURATION_UNITS: dict[str, int] = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(text: str) -> float | None:
    """Inverse of ``format_duration``; None for anything else (``n/a``)."""
    value = (text or "").strip()
    if len(value) < 2 or value[-1] not in _DURATION_UNITS:
        return None
    try:
        return float(value[:-1]) * _DURATION_UNITS[value[-1]]
    except ValueError:
        return None


def format_age(timestamp: str | datetime | None, now: datetime | None = None) -> str:
    """Age of a resource from its creation timestamp."""
    created = parse_timestamp(timestamp) if isinstance(timestamp, str) or timestamp is None else timestamp
    if created is None:
        return NA
    current = now or datetime.now(timezone.utc)
    return format_duration((current - created).total_seconds())


__all__ = ["format_age", "format_duration", "parse_duration", "parse_timestamp"]
