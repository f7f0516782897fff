"""Shared utilities."""

from .datetime import utc_now, now, resolve_timezone, to_aware, seconds_until, expiry_timestamp

__all__ = [
    "utc_now",
    "now",
    "resolve_timezone",
    "to_aware",
    "seconds_until",
    "expiry_timestamp",
]
