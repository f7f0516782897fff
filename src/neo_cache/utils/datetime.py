"""
DateTime utilities for consistent timezone handling.

Every clock read in the library goes through utc_now() so that time can
be controlled in one place.
"""
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


TimezoneLike = Union[tzinfo, str, None]


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """
    Get the current time in the given timezone (UTC when omitted).
    """
    return utc_now().astimezone(tz or timezone.utc)


def resolve_timezone(tz: TimezoneLike = None) -> tzinfo:
    """
    Turn a timezone setting into a tzinfo.

    Args:
        tz: A tzinfo, an IANA name such as 'Europe/Paris', or None for UTC

    Returns:
        tzinfo: The resolved timezone

    Raises:
        ValueError: If the name is not a known timezone
    """
    if tz is None:
        return timezone.utc

    if isinstance(tz, tzinfo):
        return tz

    if isinstance(tz, str):
        if tz.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {tz}") from e

    raise ValueError(f"Unsupported timezone value: {tz!r}")


def to_aware(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Attach a timezone to a naive datetime; aware datetimes are returned as is.

    Args:
        dt: Datetime to normalize
        tz: Timezone assumed for naive values (UTC when omitted)
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz or timezone.utc)
    return dt


def seconds_until(moment: datetime) -> float:
    """
    Seconds from now until ``moment``; negative when it is in the past.
    """
    return (to_aware(moment) - utc_now()).total_seconds()


def expiry_timestamp(
    expiration: Optional[datetime],
    ttl_seconds: Optional[int]
) -> Optional[float]:
    """
    Unix timestamp at which a stored entry expires.

    The exact expiration wins over the whole-second TTL; the TTL alone is
    used when no expiration is known.

    Args:
        expiration: Absolute expiration of the item, if any
        ttl_seconds: Remaining lifetime in whole seconds, None for no expiration
    """
    if ttl_seconds is None:
        return None
    if expiration is not None:
        return to_aware(expiration).timestamp()
    return utc_now().timestamp() + ttl_seconds
