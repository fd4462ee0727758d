"""Fields computed at conversion time rather than stored on entities."""

import math
from datetime import datetime, timezone

from fediview.models.entities import User
from fediview.models.enums import RoleName, ViewVisibility, Visibility

# Lossy: followers-only and mutuals-only both become private.
VISIBILITY_TO_VIEW: dict[Visibility, ViewVisibility] = {
    Visibility.PUBLIC: ViewVisibility.PUBLIC,
    Visibility.UNLOCKED: ViewVisibility.UNLISTED,
    Visibility.FOLLOWERS_ONLY: ViewVisibility.PRIVATE,
    Visibility.MUTUALS_ONLY: ViewVisibility.PRIVATE,
    Visibility.DIRECT: ViewVisibility.DIRECT,
}


def visibility_to_view(visibility: Visibility) -> ViewVisibility:
    """Map internal visibility to its API equivalent."""
    return VISIBILITY_TO_VIEW[Visibility(visibility)]


def is_zero_time(ts: datetime | None) -> bool:
    """True for an unset timestamp."""
    return ts is None or ts.replace(tzinfo=None) == datetime.min


def format_iso8601(ts: datetime | None) -> str:
    """
    Format a timestamp the way the API expects.

    Naive datetimes are taken to be UTC. A zero timestamp formats as the
    zero time, callers wanting an absent field use optional_iso8601.

    Examples:
        datetime(2023, 3, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)
            -> "2023-03-01T12:30:05.123Z"
    """
    if is_zero_time(ts):
        ts = datetime.min
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    else:
        ts = ts.astimezone(timezone.utc)
    return f"{ts:%Y-%m-%dT%H:%M:%S}.{ts.microsecond // 1000:03d}Z"


def optional_iso8601(ts: datetime | None) -> str | None:
    """ISO-8601 string, or None for a zero timestamp."""
    if is_zero_time(ts):
        return None
    return format_iso8601(ts)


def non_empty(value: str) -> str | None:
    return value or None


def acct_for(username: str, domain: str) -> str:
    """
    Account handle as shown to clients.

    Examples:
        ("alice", "") -> "alice"
        ("bob", "remote.example") -> "bob@remote.example"
    """
    if domain:
        return f"{username}@{domain}"
    return username


def resolve_role(user: User) -> RoleName:
    """Admin beats moderator beats user."""
    if user.admin:
        return RoleName.ADMIN
    if user.moderator:
        return RoleName.MODERATOR
    return RoleName.USER


def format_framerate(framerate: float) -> str:
    """
    Video frame rate as an integer ratio string.

    Examples:
        29.97 -> "30/1"
        24.5 -> "25/1"
    """
    rounded = math.floor(abs(framerate) + 0.5)
    return f"{int(math.copysign(rounded, framerate))}/1"
