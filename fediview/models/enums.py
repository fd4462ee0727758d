"""Enumerations shared by entities and views."""

from enum import Enum


class Visibility(str, Enum):
    """Internal status visibility."""
    PUBLIC = "public"
    UNLOCKED = "unlocked"
    FOLLOWERS_ONLY = "followers_only"
    MUTUALS_ONLY = "mutuals_only"
    DIRECT = "direct"


class ViewVisibility(str, Enum):
    """Visibility as exposed by the API."""
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


class FileType(str, Enum):
    """Media attachment file type."""
    IMAGE = "Image"
    GIF = "Gif"
    AUDIO = "Audio"
    VIDEO = "Video"
    UNKNOWN = "Unknown"


class NotificationType(str, Enum):
    """Notification kinds."""
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    MENTION = "mention"
    REBLOG = "reblog"
    FAVOURITE = "favourite"
    POLL = "poll"
    STATUS = "status"


class RoleName(str, Enum):
    """Account role names, highest precedence first."""
    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"


class StatusFormat(str, Enum):
    """Input format for status text."""
    PLAIN = "plain"
    MARKDOWN = "markdown"


class EdgeKind(str, Enum):
    """Pairwise account/status relations kept by stores."""
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    FAVE = "fave"
    BOOKMARK = "bookmark"
    MUTE = "mute"
