"""Pydantic models for fediview."""

from fediview.models.enums import (
    EdgeKind,
    FileType,
    NotificationType,
    RoleName,
    StatusFormat,
    ViewVisibility,
    Visibility,
)
from fediview.models.media import MediaAttachment
from fediview.models.entities import (
    Account,
    AccountField,
    Application,
    DomainBlock,
    Emoji,
    EmojiCategory,
    Instance,
    Mention,
    Notification,
    Relationship,
    Report,
    Status,
    Tag,
    User,
)
from fediview.models.views import (
    AccountView,
    AdminAccountView,
    AdminReportView,
    AttachmentView,
    DomainBlockView,
    DomainView,
    EmojiView,
    MentionView,
    NotificationView,
    RelationshipView,
    ReportView,
    StatusView,
    TagView,
)
from fediview.models.instance import InstanceV1View, InstanceV2View

__all__ = [
    # Enums
    "EdgeKind",
    "FileType",
    "NotificationType",
    "RoleName",
    "StatusFormat",
    "ViewVisibility",
    "Visibility",
    # Entities
    "Account",
    "AccountField",
    "Application",
    "DomainBlock",
    "Emoji",
    "EmojiCategory",
    "Instance",
    "MediaAttachment",
    "Mention",
    "Notification",
    "Relationship",
    "Report",
    "Status",
    "Tag",
    "User",
    # Views
    "AccountView",
    "AdminAccountView",
    "AdminReportView",
    "AttachmentView",
    "DomainBlockView",
    "DomainView",
    "EmojiView",
    "InstanceV1View",
    "InstanceV2View",
    "MentionView",
    "NotificationView",
    "RelationshipView",
    "ReportView",
    "StatusView",
    "TagView",
]
