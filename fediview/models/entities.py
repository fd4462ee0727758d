"""Internal entity models, as loaded from the store.

Relations are held twice: as an identifier (``*_id``) and as an optional
loaded object. Either may be missing on input; the converter hydrates
whatever it needs through the store.
"""

from datetime import datetime

from pydantic import BaseModel

from fediview.models.enums import NotificationType, Visibility
from fediview.models.media import MediaAttachment


class EmojiCategory(BaseModel):
    id: str
    name: str


class Emoji(BaseModel):
    """Custom emoji, local or remote."""

    id: str
    shortcode: str
    domain: str = ""
    uri: str = ""
    image_url: str = ""
    image_static_url: str = ""
    image_content_type: str = ""
    image_file_size: int = 0
    image_static_file_size: int = 0
    visible_in_picker: bool = True
    disabled: bool = False
    updated_at: datetime | None = None
    category_id: str = ""
    category: EmojiCategory | None = None


class AccountField(BaseModel):
    """Profile metadata field."""

    name: str
    value: str
    verified_at: datetime | None = None


class Account(BaseModel):
    """Local or remote account. Empty domain means local."""

    id: str
    created_at: datetime | None = None
    username: str
    domain: str = ""
    display_name: str = ""
    note: str = ""
    note_raw: str = ""
    url: str = ""
    uri: str = ""
    avatar_media_attachment_id: str = ""
    avatar_media_attachment: MediaAttachment | None = None
    header_media_attachment_id: str = ""
    header_media_attachment: MediaAttachment | None = None
    fields: list[AccountField] = []
    emoji_ids: list[str] = []
    emojis: list[Emoji] = []
    locked: bool = False
    bot: bool = False
    discoverable: bool = False
    sensitive: bool = False
    privacy: Visibility = Visibility.PUBLIC
    language: str = "en"
    status_format: str = ""
    custom_css: str = ""
    enable_rss: bool = False
    reason: str = ""
    suspended_at: datetime | None = None
    silenced_at: datetime | None = None

    @property
    def is_local(self) -> bool:
        return self.domain == ""


class User(BaseModel):
    """Sign-in record belonging to a local account."""

    id: str
    account_id: str
    email: str = ""
    unconfirmed_email: str = ""
    current_sign_in_ip: str | None = None
    locale: str = ""
    admin: bool = False
    moderator: bool = False
    approved: bool = False
    disabled: bool = False
    confirmed_at: datetime | None = None
    created_by_application_id: str = ""


class Application(BaseModel):
    """OAuth client application."""

    id: str
    name: str
    website: str = ""
    redirect_uri: str = ""
    client_id: str = ""
    client_secret: str = ""


class Mention(BaseModel):
    id: str
    status_id: str = ""
    target_account_id: str
    target_account: Account | None = None


class Tag(BaseModel):
    id: str
    name: str
    url: str = ""


class Status(BaseModel):
    """A post. ``boost_of`` points at the re-shared status, if any."""

    id: str
    created_at: datetime | None = None
    uri: str = ""
    url: str = ""
    content: str = ""
    text: str = ""
    content_warning: str = ""
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    language: str = ""
    pinned: bool = False
    account_id: str
    account: Account | None = None
    in_reply_to_id: str = ""
    in_reply_to_account_id: str = ""
    boost_of_id: str = ""
    boost_of: "Status | None" = None
    boost_of_account_id: str = ""
    boost_of_account: Account | None = None
    attachment_ids: list[str] = []
    attachments: list[MediaAttachment] = []
    mention_ids: list[str] = []
    mentions: list[Mention] = []
    tag_ids: list[str] = []
    tags: list[Tag] = []
    emoji_ids: list[str] = []
    emojis: list[Emoji] = []
    created_with_application_id: str = ""


class Notification(BaseModel):
    id: str
    type: NotificationType
    created_at: datetime | None = None
    target_account_id: str
    target_account: Account | None = None
    origin_account_id: str
    origin_account: Account | None = None
    status_id: str = ""
    status: Status | None = None


class Report(BaseModel):
    """Report filed by ``account`` against ``target_account``.

    An unset ``action_taken_at`` means the report has not been actioned yet.
    """

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    uri: str = ""
    account_id: str
    account: Account | None = None
    target_account_id: str
    target_account: Account | None = None
    status_ids: list[str] = []
    statuses: list[Status] = []
    comment: str = ""
    forwarded: bool = False
    action_taken: str = ""
    action_taken_at: datetime | None = None
    action_taken_by_account_id: str = ""
    action_taken_by_account: Account | None = None


class DomainBlock(BaseModel):
    id: str
    created_at: datetime | None = None
    domain: str
    created_by_account_id: str = ""
    private_comment: str = ""
    public_comment: str = ""
    obfuscate: bool = False
    subscription_id: str = ""


class Instance(BaseModel):
    """Instance metadata record."""

    id: str
    domain: str
    uri: str = ""
    title: str = ""
    description: str = ""
    short_description: str = ""
    contact_email: str = ""
    contact_account_id: str = ""
    contact_account: Account | None = None


class Relationship(BaseModel):
    """Relationship of the requesting account to account ``id``."""

    id: str
    following: bool = False
    showing_reblogs: bool = False
    notifying: bool = False
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    endorsed: bool = False
    note: str = ""
