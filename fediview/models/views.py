"""External view models returned at the API boundary."""

from pydantic import BaseModel

from fediview.models.enums import RoleName, ViewVisibility


class AccountRole(BaseModel):
    name: RoleName


class FieldView(BaseModel):
    name: str
    value: str
    verified_at: str | None = None


class EmojiView(BaseModel):
    shortcode: str
    url: str
    static_url: str
    visible_in_picker: bool
    category: str | None = None


class AdminEmojiView(EmojiView):
    """Emoji with moderation details."""

    id: str
    disabled: bool
    domain: str | None = None
    updated_at: str
    total_file_size: int
    content_type: str
    uri: str


class EmojiCategoryView(BaseModel):
    id: str
    name: str


class SourceView(BaseModel):
    """Editable profile source, only shown to the account owner."""

    privacy: ViewVisibility
    sensitive: bool
    language: str
    status_format: str
    note: str
    fields: list[FieldView]
    follow_requests_count: int


class AccountView(BaseModel):
    id: str
    username: str
    acct: str
    display_name: str
    locked: bool = False
    discoverable: bool = False
    bot: bool
    created_at: str
    note: str = ""
    url: str
    avatar: str = ""
    avatar_static: str = ""
    header: str = ""
    header_static: str = ""
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0
    last_status_at: str | None = None
    emojis: list[EmojiView] = []
    fields: list[FieldView] = []
    source: SourceView | None = None
    suspended: bool = False
    custom_css: str = ""
    enable_rss: bool = False
    role: AccountRole | None = None


class AdminIPView(BaseModel):
    ip: str
    used_at: str


class AdminAccountView(BaseModel):
    """Account as seen by moderators."""

    id: str
    username: str
    domain: str | None = None
    created_at: str
    email: str = ""
    ip: str | None = None
    ips: list[AdminIPView] = []
    locale: str = ""
    invite_request: str | None = None
    role: AccountRole
    confirmed: bool = False
    approved: bool = False
    disabled: bool = False
    silenced: bool = False
    suspended: bool = False
    account: AccountView
    created_by_application_id: str = ""
    invited_by_account_id: str = ""


class ApplicationView(BaseModel):
    id: str | None = None
    name: str
    website: str = ""
    redirect_uri: str | None = None
    client_id: str | None = None
    client_secret: str | None = None


class MediaDimensions(BaseModel):
    width: int = 0
    height: int = 0
    frame_rate: str | None = None
    duration: float | None = None
    bitrate: int | None = None
    size: str | None = None
    aspect: float | None = None


class MediaFocus(BaseModel):
    x: float
    y: float


class MediaMeta(BaseModel):
    original: MediaDimensions
    small: MediaDimensions
    focus: MediaFocus | None = None


class AttachmentView(BaseModel):
    id: str
    type: str
    url: str | None = None
    text_url: str
    preview_url: str
    remote_url: str | None = None
    preview_remote_url: str | None = None
    meta: MediaMeta
    description: str | None = None
    blurhash: str = ""


class MentionView(BaseModel):
    id: str
    username: str
    url: str
    acct: str


class TagView(BaseModel):
    name: str
    url: str


class StatusView(BaseModel):
    id: str
    created_at: str
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    sensitive: bool
    spoiler_text: str
    visibility: ViewVisibility
    language: str | None = None
    uri: str
    url: str
    replies_count: int
    reblogs_count: int
    favourites_count: int
    favourited: bool = False
    reblogged: bool = False
    muted: bool = False
    bookmarked: bool = False
    pinned: bool = False
    content: str
    reblog: "StatusView | None" = None
    application: ApplicationView | None = None
    account: AccountView
    media_attachments: list[AttachmentView] = []
    mentions: list[MentionView] = []
    tags: list[TagView] = []
    emojis: list[EmojiView] = []
    card: None = None
    poll: None = None
    text: str = ""


class NotificationView(BaseModel):
    id: str
    type: str
    created_at: str
    account: AccountView
    status: StatusView | None = None


class RelationshipView(BaseModel):
    id: str
    following: bool
    showing_reblogs: bool
    notifying: bool
    followed_by: bool
    blocking: bool
    blocked_by: bool
    muting: bool
    muting_notifications: bool
    requested: bool
    domain_blocking: bool
    endorsed: bool
    note: str


class DomainView(BaseModel):
    """Blocked domain as shared with other instances."""

    domain: str
    public_comment: str = ""


class DomainBlockView(DomainView):
    """Domain block with moderation details."""

    id: str
    obfuscate: bool
    private_comment: str
    subscription_id: str
    created_by: str
    created_at: str


class RuleView(BaseModel):
    id: str
    text: str


class ReportView(BaseModel):
    id: str
    created_at: str
    action_taken: bool
    action_taken_at: str | None = None
    action_taken_comment: str | None = None
    category: str
    comment: str
    forwarded: bool
    status_ids: list[str]
    rule_ids: list[int] = []
    target_account: AccountView


class AdminReportView(BaseModel):
    id: str
    action_taken: bool
    action_taken_at: str | None = None
    category: str
    comment: str
    forwarded: bool
    created_at: str
    updated_at: str
    account: AdminAccountView
    target_account: AdminAccountView
    assigned_account: AdminAccountView | None = None
    action_taken_by_account: AdminAccountView | None = None
    action_taken_comment: str | None = None
    statuses: list[StatusView] = []
    rules: list[RuleView] = []
