"""Instance view models, schema versions v1 and v2."""

from pydantic import BaseModel

from fediview.models.views import AccountView, RuleView


class StatusesConfiguration(BaseModel):
    max_characters: int
    max_media_attachments: int
    characters_reserved_per_url: int


class MediaAttachmentsConfiguration(BaseModel):
    supported_mime_types: list[str]
    image_size_limit: int
    image_matrix_limit: int
    video_size_limit: int
    video_frame_rate_limit: int
    video_matrix_limit: int


class PollsConfiguration(BaseModel):
    max_options: int
    max_characters_per_option: int
    min_expiration: int
    max_expiration: int


class AccountsConfiguration(BaseModel):
    allow_custom_css: bool
    max_featured_tags: int


class EmojisConfiguration(BaseModel):
    emoji_size_limit: int


class InstanceConfiguration(BaseModel):
    """Limits shared by both schema versions."""

    statuses: StatusesConfiguration
    media_attachments: MediaAttachmentsConfiguration
    polls: PollsConfiguration
    accounts: AccountsConfiguration
    emojis: EmojisConfiguration


class InstanceV1URLs(BaseModel):
    streaming_api: str


class InstanceV1View(BaseModel):
    uri: str
    account_domain: str
    title: str
    description: str
    short_description: str
    email: str
    version: str
    languages: list[str] = []
    registrations: bool
    approval_required: bool
    invites_enabled: bool = False
    configuration: InstanceConfiguration
    urls: InstanceV1URLs
    stats: dict[str, int]
    thumbnail: str
    thumbnail_type: str | None = None
    thumbnail_description: str | None = None
    contact_account: AccountView | None = None
    max_toot_chars: int


class InstanceV2URLs(BaseModel):
    streaming: str


class InstanceV2Configuration(InstanceConfiguration):
    urls: InstanceV2URLs


class InstanceV2Users(BaseModel):
    active_month: int = 0


class InstanceV2Usage(BaseModel):
    users: InstanceV2Users = InstanceV2Users()


class InstanceV2Thumbnail(BaseModel):
    url: str
    type: str | None = None
    description: str | None = None
    blurhash: str | None = None


class InstanceV2Registrations(BaseModel):
    enabled: bool
    approval_required: bool
    message: str | None = None


class InstanceV2Contact(BaseModel):
    email: str
    account: AccountView | None = None


class InstanceV2View(BaseModel):
    domain: str
    account_domain: str
    title: str
    version: str
    source_url: str
    description: str
    usage: InstanceV2Usage = InstanceV2Usage()
    thumbnail: InstanceV2Thumbnail
    languages: list[str] = []
    configuration: InstanceV2Configuration
    registrations: InstanceV2Registrations
    contact: InstanceV2Contact
    rules: list[RuleView] = []
