"""Conversion of internal entities into API views."""

import math
from dataclasses import dataclass
from typing import Awaitable, Callable

from fediview.config import InstanceConfig
from fediview.core.batch import BatchResult, convert_batch
from fediview.core.derived import (
    acct_for,
    format_framerate,
    format_iso8601,
    is_zero_time,
    non_empty,
    optional_iso8601,
    resolve_role,
    visibility_to_view,
)
from fediview.core.resolver import Resolver
from fediview.exceptions import ConversionError, NotFoundError
from fediview.logging import get_logger
from fediview.models.entities import (
    Account,
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
)
from fediview.models.enums import FileType, RoleName, StatusFormat, ViewVisibility, Visibility
from fediview.models.instance import (
    AccountsConfiguration,
    EmojisConfiguration,
    InstanceConfiguration,
    InstanceV1URLs,
    InstanceV1View,
    InstanceV2Configuration,
    InstanceV2Contact,
    InstanceV2Registrations,
    InstanceV2Thumbnail,
    InstanceV2URLs,
    InstanceV2View,
    MediaAttachmentsConfiguration,
    PollsConfiguration,
    StatusesConfiguration,
)
from fediview.models.media import MediaAttachment
from fediview.models.views import (
    AccountRole,
    AccountView,
    AdminAccountView,
    AdminEmojiView,
    AdminReportView,
    ApplicationView,
    AttachmentView,
    DomainBlockView,
    DomainView,
    EmojiCategoryView,
    EmojiView,
    FieldView,
    MediaDimensions,
    MediaFocus,
    MediaMeta,
    MentionView,
    NotificationView,
    RelationshipView,
    ReportView,
    SourceView,
    StatusView,
    TagView,
)
from fediview.store.base import Store

# A boost of a boost is not expected; anything nested deeper is dropped.
MAX_BOOST_DEPTH = 1

STATUSES_CHARACTERS_RESERVED_PER_URL = 25
MEDIA_IMAGE_MATRIX_LIMIT = 16777216  # width * height
MEDIA_VIDEO_MATRIX_LIMIT = 16777216  # width * height
MEDIA_VIDEO_FRAME_RATE_LIMIT = 60
POLLS_MIN_EXPIRATION = 300  # seconds
POLLS_MAX_EXPIRATION = 2629746  # seconds
ACCOUNTS_MAX_FEATURED_TAGS = 10
SOURCE_URL = "https://codeberg.org/fediview/fediview"
SUPPORTED_MIME_TYPES = [
    "image/jpeg",
    "image/gif",
    "image/png",
    "image/webp",
    "video/mp4",
]
REPORT_CATEGORY = "other"


@dataclass
class StatusInteractions:
    """Viewer's own interactions with a status."""

    favourited: bool = False
    reblogged: bool = False
    muted: bool = False
    bookmarked: bool = False


class Converter:
    """
    Turns partially hydrated entities into API views.

    Missing relations are fetched through the store. Each public method
    works within its own Resolver, so a relation fetched once is reused for
    the rest of that call and never written back onto the input entity.

    Example:
        converter = Converter(store, InstanceConfig(host="example.org"))
        view = await converter.status_to_view(status, viewer=account)
    """

    def __init__(self, store: Store, config: InstanceConfig | None = None):
        """
        Initialize converter.

        Args:
            store: Store used to hydrate relations and query counts
            config: InstanceConfig, uses defaults if None
        """
        self.store = store
        self.config = config or InstanceConfig()
        self._log = get_logger("converter")

    def _context(self) -> Resolver:
        return Resolver(self.store)

    async def _require(
        self, ctx: Resolver, kind: str, loaded, entity_id: str, what: str
    ):
        """Resolve a relation the view cannot do without."""
        try:
            return await ctx.resolve(kind, loaded, entity_id)
        except Exception as e:
            raise ConversionError(
                f"error getting {what} {entity_id}: {e}", kind, entity_id
            ) from e

    async def _count(
        self, what: str, kind: str, entity_id: str, query: Callable[[str], Awaitable[int]]
    ) -> int:
        try:
            return await query(entity_id)
        except Exception as e:
            raise ConversionError(
                f"error counting {what} of {kind} {entity_id}: {e}", kind, entity_id
            ) from e

    # Accounts

    async def account_to_view_public(self, account: Account) -> AccountView:
        """Account as visible to anyone."""
        return await self._account_public(self._context(), account)

    async def account_to_view_sensitive(self, account: Account) -> AccountView:
        """Account as visible to its owner, including the source object."""
        ctx = self._context()
        view = await self._account_public(ctx, account)

        try:
            follow_requests = len(await self.store.get_account_follow_requests(account.id))
        except NotFoundError:
            follow_requests = 0
        except Exception as e:
            raise ConversionError(
                f"error getting follow requests of account {account.id}: {e}",
                "account",
                account.id,
            ) from e

        view.source = SourceView(
            privacy=visibility_to_view(account.privacy),
            sensitive=account.sensitive,
            language=account.language,
            status_format=account.status_format or StatusFormat.PLAIN.value,
            note=account.note_raw,
            fields=view.fields,
            follow_requests_count=follow_requests,
        )
        return view

    async def account_to_view_blocked(self, account: Account) -> AccountView:
        """Minimal account view shown for blocked accounts, without store lookups."""
        return AccountView(
            id=account.id,
            username=account.username,
            acct=acct_for(account.username, account.domain),
            display_name=account.display_name,
            bot=account.bot,
            created_at=format_iso8601(account.created_at),
            url=account.url,
            suspended=not is_zero_time(account.suspended_at),
        )

    async def account_to_admin_view(self, account: Account) -> AdminAccountView:
        """Account with sign-in details, for moderators."""
        return await self._account_admin(self._context(), account)

    async def _account_public(self, ctx: Resolver, a: Account) -> AccountView:
        followers = await self._count("followers", "account", a.id, self.store.count_account_followers)
        following = await self._count("following", "account", a.id, self.store.count_account_following)
        statuses = await self._count("statuses", "account", a.id, self.store.count_account_statuses)

        try:
            last_posted = await self.store.get_account_last_posted(a.id)
        except NotFoundError:
            last_posted = None
        except Exception as e:
            self._log.warning("last_posted_lookup_failed", account_id=a.id, error=str(e))
            last_posted = None

        avatar = await self._optional_media(
            ctx, a.avatar_media_attachment, a.avatar_media_attachment_id, "avatar", a.id
        )
        header = await self._optional_media(
            ctx, a.header_media_attachment, a.header_media_attachment_id, "header", a.id
        )

        fields = [
            FieldView(
                name=field.name,
                value=field.value,
                verified_at=optional_iso8601(field.verified_at),
            )
            for field in a.fields
        ]

        emojis = await self._emojis(ctx, a.emojis, a.emoji_ids)
        if emojis.error:
            self._log.error("account_emojis_conversion_failed", account_id=a.id, error=str(emojis.error))

        role = None
        if a.is_local:
            user = await self._require(ctx, "user", None, a.id, "user for account")
            role = AccountRole(name=resolve_role(user))

        return AccountView(
            id=a.id,
            username=a.username,
            acct=acct_for(a.username, a.domain),
            display_name=a.display_name,
            locked=a.locked,
            discoverable=a.discoverable,
            bot=a.bot,
            created_at=format_iso8601(a.created_at),
            note=a.note,
            url=a.url,
            avatar=avatar.url if avatar else "",
            avatar_static=avatar.thumbnail.url if avatar else "",
            header=header.url if header else "",
            header_static=header.thumbnail.url if header else "",
            followers_count=followers,
            following_count=following,
            statuses_count=statuses,
            last_status_at=optional_iso8601(last_posted),
            emojis=emojis.items,
            fields=fields,
            suspended=not is_zero_time(a.suspended_at),
            custom_css=a.custom_css,
            enable_rss=a.enable_rss,
            role=role,
        )

    async def _optional_media(
        self,
        ctx: Resolver,
        loaded: MediaAttachment | None,
        attachment_id: str,
        purpose: str,
        account_id: str,
    ) -> MediaAttachment | None:
        """Avatar or header; a failed lookup leaves it unset."""
        if loaded is None and not attachment_id:
            return None
        try:
            return await ctx.resolve("attachment", loaded, attachment_id)
        except Exception as e:
            self._log.error(
                f"{purpose}_lookup_failed",
                account_id=account_id,
                attachment_id=attachment_id,
                error=str(e),
            )
            return None

    async def _account_admin(self, ctx: Resolver, a: Account) -> AdminAccountView:
        domain = None
        email = ""
        ip = None
        locale = ""
        invite_request = None
        role = RoleName.USER
        confirmed = approved = disabled = silenced = suspended = False
        created_by_application_id = ""

        if a.domain:
            domain = a.domain
        else:
            user = await self._require(ctx, "user", None, a.id, "user for account")
            email = user.email or user.unconfirmed_email
            ip = user.current_sign_in_ip or None
            locale = user.locale
            invite_request = a.reason
            role = resolve_role(user)
            confirmed = not is_zero_time(user.confirmed_at)
            approved = user.approved
            disabled = user.disabled
            silenced = not is_zero_time(a.silenced_at)
            suspended = not is_zero_time(a.suspended_at)
            created_by_application_id = user.created_by_application_id

        try:
            account_view = await self._account_public(ctx, a)
        except ConversionError as e:
            raise ConversionError(
                f"error converting account {a.id} for admin view: {e}", "account", a.id
            ) from e

        return AdminAccountView(
            id=a.id,
            username=a.username,
            domain=domain,
            created_at=format_iso8601(a.created_at),
            email=email,
            ip=ip,
            ips=[],
            locale=locale,
            invite_request=invite_request,
            role=AccountRole(name=role),
            confirmed=confirmed,
            approved=approved,
            disabled=disabled,
            silenced=silenced,
            suspended=suspended,
            account=account_view,
            created_by_application_id=created_by_application_id,
        )

    # Applications

    async def app_to_view_sensitive(self, app: Application) -> ApplicationView:
        """Application including client credentials, for its owner."""
        return ApplicationView(
            id=app.id,
            name=app.name,
            website=app.website,
            redirect_uri=app.redirect_uri,
            client_id=app.client_id,
            client_secret=app.client_secret,
        )

    async def app_to_view_public(self, app: Application) -> ApplicationView:
        return ApplicationView(name=app.name, website=app.website)

    # Media, mentions, emojis, tags

    async def attachment_to_view(self, a: MediaAttachment) -> AttachmentView:
        original = a.file_meta.original
        small = a.file_meta.small

        meta = MediaMeta(
            original=MediaDimensions(width=original.width, height=original.height),
            small=MediaDimensions(
                width=small.width,
                height=small.height,
                size=f"{small.width}x{small.height}",
                aspect=small.aspect,
            ),
        )

        if a.type == FileType.IMAGE:
            meta.original.size = f"{original.width}x{original.height}"
            meta.original.aspect = original.aspect
            meta.focus = MediaFocus(x=a.file_meta.focus.x, y=a.file_meta.focus.y)
        elif a.type == FileType.VIDEO:
            meta.original.duration = original.duration
            if original.framerate is not None and math.isfinite(original.framerate):
                meta.original.frame_rate = format_framerate(original.framerate)
            meta.original.bitrate = original.bitrate

        return AttachmentView(
            id=a.id,
            type=a.type.value.lower(),
            url=non_empty(a.url),
            text_url=a.url,
            preview_url=a.thumbnail.url,
            remote_url=non_empty(a.remote_url),
            preview_remote_url=non_empty(a.thumbnail.remote_url),
            meta=meta,
            description=non_empty(a.description),
            blurhash=a.blurhash,
        )

    async def mention_to_view(self, mention: Mention) -> MentionView:
        return await self._mention(self._context(), mention)

    async def _mention(self, ctx: Resolver, m: Mention) -> MentionView:
        target = await ctx.resolve("account", m.target_account, m.target_account_id)
        return MentionView(
            id=target.id,
            username=target.username,
            url=target.url,
            acct=acct_for(target.username, target.domain),
        )

    async def emoji_to_view(self, emoji: Emoji) -> EmojiView:
        return await self._emoji(self._context(), emoji)

    async def _emoji(self, ctx: Resolver, e: Emoji) -> EmojiView:
        category = None
        if e.category_id or e.category is not None:
            category = (await ctx.resolve("emoji_category", e.category, e.category_id)).name

        return EmojiView(
            shortcode=e.shortcode,
            url=e.image_url,
            static_url=e.image_static_url,
            visible_in_picker=e.visible_in_picker,
            category=category,
        )

    async def emoji_to_admin_view(self, emoji: Emoji) -> AdminEmojiView:
        """Emoji with file details, for admins."""
        view = await self.emoji_to_view(emoji)
        return AdminEmojiView(
            **view.model_dump(),
            id=emoji.id,
            disabled=emoji.disabled,
            domain=non_empty(emoji.domain),
            updated_at=format_iso8601(emoji.updated_at),
            total_file_size=emoji.image_file_size + emoji.image_static_file_size,
            content_type=emoji.image_content_type,
            uri=emoji.uri,
        )

    async def emoji_category_to_view(self, category: EmojiCategory) -> EmojiCategoryView:
        return EmojiCategoryView(id=category.id, name=category.name)

    async def tag_to_view(self, tag: Tag) -> TagView:
        return TagView(name=tag.name, url=tag.url)

    # Batches

    async def attachments_to_views(
        self, attachments: list[MediaAttachment], attachment_ids: list[str]
    ) -> BatchResult[AttachmentView]:
        return await self._attachments(self._context(), attachments, attachment_ids)

    async def emojis_to_views(self, emojis: list[Emoji], emoji_ids: list[str]) -> BatchResult[EmojiView]:
        return await self._emojis(self._context(), emojis, emoji_ids)

    async def mentions_to_views(
        self, mentions: list[Mention], mention_ids: list[str]
    ) -> BatchResult[MentionView]:
        return await self._mentions(self._context(), mentions, mention_ids)

    async def tags_to_views(self, tags: list[Tag], tag_ids: list[str]) -> BatchResult[TagView]:
        return await self._tags(self._context(), tags, tag_ids)

    async def _attachments(self, ctx, attachments, ids) -> BatchResult[AttachmentView]:
        return await convert_batch(ctx, "attachment", attachments, ids, self.attachment_to_view)

    async def _emojis(self, ctx, emojis, ids) -> BatchResult[EmojiView]:
        return await convert_batch(ctx, "emoji", emojis, ids, lambda e: self._emoji(ctx, e))

    async def _mentions(self, ctx, mentions, ids) -> BatchResult[MentionView]:
        return await convert_batch(ctx, "mention", mentions, ids, lambda m: self._mention(ctx, m))

    async def _tags(self, ctx, tags, ids) -> BatchResult[TagView]:
        return await convert_batch(ctx, "tag", tags, ids, self.tag_to_view)

    # Statuses

    def visibility_to_view(self, visibility: Visibility) -> ViewVisibility:
        return visibility_to_view(visibility)

    async def status_to_view(self, status: Status, viewer: Account | None = None) -> StatusView:
        """
        Convert a status, including its boosted status if any.

        Args:
            status: Status to convert
            viewer: Account whose favourited/reblogged/muted/bookmarked
                flags are computed, None for anonymous

        Returns:
            StatusView

        Raises:
            ConversionError: Counts, author, boosted status or application
                could not be produced
        """
        return await self._status(self._context(), status, viewer, 0)

    async def _status(
        self, ctx: Resolver, s: Status, viewer: Account | None, depth: int
    ) -> StatusView:
        replies = await self._count("replies", "status", s.id, self.store.count_status_replies)
        reblogs = await self._count("reblogs", "status", s.id, self.store.count_status_reblogs)
        faves = await self._count("faves", "status", s.id, self.store.count_status_faves)

        reblog = None
        if s.boost_of_id or s.boost_of is not None:
            reblog = await self._reblog(ctx, s, viewer, depth)

        application = None
        if s.created_with_application_id:
            app = await self._require(
                ctx, "application", None, s.created_with_application_id, "application for status"
            )
            application = await self.app_to_view_public(app)

        author = await self._require(ctx, "account", s.account, s.account_id, "status author")
        try:
            account_view = await self._account_public(ctx, author)
        except ConversionError as e:
            raise ConversionError(
                f"error converting author of status {s.id}: {e}", "status", s.id
            ) from e

        attachments = await self._attachments(ctx, s.attachments, s.attachment_ids)
        if attachments.error:
            self._log.error("status_attachments_conversion_failed", status_id=s.id, error=str(attachments.error))

        mentions = await self._mentions(ctx, s.mentions, s.mention_ids)
        if mentions.error:
            self._log.error("status_mentions_conversion_failed", status_id=s.id, error=str(mentions.error))

        tags = await self._tags(ctx, s.tags, s.tag_ids)
        if tags.error:
            self._log.error("status_tags_conversion_failed", status_id=s.id, error=str(tags.error))

        emojis = await self._emojis(ctx, s.emojis, s.emoji_ids)
        if emojis.error:
            self._log.error("status_emojis_conversion_failed", status_id=s.id, error=str(emojis.error))

        try:
            interactions = await self._interactions(s, viewer)
        except Exception as e:
            self._log.error(
                "status_interactions_lookup_failed",
                status_id=s.id,
                account_id=viewer.id if viewer else None,
                error=str(e),
            )
            interactions = StatusInteractions()

        return StatusView(
            id=s.id,
            created_at=format_iso8601(s.created_at),
            in_reply_to_id=non_empty(s.in_reply_to_id),
            in_reply_to_account_id=non_empty(s.in_reply_to_account_id),
            sensitive=s.sensitive,
            spoiler_text=s.content_warning,
            visibility=visibility_to_view(s.visibility),
            language=non_empty(s.language),
            uri=s.uri,
            url=s.url,
            replies_count=replies,
            reblogs_count=reblogs,
            favourites_count=faves,
            favourited=interactions.favourited,
            reblogged=interactions.reblogged,
            muted=interactions.muted,
            bookmarked=interactions.bookmarked,
            pinned=s.pinned,
            content=s.content,
            reblog=reblog,
            application=application,
            account=account_view,
            media_attachments=attachments.items,
            mentions=mentions.items,
            tags=tags.items,
            emojis=emojis.items,
            text=s.text,
        )

    async def _reblog(
        self, ctx: Resolver, s: Status, viewer: Account | None, depth: int
    ) -> StatusView | None:
        boost_of_id = s.boost_of.id if s.boost_of is not None else s.boost_of_id
        if depth >= MAX_BOOST_DEPTH or boost_of_id == s.id or boost_of_id in ctx.boost_chain:
            self._log.warning(
                "boost_chain_truncated", status_id=s.id, boost_of_id=boost_of_id, depth=depth
            )
            return None

        boosted = await self._require(ctx, "status", s.boost_of, s.boost_of_id, "boosted status")
        author = await self._require(
            ctx,
            "account",
            boosted.account or s.boost_of_account,
            boosted.account_id,
            "author of boosted status",
        )
        ctx.boost_chain.append(s.id)
        try:
            return await self._status(ctx, boosted, viewer, depth + 1)
        except ConversionError as e:
            raise ConversionError(
                f"error converting boosted status {boosted.id}: {e}", "status", s.id
            ) from e
        finally:
            ctx.boost_chain.pop()

    async def _interactions(self, s: Status, viewer: Account | None) -> StatusInteractions:
        if viewer is None:
            return StatusInteractions()
        return StatusInteractions(
            favourited=await self.store.is_status_faved_by(s.id, viewer.id),
            reblogged=await self.store.is_status_boosted_by(s.id, viewer.id),
            muted=await self.store.is_status_muted_by(s.id, viewer.id),
            bookmarked=await self.store.is_status_bookmarked_by(s.id, viewer.id),
        )

    # Instance

    async def instance_to_view_v1(self, instance: Instance) -> InstanceV1View:
        ctx = self._context()
        cfg = self.config

        stats = {
            "user_count": await self._count("users", "instance", instance.domain, self.store.count_instance_users),
            "status_count": await self._count("statuses", "instance", instance.domain, self.store.count_instance_statuses),
            "domain_count": await self._count("domains", "instance", instance.domain, self.store.count_instance_domains),
        }

        thumbnail = await self._instance_thumbnail(ctx, instance)
        contact = await self._instance_contact(ctx, instance)

        return InstanceV1View(
            uri=instance.uri,
            account_domain=cfg.effective_account_domain,
            title=instance.title,
            description=instance.description,
            short_description=instance.short_description,
            email=instance.contact_email,
            version=cfg.software_version,
            languages=[],
            registrations=cfg.accounts_registration_open,
            approval_required=cfg.accounts_approval_required,
            invites_enabled=False,
            configuration=self._instance_configuration(),
            urls=InstanceV1URLs(streaming_api=f"wss://{instance.domain}"),
            stats=stats,
            thumbnail=thumbnail.url,
            thumbnail_type=thumbnail.type,
            thumbnail_description=thumbnail.description,
            contact_account=contact,
            max_toot_chars=cfg.statuses_max_chars,
        )

    async def instance_to_view_v2(self, instance: Instance) -> InstanceV2View:
        ctx = self._context()
        cfg = self.config

        thumbnail = await self._instance_thumbnail(ctx, instance)
        contact = await self._instance_contact(ctx, instance)

        return InstanceV2View(
            domain=instance.domain,
            account_domain=cfg.effective_account_domain,
            title=instance.title,
            version=cfg.software_version,
            source_url=SOURCE_URL,
            description=instance.description,
            thumbnail=thumbnail,
            languages=[],
            configuration=InstanceV2Configuration(
                **self._instance_configuration().model_dump(),
                urls=InstanceV2URLs(streaming=f"wss://{instance.domain}"),
            ),
            registrations=InstanceV2Registrations(
                enabled=cfg.accounts_registration_open,
                approval_required=cfg.accounts_approval_required,
                message=None,
            ),
            contact=InstanceV2Contact(email=instance.contact_email, account=contact),
            rules=[],
        )

    def _instance_configuration(self) -> InstanceConfiguration:
        cfg = self.config
        return InstanceConfiguration(
            statuses=StatusesConfiguration(
                max_characters=cfg.statuses_max_chars,
                max_media_attachments=cfg.statuses_media_max_files,
                characters_reserved_per_url=STATUSES_CHARACTERS_RESERVED_PER_URL,
            ),
            media_attachments=MediaAttachmentsConfiguration(
                supported_mime_types=list(SUPPORTED_MIME_TYPES),
                image_size_limit=cfg.media_image_max_size,
                image_matrix_limit=MEDIA_IMAGE_MATRIX_LIMIT,
                video_size_limit=cfg.media_video_max_size,
                video_frame_rate_limit=MEDIA_VIDEO_FRAME_RATE_LIMIT,
                video_matrix_limit=MEDIA_VIDEO_MATRIX_LIMIT,
            ),
            polls=PollsConfiguration(
                max_options=cfg.statuses_poll_max_options,
                max_characters_per_option=cfg.statuses_poll_option_max_chars,
                min_expiration=POLLS_MIN_EXPIRATION,
                max_expiration=POLLS_MAX_EXPIRATION,
            ),
            accounts=AccountsConfiguration(
                allow_custom_css=cfg.accounts_allow_custom_css,
                max_featured_tags=ACCOUNTS_MAX_FEATURED_TAGS,
            ),
            emojis=EmojisConfiguration(emoji_size_limit=cfg.media_emoji_local_max_size),
        )

    async def _instance_thumbnail(self, ctx: Resolver, instance: Instance) -> InstanceV2Thumbnail:
        """Instance account avatar, or the bundled logo when it has none."""
        try:
            instance_account = await self.store.get_instance_account("")
        except Exception as e:
            raise ConversionError(
                f"error getting instance account: {e}", "instance", instance.domain
            ) from e

        if not instance_account.avatar_media_attachment_id and instance_account.avatar_media_attachment is None:
            return InstanceV2Thumbnail(
                url=f"{self.config.protocol}://{instance.domain}/assets/logo.png"
            )

        avatar = await self._require(
            ctx,
            "attachment",
            instance_account.avatar_media_attachment,
            instance_account.avatar_media_attachment_id,
            "instance avatar attachment",
        )
        return InstanceV2Thumbnail(
            url=avatar.url,
            type=avatar.file.content_type,
            description=avatar.description,
            blurhash=avatar.blurhash,
        )

    async def _instance_contact(self, ctx: Resolver, instance: Instance) -> AccountView | None:
        if not instance.contact_account_id and instance.contact_account is None:
            return None
        contact = await self._require(
            ctx,
            "account",
            instance.contact_account,
            instance.contact_account_id,
            "instance contact account",
        )
        try:
            return await self._account_public(ctx, contact)
        except ConversionError as e:
            raise ConversionError(
                f"error converting instance contact account {contact.id}: {e}",
                "instance",
                instance.domain,
            ) from e

    # Relationships, notifications, moderation

    async def relationship_to_view(self, r: Relationship) -> RelationshipView:
        return RelationshipView(**r.model_dump())

    async def notification_to_view(self, n: Notification) -> NotificationView:
        """
        Convert a notification.

        The status, if any, is converted from the target account's point of
        view. If it is a boost, the boosted status is returned instead.
        """
        ctx = self._context()
        target = await self._require(
            ctx, "account", n.target_account, n.target_account_id, "notification target account"
        )
        origin = await self._require(
            ctx, "account", n.origin_account, n.origin_account_id, "notification origin account"
        )

        try:
            account_view = await self._account_public(ctx, origin)
        except ConversionError as e:
            raise ConversionError(
                f"error converting origin account of notification {n.id}: {e}", "notification", n.id
            ) from e

        status_view = None
        if n.status_id or n.status is not None:
            status = await self._require(ctx, "status", n.status, n.status_id, "notification status")
            try:
                status_view = await self._status(ctx, status, target, 0)
            except ConversionError as e:
                raise ConversionError(
                    f"error converting status of notification {n.id}: {e}", "notification", n.id
                ) from e
            if status_view.reblog is not None:
                status_view = status_view.reblog

        return NotificationView(
            id=n.id,
            type=n.type.value,
            created_at=format_iso8601(n.created_at),
            account=account_view,
            status=status_view,
        )

    async def domain_block_to_view(
        self, b: DomainBlock, export: bool = False
    ) -> DomainView | DomainBlockView:
        """
        Convert a domain block.

        Args:
            b: Domain block
            export: Return only domain and public comment, for sharing
        """
        if export:
            return DomainView(domain=b.domain, public_comment=b.public_comment)
        return DomainBlockView(
            domain=b.domain,
            public_comment=b.public_comment,
            id=b.id,
            obfuscate=b.obfuscate,
            private_comment=b.private_comment,
            subscription_id=b.subscription_id,
            created_by=b.created_by_account_id,
            created_at=format_iso8601(b.created_at),
        )

    async def report_to_view(self, r: Report) -> ReportView:
        """Report as seen by the account that filed it."""
        ctx = self._context()
        target = await self._require(
            ctx, "account", r.target_account, r.target_account_id, "report target account"
        )
        try:
            target_view = await self._account_public(ctx, target)
        except ConversionError as e:
            raise ConversionError(
                f"error converting target account of report {r.id}: {e}", "report", r.id
            ) from e

        return ReportView(
            id=r.id,
            created_at=format_iso8601(r.created_at),
            action_taken=not is_zero_time(r.action_taken_at),
            action_taken_at=optional_iso8601(r.action_taken_at),
            action_taken_comment=non_empty(r.action_taken),
            category=REPORT_CATEGORY,
            comment=r.comment,
            forwarded=r.forwarded,
            status_ids=list(r.status_ids),
            rule_ids=[],
            target_account=target_view,
        )

    async def report_to_admin_view(self, r: Report, viewer: Account | None = None) -> AdminReportView:
        """
        Report with full account details and reported statuses, for moderators.

        Args:
            r: Report
            viewer: Moderator viewing the report, used for status flags
        """
        ctx = self._context()

        account = await self._require(ctx, "account", r.account, r.account_id, "report account")
        account_view = await self._account_admin(ctx, account)

        target = await self._require(
            ctx, "account", r.target_account, r.target_account_id, "report target account"
        )
        target_view = await self._account_admin(ctx, target)

        action_taken_by = None
        if r.action_taken_by_account_id or r.action_taken_by_account is not None:
            actor = await self._require(
                ctx,
                "account",
                r.action_taken_by_account,
                r.action_taken_by_account_id,
                "report action taken by account",
            )
            action_taken_by = await self._account_admin(ctx, actor)

        statuses = list(r.statuses)
        if r.status_ids and not statuses:
            try:
                statuses = await self.store.get_statuses(r.status_ids)
            except Exception as e:
                raise ConversionError(
                    f"error getting statuses of report {r.id}: {e}", "report", r.id
                ) from e

        status_views = []
        for status in statuses:
            try:
                status_views.append(await self._status(ctx, status, viewer, 0))
            except ConversionError as e:
                raise ConversionError(
                    f"error converting status {status.id} of report {r.id}: {e}", "report", r.id
                ) from e

        return AdminReportView(
            id=r.id,
            action_taken=not is_zero_time(r.action_taken_at),
            action_taken_at=optional_iso8601(r.action_taken_at),
            category=REPORT_CATEGORY,
            comment=r.comment,
            forwarded=r.forwarded,
            created_at=format_iso8601(r.created_at),
            updated_at=format_iso8601(r.updated_at),
            account=account_view,
            target_account=target_view,
            assigned_account=action_taken_by,
            action_taken_by_account=action_taken_by,
            action_taken_comment=non_empty(r.action_taken),
            statuses=status_views,
            rules=[],
        )
