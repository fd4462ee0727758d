"""In-memory store implementation."""

from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel

from fediview.exceptions import NotFoundError
from fediview.models.entities import (
    Account,
    Application,
    Emoji,
    EmojiCategory,
    Mention,
    Status,
    Tag,
    User,
)
from fediview.models.enums import EdgeKind
from fediview.models.media import MediaAttachment
from fediview.store.base import Store
from fediview.store.snapshot import Snapshot, entity_kind

T = TypeVar("T", bound=BaseModel)


class MemoryStore(Store):
    """
    Dict-backed store, seeded with put() and link().

    Lookups return deep copies so callers never share instances with the
    store or with each other.

    Example:
        store = MemoryStore(host="example.org")
        store.put(Account(id="01A", username="alice"))
        account = await store.get_account_by_id("01A")
    """

    def __init__(self, host: str = "localhost"):
        self.host = host
        self._entities: dict[str, dict[str, BaseModel]] = {}
        self._edges: set[tuple[EdgeKind, str, str]] = set()

    def put(self, entity: BaseModel) -> None:
        """Insert or replace an entity."""
        kind = entity_kind(entity)
        key = entity.account_id if kind == "user" else entity.id
        self._entities.setdefault(kind, {})[key] = entity.model_copy(deep=True)

    def link(self, kind: EdgeKind, account_id: str, target_id: str) -> None:
        """Record a follow, follow request, fave, bookmark or mute."""
        self._edges.add((EdgeKind(kind), account_id, target_id))

    def load_snapshot(self, snapshot: Snapshot) -> None:
        for entity in snapshot.entities():
            self.put(entity)
        for edge in snapshot.edges:
            self.link(edge.kind, edge.account_id, edge.target_id)

    def _get(self, kind: str, key: str, model: type[T]) -> T:
        entity = self._entities.get(kind, {}).get(key)
        if entity is None:
            raise NotFoundError(kind, key)
        return entity.model_copy(deep=True)

    def _all(self, kind: str) -> list:
        return list(self._entities.get(kind, {}).values())

    def _has_edge(self, kind: EdgeKind, account_id: str, target_id: str) -> bool:
        return (kind, account_id, target_id) in self._edges

    def _count_edges(self, kind: EdgeKind, account_id: str = "", target_id: str = "") -> int:
        return sum(
            1
            for k, a, t in self._edges
            if k == kind and (not account_id or a == account_id) and (not target_id or t == target_id)
        )

    def _local_key(self, domain: str) -> str:
        return "" if domain in ("", self.host) else domain

    async def get_account_by_id(self, account_id: str) -> Account:
        return self._get("account", account_id, Account)

    async def get_user_by_account_id(self, account_id: str) -> User:
        return self._get("user", account_id, User)

    async def get_status_by_id(self, status_id: str) -> Status:
        return self._get("status", status_id, Status)

    async def get_attachment_by_id(self, attachment_id: str) -> MediaAttachment:
        return self._get("attachment", attachment_id, MediaAttachment)

    async def get_emoji_by_id(self, emoji_id: str) -> Emoji:
        return self._get("emoji", emoji_id, Emoji)

    async def get_emoji_category(self, category_id: str) -> EmojiCategory:
        return self._get("emoji_category", category_id, EmojiCategory)

    async def get_mention_by_id(self, mention_id: str) -> Mention:
        return self._get("mention", mention_id, Mention)

    async def get_tag_by_id(self, tag_id: str) -> Tag:
        return self._get("tag", tag_id, Tag)

    async def get_application_by_id(self, application_id: str) -> Application:
        return self._get("application", application_id, Application)

    async def get_instance_account(self, domain: str = "") -> Account:
        domain = self._local_key(domain)
        username = domain or self.host
        for account in self._all("account"):
            if account.domain == domain and account.username == username:
                return account.model_copy(deep=True)
        raise NotFoundError("instance account", username)

    async def count_account_followers(self, account_id: str) -> int:
        return self._count_edges(EdgeKind.FOLLOW, target_id=account_id)

    async def count_account_following(self, account_id: str) -> int:
        return self._count_edges(EdgeKind.FOLLOW, account_id=account_id)

    async def count_account_statuses(self, account_id: str) -> int:
        return sum(1 for s in self._all("status") if s.account_id == account_id)

    async def get_account_last_posted(self, account_id: str) -> datetime:
        posted = [
            s.created_at
            for s in self._all("status")
            if s.account_id == account_id and s.created_at is not None
        ]
        if not posted:
            raise NotFoundError("status", f"by account {account_id}")
        return max(posted)

    async def get_account_follow_requests(self, account_id: str) -> list[str]:
        requesters = sorted(
            a for k, a, t in self._edges if k == EdgeKind.FOLLOW_REQUEST and t == account_id
        )
        if not requesters:
            raise NotFoundError("follow_request")
        return requesters

    async def count_status_replies(self, status_id: str) -> int:
        return sum(1 for s in self._all("status") if s.in_reply_to_id == status_id)

    async def count_status_reblogs(self, status_id: str) -> int:
        return sum(1 for s in self._all("status") if s.boost_of_id == status_id)

    async def count_status_faves(self, status_id: str) -> int:
        return self._count_edges(EdgeKind.FAVE, target_id=status_id)

    async def is_status_faved_by(self, status_id: str, account_id: str) -> bool:
        return self._has_edge(EdgeKind.FAVE, account_id, status_id)

    async def is_status_boosted_by(self, status_id: str, account_id: str) -> bool:
        return any(
            s.boost_of_id == status_id and s.account_id == account_id
            for s in self._all("status")
        )

    async def is_status_muted_by(self, status_id: str, account_id: str) -> bool:
        return self._has_edge(EdgeKind.MUTE, account_id, status_id)

    async def is_status_bookmarked_by(self, status_id: str, account_id: str) -> bool:
        return self._has_edge(EdgeKind.BOOKMARK, account_id, status_id)

    async def count_instance_users(self, domain: str) -> int:
        domain = self._local_key(domain)
        return sum(
            1
            for a in self._all("account")
            if a.domain == domain and a.username != (domain or self.host)
        )

    async def count_instance_statuses(self, domain: str) -> int:
        domain = self._local_key(domain)
        authors = {a.id for a in self._all("account") if a.domain == domain}
        return sum(1 for s in self._all("status") if s.account_id in authors)

    async def count_instance_domains(self, domain: str) -> int:
        if self._local_key(domain):
            return 0
        return len({a.domain for a in self._all("account") if a.domain})
