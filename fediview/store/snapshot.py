"""Snapshot document used to seed a store."""

from pathlib import Path

from pydantic import BaseModel

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


class Edge(BaseModel):
    """Directed relation from an account to an account or status."""

    kind: EdgeKind
    account_id: str
    target_id: str


class Snapshot(BaseModel):
    """A set of entities and relations, as exported from a server."""

    accounts: list[Account] = []
    users: list[User] = []
    statuses: list[Status] = []
    attachments: list[MediaAttachment] = []
    emojis: list[Emoji] = []
    emoji_categories: list[EmojiCategory] = []
    mentions: list[Mention] = []
    tags: list[Tag] = []
    applications: list[Application] = []
    edges: list[Edge] = []

    def entities(self) -> list[BaseModel]:
        """All entities, in load order."""
        return [
            *self.accounts,
            *self.users,
            *self.statuses,
            *self.attachments,
            *self.emojis,
            *self.emoji_categories,
            *self.mentions,
            *self.tags,
            *self.applications,
        ]


def load_snapshot(filepath: str | Path) -> Snapshot:
    """
    Load a Snapshot from a JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        Validated Snapshot
    """
    return Snapshot.model_validate_json(Path(filepath).read_text(encoding="utf-8"))


ENTITY_KINDS: dict[type[BaseModel], str] = {
    Account: "account",
    User: "user",
    Status: "status",
    MediaAttachment: "attachment",
    Emoji: "emoji",
    EmojiCategory: "emoji_category",
    Mention: "mention",
    Tag: "tag",
    Application: "application",
}


def entity_kind(entity: BaseModel) -> str:
    """Store kind name for an entity instance."""
    try:
        return ENTITY_KINDS[type(entity)]
    except KeyError:
        raise TypeError(f"unsupported entity type {type(entity).__name__}") from None
