"""SQLite-based store implementation."""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import TypeVar

import aiosqlite
from pydantic import BaseModel

from fediview.exceptions import NotFoundError, StoreError
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


class SQLiteStore(Store):
    """
    SQLite-backed store using aiosqlite.

    Entities are kept as JSON documents keyed by (kind, id); follows, follow
    requests, faves, bookmarks and mutes live in a separate edges table.

    Example:
        async with SQLiteStore("server.db", host="example.org") as store:
            account = await store.get_account_by_id("01A")
    """

    def __init__(self, db_path: str = ".fediview.db", host: str = "localhost"):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
            host: Host name of this instance
        """
        self.db_path = Path(db_path)
        self.host = host
        self._db: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def _ensure_db(self) -> aiosqlite.Connection:
        """Ensure database connection and schema exist."""
        if self._db is not None:
            return self._db

        async with self._lock:
            if self._db is None:
                try:
                    db = await aiosqlite.connect(self.db_path)
                except Exception as e:
                    raise StoreError(f"cannot open {self.db_path}: {e}") from e
                await db.execute("""
                    CREATE TABLE IF NOT EXISTS entities (
                        kind TEXT NOT NULL,
                        id TEXT NOT NULL,
                        data TEXT NOT NULL,
                        PRIMARY KEY (kind, id)
                    )
                """)
                await db.execute("""
                    CREATE TABLE IF NOT EXISTS edges (
                        kind TEXT NOT NULL,
                        account_id TEXT NOT NULL,
                        target_id TEXT NOT NULL,
                        PRIMARY KEY (kind, account_id, target_id)
                    )
                """)
                await db.execute(
                    "CREATE INDEX IF NOT EXISTS idx_edges_target ON edges(kind, target_id)"
                )
                await db.commit()
                # Published only once the schema exists
                self._db = db
        return self._db

    async def put(self, entity: BaseModel) -> None:
        """Insert or replace an entity."""
        db = await self._ensure_db()
        kind = entity_kind(entity)
        key = entity.account_id if kind == "user" else entity.id
        await db.execute(
            "INSERT OR REPLACE INTO entities (kind, id, data) VALUES (?, ?, ?)",
            (kind, key, entity.model_dump_json()),
        )
        await db.commit()

    async def link(self, kind: EdgeKind, account_id: str, target_id: str) -> None:
        """Record a follow, follow request, fave, bookmark or mute."""
        db = await self._ensure_db()
        await db.execute(
            "INSERT OR IGNORE INTO edges (kind, account_id, target_id) VALUES (?, ?, ?)",
            (EdgeKind(kind).value, account_id, target_id),
        )
        await db.commit()

    async def load_snapshot(self, snapshot: Snapshot) -> int:
        """
        Load every entity and edge of a snapshot in one transaction.

        Returns:
            Number of rows written
        """
        db = await self._ensure_db()
        rows = 0
        for entity in snapshot.entities():
            kind = entity_kind(entity)
            key = entity.account_id if kind == "user" else entity.id
            await db.execute(
                "INSERT OR REPLACE INTO entities (kind, id, data) VALUES (?, ?, ?)",
                (kind, key, entity.model_dump_json()),
            )
            rows += 1
        for edge in snapshot.edges:
            await db.execute(
                "INSERT OR IGNORE INTO edges (kind, account_id, target_id) VALUES (?, ?, ?)",
                (edge.kind.value, edge.account_id, edge.target_id),
            )
            rows += 1
        await db.commit()
        return rows

    async def _get(self, kind: str, key: str, model: type[T]) -> T:
        db = await self._ensure_db()
        async with db.execute(
            "SELECT data FROM entities WHERE kind = ? AND id = ?", (kind, key)
        ) as cursor:
            row = await cursor.fetchone()
        if row is None:
            raise NotFoundError(kind, key)
        return model.model_validate_json(row[0])

    async def _scalar(self, sql: str, params: tuple = ()):
        db = await self._ensure_db()
        async with db.execute(sql, params) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def _has_edge(self, kind: EdgeKind, account_id: str, target_id: str) -> bool:
        found = await self._scalar(
            "SELECT 1 FROM edges WHERE kind = ? AND account_id = ? AND target_id = ?",
            (kind.value, account_id, target_id),
        )
        return found is not None

    def _local_key(self, domain: str) -> str:
        return "" if domain in ("", self.host) else domain

    async def get_account_by_id(self, account_id: str) -> Account:
        return await self._get("account", account_id, Account)

    async def get_user_by_account_id(self, account_id: str) -> User:
        return await self._get("user", account_id, User)

    async def get_status_by_id(self, status_id: str) -> Status:
        return await self._get("status", status_id, Status)

    async def get_attachment_by_id(self, attachment_id: str) -> MediaAttachment:
        return await self._get("attachment", attachment_id, MediaAttachment)

    async def get_emoji_by_id(self, emoji_id: str) -> Emoji:
        return await self._get("emoji", emoji_id, Emoji)

    async def get_emoji_category(self, category_id: str) -> EmojiCategory:
        return await self._get("emoji_category", category_id, EmojiCategory)

    async def get_mention_by_id(self, mention_id: str) -> Mention:
        return await self._get("mention", mention_id, Mention)

    async def get_tag_by_id(self, tag_id: str) -> Tag:
        return await self._get("tag", tag_id, Tag)

    async def get_application_by_id(self, application_id: str) -> Application:
        return await self._get("application", application_id, Application)

    async def get_instance_account(self, domain: str = "") -> Account:
        domain = self._local_key(domain)
        username = domain or self.host
        data = await self._scalar(
            """
            SELECT data FROM entities
            WHERE kind = 'account'
              AND json_extract(data, '$.domain') = ?
              AND json_extract(data, '$.username') = ?
            """,
            (domain, username),
        )
        if data is None:
            raise NotFoundError("instance account", username)
        return Account.model_validate_json(data)

    async def count_account_followers(self, account_id: str) -> int:
        return await self._scalar(
            "SELECT COUNT(*) FROM edges WHERE kind = ? AND target_id = ?",
            (EdgeKind.FOLLOW.value, account_id),
        )

    async def count_account_following(self, account_id: str) -> int:
        return await self._scalar(
            "SELECT COUNT(*) FROM edges WHERE kind = ? AND account_id = ?",
            (EdgeKind.FOLLOW.value, account_id),
        )

    async def count_account_statuses(self, account_id: str) -> int:
        return await self._scalar(
            """
            SELECT COUNT(*) FROM entities
            WHERE kind = 'status' AND json_extract(data, '$.account_id') = ?
            """,
            (account_id,),
        )

    async def get_account_last_posted(self, account_id: str) -> datetime:
        # ISO strings of one timezone sort chronologically
        latest = await self._scalar(
            """
            SELECT MAX(json_extract(data, '$.created_at')) FROM entities
            WHERE kind = 'status' AND json_extract(data, '$.account_id') = ?
            """,
            (account_id,),
        )
        if latest is None:
            raise NotFoundError("status", f"by account {account_id}")
        return datetime.fromisoformat(latest.replace("Z", "+00:00"))

    async def get_account_follow_requests(self, account_id: str) -> list[str]:
        db = await self._ensure_db()
        async with db.execute(
            """
            SELECT account_id FROM edges WHERE kind = ? AND target_id = ?
            ORDER BY account_id
            """,
            (EdgeKind.FOLLOW_REQUEST.value, account_id),
        ) as cursor:
            rows = await cursor.fetchall()
        if not rows:
            raise NotFoundError("follow_request")
        return [row[0] for row in rows]

    async def count_status_replies(self, status_id: str) -> int:
        return await self._scalar(
            """
            SELECT COUNT(*) FROM entities
            WHERE kind = 'status' AND json_extract(data, '$.in_reply_to_id') = ?
            """,
            (status_id,),
        )

    async def count_status_reblogs(self, status_id: str) -> int:
        return await self._scalar(
            """
            SELECT COUNT(*) FROM entities
            WHERE kind = 'status' AND json_extract(data, '$.boost_of_id') = ?
            """,
            (status_id,),
        )

    async def count_status_faves(self, status_id: str) -> int:
        return await self._scalar(
            "SELECT COUNT(*) FROM edges WHERE kind = ? AND target_id = ?",
            (EdgeKind.FAVE.value, status_id),
        )

    async def is_status_faved_by(self, status_id: str, account_id: str) -> bool:
        return await self._has_edge(EdgeKind.FAVE, account_id, status_id)

    async def is_status_boosted_by(self, status_id: str, account_id: str) -> bool:
        found = await self._scalar(
            """
            SELECT 1 FROM entities
            WHERE kind = 'status'
              AND json_extract(data, '$.boost_of_id') = ?
              AND json_extract(data, '$.account_id') = ?
            """,
            (status_id, account_id),
        )
        return found is not None

    async def is_status_muted_by(self, status_id: str, account_id: str) -> bool:
        return await self._has_edge(EdgeKind.MUTE, account_id, status_id)

    async def is_status_bookmarked_by(self, status_id: str, account_id: str) -> bool:
        return await self._has_edge(EdgeKind.BOOKMARK, account_id, status_id)

    async def count_instance_users(self, domain: str) -> int:
        domain = self._local_key(domain)
        return await self._scalar(
            """
            SELECT COUNT(*) FROM entities
            WHERE kind = 'account'
              AND json_extract(data, '$.domain') = ?
              AND json_extract(data, '$.username') != ?
            """,
            (domain, domain or self.host),
        )

    async def count_instance_statuses(self, domain: str) -> int:
        domain = self._local_key(domain)
        return await self._scalar(
            """
            SELECT COUNT(*) FROM entities AS s
            JOIN entities AS a
              ON a.kind = 'account' AND a.id = json_extract(s.data, '$.account_id')
            WHERE s.kind = 'status' AND json_extract(a.data, '$.domain') = ?
            """,
            (domain,),
        )

    async def count_instance_domains(self, domain: str) -> int:
        if self._local_key(domain):
            return 0
        return await self._scalar(
            """
            SELECT COUNT(DISTINCT json_extract(data, '$.domain')) FROM entities
            WHERE kind = 'account' AND json_extract(data, '$.domain') != ''
            """
        )

    async def close(self) -> None:
        """Close database connection."""
        if self._db is not None:
            await self._db.close()
            self._db = None
