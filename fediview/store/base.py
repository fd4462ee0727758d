"""Abstract store interface."""

from abc import ABC, abstractmethod
from datetime import datetime

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
from fediview.models.media import MediaAttachment


class Store(ABC):
    """
    Read-only lookups the converter relies on.

    Every method may block on I/O. Lookups raise NotFoundError when the row
    does not exist and StoreError (or any other exception) on other failures.
    Implementations must be safe for concurrent use across requests.
    """

    # Point lookups

    @abstractmethod
    async def get_account_by_id(self, account_id: str) -> Account:
        ...

    @abstractmethod
    async def get_user_by_account_id(self, account_id: str) -> User:
        """Sign-in record of a local account."""
        ...

    @abstractmethod
    async def get_status_by_id(self, status_id: str) -> Status:
        ...

    @abstractmethod
    async def get_attachment_by_id(self, attachment_id: str) -> MediaAttachment:
        ...

    @abstractmethod
    async def get_emoji_by_id(self, emoji_id: str) -> Emoji:
        ...

    @abstractmethod
    async def get_emoji_category(self, category_id: str) -> EmojiCategory:
        ...

    @abstractmethod
    async def get_mention_by_id(self, mention_id: str) -> Mention:
        ...

    @abstractmethod
    async def get_tag_by_id(self, tag_id: str) -> Tag:
        ...

    @abstractmethod
    async def get_application_by_id(self, application_id: str) -> Application:
        ...

    @abstractmethod
    async def get_instance_account(self, domain: str = "") -> Account:
        """
        Account representing an instance.

        Args:
            domain: Remote instance domain, empty for this instance
        """
        ...

    async def get_statuses(self, status_ids: list[str]) -> list[Status]:
        """Fetch statuses in the order given, failing on the first error."""
        return [await self.get_status_by_id(status_id) for status_id in status_ids]

    async def get_mentions(self, mention_ids: list[str]) -> list[Mention]:
        """Fetch mentions in the order given, failing on the first error."""
        return [await self.get_mention_by_id(mention_id) for mention_id in mention_ids]

    # Account counts

    @abstractmethod
    async def count_account_followers(self, account_id: str) -> int:
        ...

    @abstractmethod
    async def count_account_following(self, account_id: str) -> int:
        ...

    @abstractmethod
    async def count_account_statuses(self, account_id: str) -> int:
        ...

    @abstractmethod
    async def get_account_last_posted(self, account_id: str) -> datetime:
        """Creation time of the newest status, NotFoundError if none."""
        ...

    @abstractmethod
    async def get_account_follow_requests(self, account_id: str) -> list[str]:
        """
        Pending follow requests aimed at an account.

        Returns:
            Requesting account IDs, NotFoundError if there are none
        """
        ...

    # Status counts

    @abstractmethod
    async def count_status_replies(self, status_id: str) -> int:
        ...

    @abstractmethod
    async def count_status_reblogs(self, status_id: str) -> int:
        ...

    @abstractmethod
    async def count_status_faves(self, status_id: str) -> int:
        ...

    # Viewer interactions

    @abstractmethod
    async def is_status_faved_by(self, status_id: str, account_id: str) -> bool:
        ...

    @abstractmethod
    async def is_status_boosted_by(self, status_id: str, account_id: str) -> bool:
        ...

    @abstractmethod
    async def is_status_muted_by(self, status_id: str, account_id: str) -> bool:
        ...

    @abstractmethod
    async def is_status_bookmarked_by(self, status_id: str, account_id: str) -> bool:
        ...

    # Instance counts

    @abstractmethod
    async def count_instance_users(self, domain: str) -> int:
        ...

    @abstractmethod
    async def count_instance_statuses(self, domain: str) -> int:
        ...

    @abstractmethod
    async def count_instance_domains(self, domain: str) -> int:
        ...

    async def close(self) -> None:
        """Cleanup connections and resources."""

    async def __aenter__(self) -> "Store":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
