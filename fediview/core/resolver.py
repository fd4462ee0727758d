"""Per-call relation hydration."""

from typing import Any, Awaitable, Callable

from fediview.store.base import Store


class Resolver:
    """
    Hydrates relations referenced by ID, memoizing within one conversion.

    A Resolver lives for exactly one top-level conversion call. Fetched
    entities are remembered here rather than written back onto the input
    entity, so concurrent conversions never share mutable state.
    """

    def __init__(self, store: Store):
        self.store = store
        self._memo: dict[tuple[str, str], Any] = {}
        self._fetchers: dict[str, Callable[[str], Awaitable[Any]]] = {
            "account": store.get_account_by_id,
            "user": store.get_user_by_account_id,
            "status": store.get_status_by_id,
            "attachment": store.get_attachment_by_id,
            "emoji": store.get_emoji_by_id,
            "emoji_category": store.get_emoji_category,
            "mention": store.get_mention_by_id,
            "tag": store.get_tag_by_id,
            "application": store.get_application_by_id,
        }
        # IDs of statuses currently being converted, outermost first
        self.boost_chain: list[str] = []

    async def resolve(self, kind: str, loaded: Any, entity_id: str) -> Any:
        """
        Return the loaded entity, fetching it by ID only when absent.

        Args:
            kind: Entity kind, e.g. "account" or "attachment"
            loaded: Entity already present on the owner, or None
            entity_id: Identifier used when loaded is None

        Returns:
            The entity

        Raises:
            NotFoundError: The store has no such entity
            Exception: Any other store failure, unchanged
        """
        if loaded is not None:
            self._memo.setdefault((kind, _key(kind, loaded)), loaded)
            return loaded
        key = (kind, entity_id)
        if key in self._memo:
            return self._memo[key]
        entity = await self._fetchers[kind](entity_id)
        self._memo[key] = entity
        return entity


def _key(kind: str, entity: Any) -> str:
    return entity.account_id if kind == "user" else entity.id
