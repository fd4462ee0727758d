"""Batch conversion of child entity lists with partial-failure tolerance."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, TypeVar

from fediview.core.multierror import MultiError
from fediview.core.resolver import Resolver
from fediview.exceptions import CombinedError

V = TypeVar("V")


@dataclass
class BatchResult(Generic[V]):
    """Views that converted successfully, plus what was skipped."""

    items: list[V] = field(default_factory=list)
    error: CombinedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def convert_batch(
    ctx: Resolver,
    kind: str,
    loaded: list[Any],
    ids: list[str],
    convert: Callable[[Any], Awaitable[V]],
) -> BatchResult[V]:
    """
    Convert a list of child entities, fetching them by ID if not loaded.

    The loaded list is used as-is when non-empty. Otherwise each ID is
    fetched on its own; a failed fetch or conversion is recorded and the
    item skipped. Output order follows input order.

    Args:
        ctx: Resolver for the enclosing conversion
        kind: Entity kind, used for fetching and in error messages
        loaded: Entities already present on the owner
        ids: Identifiers of the same entities
        convert: Coroutine function turning one entity into its view

    Returns:
        BatchResult with converted views and a combined error, if any
    """
    errs = MultiError()
    label = kind.replace("_", " ")

    entities = list(loaded)
    if not entities:
        for entity_id in ids:
            try:
                entities.append(await ctx.resolve(kind, None, entity_id))
            except Exception as e:
                errs.append(f"error fetching {label} {entity_id}: {e}")

    views: list[V] = []
    for entity in entities:
        try:
            views.append(await convert(entity))
        except Exception as e:
            errs.append(f"error converting {label} {entity.id}: {e}")

    return BatchResult(items=views, error=errs.combine())
