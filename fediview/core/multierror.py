"""Aggregation of non-fatal per-item errors."""

from fediview.exceptions import CombinedError


class MultiError:
    """
    Collects formatted error messages during a batch operation.

    Example:
        errs = MultiError()
        errs.append(f"error fetching attachment {attachment_id}: {e}")
        return items, errs.combine()
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def append(self, message: str) -> None:
        self._messages.append(message)

    def __len__(self) -> int:
        return len(self._messages)

    def combine(self) -> CombinedError | None:
        """None if nothing was recorded, else one error listing every message."""
        if not self._messages:
            return None
        return CombinedError(self._messages)
