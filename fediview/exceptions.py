"""Custom exception hierarchy for fediview."""


class FediviewError(Exception):
    """Base exception for all fediview errors."""


class StoreError(FediviewError):
    """Store lookup failed for a reason other than a missing row."""


class NotFoundError(StoreError):
    """Requested entity does not exist in the store."""

    def __init__(self, kind: str, entity_id: str = ""):
        self.kind = kind
        self.entity_id = entity_id
        if entity_id:
            super().__init__(f"{kind} {entity_id} not found")
        else:
            super().__init__(f"no {kind} entries")


class ConversionError(FediviewError):
    """A mandatory field of a view could not be produced."""

    def __init__(self, message: str, kind: str = "", entity_id: str = ""):
        super().__init__(message)
        self.kind = kind
        self.entity_id = entity_id

    @property
    def not_found(self) -> bool:
        """True when the underlying cause was a missing entity."""
        cause = self.__cause__
        while isinstance(cause, ConversionError):
            cause = cause.__cause__
        return isinstance(cause, NotFoundError)


class CombinedError(FediviewError):
    """One or more non-fatal per-item failures collected during a batch."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class ConfigError(FediviewError):
    """Invalid configuration."""
