"""Shared fixtures - a seeded in-memory store, no database or network."""

from pathlib import Path

import pytest

from fediview.config import InstanceConfig
from fediview.core.converter import Converter
from fediview.store.memory import MemoryStore
from fediview.store.snapshot import Snapshot, load_snapshot


FIXTURES_DIR = Path(__file__).parent / "fixtures"
HOST = "example.org"


class RecordingStore(MemoryStore):
    """MemoryStore that records every lookup and can be told to fail."""

    def __init__(self, host: str = HOST):
        super().__init__(host)
        self.calls: list[tuple] = []
        self.failures: dict[tuple, BaseException] = {}

    def fail(self, method: str, key: str | None = None, exc: BaseException | None = None) -> None:
        """Make method raise exc, for one key or for every call when key is None."""
        self.failures[(method, key)] = exc or RuntimeError(f"{method} exploded")

    def calls_to(self, method: str) -> list[tuple]:
        return [call[1:] for call in self.calls if call[0] == method]

    def __getattribute__(self, name):
        attr = super().__getattribute__(name)
        if not name.startswith(("get_", "count_", "is_")) or not callable(attr):
            return attr

        calls = super().__getattribute__("calls")
        failures = super().__getattribute__("failures")

        async def recorded(*args):
            calls.append((name, *args))
            key = args[0] if args and isinstance(args[0], str) else None
            exc = failures.get((name, key)) or failures.get((name, None))
            if exc is not None:
                raise exc
            return await attr(*args)

        return recorded


@pytest.fixture
def snapshot() -> Snapshot:
    return load_snapshot(FIXTURES_DIR / "snapshot.json")


@pytest.fixture
def store(snapshot) -> RecordingStore:
    store = RecordingStore(HOST)
    store.load_snapshot(snapshot)
    return store


@pytest.fixture
def config() -> InstanceConfig:
    return InstanceConfig(
        host=HOST,
        software_version="0.1.0-test",
        statuses_max_chars=500,
        _env_file=None,
    )


@pytest.fixture
def converter(store, config) -> Converter:
    return Converter(store, config)


def entity(snapshot: Snapshot, collection: str, entity_id: str):
    """Fresh copy of one entity from the snapshot, relations unloaded."""
    for item in getattr(snapshot, collection):
        if item.id == entity_id:
            return item.model_copy(deep=True)
    raise KeyError(entity_id)
