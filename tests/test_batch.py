"""Unit tests for batch conversion with partial failures."""

import asyncio

import pytest

from fediview.core.batch import convert_batch
from fediview.core.resolver import Resolver
from fediview.exceptions import CombinedError, StoreError
from fediview.models.entities import Mention, Tag
from fediview.models.enums import FileType
from fediview.models.media import MediaAttachment


def image(attachment_id: str) -> MediaAttachment:
    return MediaAttachment(id=attachment_id, type=FileType.IMAGE, url=f"https://example.org/{attachment_id}.png")


class TestAttachmentBatch:
    """Test fetching by ID with a missing item."""

    @pytest.mark.asyncio
    async def test_missing_item_skipped_and_reported(self, store, converter):
        store.put(image("a1"))
        store.put(image("a3"))

        result = await converter.attachments_to_views([], ["a1", "a2", "a3"])

        assert [view.id for view in result.items] == ["a1", "a3"]
        assert isinstance(result.error, CombinedError)
        assert "a2" in str(result.error)
        assert result.ok is False

    @pytest.mark.asyncio
    async def test_each_id_fetched_individually(self, store, converter):
        store.put(image("a1"))
        store.put(image("a3"))

        await converter.attachments_to_views([], ["a1", "a2", "a3"])

        assert store.calls_to("get_attachment_by_id") == [("a1",), ("a2",), ("a3",)]

    @pytest.mark.asyncio
    async def test_all_present_has_no_error(self, converter):
        result = await converter.attachments_to_views([], ["01A1", "01A2", "01A3"])

        assert [view.id for view in result.items] == ["01A1", "01A2", "01A3"]
        assert result.error is None
        assert result.ok is True

    @pytest.mark.asyncio
    async def test_loaded_list_used_without_refetch(self, store, converter):
        loaded = [image("x1"), image("x2")]

        result = await converter.attachments_to_views(loaded, ["x1", "x2"])

        assert [view.id for view in result.items] == ["x1", "x2"]
        assert store.calls_to("get_attachment_by_id") == []

    @pytest.mark.asyncio
    async def test_empty_input(self, converter):
        result = await converter.attachments_to_views([], [])
        assert result.items == []
        assert result.error is None


class TestGenericBatch:
    """Test convert_batch directly."""

    @pytest.mark.asyncio
    async def test_conversion_failure_recorded(self, store):
        async def convert(tag: Tag) -> str:
            if tag.name == "bad":
                raise ValueError("unrenderable")
            return tag.name

        tags = [Tag(id="t1", name="good"), Tag(id="t2", name="bad"), Tag(id="t3", name="fine")]
        result = await convert_batch(Resolver(store), "tag", tags, [], convert)

        assert result.items == ["good", "fine"]
        assert result.error.messages == ["error converting tag t2: unrenderable"]

    @pytest.mark.asyncio
    async def test_fetch_and_convert_failures_combined(self, store):
        store.fail("get_tag_by_id", "t-broken", StoreError("connection reset"))

        async def convert(tag: Tag) -> str:
            raise ValueError("nope")

        result = await convert_batch(Resolver(store), "tag", [], ["t-broken", "01T1"], convert)

        assert result.items == []
        assert len(result.error.messages) == 2
        assert "t-broken" in result.error.messages[0]
        assert "01T1" in result.error.messages[1]

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, store):
        store.fail("get_tag_by_id", "01T1", asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await convert_batch(Resolver(store), "tag", [], ["01T1"], lambda t: t)


class TestOtherBatches:
    """Test the emoji, mention and tag batch entry points."""

    @pytest.mark.asyncio
    async def test_mentions_by_id(self, converter):
        result = await converter.mentions_to_views([], ["01M1", "gone"])

        assert [m.acct for m in result.items] == ["bob@remote.example"]
        assert "gone" in str(result.error)

    @pytest.mark.asyncio
    async def test_emojis_by_id(self, converter):
        result = await converter.emojis_to_views([], ["01EMOJI"])

        assert [(e.shortcode, e.category) for e in result.items] == [("blobcat", "blobs")]
        assert result.ok

    @pytest.mark.asyncio
    async def test_loaded_tags(self, store, converter):
        result = await converter.tags_to_views([Tag(id="t1", name="one"), Tag(id="t2", name="two")], [])

        assert [t.name for t in result.items] == ["one", "two"]
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_single_mention(self, converter):
        view = await converter.mention_to_view(Mention(id="01M1", target_account_id="01ALICE"))

        assert (view.id, view.username, view.acct) == ("01ALICE", "alice", "alice")
        assert view.url == "https://example.org/@alice"
