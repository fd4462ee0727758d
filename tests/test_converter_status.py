"""Unit tests for status views - seeded memory store, no database."""

import asyncio
from unittest.mock import MagicMock

import pytest

from fediview.exceptions import ConversionError, NotFoundError, StoreError
from fediview.models.entities import Mention, Status
from fediview.models.enums import FileType, ViewVisibility
from fediview.models.media import FileMeta, MediaAttachment, Original

from conftest import entity


class TestStatusBasics:
    """Test the plain status fields."""

    @pytest.mark.asyncio
    async def test_counts(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert view.replies_count == 1
        assert view.reblogs_count == 1
        assert view.favourites_count == 2

    @pytest.mark.asyncio
    async def test_fields(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert view.id == "01S1"
        assert view.created_at == "2023-03-01T12:00:00.000Z"
        assert view.visibility == ViewVisibility.PUBLIC
        assert view.language == "en"
        assert view.in_reply_to_id is None
        assert view.reblog is None
        assert view.card is None
        assert view.poll is None
        assert view.account.acct == "alice"

    @pytest.mark.asyncio
    async def test_reply_fields(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S2"))

        assert view.in_reply_to_id == "01S1"
        assert view.in_reply_to_account_id == "01ALICE"
        assert view.visibility == ViewVisibility.PRIVATE
        assert view.spoiler_text == "greetings"
        assert view.sensitive is True
        assert view.language is None
        assert view.application is None
        assert view.account.acct == "bob@remote.example"

    @pytest.mark.asyncio
    async def test_public_application(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert view.application.name == "Tusky"
        assert view.application.website == "https://tusky.app"
        assert view.application.client_secret is None

    @pytest.mark.asyncio
    async def test_idempotent(self, snapshot, converter):
        status = entity(snapshot, "statuses", "01S1")

        first = await converter.status_to_view(status)
        second = await converter.status_to_view(status)

        assert first == second

    @pytest.mark.asyncio
    async def test_input_not_mutated(self, snapshot, converter):
        status = entity(snapshot, "statuses", "01S3")

        await converter.status_to_view(status)

        assert status.account is None
        assert status.boost_of is None
        assert status.attachments == []


class TestStatusChildren:
    """Test attachments, mentions, tags and emojis."""

    @pytest.mark.asyncio
    async def test_children_in_order(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert [a.id for a in view.media_attachments] == ["01A1", "01A2", "01A3"]
        assert [(m.id, m.acct) for m in view.mentions] == [("01BOB", "bob@remote.example")]
        assert [t.name for t in view.tags] == ["fedi"]
        assert [e.shortcode for e in view.emojis] == ["blobcat"]

    @pytest.mark.asyncio
    async def test_image_meta(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))
        image = view.media_attachments[0]

        assert image.type == "image"
        assert image.description == "a cat"
        assert image.remote_url is None
        assert image.meta.original.size == "800x600"
        assert image.meta.original.aspect == pytest.approx(1.3333)
        assert image.meta.original.frame_rate is None
        assert (image.meta.focus.x, image.meta.focus.y) == (-0.5, 0.25)

    @pytest.mark.asyncio
    async def test_video_meta(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))
        video = view.media_attachments[1]

        assert video.type == "video"
        assert video.meta.original.frame_rate == "30/1"
        assert video.meta.original.duration == 12.5
        assert video.meta.original.bitrate == 1000000
        assert video.meta.original.size is None
        assert video.meta.focus is None
        assert video.meta.small.size == "512x288"
        assert video.remote_url == "https://cdn.example/01A2.mp4"
        assert video.preview_remote_url == "https://cdn.example/01A2_small.jpg"
        assert video.description is None

    @pytest.mark.asyncio
    async def test_attachment_failure_is_not_fatal(self, snapshot, store, converter):
        store.fail("get_attachment_by_id", "01A2", StoreError("connection reset"))

        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert [a.id for a in view.media_attachments] == ["01A1", "01A3"]
        assert len(view.mentions) == 1

    @pytest.mark.asyncio
    async def test_missing_tag_is_not_fatal(self, snapshot, store, converter):
        status = entity(snapshot, "statuses", "01S1")
        status.tag_ids = ["01T1", "gone"]

        view = await converter.status_to_view(status)

        assert [t.name for t in view.tags] == ["fedi"]

    @pytest.mark.asyncio
    async def test_loaded_mention_target_not_refetched(self, snapshot, store, converter):
        status = entity(snapshot, "statuses", "01S1")
        status.mentions = [
            Mention(
                id="01M1",
                target_account_id="01BOB",
                target_account=entity(snapshot, "accounts", "01BOB"),
            )
        ]

        view = await converter.status_to_view(status)

        assert view.mentions[0].acct == "bob@remote.example"
        assert ("01BOB",) not in store.calls_to("get_account_by_id")
        assert store.calls_to("get_mention_by_id") == []


class TestStatusBoosts:
    """Test reblog conversion and the boost depth guard."""

    @pytest.mark.asyncio
    async def test_boost_converted(self, snapshot, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S3"))

        assert view.account.acct == "carol"
        assert view.reblog is not None
        assert view.reblog.id == "01S1"
        assert view.reblog.account.acct == "alice"
        assert len(view.reblog.media_attachments) == 3
        assert view.reblog.reblog is None

    @pytest.mark.asyncio
    async def test_each_account_fetched_once(self, snapshot, store, converter):
        await converter.status_to_view(entity(snapshot, "statuses", "01S3"))

        fetched = store.calls_to("get_account_by_id")
        assert sorted(fetched) == [("01ALICE",), ("01BOB",), ("01CAROL",)]

    @pytest.mark.asyncio
    async def test_boost_of_boost_truncated(self, store, converter):
        store.put(Status(id="01S4", account_id="01BOB", boost_of_id="01S3"))

        view = await converter.status_to_view(await store.get_status_by_id("01S4"))

        assert view.reblog.id == "01S3"
        assert view.reblog.reblog is None

    @pytest.mark.asyncio
    async def test_self_boost_omitted(self, converter):
        status = Status(id="01LOOP", account_id="01BOB", boost_of_id="01LOOP")

        view = await converter.status_to_view(status)

        assert view.reblog is None

    @pytest.mark.asyncio
    async def test_missing_boosted_status(self, converter):
        status = Status(id="01S5", account_id="01BOB", boost_of_id="gone")

        with pytest.raises(ConversionError) as exc_info:
            await converter.status_to_view(status)

        assert exc_info.value.not_found is True

    @pytest.mark.asyncio
    async def test_boosted_author_failure(self, snapshot, store, converter):
        store.fail("get_account_by_id", "01ALICE", StoreError("connection reset"))

        with pytest.raises(ConversionError):
            await converter.status_to_view(entity(snapshot, "statuses", "01S3"))

    @pytest.mark.asyncio
    async def test_loaded_boost_used(self, snapshot, store, converter):
        status = entity(snapshot, "statuses", "01S3")
        status.boost_of = entity(snapshot, "statuses", "01S1")

        view = await converter.status_to_view(status)

        assert view.reblog.id == "01S1"
        assert store.calls_to("get_status_by_id") == []


class TestStatusViewer:
    """Test the viewer's interaction flags."""

    @pytest.mark.asyncio
    async def test_anonymous(self, snapshot, store, converter):
        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert (view.favourited, view.reblogged, view.muted, view.bookmarked) == (False, False, False, False)
        assert store.calls_to("is_status_faved_by") == []

    @pytest.mark.asyncio
    async def test_faved_and_bookmarked(self, snapshot, converter):
        bob = entity(snapshot, "accounts", "01BOB")

        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"), viewer=bob)

        assert view.favourited is True
        assert view.bookmarked is True
        assert view.reblogged is False
        assert view.muted is False

    @pytest.mark.asyncio
    async def test_reblogged(self, snapshot, converter):
        carol = entity(snapshot, "accounts", "01CAROL")

        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"), viewer=carol)

        assert view.reblogged is True
        assert view.favourited is True

    @pytest.mark.asyncio
    async def test_muted(self, snapshot, converter):
        carol = entity(snapshot, "accounts", "01CAROL")

        view = await converter.status_to_view(entity(snapshot, "statuses", "01S2"), viewer=carol)

        assert view.muted is True

    @pytest.mark.asyncio
    async def test_interaction_failure_defaults_to_false(self, snapshot, store, converter):
        store.fail("is_status_bookmarked_by", exc=StoreError("database is locked"))
        bob = entity(snapshot, "accounts", "01BOB")

        view = await converter.status_to_view(entity(snapshot, "statuses", "01S1"), viewer=bob)

        assert (view.favourited, view.reblogged, view.muted, view.bookmarked) == (False, False, False, False)


class TestStatusFailures:
    """Test fatal failures and cancellation."""

    @pytest.mark.asyncio
    async def test_author_not_found(self, snapshot, store, converter):
        store.fail("get_account_by_id", "01ALICE", NotFoundError("account", "01ALICE"))

        with pytest.raises(ConversionError) as exc_info:
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert exc_info.value.not_found is True
        assert "01ALICE" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_count_failure(self, snapshot, store, converter):
        store.fail("count_status_faves", exc=StoreError("database is locked"))

        with pytest.raises(ConversionError) as exc_info:
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        assert exc_info.value.not_found is False

    @pytest.mark.asyncio
    async def test_application_failure(self, snapshot, store, converter):
        store.fail("get_application_by_id", "01APP", StoreError("connection reset"))

        with pytest.raises(ConversionError):
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

    @pytest.mark.asyncio
    async def test_cancellation_in_count(self, snapshot, store, converter):
        store.fail("count_status_replies", exc=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

    @pytest.mark.asyncio
    async def test_cancellation_in_interactions(self, snapshot, store, converter):
        store.fail("is_status_faved_by", exc=asyncio.CancelledError())
        bob = entity(snapshot, "accounts", "01BOB")

        with pytest.raises(asyncio.CancelledError):
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"), viewer=bob)

    @pytest.mark.asyncio
    async def test_cancellation_in_batch(self, snapshot, store, converter):
        store.fail("get_attachment_by_id", "01A2", asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await converter.status_to_view(entity(snapshot, "statuses", "01S1"))


class TestStatusLogging:
    """Test that non-fatal failures are logged."""

    @pytest.mark.asyncio
    async def test_batch_failure_logged(self, snapshot, store, converter):
        store.fail("get_attachment_by_id", "01A2", StoreError("connection reset"))
        converter._log = MagicMock()

        await converter.status_to_view(entity(snapshot, "statuses", "01S1"))

        converter._log.error.assert_called_once()
        args, kwargs = converter._log.error.call_args
        assert args == ("status_attachments_conversion_failed",)
        assert kwargs["status_id"] == "01S1"
        assert "01A2" in kwargs["error"]

    @pytest.mark.asyncio
    async def test_truncated_boost_logged(self, store, converter):
        store.put(Status(id="01S4", account_id="01BOB", boost_of_id="01S3"))
        converter._log = MagicMock()

        await converter.status_to_view(await store.get_status_by_id("01S4"))

        converter._log.warning.assert_called_once_with(
            "boost_chain_truncated", status_id="01S3", boost_of_id="01S1", depth=1
        )

    @pytest.mark.asyncio
    async def test_clean_conversion_logs_nothing(self, snapshot, converter):
        converter._log = MagicMock()

        await converter.status_to_view(entity(snapshot, "statuses", "01S3"))

        converter._log.error.assert_not_called()
        converter._log.warning.assert_not_called()


class TestAttachmentFramerate:
    """Test video frame rates that cannot be rounded."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fps", [float("nan"), float("inf"), float("-inf")])
    async def test_non_finite_framerate_left_unset(self, converter, fps):
        video = MediaAttachment(
            id="v1",
            type=FileType.VIDEO,
            file_meta=FileMeta(original=Original(width=640, height=360, duration=3.0, framerate=fps)),
        )

        view = await converter.attachment_to_view(video)

        assert view.meta.original.frame_rate is None
        assert view.meta.original.duration == 3.0

    @pytest.mark.asyncio
    async def test_finite_framerate_rounded(self, converter):
        video = MediaAttachment(
            id="v2",
            type=FileType.VIDEO,
            file_meta=FileMeta(original=Original(framerate=24.5)),
        )

        view = await converter.attachment_to_view(video)

        assert view.meta.original.frame_rate == "25/1"
