from __future__ import annotations

import asyncio
import threading

from components import (
    FetchError,
    ResourceState,
    TextFileRenderer,
    WebPageImage,
    XMLFileRenderer,
    render_html,
)
from helpers import FakeFetcher, NeverSettles, RecordingTracker, SleepyResource, png_bytes

ABOUT = "content/Home/AboutMe"


# ---------------------------------------------------------------------------
# XMLFileRenderer
# ---------------------------------------------------------------------------

def test_xml_file_success() -> None:
    async def scenario() -> None:
        fetcher = FakeFetcher(texts={f"{ABOUT}.xml": "<content><paragraph>Hi</paragraph></content>"})
        tracker = RecordingTracker()
        block = XMLFileRenderer(ABOUT, fetcher=fetcher, class_name="about")
        block.mount(tracker)

        assert render_html(block) == '<div class="about">Loading...</div>'
        await block.wait()

        assert block.state is ResourceState.READY
        assert render_html(block) == '<div class="about"><p>Hi</p></div>'
        assert fetcher.calls == [f"{ABOUT}.xml"]
        assert block.resource_id.startswith(f"xml-{ABOUT}-")
        assert tracker.calls == [("register", block.resource_id), ("complete", block.resource_id)]
        assert not tracker.is_loading

    asyncio.run(scenario())


def test_xml_file_fetch_failure_renders_error_and_completes(capsys) -> None:
    async def scenario() -> RecordingTracker:
        tracker = RecordingTracker()
        block = XMLFileRenderer("missing/File", fetcher=FakeFetcher())
        block.mount(tracker)
        await block.wait()

        assert block.state is ResourceState.FAILED
        assert isinstance(block.error, FetchError)
        assert render_html(block) == "<div>Error loading content</div>"
        return tracker

    tracker = asyncio.run(scenario())
    assert [name for name, _ in tracker.calls] == ["register", "complete"]
    assert not tracker.is_loading
    assert "Błąd ładowania zasobu" in capsys.readouterr().err


def test_xml_file_with_malformed_document_shows_nothing() -> None:
    async def scenario() -> None:
        block = XMLFileRenderer("bad", fetcher=FakeFetcher(texts={"bad.xml": "<content>"}))
        block.mount(RecordingTracker())
        await block.wait()
        assert block.state is ResourceState.READY
        assert render_html(block) == "<div></div>"

    asyncio.run(scenario())


def test_untracked_resource_never_touches_tracker() -> None:
    async def scenario() -> None:
        tracker = RecordingTracker()
        block = XMLFileRenderer("x", fetcher=FakeFetcher(), track_loading=False)
        block.mount(tracker)
        await block.wait()
        block.unmount()
        assert tracker.calls == []

    asyncio.run(scenario())


def test_mount_without_tracker() -> None:
    async def scenario() -> None:
        block = SleepyResource("solo")
        block.mount(None)
        await block.wait()
        assert block.state is ResourceState.READY

    asyncio.run(scenario())


# ---------------------------------------------------------------------------
# Odmontowanie przed zakończeniem
# ---------------------------------------------------------------------------

def test_unmount_before_settle_completes_exactly_once() -> None:
    async def scenario() -> None:
        tracker = RecordingTracker()
        res = NeverSettles("never")
        res.mount(tracker)
        await asyncio.sleep(0.01)

        res.unmount()
        res.unmount()
        await res.wait()
        await asyncio.sleep(0.01)

        assert tracker.calls == [("register", res.resource_id), ("complete", res.resource_id)]
        assert not tracker.is_loading

    asyncio.run(scenario())


def test_no_tracker_calls_or_state_changes_after_unmount() -> None:
    async def scenario() -> None:
        release = threading.Event()
        fetcher = FakeFetcher(
            texts={"late.xml": "<content><p>late</p></content>"},
            gate=release,
        )
        tracker = RecordingTracker()
        block = XMLFileRenderer("late", fetcher=fetcher)
        block.mount(tracker)
        await asyncio.sleep(0.02)

        block.unmount()
        calls_at_unmount = list(tracker.calls)
        release.set()
        await asyncio.sleep(0.05)

        assert tracker.calls == calls_at_unmount
        assert len(calls_at_unmount) == 2
        assert block.state is ResourceState.LOADING
        assert block.nodes == []

    asyncio.run(scenario())


def test_unmount_after_completion_adds_no_calls() -> None:
    async def scenario() -> None:
        tracker = RecordingTracker()
        res = SleepyResource("done")
        res.mount(tracker)
        await res.wait()
        res.unmount()
        assert len(tracker.calls) == 2

    asyncio.run(scenario())


def test_component_is_single_use() -> None:
    async def scenario() -> None:
        tracker = RecordingTracker()
        res = SleepyResource("once")
        res.mount(tracker)
        res.mount(tracker)
        res.unmount()
        res.mount(tracker)
        assert [name for name, _ in tracker.calls] == ["register", "complete"]

    asyncio.run(scenario())


# ---------------------------------------------------------------------------
# WebPageImage
# ---------------------------------------------------------------------------

def test_image_decodes_and_renders() -> None:
    async def scenario() -> None:
        fetcher = FakeFetcher(blobs={"images/Purger/PurgerIcon.png": png_bytes(4, 3)})
        tracker = RecordingTracker()
        img = WebPageImage("/images/Purger/PurgerIcon.png", "Purger", fetcher=fetcher, size=400)
        img.mount(tracker)
        await img.wait()

        assert img.state is ResourceState.READY
        assert img.dimensions == (4, 3)
        assert img.resource_id.startswith("img-/images/Purger/PurgerIcon.png-")
        assert render_html(img) == (
            '<img src="/images/Purger/PurgerIcon.png" alt="Purger" class="web-link-image" '
            'style="max-width: 400px; height: auto; padding: 10px"/>'
        )
        assert not tracker.is_loading

    asyncio.run(scenario())


def test_fixed_size_image_style() -> None:
    async def scenario() -> None:
        img = WebPageImage(
            "/a.png",
            fetcher=FakeFetcher(blobs={"a.png": png_bytes()}),
            size=200,
            padding=5,
            fixed_size=True,
        )
        img.mount(None)
        await img.wait()
        assert 'style="width: 200px; height: 200px; padding: 5px"' in render_html(img)

    asyncio.run(scenario())


def test_undecodable_image_fails_but_completes() -> None:
    async def scenario() -> None:
        tracker = RecordingTracker()
        img = WebPageImage("/broken.png", fetcher=FakeFetcher(blobs={"broken.png": b"not an image"}))
        img.mount(tracker)
        await img.wait()

        assert img.state is ResourceState.FAILED
        assert render_html(img) == '<span class="image-error">Error loading image</span>'
        assert [name for name, _ in tracker.calls] == ["register", "complete"]

    asyncio.run(scenario())


# ---------------------------------------------------------------------------
# TextFileRenderer
# ---------------------------------------------------------------------------

def test_text_file_inserts_html_fragment() -> None:
    async def scenario() -> None:
        fetcher = FakeFetcher(texts={"notes/intro.txt": "Hello <b>world</b>"})
        block = TextFileRenderer("notes/intro", fetcher=fetcher)
        block.mount(RecordingTracker())
        await block.wait()
        assert render_html(block) == "<p>Hello <b>world</b></p>"

    asyncio.run(scenario())


def test_text_file_failure_leaves_empty_paragraph() -> None:
    async def scenario() -> None:
        block = TextFileRenderer("nope", fetcher=FakeFetcher())
        block.mount(RecordingTracker())
        await block.wait()
        assert block.state is ResourceState.FAILED
        assert render_html(block) == "<p></p>"

    asyncio.run(scenario())
