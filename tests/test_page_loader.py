from __future__ import annotations

import asyncio
import time

import pytest

from components import Container, Heading, PageLoader, render_html
from helpers import NeverSettles, SleepyResource

# tolerancja zegara pętli zdarzeń
_EPS = 0.01


def test_no_resources_resolves_on_next_tick_not_synchronously() -> None:
    async def scenario() -> None:
        loader = PageLoader(Heading("Hi"), min_loading_time=0)
        loader.mount()
        assert not loader.can_display
        await loader.wait_until_ready(timeout=1)
        assert loader.can_display
        loader.unmount()

    asyncio.run(scenario())


def test_minimum_loading_time_is_enforced() -> None:
    async def scenario() -> float:
        loader = PageLoader(SleepyResource("fast", delay=0.02), min_loading_time=0.2)
        start = time.monotonic()
        loader.mount()

        await asyncio.sleep(0.1)
        assert not loader.is_loading
        assert not loader.can_display

        await loader.wait_until_ready(timeout=2)
        loader.unmount()
        return time.monotonic() - start

    elapsed = asyncio.run(scenario())
    assert 0.2 - _EPS <= elapsed < 1.0


def test_slow_resources_extend_past_minimum() -> None:
    async def scenario() -> float:
        loader = PageLoader(SleepyResource("slow", delay=0.15), min_loading_time=0.05)
        start = time.monotonic()
        loader.mount()
        await loader.wait_until_ready(timeout=2)
        loader.unmount()
        return time.monotonic() - start

    elapsed = asyncio.run(scenario())
    assert 0.15 - _EPS <= elapsed < 1.0


def test_waits_for_every_resource() -> None:
    async def scenario() -> None:
        fast = SleepyResource("fast", delay=0.01)
        slow = SleepyResource("slow", delay=0.1)
        loader = PageLoader(Container(fast, Container(slow)), min_loading_time=0)
        loader.mount()

        await fast.wait()
        assert loader.is_loading
        assert not loader.can_display

        await loader.wait_until_ready(timeout=2)
        assert slow.completed
        loader.unmount()

    asyncio.run(scenario())


def test_failed_resources_still_unblock_the_gate() -> None:
    async def scenario() -> None:
        ok = SleepyResource("ok", delay=0.01)
        broken = SleepyResource("broken", delay=0.01, fail=True)
        loader = PageLoader(ok, broken, min_loading_time=0)
        loader.mount()
        await loader.wait_until_ready(timeout=2)
        assert broken.error is not None
        loader.unmount()

    asyncio.run(scenario())


def test_untracked_resources_do_not_block() -> None:
    async def scenario() -> None:
        hidden = NeverSettles("hidden", track_loading=False)
        loader = PageLoader(hidden, min_loading_time=0)
        loader.mount()
        assert loader.tracker.pending == frozenset()
        await loader.wait_until_ready(timeout=1)
        loader.unmount()

    asyncio.run(scenario())


@pytest.mark.parametrize("value", [-100, -0.5, None])
def test_negative_or_missing_minimum_is_zero(value) -> None:
    loader = PageLoader(min_loading_time=value)
    assert loader.min_loading_time == 0.0


def test_unmount_cancels_pending_timer() -> None:
    async def scenario() -> None:
        loader = PageLoader(Heading("Hi"), min_loading_time=0.1)
        loader.mount()
        loader.unmount()
        await asyncio.sleep(0.2)
        assert not loader.can_display
        assert loader._timer is None

    asyncio.run(scenario())


def test_late_registration_cancels_timer() -> None:
    async def scenario() -> None:
        loader = PageLoader(Heading("Hi"), min_loading_time=0.05)
        loader.mount()
        loader.tracker.register_resource("late")

        await asyncio.sleep(0.15)
        assert not loader.can_display

        loader.tracker.mark_resource_complete("late")
        await loader.wait_until_ready(timeout=1)
        loader.unmount()

    asyncio.run(scenario())


def test_unmount_completes_children_and_closes_tracker() -> None:
    async def scenario() -> None:
        stuck = NeverSettles("stuck")
        loader = PageLoader(stuck, min_loading_time=0)
        loader.mount()
        assert loader.is_loading

        loader.unmount()
        assert stuck.completed
        assert loader.tracker.closed
        await stuck.wait()

    asyncio.run(scenario())


def test_renders_placeholder_then_content() -> None:
    async def scenario() -> None:
        loader = PageLoader(SleepyResource("body", delay=0.01), min_loading_time=0)
        loader.mount()
        before = render_html(loader)
        await loader.wait_until_ready(timeout=1)
        after = render_html(loader)
        loader.unmount()

        assert 'role="status"' in before
        assert "body" not in before
        assert after == "<div><span>body</span></div>"

    asyncio.run(scenario())


def test_custom_loading_component() -> None:
    async def scenario() -> None:
        loader = PageLoader(
            NeverSettles("x"),
            loading_component=Heading("Wait", level=3),
            min_loading_time=0,
        )
        loader.mount()
        assert render_html(loader) == "<h3>Wait</h3>"
        loader.unmount()

    asyncio.run(scenario())


def test_wait_before_mount_raises() -> None:
    async def scenario() -> None:
        with pytest.raises(RuntimeError):
            await PageLoader().wait_until_ready()

    asyncio.run(scenario())


def test_ready_timeout_propagates() -> None:
    async def scenario() -> None:
        loader = PageLoader(NeverSettles("x"), min_loading_time=0)
        loader.mount()
        with pytest.raises(asyncio.TimeoutError):
            await loader.wait_until_ready(timeout=0.05)
        loader.unmount()

    asyncio.run(scenario())
