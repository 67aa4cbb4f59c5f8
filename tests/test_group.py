"""
Tests for Logger.group — visual grouping around sync and async callbacks.

The group opens before the callback runs and always closes afterwards:
on return, on exception, or when a returned awaitable settles.
"""

import asyncio
import re

import pytest

from stylelog import GROUP_STYLE


# =============================================================================
# Synchronous callbacks
# =============================================================================

class TestSyncGroup:
    """Callbacks returning immediate values or raising."""

    def test_returns_callback_value(self, make_logger, sink):
        """Value is returned and one open/close pair brackets the callback."""
        log = make_logger()
        calls = []

        def body():
            calls.append("ran")
            log.info("inside")
            return 99

        assert log.group("T", body) == 99
        assert calls == ["ran"]
        assert sink.kinds == ["group_open", "print", "group_close"]
        assert sink.calls[0] == ("group_open", "[GROUP] T", GROUP_STYLE)

    def test_returns_none(self, make_logger, sink):
        log = make_logger()
        assert log.group("T", lambda: None) is None
        assert sink.kinds == ["group_open", "group_close"]

    def test_title_uses_namespace_and_timestamp(self, make_logger, sink):
        log = make_logger(namespace="boot", show_timestamp=True)
        log.group("startup", lambda: None)
        title = sink.calls[0][1]
        assert re.match(r"^\[[^\]]+\] \[boot\] \[GROUP\] startup$", title), title

    def test_exception_closes_group_first(self, make_logger, sink):
        """The group is closed before the same exception reaches the caller."""
        log = make_logger()
        error = ValueError("bad input")

        def body():
            raise error

        with pytest.raises(ValueError) as excinfo:
            log.group("T", body)
        assert excinfo.value is error
        assert sink.kinds == ["group_open", "group_close"]

    def test_nested_groups(self, make_logger, sink):
        log = make_logger()

        def outer():
            log.log("a")
            return log.group("inner", lambda: log.log("b") or "inner-done")

        assert log.group("outer", outer) == "inner-done"
        assert sink.kinds == [
            "group_open", "print", "group_open", "print", "group_close", "group_close",
        ]


# =============================================================================
# Render gating
# =============================================================================

class TestGroupGating:
    """Group decoration follows the 'log' level's gate; callbacks always run."""

    @pytest.mark.parametrize("minimum", ["debug", "log"])
    def test_rendered_when_log_shown(self, make_logger, sink, minimum):
        log = make_logger(level=minimum)
        log.group("T", lambda: None)
        assert sink.kinds == ["group_open", "group_close"]

    @pytest.mark.parametrize("minimum", ["info", "warn", "error", "success"])
    def test_hidden_when_log_filtered(self, make_logger, sink, minimum):
        """The callback runs even though no group is drawn."""
        log = make_logger(level=minimum)
        ran = []
        assert log.group("T", lambda: ran.append(1) or "v") == "v"
        assert ran == [1]
        assert "group_open" not in sink.kinds
        assert "group_close" not in sink.kinds

    def test_inner_levels_do_not_affect_gate(self, make_logger, sink):
        """An 'error' call inside a hidden group still prints on its own."""
        log = make_logger(level="warn")
        log.group("T", lambda: log.error("boom"))
        assert sink.kinds == ["print"]

    def test_disabled_runs_callback_without_group(self, make_logger, sink):
        log = make_logger()
        log.set_enabled(False)
        ran = []
        log.group("T", lambda: ran.append(1))
        assert ran == [1]
        assert sink.calls == []

    def test_hidden_group_exception_still_propagates(self, make_logger, sink):
        log = make_logger(level="error")

        def body():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            log.group("T", body)
        assert sink.calls == []

    def test_gate_fixed_at_call_time(self, make_logger, sink):
        """Disabling inside the callback still closes the opened group."""
        log = make_logger()
        log.group("T", lambda: log.set_enabled(False))
        assert sink.kinds == ["group_open", "group_close"]


# =============================================================================
# Coroutine callbacks
# =============================================================================

class TestCoroutineGroup:
    """Callbacks returning coroutines keep the group open until they settle."""

    def test_group_open_until_awaited(self, make_logger, sink):
        log = make_logger()

        async def body():
            await asyncio.sleep(0)
            log.info("inside")
            return "done"

        async def main():
            pending = log.group("T", body)
            assert sink.kinds == ["group_open"]
            value = await pending
            return value

        assert asyncio.run(main()) == "done"
        assert sink.kinds == ["group_open", "print", "group_close"]

    def test_rejection_closes_group_and_propagates(self, make_logger, sink):
        log = make_logger()
        error = RuntimeError("async failure")

        async def body():
            await asyncio.sleep(0)
            raise error

        async def main():
            pending = log.group("T", body)
            with pytest.raises(RuntimeError) as excinfo:
                await pending
            return excinfo.value

        assert asyncio.run(main()) is error
        assert sink.kinds == ["group_open", "group_close"]

    def test_hidden_group_coroutine_still_awaitable(self, make_logger, sink):
        log = make_logger(level="warn")

        async def body():
            return 5

        assert asyncio.run(log.group("T", body)) == 5
        assert sink.calls == []


# =============================================================================
# Future / Task callbacks
# =============================================================================

class TestFutureGroup:
    """Callbacks returning asyncio futures get the close attached to them."""

    def test_same_future_returned_and_closed_after_settle(self, make_logger, sink):
        log = make_logger()

        async def main():
            fut = asyncio.get_running_loop().create_future()
            result = log.group("T", lambda: fut)
            assert result is fut
            await asyncio.sleep(0)
            assert sink.kinds == ["group_open"]

            fut.set_result(42)
            value = await result
            await asyncio.sleep(0)
            return value

        assert asyncio.run(main()) == 42
        assert sink.kinds == ["group_open", "group_close"]

    def test_failed_task(self, make_logger, sink):
        log = make_logger()

        async def work():
            await asyncio.sleep(0)
            raise LookupError("nope")

        async def main():
            task = log.group("T", lambda: asyncio.ensure_future(work()))
            with pytest.raises(LookupError):
                await task
            await asyncio.sleep(0)

        asyncio.run(main())
        assert sink.kinds == ["group_open", "group_close"]
