"""Unit tests for the observer registry."""

import logging

import pytest

from langres.hooks import HookRegistry


@pytest.fixture
def hooks():
    return HookRegistry()


class TestOnAndEmit:
    def test_on_and_emit(self, hooks):
        calls = []
        hooks.on("test.event", lambda **kw: calls.append(kw))
        hooks.emit("test.event", old="en-US", new="fr-FR")
        assert calls == [{"old": "en-US", "new": "fr-FR"}]

    def test_emit_no_handlers(self, hooks):
        hooks.emit("nonexistent.event", x=1)  # should not raise

    def test_multiple_handlers_in_order(self, hooks):
        order = []
        hooks.on("evt", lambda **kw: order.append("a"))
        hooks.on("evt", lambda **kw: order.append("b"))
        hooks.emit("evt")
        assert order == ["a", "b"]

    def test_tokens_are_unique(self, hooks):
        handler = lambda **kw: None  # noqa: E731
        assert hooks.on("evt", handler) != hooks.on("evt", handler)

    def test_same_handler_twice_runs_twice(self, hooks):
        calls = []

        def handler(**kw):
            calls.append(1)

        hooks.on("evt", handler)
        hooks.on("evt", handler)
        hooks.emit("evt")
        assert len(calls) == 2


class TestOff:
    def test_off(self, hooks):
        calls = []
        token = hooks.on("evt", lambda **kw: calls.append(kw))
        hooks.emit("evt", x=1)
        assert len(calls) == 1

        assert hooks.off(token) is True
        hooks.emit("evt", x=2)
        assert len(calls) == 1  # not called again

    def test_off_unknown_token(self, hooks):
        assert hooks.off(999) is False

    def test_off_twice(self, hooks):
        token = hooks.on("evt", lambda **kw: None)
        assert hooks.off(token) is True
        assert hooks.off(token) is False

    def test_off_during_emit(self, hooks):
        calls = []
        tokens = {}

        def first(**kw):
            calls.append("first")
            hooks.off(tokens["second"])

        tokens["first"] = hooks.on("evt", first)
        tokens["second"] = hooks.on("evt", lambda **kw: calls.append("second"))
        hooks.emit("evt")
        hooks.emit("evt")
        assert calls == ["first", "second", "first"]


class TestClear:
    def test_clear(self, hooks):
        calls = []
        hooks.on("a", lambda **kw: calls.append("a"))
        hooks.on("b", lambda **kw: calls.append("b"))
        hooks.clear()
        hooks.emit("a")
        hooks.emit("b")
        assert calls == []
        assert hooks.count("a") == 0


class TestReservedKeywords:
    def test_emit_with_event_kwarg(self, hooks):
        calls = []
        hooks.on("language.changed", lambda **kw: calls.append(kw))
        hooks.emit("language.changed", event="payload")
        assert calls == [{"event": "payload"}]

    def test_emit_with_name_kwarg(self, hooks):
        calls = []
        hooks.on("evt", lambda **kw: calls.append(kw))
        hooks.emit("evt", name="en-US")
        assert calls == [{"name": "en-US"}]


class TestHandlerExceptionLogged:
    def test_handler_exception_logged_and_others_run(self, hooks, caplog):
        calls = []

        def bad_handler(**kw):
            raise ValueError("broken binding")

        hooks.on("check", bad_handler)
        hooks.on("check", lambda **kw: calls.append(kw))
        with caplog.at_level(logging.ERROR, logger="langres.hooks"):
            hooks.emit("check", culture="en-US")
        assert calls == [{"culture": "en-US"}]
        assert "broken binding" in caplog.text


class TestEventIsolation:
    def test_different_events_isolated(self, hooks):
        calls_a = []
        calls_b = []
        hooks.on("event.a", lambda **kw: calls_a.append(1))
        hooks.on("event.b", lambda **kw: calls_b.append(1))

        hooks.emit("event.a")
        assert len(calls_a) == 1
        assert len(calls_b) == 0

    def test_registries_isolated(self):
        first = HookRegistry()
        second = HookRegistry()
        calls = []
        first.on("evt", lambda **kw: calls.append("first"))
        second.emit("evt")
        assert calls == []
