"""Tests for the module-level API over the default registry."""

from __future__ import annotations

import pytest

from custevent import api


class Target:
    pass


@pytest.fixture(autouse=True)
def _clean_default_registry():
    api.reset_default_registry()
    yield
    api.reset_default_registry()


def test_register_dispatch_unregister_roundtrip():
    target = Target()
    received = []

    api.register_listener(target, "ping", received.append)
    api.dispatch_event(target, "ping", {"level": 3})
    removed = api.unregister_listener(target, "ping", received.append)
    api.dispatch_event(target, "ping")

    assert len(received) == 1
    assert received[0].level == 3
    assert removed == received.append


def test_register_listener_once():
    target = Target()
    received = []

    api.register_listener(target, "ping", received.append, True)
    api.dispatch_event(target, "ping")
    api.dispatch_event(target, "ping")

    assert len(received) == 1


def test_register_listener_with_wrapper():
    target = Target()
    received = []

    api.register_listener(
        target, "ping", received.append, wrapper=lambda event: received.append("wrapped")
    )
    api.dispatch_event(target, "ping")

    assert received == ["wrapped"]


def test_reset_forgets_listeners():
    target = Target()
    received = []
    api.register_listener(target, "ping", received.append)

    api.reset_default_registry()
    api.dispatch_event(target, "ping")

    assert received == []


def test_default_registry_is_singleton():
    assert api.get_default_registry() is api.default_registry
