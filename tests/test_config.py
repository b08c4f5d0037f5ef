"""Tests for RegistrySettings and its environment loader."""

from __future__ import annotations

import pytest

from custevent.config import RegistrySettings


def test_defaults_are_fail_fast():
    settings = RegistrySettings()
    assert settings.isolate_errors is False
    assert settings.log_dispatch is False


def test_from_env_unset(monkeypatch):
    monkeypatch.delenv("CUSTEVENT_ISOLATE_ERRORS", raising=False)
    monkeypatch.delenv("CUSTEVENT_LOG_DISPATCH", raising=False)

    assert RegistrySettings.from_env() == RegistrySettings()


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_from_env_truthy(monkeypatch, raw):
    monkeypatch.setenv("CUSTEVENT_ISOLATE_ERRORS", raw)
    monkeypatch.setenv("CUSTEVENT_LOG_DISPATCH", raw)

    settings = RegistrySettings.from_env()

    assert settings.isolate_errors is True
    assert settings.log_dispatch is True


@pytest.mark.parametrize("raw", ["0", "false", "", "nope"])
def test_from_env_falsy(monkeypatch, raw):
    monkeypatch.setenv("CUSTEVENT_ISOLATE_ERRORS", raw)

    assert RegistrySettings.from_env().isolate_errors is False
