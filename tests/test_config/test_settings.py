"""Tests for pydantic-settings configuration and logging setup."""

import logging

from config import log
from config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("DEFAULT_SCHEDULING_POLICY", "DEFAULT_CORE_COUNT", "LOG_LEVEL", "LOG_QUEUE_SNAPSHOTS"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)
    assert s.DEFAULT_SCHEDULING_POLICY == "fcfs"
    assert s.DEFAULT_CORE_COUNT == 1
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_QUEUE_SNAPSHOTS is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_SCHEDULING_POLICY", "psjf")
    monkeypatch.setenv("DEFAULT_CORE_COUNT", "4")
    monkeypatch.setenv("LOG_QUEUE_SNAPSHOTS", "true")

    s = Settings(_env_file=None)
    assert s.DEFAULT_SCHEDULING_POLICY == "psjf"
    assert s.DEFAULT_CORE_COUNT == 4
    assert s.LOG_QUEUE_SNAPSHOTS is True


def test_configure_logging_uses_settings_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(log.settings, "LOG_LEVEL", "WARNING")

    log.configure_logging()
    assert calls == [{"level": logging.WARNING, "format": log.LOG_FORMAT}]


def test_configure_logging_explicit_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    log.configure_logging("debug")
    assert calls[0]["level"] == logging.DEBUG
