"""Shared pytest fixtures for loader tests."""

from __future__ import annotations

import pytest
import structlog

from l10n_client.config import L10nSettings, get_settings
from l10n_client.i18n.culture import LocaleContext
from l10n_client.services.storage import MemoryStore


class FailingStore:
    """Store whose reads and writes both blow up."""

    def __init__(self) -> None:
        self.reads = 0
        self.writes = 0

    async def get(self, key: str) -> str | None:
        self.reads += 1
        raise OSError("storage unavailable")

    async def set(self, key: str, value: str) -> None:
        self.writes += 1
        raise OSError("quota exceeded")


@pytest.fixture(autouse=True)
def _reset_state(monkeypatch):
    for name in (
        "L10N_LOCALE",
        "L10N_GETTEXT_URL",
        "L10N_BASE_URL",
        "L10N_SECURE",
        "L10N_EXECUTE_SCRIPTS",
        "L10N_LOG_LEVEL",
        "L10N_REDIS__URL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> L10nSettings:
    return L10nSettings(_env_file=None)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def culture() -> LocaleContext:
    return LocaleContext("en-US")
