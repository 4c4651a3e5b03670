"""Deduplicating, store-backed loader for localized text dictionaries."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Generator

import httpx

from l10n_client.config import L10nSettings
from l10n_client.domain.models import Locale
from l10n_client.i18n.culture import LocaleContext
from l10n_client.i18n.text import LocalizedText
from l10n_client.logging import logger
from l10n_client.services.exceptions import TextLoadError
from l10n_client.services.storage import KeyValueStore
from l10n_client.utils.keys import Packages, build_key, normalize_packages


def _is_secure_client(http_client: Any) -> bool:
    base_url = getattr(http_client, "base_url", None)
    return getattr(base_url, "scheme", "") == "https"


class TextHandle:
    """Read-only view of one dictionary load shared by every caller.

    Each ``await`` goes through ``asyncio.shield``, so a caller that gives up
    (a timeout, a cancelled task group) only abandons its own wait while the
    load keeps running for everybody else.
    """

    __slots__ = ("key", "_task")

    def __init__(self, key: str, task: asyncio.Task[LocalizedText]) -> None:
        self.key = key
        self._task = task

    def __await__(self) -> Generator[Any, None, LocalizedText]:
        return asyncio.shield(self._task).__await__()

    def done(self) -> bool:
        return self._task.done()

    def cancelled(self) -> bool:
        return self._task.cancelled()

    def result(self) -> LocalizedText:
        return self._task.result()

    def exception(self) -> BaseException | None:
        return self._task.exception()

    def add_done_callback(self, callback: Callable[[asyncio.Task[LocalizedText]], object]) -> None:
        self._task.add_done_callback(callback)

    def __repr__(self) -> str:
        return f"TextHandle({self.key!r}, done={self.done()})"


class TextLoader:
    """Serves text dictionaries keyed by locale and package set.

    Every resource key maps to exactly one load for the lifetime of the
    loader. Its handle is registered before ``get_text`` returns, so callers
    arriving while a request is in flight share it instead of issuing
    another one. Entries are never evicted, failed ones included.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        store: KeyValueStore,
        context: LocaleContext,
        *,
        settings: L10nSettings | None = None,
        secure: bool | None = None,
    ) -> None:
        self._client = http_client
        self._store = store
        self._context = context
        self._settings = settings or L10nSettings()
        if secure is None:
            secure = self._settings.secure
        self.secure = _is_secure_client(http_client) if secure is None else secure
        self._promised: dict[str, TextHandle] = {}
        self._writes: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._promised)

    def get_text(
        self,
        url: str | None = None,
        packages: Packages = None,
        locale: Locale | str | None = None,
    ) -> TextHandle:
        """Return the shared handle for a dictionary, starting the load if needed.

        Must be called from a running event loop.
        """

        resolved = self._context.locale if locale is None else Locale.coerce(locale)
        normalized = normalize_packages(packages)
        key = build_key(resolved, normalized, self.secure)

        handle = self._promised.get(key)
        if handle is None:
            task = asyncio.ensure_future(
                self._load(key, url or self._settings.gettext_url, resolved, normalized)
            )
            handle = self._promised[key] = TextHandle(key, task)
        return handle

    async def flush(self) -> None:
        """Wait for store writes scheduled by finished loads."""

        while self._writes:
            await asyncio.gather(*self._writes)

    async def _load(self, key: str, url: str, locale: Locale, packages: str) -> LocalizedText:
        stored = await self._read_store(key)
        if stored is not None:
            logger.info("text_loaded_from_store", key=key)
            return self._wrap(stored)

        payload = await self._fetch(url, {"culture": locale.to_iso(), "packages": packages})
        logger.info("text_loaded_from_http", key=key, url=url)
        write = asyncio.create_task(self._write_store(key, payload))
        self._writes.add(write)
        write.add_done_callback(self._writes.discard)
        return self._wrap(payload)

    async def _fetch(self, url: str, query: dict[str, str]) -> dict[str, str]:
        try:
            response = await self._client.get(
                url,
                params=query,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            reason = exc.response.reason_phrase or str(status_code)
            logger.warning("text_request_failed", url=url, status_code=status_code, reason=reason)
            raise TextLoadError(reason, url=url, status_code=status_code) from exc
        except httpx.RequestError as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.warning("text_request_failed", url=url, reason=reason)
            raise TextLoadError(reason, url=url) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("text_request_failed", url=url, reason="invalid_json")
            raise TextLoadError("Invalid JSON payload", url=url, status_code=response.status_code) from exc
        if not isinstance(payload, dict):
            raise TextLoadError("Expected a JSON object", url=url, status_code=response.status_code)
        return payload

    async def _read_store(self, key: str) -> dict[str, str] | None:
        try:
            stored = await self._store.get(key)
        except Exception:
            logger.warning("text_store_read_failed", key=key, exc_info=True)
            return None
        if stored is None:
            return None
        try:
            payload = json.loads(stored)
        except ValueError:
            logger.warning("text_store_payload_invalid", key=key)
            return None
        return payload if isinstance(payload, dict) else None

    async def _write_store(self, key: str, payload: dict[str, str]) -> None:
        try:
            await self._store.set(key, json.dumps(payload, ensure_ascii=False))
        except Exception:
            logger.warning("text_store_write_failed", key=key, exc_info=True)

    def _wrap(self, payload: dict[str, str]) -> LocalizedText:
        return LocalizedText(payload, not_found_marker=self._settings.not_found_marker)


__all__ = ["TextHandle", "TextLoader"]
