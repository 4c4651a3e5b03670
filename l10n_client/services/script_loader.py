"""Locale-specific script loading with a language-only fallback."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx

from l10n_client.config import L10nSettings
from l10n_client.i18n.culture import LocaleContext
from l10n_client.logging import logger
from l10n_client.services.exceptions import ScriptLoadError

ScriptExecutor = Callable[[str, str], dict[str, Any]]


@dataclass(slots=True)
class LoadedScript:
    url: str
    source: str
    namespace: dict[str, Any] = field(default_factory=dict)


def execute_python_source(source: str, url: str) -> dict[str, Any]:
    """Run downloaded Python source in a fresh module namespace."""

    namespace: dict[str, Any] = {"__name__": f"l10n_script:{url}", "__file__": url}
    exec(compile(source, url, "exec"), namespace)
    return namespace


def retain_source(source: str, url: str) -> dict[str, Any]:
    """Keep the payload without running it; the default unless execution is enabled."""

    return {}


def default_executor(settings: L10nSettings) -> ScriptExecutor:
    if settings.execute_scripts:
        logger.warning("script_execution_enabled", base_url=settings.base_url)
        return execute_python_source
    return retain_source


class ScriptLoader:
    """Loads ``<template with lang-REGION>`` and falls back to ``<template with lang>``.

    Outcomes are not cached; each call walks the chain again.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        context: LocaleContext,
        *,
        settings: L10nSettings | None = None,
        executor: ScriptExecutor | None = None,
    ) -> None:
        self._client = http_client
        self._context = context
        self._settings = settings or L10nSettings()
        self._executor = executor or default_executor(self._settings)

    def candidate_urls(self, url_template: str) -> tuple[str, str]:
        marker = self._settings.script_marker
        locale = self._context.locale
        return (
            url_template.replace(marker, locale.to_iso(), 1),
            url_template.replace(marker, locale.lang, 1),
        )

    def get_script(
        self,
        url_template: str,
        callback: Callable[[LoadedScript], object] | None = None,
    ) -> asyncio.Future[LoadedScript]:
        culture_url, lang_url = self.candidate_urls(url_template)
        return asyncio.ensure_future(self._load(culture_url, lang_url, callback))

    async def _load(
        self,
        culture_url: str,
        lang_url: str,
        callback: Callable[[LoadedScript], object] | None,
    ) -> LoadedScript:
        try:
            loaded = await self._attempt(culture_url)
        except ScriptLoadError as exc:
            logger.info("script_attempt_failed", url=culture_url, reason=exc.reason, fallback_url=lang_url)
            try:
                loaded = await self._attempt(lang_url)
            except ScriptLoadError as fallback_exc:
                logger.warning("script_load_failed", url=lang_url, reason=fallback_exc.reason)
                raise

        if callback is not None:
            callback(loaded)
        logger.info("script_loaded", url=loaded.url)
        return loaded

    async def _attempt(self, url: str) -> LoadedScript:
        try:
            response = await self._client.get(url, timeout=self._settings.request_timeout_seconds)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            reason = exc.response.reason_phrase or str(exc.response.status_code)
            raise ScriptLoadError(reason, url=url) from exc
        except httpx.RequestError as exc:
            raise ScriptLoadError(str(exc) or exc.__class__.__name__, url=url) from exc

        source = response.text
        try:
            namespace = self._executor(source, url)
        except Exception as exc:
            raise ScriptLoadError(f"{exc.__class__.__name__}: {exc}", url=url) from exc
        return LoadedScript(url=url, source=source, namespace=namespace)


__all__ = [
    "LoadedScript",
    "ScriptExecutor",
    "ScriptLoader",
    "default_executor",
    "execute_python_source",
    "retain_source",
]
