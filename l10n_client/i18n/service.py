"""Facade bundling the current locale with the text and script loaders."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import httpx

from l10n_client.config import L10nSettings, get_settings
from l10n_client.domain.models import Locale
from l10n_client.i18n.culture import LocaleContext
from l10n_client.services.script_loader import LoadedScript, ScriptExecutor, ScriptLoader
from l10n_client.services.storage import KeyValueStore, build_store
from l10n_client.services.text_loader import TextHandle, TextLoader
from l10n_client.utils.keys import Packages


class L10nService:
    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        store: KeyValueStore,
        culture: LocaleContext,
        settings: L10nSettings | None = None,
        script_executor: ScriptExecutor | None = None,
        owns_client: bool = False,
        owns_store: bool = False,
    ) -> None:
        self.settings = settings or L10nSettings()
        self.culture = culture
        self.http_client = http_client
        self.store = store
        self.text_loader = TextLoader(http_client, store, culture, settings=self.settings)
        self.script_loader = ScriptLoader(
            http_client, culture, settings=self.settings, executor=script_executor
        )
        self._owns_client = owns_client
        self._owns_store = owns_store

    @classmethod
    def from_settings(
        cls,
        settings: L10nSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        store: KeyValueStore | None = None,
        script_executor: ScriptExecutor | None = None,
        environ: dict[str, str] | None = None,
    ) -> L10nService:
        """Build a service, creating whichever of client and store was not injected.

        Only the resources created here are closed by ``aclose``.
        """

        settings = settings or get_settings()
        culture = LocaleContext.from_environment(
            environ,
            override=settings.locale,
            default=settings.default_locale,
        )
        return cls(
            http_client=httpx.AsyncClient(base_url=settings.base_url) if http_client is None else http_client,
            store=build_store(settings) if store is None else store,
            culture=culture,
            settings=settings,
            script_executor=script_executor,
            owns_client=http_client is None,
            owns_store=store is None,
        )

    def get_text(
        self,
        url: str | None = None,
        packages: Packages = None,
        locale: Locale | str | None = None,
    ) -> TextHandle:
        return self.text_loader.get_text(url=url, packages=packages, locale=locale)

    def get_script(
        self,
        url_template: str,
        callback: Callable[[LoadedScript], object] | None = None,
    ) -> asyncio.Future[LoadedScript]:
        return self.script_loader.get_script(url_template, callback)

    async def gettext(
        self,
        key: str,
        *,
        packages: Packages = None,
        locale: Locale | str | None = None,
        **kwargs: Any,
    ) -> str:
        """Resolve a single key, formatting it with ``kwargs`` when found."""

        text = await self.get_text(packages=packages, locale=locale)
        if key not in text:
            return text.get(key)
        value = text.get(key)
        return value.format(**kwargs) if kwargs else value

    async def aclose(self) -> None:
        await self.text_loader.flush()
        if self._owns_client:
            await self.http_client.aclose()
        if self._owns_store:
            close = getattr(self.store, "close", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> L10nService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["L10nService"]
