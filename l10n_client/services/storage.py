"""String-keyed stores persisting fetched text payloads."""

from __future__ import annotations

from typing import Protocol

import redis.asyncio as redis

from l10n_client.config import L10nSettings
from l10n_client.logging import logger


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-scoped store; the lifetime of the process is the session."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._items.get(key)

    async def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class RedisStore:
    """Redis-backed store shared by every process pointed at the same server.

    Entries carry no TTL; flushing the keys is the only eviction path.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> RedisStore:
        return cls(redis.Redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> str | None:
        value = await self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def close(self) -> None:
        await self._client.aclose()


def build_store(settings: L10nSettings) -> KeyValueStore:
    if settings.redis.url:
        logger.info("text_store_selected", backend="redis")
        return RedisStore.from_url(settings.redis.url)
    logger.info("text_store_selected", backend="memory")
    return MemoryStore()


__all__ = ["KeyValueStore", "MemoryStore", "RedisStore", "build_store"]
