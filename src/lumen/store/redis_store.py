"""Redis-backed store adapter."""

from __future__ import annotations

import redis.asyncio as redis


class RedisStore:
    """Plain GET/SET over a Redis connection pool."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, max_connections: int = 50) -> RedisStore:
        """Open a connection pool for the given Redis URL."""
        client = redis.from_url(  # type: ignore[no-untyped-call]
            url,
            encoding="utf-8",
            decode_responses=True,
            max_connections=max_connections,
        )
        return cls(client)

    async def get(self, key: str) -> str | None:
        return await self._client.get(key)

    async def put(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()
