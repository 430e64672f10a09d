"""Process-local store adapter for development and tests."""

from __future__ import annotations


class MemoryStore:
    """Dict-backed store. Values are kept as the serialized strings."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None

    def keys(self) -> list[str]:
        return list(self._data)
