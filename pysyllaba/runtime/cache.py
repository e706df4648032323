from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Protocol


class Cache(Protocol):
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any) -> None: ...


def make_cache_key(*parts: Any) -> str:
    h = hashlib.sha256()
    for p in parts:
        if isinstance(p, bytes | bytearray):
            b = bytes(p)
        else:
            b = json.dumps(p, sort_keys=True, ensure_ascii=False, default=str).encode(
                "utf-8"
            )
        h.update(b)
        h.update(b"\x1f")
    return h.hexdigest()


MEMORY_CACHE_DIR = ":memory:"


def cache_from_dir(cache_dir: str | None) -> Cache:
    if not cache_dir:
        return NullCache()
    if cache_dir == MEMORY_CACHE_DIR:
        return MemoryCache()
    return DiskCache(Path(cache_dir))


def make_g2p_key(
    *,
    word: str,
    lang: str,
    backend: str,
    backend_version: str | None = None,
) -> str:
    return make_cache_key(
        {
            "word": word,
            "lang": lang,
            "backend": backend,
            "backend_version": backend_version,
        }
    )


class NullCache:
    def get(self, key: str) -> Any | None:
        return None

    def set(self, key: str, value: Any) -> None:
        return None


class MemoryCache:
    """Process-local cache, for callers that want memoization without disk."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class DiskCache:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Any | None:
        p = self._path(key)
        if not p.exists():
            return None
        return json.loads(p.read_text(encoding="utf-8"))

    def set(self, key: str, value: Any) -> None:
        p = self._path(key)
        p.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
