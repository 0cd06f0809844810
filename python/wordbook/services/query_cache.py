from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Tuple

from wordbook.utils.logging import get_logger


log = get_logger("services.query_cache")

QueryKey = Tuple[Hashable, ...]


@dataclass(frozen=True)
class CacheEntry:
    key: QueryKey
    value: Any


class QueryCache:
    """
    Client-side cache of query results keyed by tuples, e.g. ("words", 1, 10).
    Invalidation is by key prefix: ("words",) drops every words page.
    """

    def __init__(self) -> None:
        self._entries: Dict[QueryKey, CacheEntry] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return tuple(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey, default: Any = None) -> Any:
        entry = self._entries.get(tuple(key))
        return entry.value if entry else default

    def set(self, key: QueryKey, value: Any) -> None:
        key = tuple(key)
        self._entries[key] = CacheEntry(key=key, value=value)

    def fetch(self, key: QueryKey, loader: Callable[[], Any]) -> Any:
        key = tuple(key)
        entry = self._entries.get(key)
        if entry is not None:
            return entry.value
        value = loader()
        self.set(key, value)
        return value

    def invalidate_queries(self, prefix: QueryKey) -> int:
        prefix = tuple(prefix)
        n = len(prefix)
        stale = [k for k in self._entries if k[:n] == prefix]
        for k in stale:
            del self._entries[k]
        log.debug("invalidated %d queries prefix=%r", len(stale), prefix)
        return len(stale)
