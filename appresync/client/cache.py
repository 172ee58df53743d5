# appresync Tagged Cache
# In-memory query result cache invalidated by typename tags

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CacheEntry:
    """A cached query result and the typenames it contains."""

    value: Any
    tags: frozenset[str] = field(default_factory=frozenset)


class TaggedCache:
    """
    Query result cache keyed by string.

    Entries are tagged with the typenames they contain so that a mutation
    touching a type can drop every result that mentions it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        return entry.value if entry else None

    def set(self, key: str, value: Any, tags: Iterable[str] = ()) -> None:
        self._entries[key] = CacheEntry(value=value, tags=frozenset(tags))

    def invalidate(self, tags: Iterable[str]) -> int:
        """
        Drop every entry carrying any of the given tags.

        Returns:
            Number of entries removed.
        """
        wanted = set(tags)
        if not wanted:
            return 0

        stale = [key for key, entry in self._entries.items() if entry.tags & wanted]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
