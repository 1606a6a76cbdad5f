"""A fixed-capacity cache that evicts the least recently used entry."""

from collections import OrderedDict

MISSING = -1


class LRUCache:
    """Maps integer keys to integer values, holding at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it as used, or -1 if absent."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the least recently used when full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value