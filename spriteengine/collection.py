"""Name-keyed collections of engine objects."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .helpers import quote_str
from .log import log

T = TypeVar("T")


class Collection(Generic[T]):
    """Items stored by name and iterated in name order."""

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def add(self, name: str, item: T) -> None:
        """Store ``item`` under ``name``, replacing any earlier item."""
        if not name:
            raise ValueError("item name must not be empty")
        if item is None:
            raise ValueError("item must not be None")
        self._items[name] = item
        log("Item ", quote_str(name), " added")

    def add_named(self, item: T) -> None:
        """Store ``item`` under its own ``name`` attribute."""
        name = getattr(item, "name", None)
        if not isinstance(name, str):
            raise TypeError("item has no name")
        self.add(name, item)

    def get(self, name: str) -> T | None:
        """Return the item stored under ``name``, or None."""
        if not name:
            raise ValueError("item name must not be empty")
        return self._items.get(name)

    def items(self) -> dict[str, T]:
        """Return a name-ordered copy of the stored items."""
        return {name: self._items[name] for name in sorted(self._items)}

    def clear(self) -> None:
        """Remove every item."""
        for name in sorted(self._items):
            log("Item ", quote_str(name), " deleted")
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._items))