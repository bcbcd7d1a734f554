"""A growable sequence that compares items with strict class equality."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .objects import object_hash, objects_equal

NOT_FOUND = -1


class Array:
    """An ordered, growable collection of objects."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def get(self, index: int) -> Optional[Any]:
        """Item at ``index``, or None when the index is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index out of range: {index}")
        self._items[index] = item

    def push(self, item: Any) -> None:
        """Append ``item`` to the end."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def last(self) -> Optional[Any]:
        """The last item, or None if the array is empty."""
        return self._items[-1] if self._items else None

    def contains(self, item: Any) -> bool:
        """True if an item equal to ``item`` is present."""
        return any(objects_equal(existing, item) for existing in self._items)

    def contains_identity(self, item: Any) -> bool:
        """True if ``item`` itself is present."""
        return any(existing is item for existing in self._items)

    def find(self, item: Any) -> int:
        """Index of the first item equal to ``item``, or -1."""
        return next(
            (pos for pos, existing in enumerate(self._items) if objects_equal(existing, item)),
            NOT_FOUND,
        )

    def find_identity(self, item: Any) -> int:
        """Index of ``item`` itself, or -1."""
        return next(
            (pos for pos, existing in enumerate(self._items) if existing is item),
            NOT_FOUND,
        )

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def copy(self) -> "Array":
        """Return a new Array holding the same items."""
        return Array(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Array:
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(objects_equal(a, b) for a, b in zip(self._items, other._items))

    def __hash__(self) -> int:
        return hash(tuple(object_hash(item) for item in self._items))

    def __repr__(self) -> str:
        return f"Array({self._items!r})"