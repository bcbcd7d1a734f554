"""A key/value map whose keys compare with strict class equality."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .objects import copy_object, object_hash, objects_equal


class _Key:
    __slots__ = ("value", "_hash")

    def __init__(self, value: Any) -> None:
        self.value = value
        self._hash = object_hash(value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Key):
            return NotImplemented
        return objects_equal(self.value, other.value)


class Map:
    """Associates keys with values.

    Keys are copied when first inserted, so later changes to a mutable key
    object do not affect the map. Setting a key to None removes it.
    """

    __slots__ = ("_data",)

    def __init__(
        self, items: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]] = ()
    ) -> None:
        self._data: dict[_Key, Tuple[Any, Any]] = {}
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.set(key, value)

    def get(self, key: Any) -> Optional[Any]:
        """Value stored for ``key``, or None."""
        if key is None:
            return None
        entry = self._data.get(_Key(key))
        return None if entry is None else entry[1]

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; a None value removes the key.

        Raises ValueError for a None key.
        """
        if key is None:
            raise ValueError("map keys must not be None")
        wrapped = _Key(key)
        if value is None:
            self._data.pop(wrapped, None)
            return
        entry = self._data.get(wrapped)
        if entry is not None:
            self._data[wrapped] = (entry[0], value)
            return
        stored = copy_object(key)
        self._data[_Key(stored)] = (stored, value)

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        if key is None:
            return False
        return self._data.pop(_Key(key), None) is not None

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, value) pairs."""
        return iter(list(self._data.values()))

    def for_each(self, func: Callable[[Any, Any], Any]) -> None:
        """Call ``func(key, value)`` for every entry."""
        for key, value in self.items():
            func(key, value)

    def copy(self) -> "Map":
        """Return a new Map with the same entries."""
        duplicate = Map()
        duplicate._data = dict(self._data)
        return duplicate

    def __contains__(self, key: object) -> bool:
        return key is not None and _Key(key) in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def __eq__(self, other: object) -> bool:
        if type(other) is not Map:
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(objects_equal(other.get(key), value) for key, value in self.items())

    def __hash__(self) -> int:
        total = 0
        for key, value in self.items():
            total += object_hash(key) + object_hash(value)
        return total & 0xFFFFFFFF

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"Map({{{inner}}})"