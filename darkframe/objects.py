"""Core object helpers: ranges, boxes, release pools and generic object protocols."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Any, Optional

_UINT32_MASK = 0xFFFFFFFF

_IMMUTABLE_TYPES = (bool, int, float, complex, str, bytes, tuple, frozenset, type(None))


@dataclass(frozen=True)
class Range:
    """A span of positions; a length of ``None`` means "to the end"."""

    start: int = 0
    length: Optional[int] = None

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"range start must not be negative: {self.start}")
        if self.length is not None and self.length < 0:
            raise ValueError(f"range length must not be negative: {self.length}")

    def resolve(self, size: int) -> "Range":
        """Return a concrete range inside a sequence of ``size`` items.

        Raises ValueError if the range does not fit.
        """
        if self.start > size:
            raise ValueError(f"range start {self.start} is beyond size {size}")
        length = size - self.start if self.length is None else self.length
        if self.start + length > size:
            raise ValueError(
                f"range {self.start}+{length} exceeds size {size}"
            )
        return Range(self.start, length)


RANGE_ALL = Range()


@dataclass(eq=False)
class Box:
    """Holds an arbitrary value with a numeric type tag.

    If ``owned`` is true, releasing the box also closes the value when it
    can be closed.
    """

    value: Any
    kind: int = 0
    owned: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.kind <= _UINT32_MASK:
            raise ValueError(f"box kind must fit in 32 bits: {self.kind}")

    def release(self) -> None:
        """Drop the held value, closing it first if the box owns it."""
        value, self.value = self.value, None
        if self.owned and value is not None:
            closer = getattr(value, "close", None)
            if callable(closer):
                closer()


def _release(obj: Any) -> None:
    if isinstance(obj, Box):
        obj.release()
        return
    closer = getattr(obj, "close", None)
    if callable(closer):
        closer()


class _PoolStack(threading.local):
    def __init__(self) -> None:
        self.pools: list[RefPool] = []


_stack = _PoolStack()


class RefPool:
    """Collects objects and releases them all when drained or exited.

    Pools nest: entering a pool makes it the current one, and leaving an
    outer pool also drains any pools still open inside it.
    """

    def __init__(self) -> None:
        self._objects: list[Any] = []
        self._active = False

    def __enter__(self) -> "RefPool":
        if self._active:
            raise RuntimeError("release pool is already active")
        self._active = True
        _stack.pools.append(self)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pools = _stack.pools
        if self in pools:
            position = pools.index(self)
            inner = pools[position + 1:]
            del pools[position:]
            for pool in reversed(inner):
                pool._active = False
                pool.drain()
        self._active = False
        self.drain()

    def __len__(self) -> int:
        return len(self._objects)

    def add(self, obj: Any) -> Any:
        """Put ``obj`` in this pool and return it."""
        self._objects.append(obj)
        return obj

    def drain(self) -> None:
        """Release every collected object, in the order they were added."""
        objects, self._objects = self._objects, []
        for obj in objects:
            _release(obj)


def current_pool() -> RefPool:
    """Return the innermost active pool; raise RuntimeError if there is none."""
    if not _stack.pools:
        raise RuntimeError("no release pool is active")
    return _stack.pools[-1]


def autorelease(obj: Any) -> Any:
    """Add ``obj`` to the current pool and return it."""
    return current_pool().add(obj)


def class_name(obj: Any) -> Optional[str]:
    """Return the name of the object's class, or None for None."""
    if obj is None:
        return None
    return type(obj).__name__


def is_instance(obj: Any, cls: Optional[type]) -> bool:
    """True only if ``obj`` is exactly of class ``cls`` (not a subclass)."""
    if obj is None or cls is None:
        return False
    return type(obj) is cls


def objects_equal(a: Any, b: Any) -> bool:
    """Compare two objects; values of different exact classes never match."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    return bool(a == b)


def object_hash(obj: Any) -> int:
    """Return a 32-bit unsigned hash of ``obj``; None hashes to 0."""
    if obj is None:
        return 0
    if isinstance(obj, bool):
        return int(obj)
    if isinstance(obj, int):
        return obj & _UINT32_MASK
    if isinstance(obj, float):
        if not math.isfinite(obj):
            return 0
        return int(obj) & _UINT32_MASK
    return hash(obj) & _UINT32_MASK


def copy_object(obj: Any) -> Any:
    """Copy ``obj``; immutable values are returned as they are.

    Raises TypeError if the object cannot be copied.
    """
    if isinstance(obj, _IMMUTABLE_TYPES) or isinstance(obj, Range):
        return obj
    copier = getattr(obj, "copy", None)
    if callable(copier):
        return copier()
    raise TypeError(f"{type(obj).__name__} objects cannot be copied")