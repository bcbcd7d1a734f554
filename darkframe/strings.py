"""A mutable text object with prefix, suffix and ranged search helpers."""

from __future__ import annotations

from typing import Optional, Union

from .objects import RANGE_ALL, Range

NOT_FOUND = -1


def _text(value: Union[str, "String"]) -> str:
    if isinstance(value, String):
        return value._data
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or String, not {type(value).__name__}")


def strnlen(text: str, limit: int) -> int:
    """Length of ``text`` up to the first NUL character, at most ``limit``."""
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    head = text[:limit]
    end = head.find("\0")
    return len(head) if end < 0 else end


def join(*args: Union[str, "String"]) -> str:
    """Concatenate all arguments into one str."""
    return "".join(_text(arg) for arg in args)


class String:
    """A mutable piece of text.

    Two Strings are equal when their text is equal; a String never equals
    a plain str.
    """

    __slots__ = ("_data",)

    def __init__(self, value: Optional[Union[str, "String"]] = None) -> None:
        self._data = "" if value is None else _text(value)

    def set(self, value: Optional[Union[str, "String"]]) -> None:
        """Replace the text; None empties it."""
        self._data = "" if value is None else _text(value)

    def append(self, other: Optional[Union[str, "String"]]) -> None:
        """Append text to the end; None is ignored."""
        if other is None:
            return
        self._data += _text(other)

    def has_prefix(self, prefix: Union[str, "String"]) -> bool:
        """True if the text starts with ``prefix``."""
        return self._data.startswith(_text(prefix))

    def has_suffix(self, suffix: Union[str, "String"]) -> bool:
        """True if the text ends with ``suffix``."""
        return self._data.endswith(_text(suffix))

    def find(self, substr: Union[str, "String"], search_range: Range = RANGE_ALL) -> int:
        """Position of the first ``substr`` inside ``search_range``, or -1.

        A range that does not fit inside the text finds nothing.
        """
        needle = _text(substr)
        try:
            span = search_range.resolve(len(self._data))
        except ValueError:
            return NOT_FOUND
        return self._data.find(needle, span.start, span.start + span.length)

    def copy(self) -> "String":
        """Return an independent String with the same text."""
        return String(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"String({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not String:
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)