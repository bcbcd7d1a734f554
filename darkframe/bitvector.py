"""A growable vector of bits packed into 32-bit words."""

from __future__ import annotations

from typing import Optional

_ADDRESS_BITS_PER_WORD = 5
_BITS_PER_WORD = 1 << _ADDRESS_BITS_PER_WORD
_WORD_MASK = 0xFFFFFFFF


def number_of_trailing_zeros(value: int) -> int:
    """Count of zero bits below the lowest set bit of a 32-bit value; 32 for 0."""
    value &= _WORD_MASK
    if value == 0:
        return 32
    return (value & -value).bit_length() - 1


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"bit index must not be negative: {index}")


def _bit(index: int) -> int:
    return 1 << (index & (_BITS_PER_WORD - 1))


class BitVector:
    """Bits addressed by index, stored in 32-bit words that grow on demand."""

    __slots__ = ("_words",)

    def __init__(self, nbits: int = 16) -> None:
        if nbits < 0:
            raise ValueError(f"bit count must not be negative: {nbits}")
        size = ((nbits - 1) >> _ADDRESS_BITS_PER_WORD) + 1 if nbits > 0 else 0
        self._words = [0] * size

    @property
    def words(self) -> tuple:
        """The storage words, lowest bits first."""
        return tuple(self._words)

    def _ensure(self, word_index: int) -> None:
        required = word_index + 1
        if len(self._words) < required:
            grown = max(2 * len(self._words), required)
            self._words.extend([0] * (grown - len(self._words)))

    def set(self, index: int, value: bool = True) -> None:
        """Set or clear the bit at ``index``, growing storage as needed."""
        _check_index(index)
        word_index = index >> _ADDRESS_BITS_PER_WORD
        self._ensure(word_index)
        if value:
            self._words[word_index] |= _bit(index)
        else:
            self._words[word_index] &= ~_bit(index) & _WORD_MASK

    def get(self, index: int) -> bool:
        """The bit at ``index``; bits beyond storage are false."""
        _check_index(index)
        word_index = index >> _ADDRESS_BITS_PER_WORD
        return word_index < len(self._words) and bool(self._words[word_index] & _bit(index))

    def clear(self, index: Optional[int] = None) -> None:
        """Clear the bit at ``index``, or every bit when ``index`` is None or -1."""
        if index is None or index == -1:
            self._words = [0] * len(self._words)
            return
        _check_index(index)
        word_index = index >> _ADDRESS_BITS_PER_WORD
        if word_index < len(self._words):
            self._words[word_index] &= ~_bit(index) & _WORD_MASK

    def next_set_bit(self, from_index: int) -> int:
        """Index of the first set bit at or after ``from_index``, or -1."""
        _check_index(from_index)
        u = from_index >> _ADDRESS_BITS_PER_WORD
        if u >= len(self._words):
            return -1
        word = self._words[u] & ((_WORD_MASK << (from_index & (_BITS_PER_WORD - 1))) & _WORD_MASK)
        while True:
            if word:
                return u * _BITS_PER_WORD + number_of_trailing_zeros(word)
            u += 1
            if u == len(self._words):
                return -1
            word = self._words[u]

    def intersects(self, other: "BitVector") -> bool:
        """True if some bit is set in both vectors."""
        return any(a & b for a, b in zip(self._words, other._words))

    def is_empty(self) -> bool:
        """True if the vector holds no words of storage."""
        return not self._words

    def __str__(self) -> str:
        return "|".join(f"0x{word:08x}" for word in self._words)

    def __repr__(self) -> str:
        return f"BitVector({self})"