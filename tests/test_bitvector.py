import pytest

from darkframe.bitvector import BitVector, number_of_trailing_zeros


def test_trailing_zeros_of_zero_is_32():
    assert number_of_trailing_zeros(0) == 32


@pytest.mark.parametrize("shift", range(32))
def test_trailing_zeros_of_powers_of_two(shift):
    assert number_of_trailing_zeros(1 << shift) == shift
    assert number_of_trailing_zeros((1 << shift) | (1 << 31)) == shift


def test_default_vector_is_not_empty_and_unset():
    vector = BitVector()
    assert vector.is_empty() is False
    assert not any(vector.get(i) for i in range(64))


def test_zero_bit_vector_is_empty():
    assert BitVector(0).is_empty() is True


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BitVector(-1)


def test_set_get_round_trip():
    vector = BitVector(64)
    indices = {0, 3, 31, 32, 45, 63}
    for index in indices:
        vector.set(index, True)
    assert {i for i in range(64) if vector.get(i)} == indices


def test_set_false_clears():
    vector = BitVector()
    vector.set(5, True)
    vector.set(5, False)
    assert vector.get(5) is False


def test_set_grows_storage():
    vector = BitVector(16)
    vector.set(200, True)
    assert vector.get(200) is True
    assert vector.get(199) is False
    assert len(vector.words) >= 7


def test_clear_single_bit():
    vector = BitVector()
    vector.set(1)
    vector.set(2)
    vector.clear(1)
    assert vector.get(1) is False
    assert vector.get(2) is True


def test_clear_beyond_storage_is_harmless():
    vector = BitVector(8)
    vector.clear(500)
    assert vector.get(500) is False


@pytest.mark.parametrize("everything", [None, -1])
def test_clear_all(everything):
    vector = BitVector(100)
    for index in (0, 40, 99):
        vector.set(index)
    vector.clear(everything)
    assert vector.next_set_bit(0) == -1
    assert len(vector.words) == 4


def test_next_set_bit_walks_all_bits():
    vector = BitVector(128)
    indices = [2, 31, 32, 77, 127]
    for index in indices:
        vector.set(index)
    found = []
    position = vector.next_set_bit(0)
    while position != -1:
        found.append(position)
        if position + 1 >= 128:
            break
        position = vector.next_set_bit(position + 1)
    assert found == indices


def test_next_set_bit_none_found():
    vector = BitVector(64)
    vector.set(10)
    assert vector.next_set_bit(11) == -1
    assert vector.next_set_bit(1000) == -1


def test_intersects():
    a = BitVector(64)
    b = BitVector(64)
    a.set(40)
    b.set(41)
    assert a.intersects(b) is False
    b.set(40)
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_intersects_different_sizes():
    a = BitVector(16)
    b = BitVector(256)
    b.set(200)
    a.set(3)
    assert a.intersects(b) is False
    b.set(3)
    assert a.intersects(b) is True


def test_str_shows_words():
    vector = BitVector(64)
    vector.set(0)
    vector.set(32)
    assert str(vector) == "0x00000001|0x00000001"


def test_negative_index_rejected():
    vector = BitVector()
    with pytest.raises(ValueError):
        vector.get(-5)
    with pytest.raises(ValueError):
        vector.set(-5)
    with pytest.raises(ValueError):
        vector.clear(-5)
    with pytest.raises(ValueError):
        vector.next_set_bit(-5)
    assert vector.next_set_bit(0) == -1