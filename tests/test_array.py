import pytest

from darkframe.array import Array
from darkframe.strings import String


def test_push_and_get():
    arr = Array()
    arr.push("a")
    arr.push("b")
    assert len(arr) == 2
    assert arr.get(0) == "a"
    assert arr.get(1) == "b"


def test_get_out_of_range_is_none():
    arr = Array(["x"])
    assert arr.get(1) is None
    assert arr.get(-1) is None


def test_set_replaces_item():
    arr = Array(["a", "b"])
    arr.set(1, "z")
    assert list(arr) == ["a", "z"]


def test_set_out_of_range_raises():
    with pytest.raises(IndexError):
        Array(["a"]).set(1, "b")


def test_pop_returns_last_item():
    arr = Array(["a", "b"])
    assert arr.pop() == "b"
    assert list(arr) == ["a"]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Array().pop()


def test_last():
    assert Array().last() is None
    assert Array(["a", "b"]).last() == "b"


def test_contains_uses_strict_equality():
    arr = Array([True])
    assert arr.contains(True)
    assert not arr.contains(1)


def test_contains_versus_identity():
    a = String("x")
    b = String("x")
    arr = Array([a])
    assert arr.contains(b)
    assert not arr.contains_identity(b)
    assert arr.contains_identity(a)


def test_find_and_find_identity():
    a = String("x")
    b = String("x")
    arr = Array(["first", a])
    assert arr.find(b) == 1
    assert arr.find_identity(b) == -1
    assert arr.find_identity(a) == 1
    assert arr.find("missing") == -1


def test_clear_empties():
    arr = Array([1, 2, 3])
    arr.clear()
    assert len(arr) == 0
    assert arr.last() is None


def test_copy_is_equal_and_independent():
    arr = Array([1, "two"])
    duplicate = arr.copy()
    assert duplicate == arr
    duplicate.push(3)
    assert len(arr) == 2
    assert not (duplicate == arr)


def test_equality_rules():
    assert Array([1, 2]) == Array([1, 2])
    assert not (Array([1, 2]) == Array([1]))
    assert not (Array([1]) == Array([1.0]))
    assert not (Array([1]) == [1])


def test_equal_arrays_hash_alike():
    built_at_once = Array(["a", 1])
    built_by_push = Array()
    built_by_push.push("a")
    built_by_push.push(1)
    assert built_at_once == built_by_push
    assert hash(built_at_once) == hash(built_by_push)
    assert hash(built_at_once.copy()) == hash(built_at_once)


def test_iteration_order():
    items = ["a", "b", "c"]
    assert list(Array(items)) == items