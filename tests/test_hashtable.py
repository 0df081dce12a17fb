import pytest

from dsworkbench.hashtable import HashTable


def test_bucket_index_of_single_letter():
    table = HashTable()
    assert table.bucket_index("a") == 1


def test_bucket_index_of_two_letters():
    table = HashTable()
    assert table.bucket_index("ab") == 63


def test_bucket_index_of_empty_key_is_zero():
    assert HashTable().bucket_index("") == 0


@pytest.mark.parametrize("key", ["0", "Hello", "über", "x" * 50, "A1_b2"])
def test_bucket_index_in_range(key):
    table = HashTable(7)
    index = table.bucket_index(key)
    assert 0 <= index < 7


def test_insert_and_get():
    table = HashTable()
    assert table.insert("apple", 3) is True
    assert table.get("apple") == 3
    assert "apple" in table
    assert len(table) == 1


def test_duplicate_insert_keeps_first_value():
    table = HashTable()
    table.insert("word", 1)
    assert table.insert("word", 2) is False
    assert table.get("word") == 1
    assert len(table) == 1


def test_get_missing_returns_default():
    table = HashTable()
    assert table.get("missing") is None
    assert table.get("missing", -1) == -1
    assert "missing" not in table


def test_collisions_keep_insertion_order():
    table = HashTable(1)
    for index, key in enumerate(["c", "a", "b"]):
        table.insert(key, index)
    assert list(table) == [("c", 0), ("a", 1), ("b", 2)]
    assert table.get("b") == 2


def test_iteration_follows_bucket_order():
    table = HashTable()
    for index, key in enumerate(["zeta", "b", "a", "mid"]):
        table.insert(key, index)
    keys = [key for key, _ in table]
    assert sorted(keys) == ["a", "b", "mid", "zeta"]
    indexes = [table.bucket_index(key) for key in keys]
    assert indexes == sorted(indexes)


def test_non_string_not_contained():
    table = HashTable()
    table.insert("1", 1)
    assert 1 not in table


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(size)