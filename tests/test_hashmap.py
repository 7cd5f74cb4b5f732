import pytest

from algobox.hashmap import DEFAULT_CAPACITY, HashMap


@pytest.fixture
def filled():
    mp = HashMap()
    mp.put("test", 10)
    mp.put("test", 20)
    mp.put("test2", 30)
    mp.put(1, 40)
    return mp


def test_put_and_get():
    mp = HashMap()
    assert mp.put("test", 10) == 10
    assert mp.get("test") == 10


def test_reassigning_value():
    mp = HashMap()
    mp.put("test", 10)
    mp.put("test", 20)
    assert mp.get("test") == 20
    assert len(mp) == 1


def test_adding_new_key(filled):
    assert filled.get("test2") == 30
    assert filled.get("test") == 20


def test_numeric_key(filled):
    assert filled.get(1) == 40


def test_contains(filled):
    assert filled.contains(1) is True
    assert filled.contains(2) is False
    assert "test2" in filled
    assert "missing" not in filled


def test_missing_key_gives_none(filled):
    assert filled.get("absent") is None


def test_len_counts_distinct_keys(filled):
    assert len(filled) == 3


def test_starts_with_default_capacity():
    assert HashMap().capacity == DEFAULT_CAPACITY


def test_many_keys_survive_resizes():
    mp = HashMap()
    keys = [f"key-{number}" for number in range(100)]
    for number, key in enumerate(keys):
        mp.put(key, number)
    assert len(mp) == len(keys)
    assert all(mp.get(key) == number for number, key in enumerate(keys))
    assert mp.capacity >= DEFAULT_CAPACITY


def test_keys_with_same_text_cannot_coexist():
    mp = HashMap()
    mp.put(1, "number")
    with pytest.raises(ValueError):
        mp.put("1", "text")
    assert mp.get(1) == "number"