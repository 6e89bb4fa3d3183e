import pytest

from blaze.hashmap import INITIAL_CAPACITY, BlazeHashMap, default_hash


def test_default_hash_of_empty_input_is_zero():
    assert default_hash(b"") == 0
    assert default_hash("") == 0


def test_default_hash_single_byte_is_byte_value():
    assert default_hash("a") == ord("a")


def test_default_hash_str_matches_utf8_bytes():
    assert default_hash("héllo") == default_hash("héllo".encode("utf-8"))


def test_default_hash_fits_in_64_bits():
    value = default_hash("x" * 1000)
    assert 0 <= value < 2**64


def test_default_hash_rejects_unsupported_type():
    with pytest.raises(TypeError):
        default_hash(3.5)


def test_default_hash_rejects_too_large_int():
    with pytest.raises(OverflowError):
        default_hash(2**64)


def test_insert_and_get():
    m = BlazeHashMap()
    assert m.insert("one", 1) is None
    assert m.get("one") == 1
    assert m.get("two") is None
    assert len(m) == 1


def test_insert_replaces_and_returns_old_value():
    m = BlazeHashMap()
    m.insert("k", "first")
    assert m.insert("k", "second") == "first"
    assert m.get("k") == "second"
    assert len(m) == 1


def test_remove():
    m = BlazeHashMap()
    m.insert(5, "five")
    assert m.remove(5) == "five"
    assert m.remove(5) is None
    assert len(m) == 0
    assert not m.contains_key(5)


def test_initial_bucket_count():
    assert BlazeHashMap().bucket_count() == INITIAL_CAPACITY


def test_resize_doubles_buckets_and_keeps_entries():
    m = BlazeHashMap()
    for i in range(100):
        m.insert(i, i * 10)
    assert len(m) == 100
    assert m.bucket_count() > INITIAL_CAPACITY
    assert m.bucket_count() % INITIAL_CAPACITY == 0
    for i in range(100):
        assert m.get(i) == i * 10


def test_load_factor_invariant():
    m = BlazeHashMap()
    for i in range(50):
        m.insert(f"key{i}", i)
        assert len(m) <= m.bucket_count()


def test_small_capacity_collisions():
    m = BlazeHashMap(capacity=1)
    for word in ["alpha", "beta", "gamma", "delta"]:
        m.insert(word, len(word))
    assert m.remove("beta") == 4
    assert sorted(m.keys()) == ["alpha", "delta", "gamma"]
    assert m.get("gamma") == 5


def test_iteration_views_agree():
    m = BlazeHashMap()
    data = {f"k{i}": i for i in range(20)}
    for key, value in data.items():
        m.insert(key, value)
    assert dict(m.items()) == data
    assert set(m) == set(data)
    assert sorted(m.values()) == sorted(data.values())


def test_clear_keeps_buckets():
    m = BlazeHashMap()
    for i in range(30):
        m.insert(i, i)
    buckets = m.bucket_count()
    m.clear()
    assert len(m) == 0
    assert list(m.items()) == []
    assert m.bucket_count() == buckets


def test_mapping_dunders():
    m = BlazeHashMap()
    m["a"] = 1
    assert "a" in m
    assert m["a"] == 1
    del m["a"]
    assert "a" not in m
    with pytest.raises(KeyError):
        m["a"]
    with pytest.raises(KeyError):
        del m["a"]


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        BlazeHashMap(capacity=0)


def test_negative_int_keys():
    m = BlazeHashMap()
    m.insert(-1, "minus one")
    m.insert(2**63, "big")
    assert m.get(-1) == "minus one"
    assert m.get(2**63) == "big"