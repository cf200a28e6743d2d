import pytest

from quadkit.generational import GenerationalId, GenerationalStorage


def test_push_and_get():
    storage = GenerationalStorage()
    first = storage.push("a")
    second = storage.push("b")
    assert first != second
    assert storage.get(first) == "a"
    assert storage.get(second) == "b"
    assert storage.count() == 2


def test_first_id_starts_at_generation_zero():
    storage = GenerationalStorage()
    assert storage.push("a") == GenerationalId(0, 0)


def test_free_then_get_is_none():
    storage = GenerationalStorage()
    gen_id = storage.push("a")
    storage.free(gen_id)
    assert storage.get(gen_id) is None
    assert storage.count() == 0


def test_reused_slot_gets_next_generation():
    storage = GenerationalStorage()
    old = storage.push("a")
    storage.free(old)
    new = storage.push("b")
    assert new.index == old.index
    assert new.generation == old.generation + 1
    assert storage.get(old) is None
    assert storage.get(new) == "b"


def test_stale_free_keeps_new_value():
    storage = GenerationalStorage()
    old = storage.push("a")
    storage.free(old)
    new = storage.push("b")
    storage.free(old)
    assert storage.get(new) == "b"
    assert storage.count() == 1


def test_double_free_does_not_duplicate_slot():
    storage = GenerationalStorage()
    gen_id = storage.push("a")
    storage.free(gen_id)
    storage.free(gen_id)
    first = storage.push("b")
    second = storage.push("c")
    assert first.index != second.index
    assert storage.get(first) == "b"
    assert storage.get(second) == "c"


def test_get_unknown_index_is_none():
    storage = GenerationalStorage()
    storage.push("a")
    assert storage.get(GenerationalId(5, 0)) is None
    assert storage.get(GenerationalId(1, 0)) is None


def test_set_replaces_value():
    storage = GenerationalStorage()
    gen_id = storage.push("a")
    storage.set(gen_id, "z")
    assert storage.get(gen_id) == "z"


def test_set_stale_raises_key_error():
    storage = GenerationalStorage()
    gen_id = storage.push("a")
    storage.free(gen_id)
    with pytest.raises(KeyError):
        storage.set(gen_id, "z")


def test_retain_removes_rejected():
    storage = GenerationalStorage()
    ids = [storage.push(value) for value in range(6)]
    storage.retain(lambda value: value % 2 == 0)
    assert storage.count() == 3
    assert [storage.get(gen_id) for gen_id in ids] == [0, None, 2, None, 4, None]


def test_retain_visits_in_order():
    storage = GenerationalStorage()
    for value in "abc":
        storage.push(value)
    seen = []
    storage.retain(lambda value: seen.append(value) or True)
    assert seen == ["a", "b", "c"]
    assert len(storage) == 3


def test_iteration_yields_live_entries():
    storage = GenerationalStorage()
    a = storage.push("a")
    b = storage.push("b")
    storage.free(a)
    assert list(storage) == [(b, "b")]


def test_clear_empties_storage():
    storage = GenerationalStorage()
    gen_id = storage.push("a")
    storage.push("b")
    storage.clear()
    assert storage.count() == 0
    assert storage.get(gen_id) is None
    storage.free(gen_id)
    assert storage.push("c") == GenerationalId(0, 0)