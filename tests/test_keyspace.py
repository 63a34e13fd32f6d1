import os

from kv_consistency import keyspace
from kv_consistency.keyspace import KeySpace, make_prefix


def feed(monkeypatch, values):
    values = iter(values)
    monkeypatch.setattr(keyspace, "get_random", lambda: next(values))


def test_even_draw_picks_working_set(monkeypatch):
    feed(monkeypatch, [2, 1003])
    ks = KeySpace(prefix="p|", working_set=10, keyspace=100)

    assert ks.next_key() == "p|key_3"


def test_odd_draw_picks_keyspace(monkeypatch):
    feed(monkeypatch, [1, 1003])
    ks = KeySpace(prefix="p|", working_set=10, keyspace=100)

    assert ks.next_key() == "p|key_3"


def test_keys_stay_in_range():
    ks = KeySpace(prefix="p|", working_set=3, keyspace=7)

    for _ in range(200):
        key = ks.next_key()
        assert key.startswith("p|key_")
        assert 0 <= int(key[len("p|key_"):]) < 7


def test_prefix_carries_pid_and_differs_per_instance():
    first, second = KeySpace(), KeySpace()

    assert first.prefix.startswith(f"{os.getpid()}|")
    assert first.prefix.endswith("|")
    assert first.prefix != second.prefix


def test_make_prefix_shape():
    parts = make_prefix(object()).split("|")

    assert len(parts) == 4
    assert parts[-1] == ""
    assert 0 <= int(parts[1]) < 1_000_000
