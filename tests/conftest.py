import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from kv_consistency.driver import ConsistencyDriver
from kv_consistency.keyspace import KeySpace


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedStore:
    """
        Stands in for the redis client. Reads and INCRs are answered from
        per-operation scripts when given, otherwise from an in-memory dict.
        A scripted Exception instance is raised instead of returned.
    """

    def __init__(self):
        self.data = {}
        self.gets = []
        self.incrs = []
        self.get_calls = 0
        self.incr_calls = 0

    def _answer(self, script, fallback):
        if script:
            answer = script.pop(0)
            if isinstance(answer, Exception):
                raise answer
            return answer
        return fallback()

    def get(self, key):
        self.get_calls += 1
        return self._answer(self.gets, lambda: self.data.get(key))

    def incr(self, key):
        self.incr_calls += 1

        def apply():
            self.data[key] = int(self.data.get(key, 0)) + 1
            return self.data[key]

        return self._answer(self.incrs, apply)


def down(msg="Connection refused"):
    return RedisConnectionError(msg)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return ScriptedStore()


@pytest.fixture
def lines():
    return []


@pytest.fixture
def driver(store, clock, lines):
    return ConsistencyDriver(
        store,
        keyspace=KeySpace(prefix="test|", working_set=4, keyspace=16),
        clock=clock,
        sleep=lambda seconds: None,
        out=lines.append,
    )
