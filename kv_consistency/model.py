# Our view of the data stored in the database, plus the tallies it feeds.

from dataclasses import dataclass, field


@dataclass
class Counters:
    """
        Process-wide statistics. `lost_writes` and `not_ack_writes` hold the
        summed magnitude of every discrepancy, not the number of events.
    """
    reads: int = 0
    writes: int = 0
    failed_reads: int = 0
    failed_writes: int = 0
    lost_writes: int = 0
    not_ack_writes: int = 0


@dataclass
class ExpectedStateModel:
    counters: Counters
    cache: dict = field(default_factory=dict)

    def expected(self, key):
        return self.cache.get(key)

    def check(self, key, value):
        """
            Compare a freshly read value against the one left by our previous
            INCR on this key. Returns the signed difference (observed minus
            expected), or None when we have no opinion about the key yet.
        """
        expected = self.cache.get(key)
        if expected is None:
            return None
        if expected > value:
            self.counters.lost_writes += expected - value
        elif expected < value:
            self.counters.not_ack_writes += value - expected
        return value - expected

    def update(self, key, value):
        # Always the value the store returned, never the one we assumed.
        self.cache[key] = value
