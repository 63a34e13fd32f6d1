from dataclasses import dataclass, field
from typing import Optional


@dataclass
class OutageTracker:
    """
        Measures contiguous spans of failing operations. An outage opens on
        the first failure and closes on the first reporting tick that sees no
        new failures since the previous tick, so a single transient error
        inside a busy second does not turn into a micro-outage.
    """
    started_at: Optional[int] = None
    history: list = field(default_factory=list)
    last_failed_reads: int = 0
    last_failed_writes: int = 0

    @property
    def in_outage(self):
        return self.started_at is not None

    def failure(self, now):
        if self.started_at is None:
            self.started_at = int(now)

    def tick(self, now, failed_reads, failed_writes):
        """
            Returns the duration of the outage closed by this tick, if any.
        """
        closed = None
        if (
            self.started_at is not None
            and failed_reads == self.last_failed_reads
            and failed_writes == self.last_failed_writes
        ):
            closed = int(now) - self.started_at
            self.history.append(closed)
            self.started_at = None
        self.last_failed_reads = failed_reads
        self.last_failed_writes = failed_writes
        return closed

    @property
    def last(self):
        return self.history[-1] if self.history else None

    @property
    def longest(self):
        return max(self.history) if self.history else None
