"""Consistency tester for distributed key-value stores.

Interleaves reads and INCRs on a rotating set of keys, remembers the value
each key should hold, and counts lost and unacknowledged writes along with
the duration of every outage it observes.
"""

from kv_consistency.driver import ConsistencyDriver
from kv_consistency.keyspace import KeySpace
from kv_consistency.model import Counters, ExpectedStateModel
from kv_consistency.outage import OutageTracker
from kv_consistency.throttle import ErrorThrottle

__all__ = [
    "ConsistencyDriver",
    "Counters",
    "ErrorThrottle",
    "ExpectedStateModel",
    "KeySpace",
    "OutageTracker",
]
