# Key generation. Keys are drawn with Antithesis randomness so the fuzzer can
# steer which keys get hammered; outside Antithesis the SDK falls back to a
# local PRNG.

import os
import time

from antithesis.random import get_random

WORKING_SET = 1000
KEYSPACE = 10000


def make_prefix(owner=None):
    """
        Build a key prefix unique to this tester instance: process id, the
        microseconds of the start time and an object discriminator. Testers
        sharing a store must never touch each other's keys.
    """
    usec = int(time.time() * 1_000_000) % 1_000_000
    return "|".join([str(os.getpid()), str(usec), str(id(owner)), ""])


class KeySpace:
    def __init__(self, prefix=None, working_set=WORKING_SET, keyspace=KEYSPACE):
        self.prefix = make_prefix(self) if prefix is None else prefix
        self.working_set = working_set
        self.keyspace = keyspace

    def next_key(self):
        # Half the time write to the small hot subset
        pool = self.keyspace if get_random() % 2 else self.working_set
        return f"{self.prefix}key_{get_random() % pool}"
