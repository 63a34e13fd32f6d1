# The tester loop. Before every INCR a GET is performed on the same key and
# checked against the value our previous INCR returned, so the store is caught
# both losing acknowledged writes and applying writes it never acknowledged.

import sys
import time

# Antithesis SDK
from antithesis.assertions import (
    always,
    reachable,
    sometimes,
)

from kv_consistency import helper
from kv_consistency.config import USAGE, Settings, parse_endpoint
from kv_consistency.keyspace import KeySpace
from kv_consistency.model import Counters, ExpectedStateModel
from kv_consistency.outage import OutageTracker
from kv_consistency.report import format_report
from kv_consistency.throttle import ErrorThrottle


def emit(line):
    print(line, flush=True)


def _details(key, error):
    return {"key": key, "error": None if error is None else str(error)}


class ConsistencyDriver:
    def __init__(self, client, keyspace=None, delay=0, clock=time.time, sleep=time.sleep, out=emit):
        self.client = client
        self.keyspace = keyspace or KeySpace()
        self.delay = delay
        self.clock = clock
        self.sleep = sleep
        self.out = out

        self.counters = Counters()
        self.model = ExpectedStateModel(self.counters)
        self.outages = OutageTracker()
        self.throttle = ErrorThrottle()
        self.last_report = int(clock())

    def puterr(self, msg):
        if self.throttle.should_print(msg, self.clock()):
            self.out(msg)

    def probe(self, key):
        """
            Read the key and judge it against our cached view, then INCR it
            and remember what the store says the new value is. A failure on
            either side is counted and the other side is still attempted.
        """
        # Read
        success, error, value = helper.get_request(self.client, key)

        # Antithesis Assertion: sometimes get requests are successful. A failed request is OK since we expect them to happen.
        sometimes(success, "Client can make successful get requests", _details(key, error))

        if success:
            diff = self.model.check(key, value)
            self.counters.reads += 1
            if diff is not None:
                always(
                    diff == 0,
                    "Read-your-write consistency: successful GET must match last INCR",
                    {"key": key, "expected": value - diff, "actual": value},
                )
        else:
            self.puterr(f"Reading: {error}")
            self.counters.failed_reads += 1
            self.outages.failure(self.clock())

        # Write
        success, error, value = helper.incr_request(self.client, key)

        sometimes(success, "Client can make successful incr requests", _details(key, error))

        if success:
            self.model.update(key, value)
            self.counters.writes += 1
        else:
            self.puterr(f"Writing: {error}")
            self.counters.failed_writes += 1
            self.outages.failure(self.clock())

    def tick(self, now):
        """
            Once per wall-clock second: close the pending outage if no new
            failures were seen since the previous tick, then print a summary.
            Returns the summary line, or None if the second did not change.
        """
        second = int(now)
        if second == self.last_report:
            return None
        closed = self.outages.tick(second, self.counters.failed_reads, self.counters.failed_writes)
        if closed is not None:
            reachable("Outage recovered", {"duration": closed})
        report = format_report(self.counters, self.outages)
        self.last_report = second
        self.out(report)
        return report

    def step(self):
        self.probe(self.keyspace.next_key())
        if self.delay:
            self.sleep(self.delay)
        self.tick(self.clock())

    def run(self, iterations=None):
        count = 0
        while iterations is None or count < iterations:
            self.step()
            count += 1


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    endpoint = parse_endpoint(argv)
    if endpoint is None:
        emit(USAGE)
        return 1
    host, port = endpoint

    try:
        settings = Settings.from_env()
    except ValueError as e:
        emit(f"Client: bad configuration: {e}")
        emit(USAGE)
        return 1

    try:
        client = helper.connect_to_host(host, port, settings)
    except helper.STORE_ERRORS as e:
        emit(f"Client: cannot connect to {host}:{port}: {e}")
        return 1

    keyspace = KeySpace(working_set=settings.working_set, keyspace=settings.keyspace)
    tester = ConsistencyDriver(client, keyspace=keyspace, delay=settings.delay)
    emit(f"Client: testing {host}:{port} with key prefix '{keyspace.prefix}'")
    try:
        tester.run()
    except KeyboardInterrupt:
        emit(format_report(tester.counters, tester.outages))
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
