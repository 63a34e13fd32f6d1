import os
from dataclasses import dataclass

from kv_consistency.keyspace import KEYSPACE, WORKING_SET

USAGE = "Usage: kv-consistency-test <hostname> <port>"


@dataclass
class Settings:
    delay: float = 0.0
    timeout: float = 0.1
    cluster: bool = True
    working_set: int = WORKING_SET
    keyspace: int = KEYSPACE
    max_connections: int = 32

    def __post_init__(self):
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")
        for name in ("working_set", "keyspace", "max_connections"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            delay=float(env.get("KV_CONSISTENCY_DELAY", cls.delay)),
            timeout=float(env.get("KV_CONSISTENCY_TIMEOUT", cls.timeout)),
            cluster=env.get("KV_CONSISTENCY_CLUSTER", "1") != "0",
            working_set=int(env.get("KV_CONSISTENCY_WORKING_SET", cls.working_set)),
            keyspace=int(env.get("KV_CONSISTENCY_KEYSPACE", cls.keyspace)),
            max_connections=int(env.get("KV_CONSISTENCY_MAX_CONNECTIONS", cls.max_connections)),
        )


def parse_endpoint(argv):
    """
        Returns (host, port) from the two positional arguments, or None when
        they are missing or the port is not a valid TCP port.
    """
    if len(argv) != 2:
        return None
    host, port = argv
    if not host:
        return None
    try:
        port = int(port)
    except ValueError:
        return None
    if not 0 < port < 65536:
        return None
    return host, port
