# Store plumbing. Every request returns a (success, error, value) tuple so the
# tester can treat failures as data points instead of exceptions.

import redis
from redis.cluster import RedisCluster
from redis.exceptions import RedisClusterException, RedisError

STORE_ERRORS = (RedisError, RedisClusterException)


def connect_to_host(host, port, settings):
    """
        Build a client for the store. In cluster mode the host/port pair is
        only a seed; the client discovers the rest of the topology itself.
    """
    options = dict(
        socket_timeout=settings.timeout,
        decode_responses=True,
        max_connections=settings.max_connections,
    )
    if settings.cluster:
        return RedisCluster(host=host, port=port, **options)
    return redis.Redis(host=host, port=port, **options)


def get_request(client, key):
    try:
        value = client.get(key)
    except STORE_ERRORS as e:
        return False, e, None
    # A key we never incremented does not exist yet: it reads as 0.
    if value is None:
        return True, None, 0
    try:
        return True, None, int(value)
    except ValueError as e:
        return False, e, None


def incr_request(client, key):
    try:
        return True, None, int(client.incr(key))
    except STORE_ERRORS as e:
        return False, e, None
