"""Redis connectivity error handling for the short URL DAOs

Every Redis failure that means "the store is unreachable" is reported as a
single DataStoreError naming the Redis endpoint, both when a DAO is built
(RedisClientMixin PINGs Redis) and on each DAO call. The Lambda layer turns
DataStoreError into a 500 response, and the DAO factory uses it at start-up
to fall back to in-memory storage.
"""

import logging
import functools
from typing import Any
from collections.abc import Callable

import redis

from boltshortener.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)

CONNECTIVITY_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)

DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'


def redis_endpoint(client: redis.Redis) -> str:
    """Return `host:port/db` of the server `client` talks to"""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def data_store_error(client: redis.Redis, hint: str = '') -> DataStoreError:
    message = f"Can't connect to Redis at {redis_endpoint(client)}."
    return DataStoreError(f'{message} {hint}' if hint else message)


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Decorator: raise DataStoreError when a DAO method can't reach Redis

    The failing operation is logged with the DAO method name. Other Redis
    errors (e.g. WRONGTYPE replies) propagate unchanged.

    Example:
        >>> @handle_redis_connection_error
        ... def count(self, increment=False):
        ...     return int(self.redis.get(self.keys.counter_key()) or 0)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except CONNECTIVITY_ERRORS as e:
            error = data_store_error(self.redis)
            logger.warning(
                'Redis unreachable during short URL operation.',
                extra={'operation': method.__name__, 'reason': str(e), 'event': DATA_STORE_UNAVAILABLE},
            )
            raise error from e

    return wrapper
