"""Redis client setup shared by the Redis-backed DAOs

RedisClientMixin gives a DAO two attributes:
    redis (redis.Redis): client with `decode_responses=True`, so hash fields
        and counter values come back as str.
    keys (RedisKeySchema): key names under the app prefix (`<APP_NAME>:<APP_ENV>`).

Redis is PINGed once on construction. A DAO that was built has reached Redis
at least once; one that can't reach it raises DataStoreError, which is what
the DAO factory catches to fall back to in-memory storage.

Example:
    >>> dao = ShortURLRedisDAO(redis_host='redis.internal', redis_socket_timeout=2.0, prefix='boltshortener:dev')
    >>> dao.keys.counter_key()
    'boltshortener:dev:links:counter'
"""

import redis

from boltshortener.dao.redis.redis_key_schema import RedisKeySchema
from boltshortener.dao.redis.helpers import CONNECTIVITY_ERRORS, data_store_error


class RedisClientMixin:
    """Connect to Redis (or adopt `redis_client`) and bind the key schema

    The `redis_*` keyword arguments mirror the `redis` section of a lambda's
    AppConfig document (`{"host": ..., "port": ..., "db": ...}`), prefixed by
    the DAO factory. `redis_socket_timeout` bounds every command, so a stalled
    Redis fails the request instead of the Lambda timing out.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_socket_timeout: float | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
                decode_responses=True,
            )
        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)
        self._healthcheck()

    def _healthcheck(self) -> None:
        """PING Redis, raising DataStoreError if it can't be reached"""
        try:
            self.redis.ping()
        except CONNECTIVITY_ERRORS as e:
            raise data_store_error(self.redis, hint='Check the redis section of the lambda configuration.') from e
