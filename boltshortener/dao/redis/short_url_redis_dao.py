"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO.

Responsibilities:
    - Create, look up and list short URL mappings in Redis;
    - Increment the global counter that assigns shortcodes;
    - Keep a single mapping per original URL, even under concurrent writers;
    - Provide error handling and raise appropriate DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from boltshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="boltshortener:dev")

    >>> short_url = dao.create("https://example.com/page")
    >>> short_url.shortcode
    1

    >>> dao.get(1).target
    'https://example.com/page'

    >>> dao.find_by_target("https://example.com/page").shortcode
    1
"""

import logging
from datetime import datetime, UTC

import redis
from beartype import beartype

from boltshortener.models import ShortURLModel
from boltshortener.dao.base import ShortURLBaseDAO
from boltshortener.dao.redis.mixins import RedisClientMixin
from boltshortener.dao.redis.helpers import handle_redis_connection_error
from boltshortener.dao.exceptions import ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(shortcode: int, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        find_by_target(target: str, **kwargs) -> ShortURLModel | None:
            Retrieve a short URL mapping by original URL via the targets index.

        create(target: str, **kwargs) -> ShortURLModel:
            Allocate the next shortcode (INCR) and store the mapping in an
            optimistic (WATCH/MULTI) transaction guarded by the targets index.

        list(limit: int, **kwargs) -> list[ShortURLModel]:
            Retrieve the newest mappings via the shortcode index.

        count(increment: bool = False, **kwargs) -> int:
            Retrieve (and optionally increment) the global URL counter.

        All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: int, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (int):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get(1)
            ShortURLModel(target='https://example.com', shortcode=1, ...)
        """
        fields = self.redis.hgetall(self.keys.link_key(shortcode))
        if not fields:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return self._to_model(shortcode, fields)

    @handle_redis_connection_error
    @beartype
    def find_by_target(self, target: str, **kwargs) -> ShortURLModel | None:
        shortcode = self.redis.hget(self.keys.link_targets_key(), target)
        if shortcode is None:
            return None
        return self.get(int(shortcode))

    @handle_redis_connection_error
    @beartype
    def create(self, target: str, **kwargs) -> ShortURLModel:
        """Assign the next shortcode to `target` and store the mapping

        NOTE: The targets index acts as a uniqueness constraint on original URLs.
              It is WATCHed while the counter is incremented, so the mapping,
              the targets index entry and the shortcode index entry are only
              written if no other writer touched the targets index meanwhile:

              (lambda 1): WATCH <app>:links:targets
                          HGET  <app>:links:targets <url>        => nil
                          INCR  <app>:links:counter              => 7
                          ... interruption
              (lambda 2): stores <url> as 8 and commits
              (lambda 1): MULTI ... EXEC                         => WatchError
                          WATCH, HGET <app>:links:targets <url>  => 8
                          => returns lambda 2's mapping

              The counter value taken by the losing writer (7) is never reused,
              so concurrent creation may leave gaps in the shortcode sequence.

        Args:
            target (str):
                Validated original URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The new mapping, or the mapping stored first by a concurrent writer.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        targets_key = self.keys.link_targets_key()

        with self.redis.pipeline(transaction=True) as pipe:
            while True:
                try:
                    pipe.watch(targets_key)
                    existing = pipe.hget(targets_key, target)
                    if existing is not None:
                        pipe.unwatch()
                        return self.get(int(existing))

                    shortcode = int(pipe.incr(self.keys.counter_key()))
                    created_at = datetime.now(UTC)

                    pipe.multi()
                    pipe.hset(
                        self.keys.link_key(shortcode),
                        mapping={'target': target, 'created_at': created_at.isoformat()},
                    )
                    pipe.hset(targets_key, target, shortcode)
                    pipe.zadd(self.keys.link_index_key(), {str(shortcode): shortcode})
                    pipe.execute()
                except redis.exceptions.WatchError:
                    logger.debug('Targets index changed during short URL creation. Retrying.', extra={'target': target})
                    continue
                else:
                    return ShortURLModel(target=target, shortcode=shortcode, created_at=created_at)

    @handle_redis_connection_error
    @beartype
    def list(self, limit: int, **kwargs) -> list[ShortURLModel]:
        """Retrieve up to `limit` mappings, newest (highest shortcode) first

        Example:
            >>> [url.shortcode for url in dao.list(limit=3)]
            [42, 41, 40]
        """
        if limit <= 0:
            return []

        shortcodes = [int(code) for code in self.redis.zrevrange(self.keys.link_index_key(), 0, limit - 1)]

        with self.redis.pipeline(transaction=True) as pipe:
            for shortcode in shortcodes:
                pipe.hgetall(self.keys.link_key(shortcode))
            records = pipe.execute()

        return [self._to_model(shortcode, fields) for shortcode, fields in zip(shortcodes, records) if fields]

    @handle_redis_connection_error
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve global short URL counter

        Args:
            increment (bool):
                If True, increments the counter. Otherwise, retrieves its value.
            **kwargs:
                Optional keyword arguments.

        Returns:
            int:
                The updated or current global counter value (0 before the first mapping).

        Example:
            >>> dao.count(increment=False)
            123
            >>> dao.count(increment=True)
            124
        """
        if increment:
            return int(self.redis.incr(self.keys.counter_key()))
        else:
            return int(self.redis.get(self.keys.counter_key()) or 0)

    @staticmethod
    def _to_model(shortcode: int, fields: dict) -> ShortURLModel:
        created_at = fields.get('created_at')
        return ShortURLModel(
            target=fields['target'],
            shortcode=shortcode,
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
