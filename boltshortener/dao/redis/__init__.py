from boltshortener.dao.redis.redis_key_schema import RedisKeySchema
from boltshortener.dao.redis.mixins import RedisClientMixin
from boltshortener.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisDAO',
]
