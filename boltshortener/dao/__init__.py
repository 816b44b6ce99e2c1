from boltshortener.dao.base import ShortURLBaseDAO
from boltshortener.dao.memory import ShortURLMemoryDAO
from boltshortener.dao.redis import ShortURLRedisDAO
from boltshortener.dao.factory import build_short_url_dao


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
    'ShortURLRedisDAO',
    'build_short_url_dao',
]
