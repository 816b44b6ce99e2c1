from unittest.mock import MagicMock

import pytest
import redis

from boltshortener.dao.redis import ShortURLRedisDAO


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis pipeline-compatible client."""
    client = MagicMock(spec=redis.client.Pipeline)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.pipeline.return_value = client
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    return client


@pytest.fixture
def dao(redis_client, app_prefix) -> ShortURLRedisDAO:
    return ShortURLRedisDAO(redis_client=redis_client, prefix=app_prefix)
