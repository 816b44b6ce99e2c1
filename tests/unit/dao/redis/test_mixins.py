"""Unit tests for RedisClientMixin.

Test coverage includes:
    1. Client construction from lambda configuration
    2. Adopting an existing client
    3. Start-up PING and the DataStoreError used for in-memory fallback
"""

from unittest.mock import MagicMock, patch

import pytest
import redis

from boltshortener.dao.exceptions import DataStoreError
from boltshortener.dao.redis.mixins import RedisClientMixin


@pytest.fixture
def redis_client():
    _redis_client = MagicMock(
        spec=redis.Redis, connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis', 'port': 6379, 'db': 0})
    )
    _redis_client.ping.return_value = True
    return _redis_client


def test_client_built_from_lambda_configuration():
    """Ensure string ports/dbs from AppConfig are converted and responses are decoded."""
    redis_config = {
        'redis_host': 'redis',
        'redis_port': '6379',
        'redis_db': '2',
        'redis_username': 'default',
        'redis_password': 'password',
        'redis_socket_timeout': 2.5,
    }

    with patch('boltshortener.dao.redis.mixins.redis.Redis', autospec=True) as redis_mock:
        mixin = RedisClientMixin(**redis_config, prefix='testapp:test')

    redis_mock.assert_called_once_with(
        host='redis',
        port=6379,
        db=2,
        username='default',
        password='password',
        socket_timeout=2.5,
        decode_responses=True,
    )
    assert mixin.redis is redis_mock.return_value
    assert mixin.keys.counter_key() == 'testapp:test:links:counter'
    redis_mock.return_value.ping.assert_called_once()


def test_adopts_existing_client(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')

    assert mixin.redis is redis_client
    redis_client.ping.assert_called_once()


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ConnectionError('Connection refused'),
        redis.exceptions.TimeoutError('Timeout connecting to server'),
    ],
)
def test_unreachable_redis_raises_data_store_error(redis_client, error):
    redis_client.ping.side_effect = error
    redis_client.connection_pool.connection_kwargs = {'host': '203.0.113.1', 'port': 18000, 'db': 5}

    with pytest.raises(DataStoreError) as excinfo:
        RedisClientMixin(redis_client=redis_client, prefix='testapp:test')

    assert str(excinfo.value) == (
        "Can't connect to Redis at 203.0.113.1:18000/5. Check the redis section of the lambda configuration."
    )
    assert excinfo.value.__cause__ is error


def test_healthcheck_after_construction(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
    redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection reset by peer')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis:6379/0."):
        mixin._healthcheck()
