import pytest

from boltshortener.dao import factory
from boltshortener import registry


@pytest.fixture(autouse=True)
def _clear_process_caches():
    """Reset per-process DAO and resolver caches between tests."""
    factory.build_short_url_dao.cache_clear()
    factory.memory_dao.cache_clear()
    registry.default_resolver.cache_clear()
    yield
    factory.build_short_url_dao.cache_clear()
    factory.memory_dao.cache_clear()
    registry.default_resolver.cache_clear()


@pytest.fixture
def resolvable():
    """Hostname resolver stub: every hostname except *.invalid resolves."""
    return lambda hostname: not hostname.endswith('.invalid')
