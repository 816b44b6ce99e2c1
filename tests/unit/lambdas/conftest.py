import pytest

from boltshortener.dao import ShortURLMemoryDAO
from boltshortener.registry import URLRegistry


@pytest.fixture
def context():
    return object()


@pytest.fixture
def registry(resolvable):
    """Registry over a fresh in-memory store with a stubbed hostname resolver."""
    return URLRegistry(ShortURLMemoryDAO(), resolver=resolvable)
