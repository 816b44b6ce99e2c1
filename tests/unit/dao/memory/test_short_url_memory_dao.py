"""Unit tests for the ShortURLMemoryDAO

Test coverage includes:

1. Creation behavior
   - Ensures shortcodes start at 1 and increase in creation order.
   - Ensures the same URL is never stored twice.
   - Ensures concurrent creation never hands out duplicate shortcodes.

2. Retrieval behavior
   - Ensures lookups by shortcode and by original URL.
   - Confirms missing shortcodes raise ShortURLNotFoundError.

3. Listing and counting
   - Ensures mappings are listed newest first and capped by the limit.
   - Ensures the counter equals the highest assigned shortcode.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, UTC

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from freezegun import freeze_time

from boltshortener.dao.memory import ShortURLMemoryDAO
from boltshortener.dao.exceptions import ShortURLNotFoundError


@pytest.fixture
def dao():
    return ShortURLMemoryDAO()


# -------------------------------
# 1. Creation behavior
# -------------------------------


@freeze_time('2025-10-15')
def test_create_assigns_shortcodes_in_order(dao):
    first = dao.create('https://example.com/page')
    second = dao.create('https://another.example/x')

    assert (first.shortcode, second.shortcode) == (1, 2)
    assert first.target == 'https://example.com/page'
    assert first.created_at == datetime(2025, 10, 15, tzinfo=UTC)


def test_create_returns_existing_mapping_for_same_url(dao):
    first = dao.create('https://example.com/page')

    assert dao.create('https://example.com/page') is first
    assert dao.count() == 1


def test_create_is_case_sensitive(dao):
    lower = dao.create('https://example.com/page')
    upper = dao.create('https://example.com/PAGE')

    assert lower.shortcode != upper.shortcode


def test_concurrent_create_assigns_unique_shortcodes(dao):
    urls = [f'https://example.com/{i}' for i in range(200)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        short_urls = list(pool.map(dao.create, urls))

    assert sorted(url.shortcode for url in short_urls) == list(range(1, 201))
    assert dao.count() == 200


def test_concurrent_create_of_same_url_stores_single_mapping(dao):
    with ThreadPoolExecutor(max_workers=16) as pool:
        short_urls = list(pool.map(dao.create, ['https://example.com/page'] * 100))

    assert {url.shortcode for url in short_urls} == {1}
    assert dao.count() == 1


def test_create_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.create(None)


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_short_url(dao):
    created = dao.create('https://example.com/page')
    assert dao.get(1) == created


def test_get_short_url_which_does_not_exist(dao):
    with pytest.raises(ShortURLNotFoundError, match="Short URL with code '99' not found"):
        dao.get(99)


def test_find_by_target(dao):
    created = dao.create('https://example.com/page')

    assert dao.find_by_target('https://example.com/page') == created
    assert dao.find_by_target('https://example.com/other') is None


# -------------------------------
# 3. Listing and counting
# -------------------------------


def test_list_newest_first(dao):
    for i in range(5):
        dao.create(f'https://example.com/{i}')

    assert [url.shortcode for url in dao.list(limit=50)] == [5, 4, 3, 2, 1]
    assert [url.shortcode for url in dao.list(limit=2)] == [5, 4]
    assert dao.list(limit=0) == []


def test_count(dao):
    assert dao.count() == 0
    dao.create('https://example.com/page')
    assert dao.count() == 1


def test_count_with_increment(dao):
    assert dao.count(increment=True) == 1
    assert dao.create('https://example.com/page').shortcode == 2
