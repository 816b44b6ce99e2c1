"""Unit tests for the redirect_url AWS Lambda handler.

Test coverage includes:

1. Successful redirect
   - Ensures valid shortcodes return a 302 redirect with correct Location header.

2. Failed lookups
   - Non-numeric or missing shortcodes return {"error": "Wrong format"}.
   - Unknown shortcodes, including numbers too long to parse, return {"error": "No short URL found for the given input"}.

3. Backing store failures
   - DataStoreError results in HTTP 500.
"""

import json

import pytest

from boltshortener.lambdas.redirect_url import app
from boltshortener.dao.exceptions import DataStoreError


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(monkeypatch, registry):
    monkeypatch.setattr(app, 'build_registry', lambda lambda_name: registry)


@pytest.fixture
def target_url():
    return 'https://example.com/Some/Page?q=1'


@pytest.fixture(autouse=True)
def _seed(registry, target_url):
    registry.shorten(target_url)


def apigw_event(shortcode: str | None) -> dict:
    return {
        'resource': '/api/shorturl/{shortcode}',
        'pathParameters': None if shortcode is None else {'shortcode': shortcode},
        'httpMethod': 'GET',
        'path': f'/api/shorturl/{shortcode}',
        'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
    }


def test_redirect(context, target_url):
    response = app.lambda_handler(apigw_event('1'), context)

    assert response['statusCode'] == 302
    assert response['headers']['Location'] == target_url


@pytest.mark.parametrize('shortcode', ['abc', '1.5', '', None])
def test_redirect_with_malformed_shortcode(context, shortcode):
    response = app.lambda_handler(apigw_event(shortcode), context)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {'error': 'Wrong format'}


@pytest.mark.parametrize('shortcode', ['99', '0', '-3', '9' * 5000])
def test_redirect_with_unknown_shortcode(context, shortcode):
    response = app.lambda_handler(apigw_event(shortcode), context)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {'error': 'No short URL found for the given input'}


def test_redirect_with_data_store_error(context, registry, monkeypatch):
    def unavailable(shortcode):
        raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    monkeypatch.setattr(registry.dao, 'get', unavailable)

    response = app.lambda_handler(apigw_event('1'), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body']) == {'error': 'Server error'}
