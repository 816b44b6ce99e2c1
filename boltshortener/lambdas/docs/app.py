from typing import Any

from boltshortener.constants import (
    SERVICE_NAME,
    SERVICE_VERSION,
    SERVICE_DESCRIPTION,
    INVALID_URL_MESSAGE,
    WRONG_FORMAT_MESSAGE,
    SHORT_URL_NOT_FOUND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    Limits,
)
from boltshortener.utils.helpers import guarantee_500_response
from boltshortener.utils.responses import response_200


ENDPOINTS = {
    'POST /api/shorturl': {
        'description': 'Shorten a URL',
        'body': {'url': 'string, full URL with http/https protocol'},
        'response': '{ original_url, short_url }',
        'errors': [{'error': INVALID_URL_MESSAGE}],
    },
    'GET /api/shorturl/{shortcode}': {
        'description': 'Redirect to original URL (302)',
        'errors': [{'error': WRONG_FORMAT_MESSAGE}, {'error': SHORT_URL_NOT_FOUND_MESSAGE}],
    },
    'GET /api/urls': {
        'description': 'List shortened URLs (newest first) with count',
        'query': {'limit': f'positive integer, default {Limits.LIST}'},
        'response': '{ count, urls: [{ original_url, short_url }] }',
    },
    'GET /api/docs': {
        'description': 'This document',
    },
    'GET /health': {
        'description': 'Service health check',
        'response': '{ status, uptime, timestamp, environment }',
    },
}


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Describe the API: service identity, endpoint catalogue and error contract

    Client errors are answered with status 200 and an `error` body; only
    server failures use status 500.
    """
    return response_200(
        {
            'name': SERVICE_NAME,
            'version': SERVICE_VERSION,
            'description': SERVICE_DESCRIPTION,
            'endpoints': ENDPOINTS,
            'errors': {
                'client': {'status': 200, 'body': '{ error: <message> }'},
                'server': {'status': 500, 'body': {'error': SERVER_ERROR_MESSAGE}},
            },
        }
    )
