"""API Gateway (Lambda proxy) response builders

Client errors for this API are reported with a 200 status and an `error`
body, e.g. {"error": "invalid url"}. Only server-side failures use 5xx.
"""

import json
from typing import Any

from boltshortener.constants import SERVER_ERROR_MESSAGE


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def response_200(body: dict[str, Any]) -> dict:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps(body),
    }


def response_error(message: str) -> dict:
    return response_200({'error': message})


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {'Location': location, **CORS_HEADERS},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_500(message: str | None = None) -> dict:
    return {
        'statusCode': 500,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps({'error': message or SERVER_ERROR_MESSAGE}),
    }
