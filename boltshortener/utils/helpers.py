"""Helper utilities for AWS lambda functions.

Functions:
    request_body(event: dict) -> dict
        Decode a JSON or form-encoded request body from an API Gateway event
    query_parameter(event: dict, name: str) -> str | None
        Read a single query string parameter from an API Gateway event
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(func) -> Callable
        Decorator: Turn unhandled handler exceptions into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> from boltshortener.utils.helpers import request_body
        >>> event = {
        ...     "headers": {"Content-Type": "application/x-www-form-urlencoded"},
        ...     "body": "url=https%3A%2F%2Fexample.com"
        ... }
        >>> request_body(event)
        {'url': 'https://example.com'}
"""

import os
import json
import base64
import logging
import functools
from typing import Any
from urllib.parse import parse_qs
from collections.abc import Callable

from boltshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from boltshortener.exceptions import MissingEnvironmentVariableError
from boltshortener.utils.responses import response_500


logger = logging.getLogger(__name__)


def _header(event: dict[str, Any], name: str) -> str:
    headers = event.get('headers') or {}
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value or ''
    return ''


def request_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode the request body of an API Gateway event

    Form-encoded bodies (`application/x-www-form-urlencoded`) are parsed into
    a flat dict keeping the first value of each field. Any other body is
    parsed as JSON. Base64 encoded bodies (`isBase64Encoded`) are decoded first.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        dict: decoded request body, empty if the event has no body

    Raises:
        ValueError: If the body is neither valid JSON nor a JSON object.
    """
    body = event.get('body') or ''
    if event.get('isBase64Encoded') and body:
        body = base64.b64decode(body).decode('utf-8')

    if not body:
        return {}

    if _header(event, 'Content-Type').startswith('application/x-www-form-urlencoded'):
        return {key: values[0] for key, values in parse_qs(body, keep_blank_values=True).items()}

    payload = json.loads(body)  # json.JSONDecodeError is a ValueError
    if not isinstance(payload, dict):
        raise ValueError(f'Expected a JSON object as request body (given type: {type(payload).__name__}).')
    return payload


def query_parameter(event: dict[str, Any], name: str) -> str | None:
    return (event.get('queryStringParameters') or {}).get(name)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 if the Lambda handler raises

    Store connectivity failures (DataStoreError) and any other unexpected
    exception end up here. The exception is logged with its traceback.
    """

    @functools.wraps(func)
    def wrapper(event: dict, context: Any) -> dict:
        try:
            return func(event, context)
        except Exception:
            logger.exception(
                'Unhandled exception in Lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500()

    return wrapper
