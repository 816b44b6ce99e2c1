import logging
from typing import Any

from boltshortener.registry import build_registry
from boltshortener.utils.helpers import query_parameter, guarantee_500_response
from boltshortener.utils.responses import response_200
from boltshortener.lambdas.list_urls.constants import INVALID_LIMIT, LIST_SUCCESS


logger = logging.getLogger(__name__)


def _limit(event: dict) -> int | None:
    """Read the optional `limit` query parameter, ignoring anything but positive integers"""
    raw_limit = query_parameter(event, 'limit')
    if raw_limit is None:
        return None
    limit = int(raw_limit) if raw_limit.isascii() and raw_limit.isdigit() else 0
    if limit <= 0:
        logger.info('Ignoring invalid "limit" query parameter.', extra={'limit': raw_limit, 'event': INVALID_LIMIT})
        return None
    return limit


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to list shortened URLs

    HTTP responses:
        200: Listing
            count: number of shortcodes assigned so far
            urls: [{original_url, short_url}, ...] newest first
        500: Internal server error
            error: "Server error"

    Example:
        >>> response = lambda_handler({'queryStringParameters': {'limit': '2'}}, None)
        >>> json.loads(response['body'])
        {'count': 3, 'urls': [{'original_url': 'https://c.example', 'short_url': 3}, ...]}
    """
    registry = build_registry('list_urls')
    short_urls = registry.list(limit=_limit(event))
    count = registry.count()

    logger.info('Listing short URLs. Responding with 200.', extra={'count': count, 'event': LIST_SUCCESS})
    return response_200({'count': count, 'urls': [short_url.to_dict() for short_url in short_urls]})
