import logging
from typing import Any

from boltshortener.constants import INVALID_URL_MESSAGE
from boltshortener.exceptions import InvalidURLError
from boltshortener.registry import build_registry
from boltshortener.utils.helpers import request_body, guarantee_500_response
from boltshortener.utils.responses import response_200, response_error
from boltshortener.lambdas.shorten_url.constants import INVALID_BODY, INVALID_URL, SHORTEN_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body (JSON or form-encoded)
    - Step 2: Validate, deduplicate and store the URL (via URLRegistry)
    - Step 3: Respond to user with the mapping

    HTTP responses:
        200: Successful URL shortening
            original_url: original url (provided in request, trimmed)
            short_url: integer shortcode
        200: Rejected URL
            error: "invalid url"
        500: Internal server error
            error: "Server error"

    Args:
        event (Dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object containing runtime information.

    Returns:
        Dict[str, Any]:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"url": "https://example.com/page"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])
        {'original_url': 'https://example.com/page', 'short_url': 1}
    """
    # 1- Extract original URL from request body
    try:
        body = request_body(event)
    except ValueError:
        logger.info('Request body is not valid JSON. Responding with invalid url.', extra={'event': INVALID_BODY})
        return response_error(INVALID_URL_MESSAGE)
    raw_url = body.get('url')

    # 2- Validate, deduplicate and store the URL
    registry = build_registry('shorten_url')
    try:
        short_url = registry.shorten(raw_url)
    except InvalidURLError as e:
        logger.info('Rejected URL. Responding with invalid url.', extra={'event': INVALID_URL, 'reason': str(e)})
        return response_error(e.message)

    # 3- Return mapping to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'event': SHORTEN_SUCCESS, 'shortcode': short_url.shortcode},
    )
    return response_200(short_url.to_dict())
