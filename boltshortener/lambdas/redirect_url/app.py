import logging
from typing import Any

from boltshortener.exceptions import MalformedShortcodeError
from boltshortener.dao.exceptions import ShortURLNotFoundError
from boltshortener.registry import build_registry
from boltshortener.utils.helpers import guarantee_500_response
from boltshortener.utils.responses import response_302, response_error
from boltshortener.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    MALFORMED_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Get short URL record (via URLRegistry)
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        200: Lookup failed
            error: "Wrong format" for non-numeric shortcodes
            error: "No short URL found for the given input" for unknown shortcodes
        500: Internal server error
            error: "Server error"

    Args:
        event (dict):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': '1'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with wrong format.', extra={'event': MISSING_SHORTCODE})
        return response_error(MalformedShortcodeError.message)

    # 2- Get short URL record
    registry = build_registry('redirect_url')
    try:
        short_url = registry.resolve(shortcode)
    except MalformedShortcodeError as e:
        logger.info(
            'Shortcode is not numeric. Responding with wrong format.',
            extra={'shortcode': shortcode, 'event': MALFORMED_SHORTCODE},
        )
        return response_error(e.message)
    except ShortURLNotFoundError as e:
        logger.info(
            'Short URL record not found in database. Responding with not found.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_error(e.message)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': short_url.shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=short_url.target)
