"""URL registry: validation, deduplication and shortcode assignment

The registry sits between the Lambda handlers and the short URL DAO. It is
backend-agnostic: all persistence goes through a ShortURLBaseDAO, and
hostname resolution goes through an injected callable.

Operations:
    shorten(raw_url) -> ShortURLModel
        Validate a URL and return its mapping, creating one if needed.
        Raises InvalidURLError.
    resolve(shortcode) -> ShortURLModel
        Look up a mapping by shortcode.
        Raises MalformedShortcodeError or ShortURLNotFoundError.
    list(limit=None) -> list[ShortURLModel]
        Newest mappings first.
    count() -> int
        Number of shortcodes assigned so far.

DataStoreError raised by the DAO is never caught here.

Example:
    >>> from boltshortener.dao import ShortURLMemoryDAO
    >>> registry = URLRegistry(ShortURLMemoryDAO(), resolver=lambda hostname: True)
    >>> registry.shorten('https://example.com/page').to_dict()
    {'original_url': 'https://example.com/page', 'short_url': 1}
    >>> registry.shorten('https://another.example/x').shortcode
    2
    >>> registry.resolve('1').target
    'https://example.com/page'
    >>> registry.resolve('abc')
    Traceback (most recent call last):
        ...
    boltshortener.exceptions.MalformedShortcodeError: Shortcode 'abc' is not an integer.
"""

import re
import logging
import functools
from typing import Any
from urllib.parse import urlsplit

from boltshortener.constants import Limits
from boltshortener.exceptions import InvalidURLError, MalformedShortcodeError
from boltshortener.models import ShortURLModel
from boltshortener.dao import ShortURLBaseDAO, build_short_url_dao
from boltshortener.dao.exceptions import ShortURLNotFoundError
from boltshortener.types import HostnameResolverFn
from boltshortener.utils.dns import HostnameResolver


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})
SHORTCODE_PATTERN = re.compile(r'[+-]?\d+')


def parse_url(raw_url: Any) -> tuple[str, str]:
    """Validate the syntax of a URL to be shortened

    Args:
        raw_url (Any):
            Untrusted input, normally the `url` field of a request body.

    Returns:
        tuple[str, str]: the trimmed URL and its hostname.

    Raises:
        InvalidURLError:
            If the input is not a non-empty string, is not an absolute URL,
            uses a scheme other than http/https or has no valid host.

    Example:
        >>> parse_url('  https://Example.com/Page  ')
        ('https://Example.com/Page', 'example.com')
    """
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise InvalidURLError('URL must be a non-empty string.')

    url = raw_url.strip()
    try:
        components = urlsplit(url)
        _ = components.port  # raises ValueError for out of range or non-numeric ports
    except ValueError as e:
        raise InvalidURLError(f"Can't parse URL '{url}'.") from e

    if components.scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"URL scheme must be http or https (given URL: '{url}').")
    if not components.hostname:
        raise InvalidURLError(f"URL has no host (given URL: '{url}').")

    return url, components.hostname


def parse_shortcode(shortcode: Any) -> int:
    """Convert a shortcode lookup key into an integer

    Raises:
        MalformedShortcodeError: If `shortcode` is not an integer or a decimal integer string.
        ShortURLNotFoundError: If `shortcode` is numeric but too long for int(); no such code is ever assigned.
    """
    if isinstance(shortcode, int) and not isinstance(shortcode, bool):
        return shortcode
    if isinstance(shortcode, str) and SHORTCODE_PATTERN.fullmatch(shortcode.strip()):
        try:
            return int(shortcode.strip())
        except ValueError:
            # int() refuses strings over sys.get_int_max_str_digits() digits
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode.strip()[:16]}...' not found.") from None
    raise MalformedShortcodeError(f"Shortcode '{shortcode}' is not an integer.")


class URLRegistry:
    """Validate, deduplicate and assign shortcodes to URLs

    Attributes:
        dao (ShortURLBaseDAO):
            Backing store owning the mappings and the shortcode counter.
        resolver (Callable[[str], bool]):
            Returns True if a hostname resolves. Defaults to the process-wide default_resolver().
        list_limit (int):
            Number of mappings returned by list() when no limit is given.
    """

    def __init__(self, dao: ShortURLBaseDAO, resolver: HostnameResolverFn | None = None, list_limit: int = Limits.LIST):
        self.dao = dao
        self.resolver = resolver if resolver is not None else default_resolver()
        self.list_limit = list_limit

    def shorten(self, raw_url: Any) -> ShortURLModel:
        """Return the mapping for `raw_url`, creating it on first submission

        Repeated submissions of the same (trimmed) URL string return the same
        mapping. Validation happens before any shortcode is assigned.

        Raises:
            InvalidURLError: If the URL is malformed or its host doesn't resolve.
            DataStoreError: If the backing store is unreachable.
        """
        url, hostname = parse_url(raw_url)
        if not self.resolver(hostname):
            raise InvalidURLError(f"Can't resolve host '{hostname}'.")

        existing = self.dao.find_by_target(url)
        if existing is not None:
            logger.debug('URL already shortened.', extra={'shortcode': existing.shortcode})
            return existing

        short_url = self.dao.create(url)
        logger.debug('Created short URL.', extra={'shortcode': short_url.shortcode})
        return short_url

    def resolve(self, shortcode: int | str) -> ShortURLModel:
        """Look up the mapping for `shortcode`

        Raises:
            MalformedShortcodeError: If `shortcode` is not numeric.
            ShortURLNotFoundError: If no mapping has this shortcode (including numbers too long to parse).
            DataStoreError: If the backing store is unreachable.
        """
        return self.dao.get(parse_shortcode(shortcode))

    def list(self, limit: int | None = None) -> list[ShortURLModel]:
        return self.dao.list(limit=self.list_limit if limit is None else limit)

    def count(self) -> int:
        return self.dao.count()


@functools.cache
def default_resolver() -> HostnameResolver:
    return HostnameResolver()


def build_registry(lambda_name: str) -> URLRegistry:
    """Create a registry over the configured backing store for `lambda_name`"""
    return URLRegistry(build_short_url_dao(lambda_name), resolver=default_resolver())
