"""In-memory Data Access Object (DAO) for shortened URLs

Zero-configuration backing store used when no external data store is
configured. Mappings live for the lifetime of the process.

Classes:
    ShortURLMemoryDAO:
        DAO keeping ShortURLModel instances in process memory.

Example:
    >>> dao = ShortURLMemoryDAO()
    >>> dao.create('https://example.com/page')
    ShortURLModel(target='https://example.com/page', shortcode=1, ...)
    >>> dao.create('https://another.example/x').shortcode
    2
    >>> [url.shortcode for url in dao.list(limit=10)]
    [2, 1]
"""

import threading
from datetime import datetime, UTC

from beartype import beartype

from boltshortener.models import ShortURLModel
from boltshortener.dao.base import ShortURLBaseDAO
from boltshortener.dao.exceptions import ShortURLNotFoundError


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Process-local DAO for managing short URL mappings

    Attributes:
        _links (dict[int, ShortURLModel]):
            Mappings keyed by shortcode.
        _targets (dict[str, int]):
            Shortcodes keyed by original URL (uniqueness index).
        _counter (int):
            Highest shortcode assigned so far.
        _lock (threading.RLock):
            Guards the read-increment-write sequence on the counter together
            with the uniqueness check in create().
    """

    def __init__(self):
        self._links: dict[int, ShortURLModel] = {}
        self._targets: dict[str, int] = {}
        self._counter = 0
        self._lock = threading.RLock()

    @beartype
    def get(self, shortcode: int, **kwargs) -> ShortURLModel:
        short_url = self._links.get(shortcode)
        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    @beartype
    def find_by_target(self, target: str, **kwargs) -> ShortURLModel | None:
        shortcode = self._targets.get(target)
        return None if shortcode is None else self._links[shortcode]

    @beartype
    def create(self, target: str, **kwargs) -> ShortURLModel:
        """Assign the next shortcode and store the mapping

        The uniqueness check is repeated under the lock, so two concurrent
        calls for the same target end up with a single mapping.
        """
        with self._lock:
            existing = self.find_by_target(target)
            if existing is not None:
                return existing

            shortcode = self.count(increment=True)
            short_url = ShortURLModel(target=target, shortcode=shortcode, created_at=datetime.now(UTC))
            self._links[shortcode] = short_url
            self._targets[target] = shortcode
            return short_url

    @beartype
    def list(self, limit: int, **kwargs) -> list[ShortURLModel]:
        with self._lock:
            shortcodes = sorted(self._links, reverse=True)[: max(limit, 0)]
            return [self._links[shortcode] for shortcode in shortcodes]

    def count(self, increment: bool = False, **kwargs) -> int:
        with self._lock:
            if increment:
                self._counter += 1
            return self._counter
