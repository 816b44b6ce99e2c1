"""Hostname resolution used to validate shortened URLs

`HostnameResolver` is the default name-resolution capability of the
registry. It is a plain callable, so tests and alternative deployments can
pass any `Callable[[str], bool]` instead.

Example:
    >>> resolve = HostnameResolver(timeout=2.0)
    >>> resolve('example.com')
    True
    >>> resolve('this-host-does-not-exist.invalid')
    False
"""

import os
import socket
import logging
from concurrent.futures import ThreadPoolExecutor

from boltshortener.constants import ENV, Limits


logger = logging.getLogger(__name__)


def dns_lookup_timeout() -> float:
    """Return the hostname lookup timeout in seconds (`DNS_LOOKUP_TIMEOUT`)"""
    return float(os.environ.get(ENV.App.DNS_LOOKUP_TIMEOUT, Limits.DNS_LOOKUP_TIMEOUT))


class HostnameResolver:
    """Check that a hostname resolves, giving up after `timeout` seconds

    socket.getaddrinfo() has no timeout of its own, so lookups run on a
    small worker pool and the caller stops waiting once the timeout expires.
    A lookup that times out keeps its worker busy until the system resolver
    returns.
    """

    def __init__(self, timeout: float | None = None, max_workers: int = 4):
        self.timeout = dns_lookup_timeout() if timeout is None else timeout
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='dns-lookup')

    def __call__(self, hostname: str) -> bool:
        future = self._executor.submit(socket.getaddrinfo, hostname, None)
        try:
            future.result(timeout=self.timeout)
        except TimeoutError:
            logger.info('Hostname lookup timed out.', extra={'hostname': hostname, 'timeout': self.timeout})
            return False
        except (OSError, UnicodeError) as e:
            # socket.gaierror is an OSError; IDNA encoding failures are UnicodeErrors
            logger.info('Hostname lookup failed.', extra={'hostname': hostname, 'reason': str(e)})
            return False
        return True
