"""Backing store selection

The short URL DAO is chosen once per process from the Lambda's configuration:

    - no AppConfig configured, or active_backend == "memory" -> ShortURLMemoryDAO
    - active_backend == "redis"                               -> ShortURLRedisDAO
    - Redis unreachable at start-up                           -> ShortURLMemoryDAO (with a warning)

The in-memory DAO is shared by every caller in the process, so all handlers
running in the same process see the same mappings and counter.
"""

import functools
import logging

from boltshortener.constants import Backend
from boltshortener.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from boltshortener.dao.base import ShortURLBaseDAO
from boltshortener.dao.memory import ShortURLMemoryDAO
from boltshortener.dao.redis import ShortURLRedisDAO
from boltshortener.dao.exceptions import DataStoreError
from boltshortener.utils.config import load_config, app_prefix


logger = logging.getLogger(__name__)


@functools.cache
def memory_dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO()


@functools.cache
def build_short_url_dao(lambda_name: str) -> ShortURLBaseDAO:
    """Create the short URL DAO for `lambda_name` (cached per process)

    Args:
        lambda_name (str):
            Name of the Lambda whose configuration section is used.

    Returns:
        ShortURLBaseDAO: The selected DAO.

    Raises:
        BadConfigurationError:
            If the configuration names an unsupported backend.
    """
    try:
        app_config = load_config(lambda_name)
    except MissingEnvironmentVariableError:
        logger.info('No AppConfig configured. Using in-memory short URL storage.', extra={'lambdaName': lambda_name})
        return memory_dao()

    backend, backend_config = next(iter(app_config.items()))

    if backend == Backend.MEMORY:
        logger.info('Using in-memory short URL storage.', extra={'lambdaName': lambda_name})
        return memory_dao()

    if backend == Backend.REDIS:
        redis_config = {f'redis_{k}': v for k, v in backend_config.items()}
        try:
            dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
        except DataStoreError:
            logger.warning(
                'Redis unreachable, falling back to in-memory short URL storage.',
                exc_info=True,
                extra={'lambdaName': lambda_name},
            )
            return memory_dao()
        logger.info('Using Redis short URL storage.', extra={'lambdaName': lambda_name})
        return dao

    raise BadConfigurationError(f"Unsupported short URL backend '{backend}'.")
