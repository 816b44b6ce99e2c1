"""AWS AppConfig access for the Lambda handlers

One AppConfig document (profile `backend-config`, one AppConfig environment
per APP_ENV) selects the short URL backing store and carries the settings
each lambda needs to reach it:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "shorten_url":  {"redis": {"host": "...", "port": 6379, "db": 0, "socket_timeout": 2}},
            "redirect_url": {"redis": {...}},
            "list_urls":    {"redis": {...}}
        }
    }

`load_config(lambda_name)` returns `{active_backend: <that lambda's section>}`,
e.g. {"redis": {"host": ...}} or {"memory": {}}. Under `sam local` with
APPCONFIG_AGENT_URL set, the document is read from a local AppConfig agent
instead of the appconfigdata API.
"""

import os
import json
import urllib.parse
import urllib.request
import logging

import boto3

from boltshortener.types import LambdaConfiguration
from boltshortener.constants import ENV
from boltshortener.exceptions import BadConfigurationError
from boltshortener.utils.helpers import require_environment
from boltshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)

LOCAL_AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal', 'appconfig-agent'})
LOCAL_AGENT_PORT = 2772
DEFAULT_PROFILE_NAME = 'backend-config'


def app_env() -> str:
    """APP_ENV, lowercased; 'local' when unset"""
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Redis key prefix `<APP_NAME>:<APP_ENV>`, or None without APP_NAME

    Example:
        >>> os.environ['APP_NAME'] = 'boltshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'boltshortener:local'
    """
    name = app_name()
    return None if name is None else f'{name}:{app_env()}'


def lambda_section(config: dict, lambda_name: str) -> LambdaConfiguration:
    """Extract the active backend's section for `lambda_name` from an AppConfig document

    Raises:
        BadConfigurationError: If the document lacks `active_backend`.
    """
    try:
        backend = config['active_backend']
    except KeyError as e:
        raise BadConfigurationError("AppConfig document is missing 'active_backend'.") from e

    lambda_config = config.get('configs', {}).get(lambda_name, {})
    return {backend: lambda_config.get(backend, {})}


def local_agent_url() -> str | None:
    """Return APPCONFIG_AGENT_URL when running under SAM, None otherwise

    Raises:
        BadConfigurationError: If the URL is set but is not an http(s) URL of a local agent on port 2772.
    """
    url = os.getenv(ENV.AppConfig.AGENT_URL)
    if not url:
        return None

    components = urllib.parse.urlparse(url)
    if (
        components.scheme not in {'http', 'https'}
        or components.hostname not in LOCAL_AGENT_HOSTS
        or components.port not in {LOCAL_AGENT_PORT, None}
    ):
        raise BadConfigurationError(f"APPCONFIG_AGENT_URL '{url}' is not a local AppConfig agent.")

    return url if running_locally() else None


def _fetch_from_agent(agent_url: str) -> dict:
    profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, DEFAULT_PROFILE_NAME)
    url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'
    with urllib.request.urlopen(url, timeout=5) as response:  # noqa: S310
        return json.load(response)


@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def _fetch_from_appconfig() -> dict:
    client = boto3.client('appconfigdata')
    token = client.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']
    response = client.get_latest_configuration(ConfigurationToken=token)
    return json.loads(response['Configuration'].read())


def load_config(lambda_name: str) -> LambdaConfiguration:
    """Load the backing store configuration of `lambda_name`

    Returns:
        dict: `{active_backend: section}`, e.g. {'redis': {'host': 'redis.internal', 'port': 6379}}.

    Raises:
        MissingEnvironmentVariableError:
            If no local agent is used and the APPCONFIG_APP_ID, APPCONFIG_ENV_ID
            and APPCONFIG_PROFILE_ID variables are not all set. The DAO factory
            treats this as "no configuration" and uses in-memory storage.
        BadConfigurationError:
            If the agent URL is unsafe or the document lacks `active_backend`.
    """
    agent_url = local_agent_url()
    document = _fetch_from_agent(agent_url) if agent_url else _fetch_from_appconfig()

    logger.debug(
        'Loaded AppConfig document.',
        extra={'lambdaName': lambda_name, 'source': 'local agent' if agent_url else 'appconfigdata', 'build': document.get('build')},
    )
    return lambda_section(document, lambda_name)
