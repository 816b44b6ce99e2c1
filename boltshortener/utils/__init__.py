from boltshortener.utils.config import app_env, app_name, app_prefix, load_config
from boltshortener.utils.helpers import request_body, query_parameter, require_environment, guarantee_500_response
from boltshortener.utils.dns import HostnameResolver
from boltshortener.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'request_body',
    'query_parameter',
    'require_environment',
    'guarantee_500_response',
    'HostnameResolver',
    'initialize_logging',
]
