from enum import StrEnum


class Limits:
    """Default limits for registry operations."""

    LIST = 50  # Default number of records returned by list operations
    DNS_LOOKUP_TIMEOUT = 3.0  # Seconds before a hostname lookup counts as failed


class Backend(StrEnum):
    """Supported short URL backing stores."""

    MEMORY = 'memory'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        DNS_LOOKUP_TIMEOUT = 'DNS_LOOKUP_TIMEOUT'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Wire error messages
INVALID_URL_MESSAGE = 'invalid url'
WRONG_FORMAT_MESSAGE = 'Wrong format'
SHORT_URL_NOT_FOUND_MESSAGE = 'No short URL found for the given input'
SERVER_ERROR_MESSAGE = 'Server error'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'

# Service identity reported by the docs endpoint
SERVICE_NAME = 'Bolt'
SERVICE_VERSION = '0.1.0'
SERVICE_DESCRIPTION = 'URL compression engine'
