from boltshortener.constants import INVALID_URL_MESSAGE, WRONG_FORMAT_MESSAGE


class BoltShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:boltshortener_error'


class ConfigurationError(BoltShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class RegistryError(BoltShortenerError):
    """Base exception for rejected registry input.

    Subclasses set `message`, the text returned to API clients.
    """

    error_code = 'registry:registry_error'


class InvalidURLError(RegistryError):
    """Raised when a URL is malformed, uses a disallowed scheme or has an unresolvable host."""

    error_code = 'registry:invalid_url_error'
    message = INVALID_URL_MESSAGE


class MalformedShortcodeError(RegistryError):
    """Raised when a shortcode lookup key is not an integer."""

    error_code = 'registry:malformed_shortcode_error'
    message = WRONG_FORMAT_MESSAGE
