"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error.

    Raised when a required secret or endpoint is missing. The message is
    meant for server logs; callers return a generic message instead.
    """

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass
