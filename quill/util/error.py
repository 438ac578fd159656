"""Utility layer errors.

These cover wiring problems discovered at startup, never request failures.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are unusable for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be selected or the container is misconfigured."""

    pass
