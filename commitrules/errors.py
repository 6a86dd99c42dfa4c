"""Errors raised by commitrules."""


class ConfigError(Exception):
    """Raised when a lint configuration cannot be read, parsed or rendered."""
