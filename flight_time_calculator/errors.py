"""Custom exceptions for the layers around the pure core.

Expression parsing never raises; malformed input is reported via
``ParseResult.is_valid`` or a ``None`` return.
"""


class ConfigError(Exception):
    """Raised when loading or validating the configuration fails."""
