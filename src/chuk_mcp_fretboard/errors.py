"""
Configuration errors.

All of these are raised before enumeration starts. Once a configuration
validates, the engine has no failure modes.
"""


class ConfigurationError(ValueError):
    """Base class for configuration validation failures."""

    code = "INVALID_CONFIGURATION"


class InvalidTuning(ConfigurationError):
    """Zero strings, too many strings, or a pitch class outside 0-11."""

    code = "INVALID_TUNING"


class InvalidBounds(ConfigurationError):
    """A numeric bound is negative, too large or inconsistent with the tuning."""

    code = "INVALID_BOUNDS"
