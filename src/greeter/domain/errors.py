"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """The ``[greeter]`` configuration section is malformed.

    Raised while turning raw layered configuration into a typed greeting
    configuration. The CLI maps it to exit code 78 (``EX_CONFIG``).

    Example:
        >>> err = ConfigurationError("greeter.default_name must be a string")
        >>> str(err)
        'greeter.default_name must be a string'
    """


__all__ = ["ConfigurationError"]
