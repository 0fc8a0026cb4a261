"""Greeting configuration model and loader.

Provides the GreetingConfig Pydantic model for the ``[greeter]`` section and
the loader that turns a raw configuration mapping into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from greeter.domain.behaviors import CANONICAL_NAME
from greeter.domain.errors import ConfigurationError


class GreetingConfig(BaseModel):
    """Validated, immutable ``[greeter]`` settings.

    ``default_name`` is the addressee used when ``greeter hello`` receives no
    NAME argument. Any string is accepted, the empty string included.

    Example:
        >>> GreetingConfig().default_name
        'World'
        >>> GreetingConfig(default_name="Alice").default_name
        'Alice'
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    default_name: str = CANONICAL_NAME


def load_greeting_config(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Build a GreetingConfig from the ``greeter`` key of *config_dict*.

    A missing section, or one set to None, yields the defaults.

    Args:
        config_dict: Merged configuration, typically ``Config.as_dict()``.

    Returns:
        Validated GreetingConfig.

    Raises:
        ConfigurationError: When the section is not a table, contains unknown
            keys, or ``default_name`` is not a string.

    Example:
        >>> load_greeting_config({}).default_name
        'World'
        >>> load_greeting_config({"greeter": {"default_name": "Bob"}}).default_name
        'Bob'
    """
    section = config_dict.get("greeter")
    if section is None:
        return GreetingConfig()
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[greeter] must be a table, got {type(section).__name__}")
    try:
        return GreetingConfig.model_validate(dict(section))
    except ValidationError as exc:
        problems = "; ".join(f"greeter.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid greeter configuration: {problems}") from exc


__all__ = [
    "GreetingConfig",
    "load_greeting_config",
]
