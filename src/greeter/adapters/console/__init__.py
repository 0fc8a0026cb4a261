"""Console adapter - greeting output and greeting configuration.

Contents:
    * :mod:`.greeter` - Greeter writing greeting lines to stdout
    * :mod:`.config` - GreetingConfig model for the ``[greeter]`` section
"""

from __future__ import annotations

from .config import GreetingConfig, load_greeting_config
from .greeter import Greeter

__all__ = [
    "Greeter",
    "GreetingConfig",
    "load_greeting_config",
]
