"""Public package surface: greeting, configuration and metadata.

- Domain exports: greeting text construction
- Adapter exports: the console Greeter
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.console import Greeter
from .composition import get_config
from .domain.behaviors import (
    CANONICAL_GREETING,
    CANONICAL_NAME,
    build_greeting,
)

__all__ = [
    "CANONICAL_GREETING",
    "CANONICAL_NAME",
    "Greeter",
    "build_greeting",
    "get_config",
    "print_info",
]
