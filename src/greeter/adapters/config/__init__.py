"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered loading and profile validation
    * :mod:`.display` - Human/JSON rendering
    * :mod:`.overrides` - ``--set`` parsing and merging
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
]
