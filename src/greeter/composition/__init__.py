"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.console import Greeter, load_greeting_config
from ..adapters.logging.setup import init_logging

# pyright checks that every adapter structurally satisfies its port.
if TYPE_CHECKING:
    from ..adapters.memory.console import GreetingSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        Greet,
        InitLogging,
        LoadGreetingConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeting_config: LoadGreetingConfig = load_greeting_config
    _assert_greet: Greet = Greeter().greet
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_greeting_config: LoadGreetingConfig
    greet: Greet
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters, greeting through a console Greeter."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_greeting_config=load_greeting_config,
        greet=Greeter().greet,
        init_logging=init_logging,
    )


def build_testing(*, spy: GreetingSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: GreetingSpy receiving every greeting. A fresh one is created
            when None; pass your own to assert on what was greeted.
    """
    from ..adapters.memory import (
        GreetingSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_greeting_config_in_memory,
    )

    greeting_spy = spy if spy is not None else GreetingSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_greeting_config=load_greeting_config_in_memory,
        greet=greeting_spy.greet,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "load_greeting_config",
]
