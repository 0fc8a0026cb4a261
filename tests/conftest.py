"""Shared pytest fixtures for CLI, adapter and module-entry tests.

Fixtures read as plain English and replace only the I/O boundary they
name; everything else stays production-wired.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.adapters.memory.console import GreetingSpy
    from greeter.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Assert on ``result.stdout`` when exact output matters; log records are
    written to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations without injection."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper removing ANSI escape sequences from text."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to disabled and restore the snapshot afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test runs."""
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real Config objects from plain dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class GreetingCliContext:
    """Services factory plus the spy receiving its greetings."""

    factory: Callable[[], Any]
    spy: GreetingSpy


@pytest.fixture
def greeting_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], GreetingCliContext]:
    """Create a services factory with injected config and a GreetingSpy.

    The returned function takes the full configuration dict. Greetings go to
    the spy instead of stdout; logging and config display stay production.

    Example:
        def test_hello(cli_runner, greeting_cli_context) -> None:
            ctx = greeting_cli_context({"greeter": {"default_name": "Ada"}})
            cli_runner.invoke(cli, ["hello"], obj=ctx.factory)
            assert ctx.spy.names == ["Ada"]
    """
    from greeter.adapters.memory import GreetingSpy as GreetingSpyImpl
    from greeter.adapters.memory import load_greeting_config_in_memory
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> GreetingCliContext:
        spy = GreetingSpyImpl()
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_greeting_config=load_greeting_config_in_memory,
            greet=spy.greet,
            init_logging=prod.init_logging,
        )
        return GreetingCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a production services factory whose get_config returns *config_data*."""
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_greeting_config=prod.load_greeting_config,
            greet=prod.greet,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from greeter.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_greeting_config=prod.load_greeting_config,
            greet=prod.greet,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _inject
