"""Port behavioral contract tests for the in-memory adapters and composition.

Production adapters are covered by the CLI integration tests. Static type
conformance is enforced by pyright through the TYPE_CHECKING assertions.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from greeter.adapters.console import GreetingConfig
from greeter.adapters.memory import (
    GreetingSpy,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_greeting_config_in_memory,
)
from greeter.composition import AppServices, build_production, build_testing
from greeter.domain.enums import OutputFormat

if TYPE_CHECKING:
    from greeter.application.ports import GetConfig, GetDefaultConfigPath, LoadGreetingConfig


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def load_greeting_config_impl() -> LoadGreetingConfig:
    return load_greeting_config_in_memory


# ======================== In-memory adapter contracts ========================


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_greeter_defaults(get_config_impl: GetConfig) -> None:
    config = get_config_impl()

    assert isinstance(config, Config)
    assert config.as_dict() == {"greeter": {"default_name": "World"}}


@pytest.mark.os_agnostic
def test_get_config_ignores_profile(get_config_impl: GetConfig) -> None:
    assert get_config_impl(profile="staging").as_dict() == get_config_impl().as_dict()


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()

    assert isinstance(path, Path)
    assert path.suffix == ".toml"


@pytest.mark.os_agnostic
def test_load_greeting_config_returns_model(load_greeting_config_impl: LoadGreetingConfig) -> None:
    result = load_greeting_config_impl({"greeter": {"default_name": "Ada"}})

    assert isinstance(result, GreetingConfig)
    assert result.default_name == "Ada"


@pytest.mark.os_agnostic
def test_display_config_in_memory_writes_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    display_config_in_memory(Config({"greeter": {}}, {}), output_format=OutputFormat.JSON)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_init_logging_in_memory_returns_none() -> None:
    assert init_logging_in_memory(Config({}, {})) is None


# ======================== GreetingSpy ========================


@pytest.mark.os_agnostic
def test_spy_records_names_and_rendered_lines(capsys: pytest.CaptureFixture[str]) -> None:
    spy = GreetingSpy()

    spy.greet("Alice")
    spy.greet("")

    assert spy.names == ["Alice", ""]
    assert spy.lines == ["Hello, Alice!", "Hello, !"]
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_spy_raises_configured_exception_after_recording() -> None:
    spy = GreetingSpy(raise_exception=OSError("closed"))

    with pytest.raises(OSError, match="closed"):
        spy.greet("Alice")

    assert spy.names == ["Alice"]


@pytest.mark.os_agnostic
def test_spy_clear_resets_everything() -> None:
    spy = GreetingSpy(raise_exception=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        spy.greet("Alice")

    spy.clear()

    assert spy.names == []
    assert spy.lines == []
    assert spy.raise_exception is None


@pytest.mark.os_agnostic
def test_spies_do_not_share_state() -> None:
    first, second = GreetingSpy(), GreetingSpy()

    first.greet("Alice")

    assert second.names == []


# ======================== Composition ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("builder", [build_production, build_testing], ids=["production", "testing"])
def test_every_service_is_callable(builder: object) -> None:
    services = builder()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    for service_field in fields(services):
        assert callable(getattr(services, service_field.name))


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_testing()

    with pytest.raises(AttributeError):
        services.greet = print  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_build_testing_routes_greetings_to_given_spy(capsys: pytest.CaptureFixture[str]) -> None:
    spy = GreetingSpy()
    services = build_testing(spy=spy)

    services.greet("Alice")

    assert spy.lines == ["Hello, Alice!"]
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_build_production_greets_on_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    build_production().greet("Alice")

    assert capsys.readouterr().out == "Hello, Alice!\n"
