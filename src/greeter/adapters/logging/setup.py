"""lib_log_rich runtime setup shared by every entry point.

The console script, ``python -m greeter`` and the tests all initialise
logging through :func:`init_logging`, which configures the runtime at most
once per process from the ``[lib_log_rich]`` configuration section.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; any other key
    is kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="greeter-ci").service
        'greeter-ci'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map ``[lib_log_rich]`` onto a RuntimeConfig, defaulting the service name."""
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime unless it is already running.

    On first use this enables ``.env`` discovery for ``LOG_*`` variables,
    starts the runtime and attaches it to the standard :mod:`logging` tree so
    ``logging.getLogger(__name__)`` records reach lib_log_rich.

    Args:
        config: Merged configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
