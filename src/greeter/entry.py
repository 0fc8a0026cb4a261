"""Console script entry point with production wiring.

Lives at package level so it can hand the composition root to the CLI
adapter without the adapters importing composition themselves.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``greeter`` with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
