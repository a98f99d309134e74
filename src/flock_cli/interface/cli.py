"""CLI entry points for Flock - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer

from flock_cli.domain.exceptions import FlockError
from flock_cli.domain.protocols import TelemetryPort
from flock_cli.infrastructure.di.container import FlockContainer

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    container_factory: Callable[..., FlockContainer]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure_logging(level: int) -> None:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        logging.getLogger("flock").setLevel(level)
        logging.getLogger("flock_cli").setLevel(level)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="flock",
            help="Flock: automated deployment of Swift projects. Run 'flock init' inside a Swift package to get started.",
            add_completion=False,
        )

        @app.callback()
        def main_callback() -> None:
            """Flock command line."""

        @app.command(name="init")
        def init_flock(
            path: Optional[Path] = typer.Option(
                None, "--path", "-p", help="Swift package root (default: current directory)"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Show debug output, including discarded failures"),
        ) -> None:
            """Initializes Flock in the current directory."""
            root = (path or Path.cwd()).resolve()
            container = deps.container_factory(root, telemetry=deps.telemetry)
            level = logging.DEBUG if verbose else container.get_settings().log_level
            CLIAppFactory.configure_logging(level)

            use_case = container.get_init_use_case()
            try:
                use_case.execute()
            except FlockError as e:
                deps.telemetry.error(e.message)
                raise typer.Exit(code=1) from e

        return app
