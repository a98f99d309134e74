"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from flock_cli.infrastructure.di.container import FlockContainer
from flock_cli.interface.cli import CLIAppFactory, CLIDependencies
from flock_cli.interface.telemetry import ProjectTelemetry


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    deps = CLIDependencies(
        telemetry=ProjectTelemetry("FLOCK", "cyan", "Automated deployment of Swift projects"),
        container_factory=FlockContainer,
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
