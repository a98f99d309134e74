"""Use Case: Initialize Flock in the current Swift package."""

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.entities import InitReport
from flock_cli.domain.exceptions import AlreadyInitialized
from flock_cli.domain.protocols import (
    DependencyPrefetcherProtocol,
    GitIgnoreUpdaterProtocol,
    ScaffolderProtocol,
    TelemetryPort,
)


class InitProjectUseCase:
    """
    Orchestrate initialization: precondition, scaffold, .gitignore, dependency pre-fetch.

    Steps run strictly in order. AlreadyInitialized is raised before anything
    is written; OperationFailed from the scaffold or .gitignore steps aborts
    the run without rolling back earlier writes. The pre-fetch never fails
    the run.
    """

    def __init__(
        self,
        paths: FlockPaths,
        scaffolder: ScaffolderProtocol,
        gitignore_updater: GitIgnoreUpdaterProtocol,
        prefetcher: DependencyPrefetcherProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self._paths = paths
        self.scaffolder = scaffolder
        self.gitignore_updater = gitignore_updater
        self.prefetcher = prefetcher
        self.telemetry = telemetry

    def execute(self) -> InitReport:
        self.check_existing()

        scaffold_report = self.scaffolder.scaffold()
        gitignore_result = self.gitignore_updater.update()
        prefetch_result = self.prefetcher.build()

        self.telemetry.success("Successfully initialized Flock!")
        self.telemetry.instructions(
            "Follow these steps to finish setting up Flock:", self.instructions())

        return InitReport(
            scaffold=scaffold_report,
            gitignore=gitignore_result,
            prefetch=prefetch_result,
        )

    def check_existing(self) -> None:
        for path in self._paths.precondition_paths():
            if path.exists() or path.is_symlink():
                raise AlreadyInitialized(
                    f"{self._paths.relative(path)} must not already exist")

    def instructions(self) -> list[str]:
        deploy = self._paths.relative(self._paths.deploy_directory)
        flockfile = self._paths.flockfile.name
        return [
            f'1. Add `exclude: ["{flockfile}"]` to the end of your Package.swift',
            f"2. Update the required fields in {deploy}/Always.swift",
            f"3. Add your servers to {deploy}/Production.swift and {deploy}/Staging.swift",
        ]
