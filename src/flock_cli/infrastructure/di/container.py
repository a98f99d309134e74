from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

from flock_cli.domain.config import FlockPaths, FlockSettings
from flock_cli.domain.services.manifest_introspector import ManifestIntrospector
from flock_cli.infrastructure.adapters.swift_package_adapter import SwiftPackageAdapter
from flock_cli.infrastructure.config_file_loader import ConfigFileLoader
from flock_cli.infrastructure.services.dependency_prefetcher import DependencyPrefetcher
from flock_cli.infrastructure.services.environment_creator import EnvironmentCreator
from flock_cli.infrastructure.services.gitignore_updater import GitIgnoreUpdater
from flock_cli.infrastructure.services.scaffolder import Scaffolder
from flock_cli.interface.telemetry import ProjectTelemetry
from flock_cli.use_cases.init_project import InitProjectUseCase

if TYPE_CHECKING:
    from flock_cli.domain.protocols import (
        BuildToolProtocol,
        DependencyPrefetcherProtocol,
        GitIgnoreUpdaterProtocol,
        InitWorkflowProtocol,
        ManifestIntrospectorProtocol,
        ScaffolderProtocol,
        TelemetryPort,
    )


class FlockContainer:
    """Dependency Injection Container for one initialization root."""

    def __init__(
        self,
        root: Path,
        telemetry: Optional["TelemetryPort"] = None,
        settings: FlockSettings | None = None,
    ) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(root, telemetry, settings)

    def _register_defaults(
        self,
        root: Path,
        telemetry: Optional["TelemetryPort"],
        settings: FlockSettings | None,
    ) -> None:
        """Register default implementations for protocols."""
        if settings is None:
            settings = FlockSettings(ConfigFileLoader.load_config(root))
        self.register_singleton("FlockSettings", settings)

        paths = FlockPaths(root)
        self.register_singleton("FlockPaths", paths)

        if telemetry is None:
            telemetry = ProjectTelemetry("FLOCK", "cyan", "Automated deployment of Swift projects")
        self.register_singleton("TelemetryPort", telemetry)

        build_tool = SwiftPackageAdapter(paths, swift_executable=settings.swift_executable)
        self.register_singleton("SwiftPackageAdapter", build_tool)

        introspector = ManifestIntrospector(build_tool)
        self.register_singleton("ManifestIntrospector", introspector)
        self.register_singleton(
            "Scaffolder",
            Scaffolder(paths, telemetry, introspector, EnvironmentCreator(paths)),
        )
        self.register_singleton("GitIgnoreUpdater", GitIgnoreUpdater(paths, telemetry))
        self.register_singleton(
            "DependencyPrefetcher", DependencyPrefetcher(build_tool, telemetry))

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_settings(self) -> FlockSettings:
        return cast(FlockSettings, self.get("FlockSettings"))

    def get_paths(self) -> FlockPaths:
        return cast(FlockPaths, self.get("FlockPaths"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_build_tool(self) -> "BuildToolProtocol":
        """Return the SwiftPM adapter."""
        return cast("BuildToolProtocol", self.get("SwiftPackageAdapter"))

    def get_introspector(self) -> "ManifestIntrospectorProtocol":
        return cast("ManifestIntrospectorProtocol", self.get("ManifestIntrospector"))

    def get_scaffolder(self) -> "ScaffolderProtocol":
        """Return the project scaffolder."""
        return cast("ScaffolderProtocol", self.get("Scaffolder"))

    def get_gitignore_updater(self) -> "GitIgnoreUpdaterProtocol":
        return cast("GitIgnoreUpdaterProtocol", self.get("GitIgnoreUpdater"))

    def get_prefetcher(self) -> "DependencyPrefetcherProtocol":
        return cast("DependencyPrefetcherProtocol", self.get("DependencyPrefetcher"))

    def get_init_use_case(self) -> "InitWorkflowProtocol":
        """Build the init workflow from the registered services."""
        return InitProjectUseCase(
            paths=self.get_paths(),
            scaffolder=self.get_scaffolder(),
            gitignore_updater=self.get_gitignore_updater(),
            prefetcher=self.get_prefetcher(),
            telemetry=self.get_telemetry_port(),
        )
