from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flock_cli.domain.entities import (
        InitReport,
        OperationResult,
        PackageManifest,
        ProjectDefaults,
        ScaffoldReport,
    )


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def instructions(self, title: str, lines: list[str]) -> None: ...
    def handshake(self) -> None: ...


class BuildToolProtocol(Protocol):
    """Narrow capability over the host package's build tool (SwiftPM)."""

    def query_manifest(self) -> "OperationResult[PackageManifest]":
        """Return the host package manifest, or a failure describing why it is unavailable."""
        ...

    def prefetch_dependencies(self) -> "OperationResult[None]":
        """Resolve and download dependencies of the .flock package without compiling."""
        ...

    def build(self, silent: bool = True) -> "OperationResult[None]":
        """Build the .flock package. Silent mode captures all output."""
        ...


class ManifestIntrospectorProtocol(Protocol):
    def introspect(self) -> "OperationResult[ProjectDefaults]": ...
    def defaults(
        self, result: "OperationResult[ProjectDefaults] | None" = None
    ) -> "ProjectDefaults": ...


class ScaffolderProtocol(Protocol):
    def scaffold(self) -> "ScaffoldReport": ...


class GitIgnoreUpdaterProtocol(Protocol):
    def update(self) -> "OperationResult[bool]": ...


class DependencyPrefetcherProtocol(Protocol):
    def build(self) -> "OperationResult[None]": ...


class InitWorkflowProtocol(Protocol):
    def execute(self) -> "InitReport": ...
