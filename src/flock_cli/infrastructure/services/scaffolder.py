"""Service for creating the Flock scaffold inside a Swift package."""

import json
import logging
from pathlib import Path

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.constants import (
    DEPENDENCIES_PACKAGE_NAME,
    DEPENDENCIES_TEMPLATE,
    ENV_CONFIG_DEFAULTS,
    FLOCKFILE_TEMPLATE,
    PACKAGE_DEPENDENCY_LINE,
    PACKAGE_FILE_TEMPLATE,
)
from flock_cli.domain.entities import OperationResult, ProjectDefaults, ScaffoldReport
from flock_cli.domain.exceptions import OperationFailed
from flock_cli.domain.protocols import ManifestIntrospectorProtocol, TelemetryPort
from flock_cli.domain.services.manifest_introspector import ManifestIntrospector
from flock_cli.infrastructure.services.environment_creator import EnvironmentCreator

logger = logging.getLogger(__name__)


class Scaffolder:
    """
    Creates Flockfile.swift, deploy/ and the .flock build directory.

    Each artifact has its own idempotence rule:
    - Flockfile.swift is written unconditionally (the workflow guarantees it is absent).
    - deploy/ is created if missing; a non-directory at that path is fatal.
    - Environment files are never overwritten; a failure skips only that file.
    - deploy/FlockDependencies.json is written only when absent.
    """

    def __init__(
        self,
        paths: FlockPaths,
        telemetry: TelemetryPort,
        introspector: ManifestIntrospectorProtocol,
        environment_creator: EnvironmentCreator,
    ) -> None:
        self._paths = paths
        self.telemetry = telemetry
        self._introspector = introspector
        self._environment_creator = environment_creator

    def scaffold(self) -> ScaffoldReport:
        """Create every scaffold artifact. Raises OperationFailed on a fatal write."""
        self.telemetry.step("Creating Flock files...")

        self._write(self._paths.flockfile, FLOCKFILE_TEMPLATE)
        self._create_directory(self._paths.deploy_directory)

        introspection = self._introspector.introspect()
        environments = self.create_environments(self._introspector.defaults(introspection))

        dependencies_written = False
        if not self._paths.dependencies_file.exists():
            self._write(self._paths.dependencies_file, DEPENDENCIES_TEMPLATE)
            dependencies_written = True

        self.form_flock_directory()

        self.telemetry.success("Successfully created Flock files")
        return ScaffoldReport(
            environments=environments,
            dependencies_written=dependencies_written,
            introspection=introspection,
        )

    def create_environments(
        self, base_defaults: ProjectDefaults
    ) -> dict[str, OperationResult[str]]:
        """Create base, production and staging. Failures are returned, not raised."""
        plan: list[tuple[str, list[str]]] = [
            ("base", ManifestIntrospector.render(base_defaults)),
            ("production", list(ENV_CONFIG_DEFAULTS)),
            ("staging", list(ENV_CONFIG_DEFAULTS)),
        ]
        results: dict[str, OperationResult[str]] = {}
        for env, lines in plan:
            result = self._environment_creator.create(env, lines)
            if result.ok:
                self.telemetry.debug(f"Generated: {result.value}")
            else:
                logger.debug("Skipped %s environment: %s", env, result.error)
            results[env] = result
        return results

    def form_flock_directory(self) -> None:
        """Create .flock/ with a Package.swift for the deploy dependencies and links to the sources."""
        flock_dir = self._paths.flock_directory
        self._create_directory(flock_dir)

        dependencies = self._read_dependencies()
        lines = [
            PACKAGE_DEPENDENCY_LINE.format(url=url, major=major)
            for url, major in dependencies
        ]
        self._write(
            self._paths.package_file,
            PACKAGE_FILE_TEMPLATE.format(
                name=DEPENDENCIES_PACKAGE_NAME, dependencies="\n".join(lines)),
        )

        self._link(flock_dir / "main.swift", Path("..") / self._paths.flockfile.name)
        deploy_name = self._paths.deploy_directory.name
        for source in sorted(self._paths.deploy_directory.glob("*.swift")):
            self._link(flock_dir / source.name, Path("..") / deploy_name / source.name)

    def _read_dependencies(self) -> list[tuple[str, int]]:
        shown = self._paths.relative(self._paths.dependencies_file)
        try:
            data = json.loads(self._paths.dependencies_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise OperationFailed(f"Couldn't read {shown}: {e}") from e

        raw = data.get("dependencies") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            raise OperationFailed(f"{shown} must contain a top-level 'dependencies' list")

        dependencies: list[tuple[str, int]] = []
        for entry in raw:
            if not isinstance(entry, dict):
                raise OperationFailed(f"{shown}: each dependency must be an object")
            url = entry.get("url")
            major = entry.get("major")
            if not isinstance(url, str) or not isinstance(major, int) or isinstance(major, bool):
                raise OperationFailed(
                    f"{shown}: each dependency needs a string 'url' and an integer 'major'")
            dependencies.append((url, major))
        return dependencies

    def _write(self, path: Path, contents: str) -> None:
        try:
            path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise OperationFailed(f"Couldn't write {self._paths.relative(path)}: {e}") from e
        self.telemetry.debug(f"Generated: {self._paths.relative(path)}")

    def _create_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OperationFailed(
                f"Couldn't create directory {self._paths.relative(path)}: {e}") from e

    def _link(self, link: Path, target: Path) -> None:
        if link.exists() or link.is_symlink():
            return
        try:
            link.symlink_to(target)
        except OSError as e:
            raise OperationFailed(f"Couldn't link {self._paths.relative(link)}: {e}") from e
