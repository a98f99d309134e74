"""Infer base-environment defaults from the host package manifest."""

import logging
from typing import TYPE_CHECKING

from flock_cli.domain.constants import (
    BASE_DEFAULTS_TEMPLATE,
    EXECUTABLE_NAME_PLACEHOLDER,
    FRAMEWORK_REPOSITORIES,
    PROJECT_NAME_PLACEHOLDER,
)
from flock_cli.domain.entities import (
    FrameworkType,
    OperationResult,
    PackageManifest,
    ProjectDefaults,
)

if TYPE_CHECKING:
    from flock_cli.domain.protocols import BuildToolProtocol

logger = logging.getLogger(__name__)

PLACEHOLDER_DEFAULTS = ProjectDefaults(
    project_name=PROJECT_NAME_PLACEHOLDER,
    executable_name=EXECUTABLE_NAME_PLACEHOLDER,
    framework=FrameworkType.GENERIC,
)


class ManifestIntrospector:
    """
    Best-effort extraction of project name, executable and server framework.

    Any failure while querying or interpreting the manifest yields a failure
    result; `defaults()` then falls back to PLACEHOLDER_DEFAULTS as a whole,
    never to a partially inferred set.
    """

    def __init__(self, build_tool: "BuildToolProtocol") -> None:
        self._build_tool = build_tool

    def introspect(self) -> OperationResult[ProjectDefaults]:
        try:
            manifest_result = self._build_tool.query_manifest()
            if not manifest_result.ok or manifest_result.value is None:
                return OperationResult.failure(
                    manifest_result.error or "package manifest unavailable")
            return OperationResult.success(self.infer(manifest_result.value))
        except Exception as e:
            # JUSTIFICATION: introspection must never block initialization.
            return OperationResult.failure(f"{type(e).__name__}: {e}")

    def defaults(
        self, result: OperationResult[ProjectDefaults] | None = None
    ) -> ProjectDefaults:
        """Inferred defaults, or PLACEHOLDER_DEFAULTS when introspection failed."""
        if result is None:
            result = self.introspect()
        if result.ok and result.value is not None:
            return result.value
        logger.debug("Manifest introspection discarded: %s", result.error)
        return PLACEHOLDER_DEFAULTS

    @staticmethod
    def infer(manifest: PackageManifest) -> ProjectDefaults:
        project_name = ManifestIntrospector.quote(manifest.name)
        if manifest.declares_targets or manifest.targets:
            executable_name = ManifestIntrospector.infer_executable(manifest)
        else:
            executable_name = project_name
        return ProjectDefaults(
            project_name=project_name,
            executable_name=executable_name,
            framework=ManifestIntrospector.infer_framework(manifest),
        )

    @staticmethod
    def infer_executable(manifest: PackageManifest) -> str:
        """Quoted name of the only target nothing depends on, else the placeholder."""
        target_names = {target.name for target in manifest.targets}
        dependency_names: set[str] = set()
        for target in manifest.targets:
            dependency_names.update(target.dependencies)
        executables = target_names - dependency_names
        if len(executables) == 1:
            return ManifestIntrospector.quote(next(iter(executables)))
        return EXECUTABLE_NAME_PLACEHOLDER

    @staticmethod
    def infer_framework(manifest: PackageManifest) -> FrameworkType:
        for dependency in manifest.dependencies:
            url = ManifestIntrospector.normalize_url(dependency.url)
            for known_url, framework in FRAMEWORK_REPOSITORIES:
                if url == known_url:
                    return framework
        return FrameworkType.GENERIC

    @staticmethod
    def normalize_url(url: str | None) -> str | None:
        if url is None:
            return None
        url = url.rstrip("/")
        if url.endswith(".git"):
            url = url[: -len(".git")]
        return url

    @staticmethod
    def quote(value: str) -> str:
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    @staticmethod
    def render(defaults: ProjectDefaults) -> list[str]:
        """Lines of the base environment's configure() body."""
        return [
            line.format(
                project_name=defaults.project_name,
                executable_name=defaults.executable_name,
                framework=defaults.framework.value,
            )
            for line in BASE_DEFAULTS_TEMPLATE
        ]
