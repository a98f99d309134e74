from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a best-effort step.

    Failures are captured here instead of raised so the caller decides,
    at the call site, whether to discard them.
    """
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "OperationResult[T]":
        return cls(error=error or "unknown failure")


class FrameworkType(Enum):
    """Server framework the deployed project is built on. Value is the Swift type prefix."""
    GENERIC = "GenericServer"
    VAPOR = "Vapor"
    ZEWO = "Zewo"
    KITURA = "Kitura"
    PERFECT = "Perfect"


@dataclass(frozen=True)
class TargetDescription:
    name: str
    dependencies: frozenset[str] = frozenset()


@dataclass(frozen=True)
class DependencyDescription:
    url: str | None = None


@dataclass(frozen=True)
class PackageManifest:
    """
    Read-only view of `swift package dump-package` output.

    Only `name` is mandatory. Missing or malformed `targets` and
    `dependencies` sections are read as empty; individual malformed target
    entries are skipped. `declares_targets` records whether the dump listed
    any target entries at all, well-formed or not.
    """
    name: str
    targets: tuple[TargetDescription, ...] = ()
    dependencies: tuple[DependencyDescription, ...] = ()
    declares_targets: bool = False

    @classmethod
    def from_dump(cls, data: object) -> "PackageManifest":
        """Build a manifest from decoded JSON. Raises ValueError when no name is present."""
        if not isinstance(data, dict):
            raise ValueError("manifest dump is not an object")
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("manifest dump has no package name")

        targets: list[TargetDescription] = []
        raw_targets = data.get("targets")
        declares_targets = isinstance(raw_targets, list) and bool(raw_targets)
        if isinstance(raw_targets, list):
            for raw in raw_targets:
                target = cls._parse_target(raw)
                if target is not None:
                    targets.append(target)

        dependencies: list[DependencyDescription] = []
        raw_dependencies = data.get("dependencies")
        if isinstance(raw_dependencies, list):
            for raw in raw_dependencies:
                dependencies.append(
                    DependencyDescription(url=cls._dependency_url(raw)))

        return cls(
            name=name,
            targets=tuple(targets),
            dependencies=tuple(dependencies),
            declares_targets=declares_targets,
        )

    @staticmethod
    def _parse_target(raw: object) -> TargetDescription | None:
        if not isinstance(raw, dict):
            return None
        name = raw.get("name")
        deps = raw.get("dependencies")
        if not isinstance(name, str) or not isinstance(deps, list):
            return None
        names: set[str] = set()
        for dep in deps:
            dep_name = PackageManifest._dependency_name(dep)
            if dep_name is None:
                return None
            names.add(dep_name)
        return TargetDescription(name=name, dependencies=frozenset(names))

    @staticmethod
    def _dependency_name(dep: object) -> str | None:
        # Older dumps list bare names; newer ones wrap them as {"byName": [name, ...]}.
        if isinstance(dep, str):
            return dep
        if isinstance(dep, dict):
            for key in ("byName", "target", "product"):
                entry = dep.get(key)
                if isinstance(entry, list) and entry and isinstance(entry[0], str):
                    return entry[0]
        return None

    @staticmethod
    def _dependency_url(raw: object) -> str | None:
        if not isinstance(raw, dict):
            return None
        url = raw.get("url")
        if isinstance(url, str):
            return url
        source_control = raw.get("sourceControl")
        if isinstance(source_control, list) and source_control:
            location = source_control[0].get("location", {}) if isinstance(
                source_control[0], dict) else {}
            remote = location.get("remote") if isinstance(location, dict) else None
            if isinstance(remote, list) and remote:
                first = remote[0]
                if isinstance(first, str):
                    return first
                if isinstance(first, dict) and isinstance(first.get("urlString"), str):
                    return first["urlString"]
        return None


@dataclass(frozen=True)
class ProjectDefaults:
    """Values rendered into the base environment file. Strings are Swift expressions."""
    project_name: str
    executable_name: str
    framework: FrameworkType = FrameworkType.GENERIC


@dataclass(frozen=True)
class ScaffoldReport:
    """What the scaffolder did, including the best-effort failures it discarded."""
    environments: dict[str, OperationResult[str]] = field(default_factory=dict)
    dependencies_written: bool = False
    introspection: OperationResult[ProjectDefaults] = field(
        default_factory=OperationResult)

    def skipped_environments(self) -> list[str]:
        return [env for env, result in self.environments.items() if not result.ok]


@dataclass(frozen=True)
class InitReport:
    scaffold: ScaffoldReport
    gitignore: OperationResult[bool]
    prefetch: OperationResult[None]
