"""Configuration values for the initializer. Immutable, created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SWIFT_EXECUTABLE = "swift"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class FlockPaths:
    """Every path the init workflow reads or writes, resolved against one root."""

    root: Path

    @property
    def flockfile(self) -> Path:
        return self.root / "Flockfile.swift"

    @property
    def flock_directory(self) -> Path:
        return self.root / ".flock"

    @property
    def deploy_directory(self) -> Path:
        return self.root / "deploy"

    @property
    def dependencies_file(self) -> Path:
        return self.deploy_directory / "FlockDependencies.json"

    @property
    def package_file(self) -> Path:
        return self.flock_directory / "Package.swift"

    @property
    def build_directory(self) -> Path:
        return self.flock_directory / ".build"

    @property
    def packages_directory(self) -> Path:
        return self.flock_directory / "Packages"

    @property
    def gitignore(self) -> Path:
        return self.root / ".gitignore"

    def precondition_paths(self) -> tuple[Path, ...]:
        """Paths that must be absent before initialization."""
        return (self.flock_directory, self.flockfile)

    def relative(self, path: Path) -> str:
        """Render a path relative to root, the way it is shown to users and written to .gitignore."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


class FlockSettings:
    """
    Tool settings read from flock.toml and the environment.

    Unknown keys are ignored with a warning; invalid values fall back to
    defaults so a broken settings file never blocks initialization.
    """

    KNOWN_KEYS = frozenset({"swift", "log_level"})

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config = dict(config_dict or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        unknown = sorted(set(config) - self.KNOWN_KEYS)
        if unknown:
            logger.warning("Configuration Warning: ignoring unknown flock.toml keys: %s",
                           ", ".join(unknown))

    @property
    def config(self) -> dict[str, object]:
        return self._config

    @property
    def swift_executable(self) -> str:
        raw = self._config.get("swift", DEFAULT_SWIFT_EXECUTABLE)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
        return DEFAULT_SWIFT_EXECUTABLE

    @property
    def log_level(self) -> int:
        raw = self._config.get("log_level", DEFAULT_LOG_LEVEL)
        if isinstance(raw, str):
            level = logging.getLevelName(raw.upper())
            if isinstance(level, int):
                return level
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
