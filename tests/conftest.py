"""Shared fixtures for flock-cli tests.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ on
the import path.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.entities import OperationResult, PackageManifest


class FakeBuildTool:
    """BuildToolProtocol stand-in that records calls instead of running swift."""

    def __init__(
        self,
        manifest: object = None,
        manifest_error: str | None = "swift not available",
        build_result: OperationResult[None] | None = None,
    ) -> None:
        self._manifest = manifest
        self._manifest_error = manifest_error
        self._build_result = build_result or OperationResult.failure("compile failed")
        self.calls: list[str] = []

    def query_manifest(self) -> OperationResult[PackageManifest]:
        self.calls.append("query_manifest")
        if self._manifest is None:
            return OperationResult.failure(self._manifest_error or "no manifest")
        return OperationResult.success(PackageManifest.from_dump(self._manifest))

    def prefetch_dependencies(self) -> OperationResult[None]:
        self.calls.append("prefetch_dependencies")
        return OperationResult.success()

    def build(self, silent: bool = True) -> OperationResult[None]:
        self.calls.append(f"build(silent={silent})")
        return self._build_result


@pytest.fixture
def paths(tmp_path: Path) -> FlockPaths:
    return FlockPaths(tmp_path)


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


def _snapshot(root: Path) -> dict[str, bytes | None]:
    """Map of every path under root to its bytes (None for directories and links)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        if path.is_symlink() or path.is_dir():
            result[rel] = None
        else:
            result[rel] = path.read_bytes()
    return result


@pytest.fixture
def fake_build_tool() -> type[FakeBuildTool]:
    return FakeBuildTool


@pytest.fixture
def snapshot():
    return _snapshot
