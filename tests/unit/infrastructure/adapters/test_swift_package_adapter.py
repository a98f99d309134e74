"""Unit tests for SwiftPackageAdapter."""

import json
import subprocess
from unittest.mock import patch

from flock_cli.domain.config import FlockPaths
from flock_cli.infrastructure.adapters.swift_package_adapter import SwiftPackageAdapter

RUN = "flock_cli.infrastructure.adapters.swift_package_adapter.subprocess.run"


def _completed(returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestQueryManifest:
    def test_parses_dump(self, paths: FlockPaths) -> None:
        dump = {"name": "App", "targets": [{"name": "App", "dependencies": []}]}
        with patch(RUN, return_value=_completed(stdout=json.dumps(dump))) as mock_run:
            result = SwiftPackageAdapter(paths).query_manifest()

        assert result.ok
        assert result.value.name == "App"
        args, kwargs = mock_run.call_args
        assert args[0] == ["swift", "package", "dump-package"]
        assert kwargs["cwd"] == paths.root
        assert kwargs["capture_output"] is True

    def test_non_zero_exit(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed(returncode=1, stderr="error: no Package.swift")):
            result = SwiftPackageAdapter(paths).query_manifest()
        assert not result.ok
        assert "exited with code 1" in result.error
        assert "no Package.swift" in result.error

    def test_invalid_json(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed(stdout="warning: something\n")):
            result = SwiftPackageAdapter(paths).query_manifest()
        assert not result.ok
        assert result.error.startswith("Unreadable package manifest")

    def test_missing_name(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed(stdout='{"targets": []}')):
            assert not SwiftPackageAdapter(paths).query_manifest().ok

    def test_swift_not_installed(self, paths: FlockPaths) -> None:
        with patch(RUN, side_effect=FileNotFoundError()):
            result = SwiftPackageAdapter(paths, swift_executable="swift-5").query_manifest()
        assert not result.ok
        assert "'swift-5' not found" in result.error


class TestBuild:
    def test_silent_build_targets_flock_directory(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed()) as mock_run:
            result = SwiftPackageAdapter(paths).build(silent=True)
        assert result.ok
        args, kwargs = mock_run.call_args
        assert args[0] == ["swift", "build", "--package-path", str(paths.flock_directory)]
        assert kwargs["capture_output"] is True

    def test_loud_build_does_not_capture(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed()) as mock_run:
            SwiftPackageAdapter(paths).build(silent=False)
        assert mock_run.call_args.kwargs["capture_output"] is False

    def test_build_failure(self, paths: FlockPaths) -> None:
        with patch(RUN, return_value=_completed(returncode=1, stderr="error: compile")):
            result = SwiftPackageAdapter(paths).build()
        assert not result.ok
        assert "error: compile" in result.error


def test_prefetch_resolves(paths: FlockPaths) -> None:
    with patch(RUN, return_value=_completed()) as mock_run:
        assert SwiftPackageAdapter(paths).prefetch_dependencies().ok
    assert mock_run.call_args.args[0] == [
        "swift", "package", "--package-path", str(paths.flock_directory), "resolve"]
