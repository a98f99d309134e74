"""Unit tests for DependencyPrefetcher."""

from unittest.mock import MagicMock

from flock_cli.domain.entities import OperationResult
from flock_cli.infrastructure.services.dependency_prefetcher import DependencyPrefetcher


def test_build_failure_is_discarded(fake_build_tool, telemetry) -> None:
    build_tool = fake_build_tool(build_result=OperationResult.failure("error: no such module"))

    result = DependencyPrefetcher(build_tool, telemetry).build()

    assert build_tool.calls == ["build(silent=True)"]
    assert not result.ok
    assert result.error == "error: no such module"
    telemetry.step.assert_called_once_with("Downloading and building dependencies...")
    telemetry.success.assert_called_once_with("Successfully downloaded dependencies")


def test_build_exception_is_discarded(telemetry) -> None:
    build_tool = MagicMock()
    build_tool.build.side_effect = OSError("toolchain vanished")

    result = DependencyPrefetcher(build_tool, telemetry).build()

    assert not result.ok
    assert "toolchain vanished" in result.error
    telemetry.success.assert_called_once_with("Successfully downloaded dependencies")


def test_successful_build(fake_build_tool, telemetry) -> None:
    build_tool = fake_build_tool(build_result=OperationResult.success())
    assert DependencyPrefetcher(build_tool, telemetry).build().ok
