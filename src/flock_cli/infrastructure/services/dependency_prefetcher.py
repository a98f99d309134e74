"""Warm the SwiftPM cache for the .flock package."""

from flock_cli.domain.entities import OperationResult
from flock_cli.domain.protocols import BuildToolProtocol, TelemetryPort


class DependencyPrefetcher:
    """Builds .flock once so dependencies get downloaded. The compile itself is expected to fail."""

    def __init__(self, build_tool: BuildToolProtocol, telemetry: TelemetryPort) -> None:
        self._build_tool = build_tool
        self.telemetry = telemetry

    def build(self) -> OperationResult[None]:
        self.telemetry.step("Downloading and building dependencies...")
        try:
            result = self._build_tool.build(silent=True)
        except Exception as e:
            # JUSTIFICATION: a broken toolchain must not fail initialization.
            result = OperationResult.failure(f"{type(e).__name__}: {e}")
        if not result.ok:
            self.telemetry.debug(f"Dependency build discarded: {result.error}")
        self.telemetry.success("Successfully downloaded dependencies")
        return result
