"""Append Flock build paths to an existing .gitignore."""

import logging

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.constants import GITIGNORE_MARKER
from flock_cli.domain.entities import OperationResult
from flock_cli.domain.exceptions import OperationFailed
from flock_cli.domain.protocols import TelemetryPort

logger = logging.getLogger(__name__)


class GitIgnoreUpdater:
    """
    Adds the `# Flock` block once.

    A missing .gitignore is left missing; the step still succeeds.
    """

    def __init__(self, paths: FlockPaths, telemetry: TelemetryPort) -> None:
        self._paths = paths
        self.telemetry = telemetry

    def block(self) -> str:
        return "\n".join([
            "",
            GITIGNORE_MARKER,
            self._paths.relative(self._paths.build_directory),
            self._paths.relative(self._paths.packages_directory),
            "",
        ])

    def update(self) -> OperationResult[bool]:
        """Returns success(True) when the block was appended, success(False) when nothing changed."""
        self.telemetry.step("Adding Flock files to .gitignore...")
        appended = self._append_block()
        self.telemetry.success("Successfully added Flock files to .gitignore")
        return OperationResult.success(appended)

    def _append_block(self) -> bool:
        gitignore = self._paths.gitignore
        if not gitignore.exists():
            logger.debug("No .gitignore at %s; leaving it absent", gitignore)
            return False

        content = b""
        try:
            content = gitignore.read_bytes()
        except OSError as e:
            logger.debug("Could not read .gitignore, treating as empty: %s", e)

        if GITIGNORE_MARKER.encode("utf-8") in content:
            self.telemetry.debug(".gitignore already contains Flock entries.")
            return False

        try:
            f = gitignore.open("ab")
        except OSError as e:
            raise OperationFailed("Couldn't open .gitignore stream") from e
        with f:
            f.write(self.block().encode("utf-8"))
        return True
