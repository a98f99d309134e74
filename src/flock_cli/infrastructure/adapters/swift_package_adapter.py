"""SwiftPM adapter: manifest dump and .flock builds through the `swift` executable."""

import json
import logging
import subprocess
from pathlib import Path

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.entities import OperationResult, PackageManifest
from flock_cli.domain.protocols import BuildToolProtocol

logger = logging.getLogger(__name__)


class SwiftPackageAdapter(BuildToolProtocol):
    """Runs SwiftPM commands synchronously. Calls block until the process exits."""

    def __init__(self, paths: FlockPaths, swift_executable: str = "swift") -> None:
        self._paths = paths
        self._swift = swift_executable

    def query_manifest(self) -> OperationResult[PackageManifest]:
        """Run `swift package dump-package` in the host package root."""
        result = self._run(["package", "dump-package"], cwd=self._paths.root)
        if not result.ok or result.value is None:
            return OperationResult.failure(result.error or "dump-package failed")
        try:
            data = json.loads(result.value)
            return OperationResult.success(PackageManifest.from_dump(data))
        except ValueError as e:
            return OperationResult.failure(f"Unreadable package manifest: {e}")

    def prefetch_dependencies(self) -> OperationResult[None]:
        """Resolve the .flock package's dependencies without compiling."""
        result = self._run(
            ["package", "--package-path", str(self._paths.flock_directory), "resolve"],
            cwd=self._paths.root,
        )
        return OperationResult.success() if result.ok else OperationResult.failure(
            result.error or "resolve failed")

    def build(self, silent: bool = True) -> OperationResult[None]:
        """Build the .flock package; when not silent, output goes straight to the terminal."""
        result = self._run(
            ["build", "--package-path", str(self._paths.flock_directory)],
            cwd=self._paths.root,
            capture=silent,
        )
        return OperationResult.success() if result.ok else OperationResult.failure(
            result.error or "build failed")

    def _run(self, args: list[str], cwd: Path, capture: bool = True) -> OperationResult[str]:
        cmd = [self._swift, *args]
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=capture,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return OperationResult.failure(
                f"'{self._swift}' not found. Install the Swift toolchain or set FLOCK_SWIFT.")
        except OSError as e:
            return OperationResult.failure(f"Could not run {' '.join(cmd)}: {e}")

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""
        if stderr:
            logger.debug("%s stderr:\n%s", " ".join(cmd), stderr)
        if completed.returncode != 0:
            detail = stderr.strip() or stdout.strip()
            message = f"{' '.join(cmd)} exited with code {completed.returncode}"
            return OperationResult.failure(f"{message}: {detail}" if detail else message)
        return OperationResult.success(stdout)
