"""Write one deploy/<Environment>.swift file."""

from pathlib import Path

from flock_cli.domain.config import FlockPaths
from flock_cli.domain.constants import ENVIRONMENT_FILE_TEMPLATE, ENVIRONMENTS
from flock_cli.domain.entities import OperationResult


class EnvironmentCreator:
    """Creates environment files. Never overwrites one that already exists."""

    def __init__(self, paths: FlockPaths) -> None:
        self._paths = paths

    def environment_file(self, env: str) -> Path:
        stem, _ = self._names(env)
        return self._paths.deploy_directory / f"{stem}.swift"

    def create(self, env: str, defaults: list[str]) -> OperationResult[str]:
        """Write the environment file; the result carries its root-relative path."""
        path = self.environment_file(env)
        shown = self._paths.relative(path)
        _, class_name = self._names(env)
        body = "\n".join(f"        {line}" if line else "" for line in defaults)
        contents = ENVIRONMENT_FILE_TEMPLATE.format(class_name=class_name, body=body)
        try:
            # "x" refuses to clobber a file the user already edited.
            with path.open("x", encoding="utf-8") as f:
                f.write(contents)
        except FileExistsError:
            return OperationResult.failure(f"{shown} already exists")
        except OSError as e:
            return OperationResult.failure(f"Could not write {shown}: {e}")
        return OperationResult.success(shown)

    @staticmethod
    def _names(env: str) -> tuple[str, str]:
        if env in ENVIRONMENTS:
            return ENVIRONMENTS[env]
        name = env.capitalize()
        return (name, name)
