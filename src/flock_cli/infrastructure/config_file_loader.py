"""Load initializer settings from flock.toml and the environment. Infrastructure I/O only."""

import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

CONFIG_FILE_NAME = "flock.toml"
ENV_OVERRIDES: dict[str, str] = {
    "FLOCK_SWIFT": "swift",
    "FLOCK_LOG_LEVEL": "log_level",
}


class ConfigFileLoader:
    """
    Loads settings from the nearest flock.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the first flock.toml found walking up from `start`, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / CONFIG_FILE_NAME
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                return {}
            section = data.get("init", data)
            return dict(section) if isinstance(section, dict) else {}
        return {}

    @staticmethod
    def load_config(start: Path | None = None,
                    environ: dict[str, str] | None = None) -> dict[str, object]:
        """File settings with FLOCK_* environment variables taking precedence."""
        config = ConfigFileLoader.load_config_from_fs(start)
        env = os.environ if environ is None else environ
        for variable, key in ENV_OVERRIDES.items():
            value = env.get(variable)
            if value:
                config[key] = value
        return config
