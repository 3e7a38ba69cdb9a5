"""Reading and writing the themer configuration file."""

from __future__ import annotations

import tomllib
from os import PathLike
from pathlib import Path

import platformdirs
import tomli_w

from themer.config_models import Config

_CONFIG_FILE = "config.toml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or written."""


class ConfigLoader:
    """Loads and saves ``config.toml`` inside a configuration directory."""

    def __init__(self, config_dir: str | PathLike[str]) -> None:
        self.config_dir = Path(config_dir)

    @classmethod
    def default(cls) -> ConfigLoader:
        """Loader for the user's standard configuration directory."""
        return cls(platformdirs.user_config_path() / "themer")

    @property
    def _config_path(self) -> Path:
        return self.config_dir / _CONFIG_FILE

    def load(self) -> Config:
        path = self._config_path
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read {path}: {exc}") from exc
        try:
            return Config.from_dict(tomllib.loads(content))
        except (tomllib.TOMLDecodeError, ValueError) as exc:
            raise ConfigError(f"Failed to parse config.toml: {exc}") from exc

    def save(self, config: Config) -> None:
        path = self._config_path
        content = tomli_w.dumps(config.to_dict())
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write {path}: {exc}") from exc