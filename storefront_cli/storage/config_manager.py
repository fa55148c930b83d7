"""
Reads and writes the storefront's INI settings file.

Only the `DEFAULT` section is used. Values are validated by `StoreConfig`.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from storefront_cli.exceptions import ConfigurationError
from storefront_cli.models.config import StoreConfig

log = logging.getLogger(__name__)

FLOAT_KEYS = ("music_speed_mbps", "video_speed_mbps")


class ConfigManager:
    """Owns one settings file; a missing file simply means all defaults."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser()

    def load_config(self, cli_options: dict[str, Any] | None = None) -> StoreConfig:
        """
        Builds the effective StoreConfig.

        Precedence, lowest first: model defaults, the settings file,
        `cli_options`. Keys missing from an existing file are written back.

        Raises:
            ConfigurationError: The file cannot be parsed or a value is invalid.
        """
        if not self.config_file_path.is_file():
            log.debug(f"{self.config_file_path} not found; using default settings.")
        else:
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Cannot parse {self.config_file_path}: {e}"
                ) from e
            if self._migrate_if_needed():
                log.info(f"Added missing settings to {self.config_file_path}.")

        try:
            values = self._get_config_as_dict()
        except ValueError as e:
            raise ConfigurationError(f"Invalid value in configuration file: {e}") from e
        values.update(cli_options or {})

        try:
            return StoreConfig(**values, config_path=str(self.config_file_path.parent))
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, Any] | None = None) -> None:
        """Writes every setting, taking `settings` over the model defaults."""
        merged = StoreConfig().model_dump(include=StoreConfig.get_ini_keys())
        merged.update(settings or {})

        writer = configparser.ConfigParser()
        writer["DEFAULT"] = {key: str(merged[key]) for key in sorted(merged)}

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as fh:
                writer.write(fh)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write {self.config_file_path}: {e}"
            ) from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Returns the file's values, with defaults for anything not present."""
        section = self._parser["DEFAULT"]
        values = StoreConfig().model_dump(include=StoreConfig.get_ini_keys())
        for key in FLOAT_KEYS:
            values[key] = section.getfloat(key, values[key])
        values["default_kind"] = section.get("default_kind", values["default_kind"])
        return values

    def _migrate_if_needed(self) -> bool:
        """Fills in keys newer than the file. Returns True if it was rewritten."""
        section = self._parser["DEFAULT"]
        defaults = StoreConfig()
        added = [key for key in sorted(StoreConfig.get_ini_keys()) if key not in section]
        if not added:
            return False

        for key in added:
            section[key] = str(getattr(defaults, key))
        log.debug(f"Settings added to config: {', '.join(added)}.")

        try:
            with open(self.config_file_path, "w", encoding="utf-8") as fh:
                self._parser.write(fh)
        except OSError as e:
            log.error(f"Could not update {self.config_file_path}: {e}")
            return False
        return True
