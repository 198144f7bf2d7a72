"""
Configuration Loader
Loads fiskaly settings from various sources
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from fiskaly_sdk.config.settings import FiskalySettings, ENV_VAR_MAPPING, ConfigDefaults
from fiskaly_sdk.config.config_validator import ConfigValidator
from fiskaly_sdk.exceptions import ConfigError


class ConfigLoader:
    """
    ConfigLoader class
    Provides multiple ways to load and merge settings
    """

    def __init__(self) -> None:
        self._validator = ConfigValidator()

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load settings from a JSON file

        Args:
            path: Path to JSON settings file

        Returns:
            Loaded settings dictionary

        Raises:
            ConfigError: If file not found or invalid JSON
        """
        file_path = Path(path).resolve()

        if not file_path.exists():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(
                f"Configuration file must contain a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR"
            )
        return config

    def from_environment(self) -> Dict[str, Any]:
        """
        Load settings from environment variables

        Returns:
            Settings dictionary from environment variables
        """
        config: Dict[str, Any] = {}

        for env_var, config_key in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var)
            if value is not None and value != "":
                config[config_key] = self._parse_env_value(config_key, value)

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of a settings dictionary"""
        return config.copy()

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge settings dictionaries, later sources win

        None values never override earlier ones.
        """
        merged: Dict[str, Any] = {}

        for source in sources:
            merged.update(self._filter_none(source))

        return merged

    def resolve(self, config: Dict[str, Any]) -> FiskalySettings:
        """
        Resolve settings with defaults and validation

        Raises:
            ConfigError: If the settings are invalid
        """
        self._validator.validate_or_raise(config)

        try:
            return FiskalySettings(**config)
        except ValidationError as e:
            raise ConfigError(
                f"Configuration validation failed: {e}",
                code="CONFIG_INVALID"
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> FiskalySettings:
        """
        Load, merge, and resolve settings from multiple sources

        Priority, lowest first: file, environment, programmatic config.
        """
        sources: List[Dict[str, Any]] = []

        if file is not None:
            sources.append(self.from_file(file))

        if env:
            sources.append(self.from_environment())

        if config is not None:
            sources.append(config)

        return self.resolve(self.merge(*sources))

    def create_template(self, path: Union[str, Path]) -> None:
        """
        Create a settings template file

        Args:
            path: Path to write template
        """
        template = {
            "fiskaly_service": "http://localhost:8080/invoke",
            "api_key": "YOUR_API_KEY",
            "api_secret": "YOUR_API_SECRET",
            "base_url": ConfigDefaults.BASE_URL,
            "timeout": ConfigDefaults.TIMEOUT,
        }

        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(template, f, indent=2)

    def _parse_env_value(self, key: str, value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if key == "timeout":
            try:
                return int(value)
            except ValueError:
                return value

        return value

    def _filter_none(self, config: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in config.items() if v is not None}
