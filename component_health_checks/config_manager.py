"""Configuration manager module.

Loads the service's YAML configuration into immutable pydantic models.
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from component_health_checks.models.health_check_config import ComponentConfig

DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"


class ConfigManager:
    """Manager for loading the component configuration from YAML."""

    def __init__(self, yaml_path: Optional[Union[str, Path]] = None) -> None:
        """Initialize the configuration manager.

        Args:
             yaml_path: The path to the config.yaml file. If None, uses config/config.yaml.
        """
        self.yaml_path = Path(yaml_path) if yaml_path is not None else DEFAULT_CONFIG_PATH
        self.config = self._load_yaml()

    def _load_yaml(self) -> ComponentConfig:
        """Load and validate the configuration file.

        Returns:
            ComponentConfig: The loaded configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid YAML or has the wrong shape.
        """
        if not self.yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.yaml_path}")

        try:
            with open(self.yaml_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.yaml_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file: expected a mapping in {self.yaml_path}"
            )

        try:
            return ComponentConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {self.yaml_path}: {e}") from e
