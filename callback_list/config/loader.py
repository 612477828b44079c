"""
Configuration loader with YAML overrides
"""
from pathlib import Path
from typing import Optional, Union
import logging

import yaml
from pydantic import ValidationError

from .schemas import Config


class ConfigLoader:
    """Loads defaults, applies YAML overrides and validates the result"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._config: Optional[Config] = None

    @property
    def config(self) -> Optional[Config]:
        """Last loaded config, if any"""
        return self._config

    def load(self, override_file: Optional[Union[str, Path]] = None) -> Config:
        """Load configuration with optional overrides"""
        config = Config()

        if override_file:
            override_path = Path(override_file)
            if not override_path.exists() and override_path.suffix == "":
                # Try with .yaml extension
                override_path = override_path.with_suffix(".yaml")
            if not override_path.exists():
                raise FileNotFoundError(f"Config override file not found: {override_file}")

            self.logger.info(f"Loading config overrides from: {override_path}")
            with open(override_path) as f:
                overrides = yaml.safe_load(f) or {}

            if not isinstance(overrides, dict):
                raise ValueError(f"Config overrides must be a mapping, got {type(overrides).__name__}")

            try:
                config_dict = config.model_dump()
                self._deep_update(config_dict, overrides)
                config = Config(**config_dict)
            except ValidationError as e:
                self.logger.error(f"Failed to apply config overrides: {e}")
                raise ValueError(f"Invalid config overrides: {e}") from e
            self.logger.info("Config overrides applied successfully")

        self._config = config
        return config

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Deep update base_dict with update_dict"""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value


# Global config instance
_config_loader = ConfigLoader()


def load_config(override_file: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration with optional overrides

    Args:
        override_file: Path to an override YAML file (".yaml" may be omitted)

    Returns:
        Validated Config object
    """
    return _config_loader.load(override_file)
