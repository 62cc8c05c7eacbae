"""
Configuration loader for YAML files.
"""

import yaml
from pathlib import Path
from typing import Union
import logging

from pydantic import ValidationError

from .schema import EngineConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and save engine configurations."""

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> EngineConfig:
        """
        Load configuration from a YAML file.

        Sections left out of the file keep their defaults, so a file that
        only overrides ``forecast.customer_values`` is valid.

        Parameters
        ----------
        path : Union[str, Path]
            Path to the YAML configuration file.

        Returns
        -------
        EngineConfig
            Validated engine configuration.

        Raises
        ------
        FileNotFoundError
            If the configuration file doesn't exist.
        ValueError
            If the configuration is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f) or {}

        if not isinstance(config_dict, dict):
            raise ValueError(f"Invalid configuration in {path}: expected a mapping at top level")

        try:
            config = EngineConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {path}: {e}") from e

        logger.info(f"Loaded configuration '{config.name}' from {path}")
        return config

    @staticmethod
    def to_yaml(config: EngineConfig, path: Union[str, Path]) -> None:
        """
        Save configuration to a YAML file.

        Parameters
        ----------
        config : EngineConfig
            Configuration to save.
        path : Union[str, Path]
            Path to save the YAML file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(ConfigLoader.to_dict(config), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration '{config.name}' to {path}")

    @staticmethod
    def from_dict(config_dict: dict) -> EngineConfig:
        """Load configuration from a dictionary."""
        return EngineConfig(**config_dict)

    @staticmethod
    def to_dict(config: EngineConfig) -> dict:
        """JSON/YAML-safe dictionary (enum keys become their string values)."""
        return config.model_dump(mode="json")

    @staticmethod
    def get_template() -> dict:
        """
        Get a template configuration dictionary with every option filled in.

        Returns
        -------
        dict
            Template configuration with default values.
        """
        template = ConfigLoader.to_dict(EngineConfig())
        template["name"] = "my_engine_config"
        template["description"] = "Campaign estimation engine configuration"
        return template
