"""
Configuration Management Module

Handles loading, validation and saving of generator configuration files.
Schema definitions describe *what* a table looks like; this configuration
covers *how* values are drawn (seed, locale, temporal window, nesting of
structured values) and how the tool logs.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    """Configuration for the random source"""
    seed: Optional[int] = None
    locale: str = "en_US"


@dataclass
class TemporalConfig:
    """Window for date, time and datetime values (ISO 8601)"""
    start: str = "1970-01-01T00:00:00"
    end: str = "2037-12-31T23:59:59"

    @property
    def start_datetime(self) -> datetime:
        return datetime.fromisoformat(self.start)

    @property
    def end_datetime(self) -> datetime:
        return datetime.fromisoformat(self.end)


@dataclass
class StructuredConfig:
    """Configuration for json field values"""
    max_depth: int = 2
    max_items: int = 3  # length of generated arrays


@dataclass
class LoggingConfig:
    """Configuration for log output"""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class combining all sub-configurations"""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    temporal: TemporalConfig = field(default_factory=TemporalConfig)
    structured: StructuredConfig = field(default_factory=StructuredConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)


class ConfigLoader:
    """Loads and saves configuration files"""

    SECTIONS = {
        'generation': GenerationConfig,
        'temporal': TemporalConfig,
        'structured': StructuredConfig,
        'logging': LoggingConfig,
    }

    def load_from_file(self, filepath: Union[str, Path]) -> Config:
        """
        Load configuration from a YAML file

        Args:
            filepath: Path to the YAML configuration file

        Returns:
            Config object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(filepath, 'r') as f:
            try:
                config_dict = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid configuration file {filepath}: {e}") from e

        logger.info(f"Loaded configuration: {filepath}")
        return self._dict_to_config(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> Config:
        """
        Load configuration from a dictionary

        Args:
            config_dict: Configuration dictionary

        Returns:
            Config object
        """
        return self._dict_to_config(config_dict)

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> Config:
        """Convert dictionary to Config object"""
        if not isinstance(config_dict, dict):
            raise ValueError("Configuration must be a mapping")

        unknown = set(config_dict) - set(self.SECTIONS)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

        config = Config()
        for key, config_class in self.SECTIONS.items():
            if key not in config_dict:
                continue

            section = config_dict[key] or {}
            if not isinstance(section, dict):
                raise ValueError(f"Configuration section '{key}' must be a mapping")
            try:
                setattr(config, key, config_class(**section))
            except TypeError as e:
                raise ValueError(f"Invalid option in configuration section '{key}': {e}") from e

        return config

    def save_config(self, config: Config, filepath: Union[str, Path]):
        """
        Save configuration to a YAML file

        Args:
            config: Configuration to save
            filepath: Path to save the file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to: {filepath}")


class ConfigValidator:
    """Validates configuration parameters"""

    VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def validate(config: Config) -> tuple[bool, List[str]]:
        """
        Validate configuration parameters

        Args:
            config: Configuration to validate

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        seed = config.generation.seed
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            errors.append("generation.seed must be a non-negative integer")

        if not config.generation.locale:
            errors.append("generation.locale must not be empty")

        try:
            if config.temporal.start_datetime > config.temporal.end_datetime:
                errors.append("temporal.start must not be after temporal.end")
        except (TypeError, ValueError) as e:
            errors.append(f"temporal window is not valid ISO 8601: {e}")

        for name in ("max_depth", "max_items"):
            value = getattr(config.structured, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(f"structured.{name} must be a non-negative integer")

        if str(config.logging.level).upper() not in ConfigValidator.VALID_LEVELS:
            errors.append(f"logging.level must be one of {ConfigValidator.VALID_LEVELS}")

        return len(errors) == 0, errors


def get_default_config() -> Config:
    """Get the default configuration"""
    return Config()
