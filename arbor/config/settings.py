"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Configuration management for Arbor.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from arbor.exceptions import InvalidConfigurationError, UnsupportedHashAlgorithmError
from arbor.logging_config import get_logger
from arbor.merkle.hashing import DEFAULT_ALGORITHM, validate_algorithm
from arbor.samples import DEFAULT_SAMPLE_FILE

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${ARBOR_HASH}" -> value of ARBOR_HASH env var
        "${ARBOR_HASH:sha256}" -> value of ARBOR_HASH or "sha256" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class HashingConfig:
    """Hash primitive configuration."""

    algorithm: str = DEFAULT_ALGORITHM


@dataclass
class SamplesConfig:
    """Sample hash file configuration."""

    file: str = DEFAULT_SAMPLE_FILE
    count: int = 10
    length: int = 64  # hex characters, 64 = 32 bytes


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "console" or "json"


@dataclass
class ArborConfig:
    """Main Arbor configuration."""

    hashing: HashingConfig = field(default_factory=HashingConfig)
    samples: SamplesConfig = field(default_factory=SamplesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.arbor/config.yaml")


def get_default_config() -> ArborConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        ArborConfig: Default configuration object
    """
    return ArborConfig()


def load_config(config_path: Optional[str] = None) -> ArborConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        ArborConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (InvalidConfigurationError, TypeError, ValueError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"'{name}' section must be a mapping")
    return section


def _build_config_from_dict(config_data: Dict[str, Any]) -> ArborConfig:
    """
    Build configuration object from dictionary.

    Values that came through environment expansion are strings, so numeric
    fields are coerced with int().

    Args:
        config_data: Configuration dictionary from YAML

    Returns:
        ArborConfig: Configuration object
    """
    hashing_data = _section(config_data, 'hashing')
    hashing = HashingConfig(
        algorithm=str(hashing_data.get('algorithm', DEFAULT_ALGORITHM)),
    )

    samples_data = _section(config_data, 'samples')
    samples = SamplesConfig(
        file=str(samples_data.get('file', DEFAULT_SAMPLE_FILE)),
        count=int(samples_data.get('count', 10)),
        length=int(samples_data.get('length', 64)),
    )

    logging_data = _section(config_data, 'logging')
    logging = LoggingConfig(
        level=str(logging_data.get('level', 'INFO')),
        file=str(logging_data.get('file') or ''),
        format=str(logging_data.get('format', 'console')),
    )

    return ArborConfig(hashing=hashing, samples=samples, logging=logging)


def _validate_config(config: ArborConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    try:
        config.hashing.algorithm = validate_algorithm(config.hashing.algorithm)
    except UnsupportedHashAlgorithmError as e:
        raise InvalidConfigurationError(str(e)) from e

    if not config.samples.file:
        raise InvalidConfigurationError("samples file path cannot be empty")

    if config.samples.count < 1:
        raise InvalidConfigurationError(
            f"samples count must be at least 1, got {config.samples.count}"
        )

    # Each hash must decode to whole bytes
    if config.samples.length < 2 or config.samples.length % 2 != 0:
        raise InvalidConfigurationError(
            f"samples length must be a positive even number, got {config.samples.length}"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    valid_formats = ["console", "json"]
    if config.logging.format not in valid_formats:
        raise InvalidConfigurationError(
            f"logging format must be one of {valid_formats}, "
            f"got '{config.logging.format}'"
        )
