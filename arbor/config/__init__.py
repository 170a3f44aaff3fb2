"""
Configuration management for Arbor.

Handles loading and validation of configuration files.
"""

from arbor.config.settings import (
    ArborConfig,
    HashingConfig,
    LoggingConfig,
    SamplesConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ArborConfig",
    "HashingConfig",
    "LoggingConfig",
    "SamplesConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
