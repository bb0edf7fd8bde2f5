"""
YAPI MCP Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from yapi_mcp.configs.logging import get_logger, setup_logging

# Paths
from yapi_mcp.configs.paths import ensure_data_dir, get_data_path

# YAML config
from yapi_mcp.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
)

# Settings
from yapi_mcp.configs.settings import YapiSettings, load_settings

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Settings
    "YapiSettings",
    "load_settings",
]
