"""
YAPI MCP YAML Configuration

Loading and defaults for ~/.yapi-mcp/config.yaml.
"""

from pathlib import Path

import yaml

from yapi_mcp.configs.paths import ensure_data_dir, get_data_path

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# YAPI MCP Configuration
# Environment variables (YAPI_BASE_URL, YAPI_TOKEN, YAPI_TIMEOUT) override these values.

yapi:
  # Registry base URL, e.g. https://yapi.example.com
  base_url: ""

  # Project token (prefer the YAPI_TOKEN env var)
  # token: ""

  # Per-request timeout in seconds (omit for no timeout)
  # timeout: 30

# Enable debug logging
debug: false
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from ~/.yapi-mcp/config.yaml.

    Returns:
        Configuration dictionary (empty if the file doesn't exist or can't be parsed)
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        loaded = yaml.safe_load(config_path.read_text())
    except (OSError, yaml.YAMLError):
        return {}

    return loaded if isinstance(loaded, dict) else {}


def create_default_config() -> bool:
    """
    Create config.yaml with defaults if it doesn't exist.

    Returns:
        True if the file was created, False if it already existed
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
