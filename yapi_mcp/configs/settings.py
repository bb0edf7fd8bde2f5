"""
YAPI MCP Settings

Resolves the registry connection settings once at process entry.

Priority (highest wins):
1. Environment variables (YAPI_BASE_URL, YAPI_TOKEN, YAPI_TIMEOUT)
2. `yapi:` section of config.yaml
3. Defaults
"""

import os
from dataclasses import dataclass
from typing import Optional

from yapi_mcp.configs.yaml_config import load_yaml_config
from yapi_mcp.exceptions import ConfigurationError, MissingConfigError


@dataclass(frozen=True)
class YapiSettings:
    """Immutable registry connection settings."""

    base_url: str
    token: str
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return f"YapiSettings(base_url={self.base_url!r}, token='***', timeout={self.timeout!r})"


def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("Invalid YAPI timeout", {"value": value}) from e
    if timeout <= 0:
        raise ConfigurationError("YAPI timeout must be positive", {"value": value})
    return timeout


def load_settings() -> YapiSettings:
    """
    Build settings from the environment and config.yaml.

    Returns:
        YapiSettings

    Raises:
        MissingConfigError: No token configured
        ConfigurationError: Timeout is not a positive number
    """
    yaml_section = load_yaml_config().get("yapi") or {}
    if not isinstance(yaml_section, dict):
        yaml_section = {}

    base_url = os.environ.get("YAPI_BASE_URL")
    if base_url is None:
        base_url = yaml_section.get("base_url") or ""

    token = os.environ.get("YAPI_TOKEN") or yaml_section.get("token")
    if not token:
        raise MissingConfigError("YAPI_TOKEN environment variable is required")

    timeout = os.environ.get("YAPI_TIMEOUT")
    if timeout is None:
        timeout = yaml_section.get("timeout")

    return YapiSettings(
        base_url=str(base_url).rstrip("/"),
        token=str(token),
        timeout=_parse_timeout(timeout),
    )
