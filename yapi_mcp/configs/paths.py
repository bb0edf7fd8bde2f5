"""
YAPI MCP Paths

Data directory resolution.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".yapi-mcp"


def get_data_path() -> Path:
    """Get the data directory path."""
    data_path = os.environ.get("YAPI_MCP_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH


def ensure_data_dir() -> Path:
    """Ensure the data directory exists and return it."""
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
