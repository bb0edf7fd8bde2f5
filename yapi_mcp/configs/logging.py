"""
YAPI MCP Logging Configuration

Configures logging based on environment variables:
- YAPI_MCP_DEBUG: Enable debug logging (default: false, or `debug` in config.yaml)
- YAPI_MCP_LOG_FILE: Optional log file path

stdout carries the MCP stream, so console output always goes to stderr.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from yapi_mcp.configs.yaml_config import load_yaml_config


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the service.

    Args:
        debug: Enable debug level. Defaults to YAPI_MCP_DEBUG env var,
               then `debug` in config.yaml.
        log_file: Log file path. Defaults to YAPI_MCP_LOG_FILE env var.

    Returns:
        Root logger for yapi_mcp
    """
    if debug is None:
        env_debug = os.environ.get("YAPI_MCP_DEBUG")
        if env_debug is not None:
            debug = env_debug.lower() in ("true", "1", "yes")
        else:
            debug = bool(load_yaml_config().get("debug", False))
    if log_file is None:
        log_file = os.environ.get("YAPI_MCP_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("yapi_mcp")
    logger.setLevel(level)
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_path}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "server", "tools", "http")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"yapi_mcp.{component}")
