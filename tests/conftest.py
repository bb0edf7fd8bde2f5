"""
Pytest fixtures for YAPI MCP tests.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for yapi_mcp imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fakes import TEST_BASE_URL, TEST_TOKEN, make_response  # noqa: E402
from yapi_mcp.configs import YapiSettings  # noqa: E402
from yapi_mcp.utils.http_client import YapiClient  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Keep tests away from the real environment and ~/.yapi-mcp."""
    for name in ("YAPI_BASE_URL", "YAPI_TOKEN", "YAPI_TIMEOUT", "YAPI_MCP_DEBUG", "YAPI_MCP_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("YAPI_MCP_DATA_PATH", str(tmp_path / "data"))
    yield tmp_path


@pytest.fixture
def settings() -> YapiSettings:
    return YapiSettings(base_url=TEST_BASE_URL, token=TEST_TOKEN)


@pytest.fixture
def client(settings: YapiSettings) -> YapiClient:
    return YapiClient(settings)


@pytest.fixture
def mock_get():
    """Patch requests.get as used by the YAPI client."""
    with patch("yapi_mcp.utils.http_client.requests.get") as mocked:
        mocked.return_value = make_response({"errcode": 0, "data": {}})
        yield mocked
