"""
YAPI HTTP Client

Issues GET requests against the YAPI registry with the project token
attached both as a bearer header and as the `token` query parameter.
Uses `requests` with standardized error translation; nothing is retried.

Usage:
    from yapi_mcp.utils.http_client import YapiClient

    client = YapiClient(settings)
    body = client.get("/api/interface/get", params={"id": 42})
"""

from typing import Any

import requests

from yapi_mcp.configs import YapiSettings, get_logger
from yapi_mcp.configs.constants import MAX_ERROR_BODY_CHARS
from yapi_mcp.exceptions import (
    HTTPConnectionError,
    HTTPRequestError,
    HTTPTimeoutError,
    InvalidResponseError,
    InvalidURLError,
)

logger = get_logger("http")


class YapiClient:
    """Thin GET client bound to one registry and one token."""

    def __init__(self, settings: YapiSettings):
        self.base_url = settings.base_url.rstrip("/")
        self.token = settings.token
        self.timeout = settings.timeout

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def url_for(self, path: str) -> str:
        """Join a registry path onto the base URL."""
        return f"{self.base_url}{path}"

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a registry path and return the parsed JSON body.

        Args:
            path: Path relative to the base URL (e.g. "/api/interface/list")
            params: Extra query parameters; None values are dropped

        Returns:
            Parsed JSON body

        Raises:
            HTTPConnectionError: Connection failed
            HTTPTimeoutError: Request timed out
            HTTPRequestError: Non-2xx status
            InvalidResponseError: Body is not JSON
            InvalidURLError: URL is unusable (e.g. no base URL configured)
        """
        url = self.url_for(path)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        query["token"] = self.token

        logger.debug(f"GET {url} params={sorted(k for k in query if k != 'token')}")

        try:
            response = requests.get(url, headers=self.headers, params=query, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.ConnectionError as e:
            raise HTTPConnectionError(f"Connection failed: {url}") from e
        except requests.exceptions.Timeout as e:
            raise HTTPTimeoutError(f"Request timed out: {url}") from e
        except requests.exceptions.HTTPError as e:
            raise HTTPRequestError(
                f"HTTP {e.response.status_code}: {url}",
                status_code=e.response.status_code,
                response_text=e.response.text[:MAX_ERROR_BODY_CHARS] if e.response.text else None,
            ) from e
        except requests.exceptions.RequestException as e:
            # MissingSchema / InvalidURL when no usable base URL is configured
            raise InvalidURLError(f"Request failed: {url}", {"error": str(e)}) from e

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Invalid JSON response from {url}") from e
