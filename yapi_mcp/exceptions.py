"""
YAPI MCP Exception Hierarchy

Centralized exception classes for structured error handling.
All project-specific exceptions inherit from YapiMcpError.

Usage:
    from yapi_mcp.exceptions import TransportError, UpstreamFormatError

    try:
        get_interfaces(client, project_id=11)
    except UpstreamFormatError as e:
        logger.error(f"Registry contract changed: {e}")
"""


class YapiMcpError(Exception):
    """Base exception for all YAPI MCP errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(YapiMcpError):
    """Error in service configuration."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    pass


# =============================================================================
# Request Errors
# =============================================================================


class UnknownRequestError(YapiMcpError):
    """Request names a resource or tool the server doesn't provide."""

    pass


class UnknownResourceError(UnknownRequestError):
    """Resource URI is not recognized."""

    def __init__(self, uri: str):
        super().__init__("Unknown resource", {"uri": uri})
        self.uri = uri


class UnknownToolError(UnknownRequestError):
    """Tool name is not recognized."""

    def __init__(self, name: str):
        super().__init__("Unknown tool", {"name": name})
        self.name = name


# =============================================================================
# Upstream Errors
# =============================================================================


class UpstreamFormatError(YapiMcpError):
    """Registry response is missing expected fields."""

    def __init__(self, message: str = "Invalid YAPI response format", details: dict | None = None):
        super().__init__(message, details)


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(YapiMcpError):
    """Base class for outbound HTTP failures."""

    pass


class HTTPRequestError(TransportError):
    """Registry answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_text:
            details["response_text"] = response_text[:200]
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class HTTPConnectionError(TransportError):
    """Failed to connect to the registry."""

    pass


class HTTPTimeoutError(TransportError):
    """Registry request timed out."""

    pass


class InvalidResponseError(TransportError):
    """Registry response body could not be parsed."""

    pass


class InvalidURLError(TransportError):
    """Request URL is unusable (no scheme, malformed host)."""

    pass
