"""
YAPI MCP Resources

Readable resources exposed to MCP clients. There is one: the full
interface list of the registry, served as JSON.
"""

import json
from typing import Any

from yapi_mcp.configs import get_logger
from yapi_mcp.configs.constants import (
    INTERFACE_LIST_PATH,
    INTERFACES_RESOURCE_URI,
    JSON_INDENT,
    JSON_MIME_TYPE,
)
from yapi_mcp.exceptions import UnknownResourceError, UpstreamFormatError
from yapi_mcp.utils.http_client import YapiClient

logger = get_logger("resources")


# --- Resource Descriptors ---

RESOURCE_DESCRIPTORS = [
    {
        "uri": INTERFACES_RESOURCE_URI,
        "name": "YAPI Interfaces",
        "mimeType": JSON_MIME_TYPE,
        "description": "List of all YAPI interfaces",
    },
]


def list_resources() -> dict[str, Any]:
    """List available resources in MCP protocol format."""
    return {"resources": [dict(descriptor) for descriptor in RESOURCE_DESCRIPTORS]}


def read_resource(client: YapiClient, uri: str) -> dict[str, Any]:
    """
    Read a resource by URI.

    Args:
        client: Registry client
        uri: Resource URI (only yapi://interfaces is known)

    Returns:
        {"contents": [{"uri", "mimeType", "text"}]}

    Raises:
        UnknownResourceError: URI is not served here
        UpstreamFormatError: Response has no data field
        TransportError: Registry request failed
    """
    if uri != INTERFACES_RESOURCE_URI:
        raise UnknownResourceError(uri)

    logger.info(f"Reading resource: {uri}")
    body = client.get(INTERFACE_LIST_PATH)
    if not isinstance(body, dict) or "data" not in body:
        raise UpstreamFormatError()
    data = body["data"]

    return {
        "contents": [
            {
                "uri": uri,
                "mimeType": JSON_MIME_TYPE,
                "text": json.dumps(data, indent=JSON_INDENT, ensure_ascii=False),
            }
        ],
    }
