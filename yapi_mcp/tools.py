"""
YAPI MCP Tools

Callable tools exposed to MCP clients. Each tool issues exactly one GET
against the registry and returns its answer as pretty-printed JSON text.
"""

import json
from typing import Any, Callable

from yapi_mcp.configs import get_logger
from yapi_mcp.configs.constants import INTERFACE_GET_PATH, INTERFACE_LIST_PATH, JSON_INDENT
from yapi_mcp.exceptions import UnknownToolError, UpstreamFormatError
from yapi_mcp.utils.http_client import YapiClient

logger = get_logger("tools")

# Upstream field -> output field for interface summaries
INTERFACE_FIELD_MAP = {
    "_id": "id",
    "title": "name",
    "path": "path",
    "method": "method",
}


# --- Tool Schemas ---

MCP_TOOL_SCHEMAS = [
    {
        "name": "get_interfaces",
        "description": "Get list of YAPI interfaces",
        "inputSchema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "number", "description": "YAPI project ID"},
            },
            "required": ["project_id"],
        },
    },
    {
        "name": "get_interface_detail",
        "description": "Get detailed interface definition",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "number", "description": "Interface ID"},
            },
            "required": ["id"],
        },
    },
]


def list_tools() -> dict[str, Any]:
    """List available tools in MCP protocol format."""
    return {"tools": [dict(schema) for schema in MCP_TOOL_SCHEMAS]}


# --- Helpers ---


def _query_value(value: Any) -> Any:
    """Send integral numbers as integers (JSON clients may pass 11.0)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _text_result(payload: Any) -> dict[str, Any]:
    return {
        "content": [
            {
                "type": "text",
                "text": json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False),
            }
        ],
    }


def _response_data(body: Any) -> Any:
    """Return body["data"], or None if the body has no usable data field."""
    if not isinstance(body, dict):
        return None
    return body.get("data")


def is_missing(value: Any) -> bool:
    """
    True for values the registry contract treats as absent.

    None and empty or zero scalars ("", 0, False) are missing; containers
    are present even when empty.
    """
    if value is None:
        return True
    if isinstance(value, (dict, list)):
        return False
    return not value


def map_interface(item: Any) -> dict[str, Any]:
    """
    Rename an upstream interface summary to the tool vocabulary.

    {_id, title, path, method} -> {id, name, path, method}. Fields missing
    upstream are left out.
    """
    if not isinstance(item, dict):
        return {}
    return {
        target: item[source]
        for source, target in INTERFACE_FIELD_MAP.items()
        if source in item
    }


# --- Tools ---


def get_interfaces(client: YapiClient, project_id: Any = None) -> dict[str, Any]:
    """
    List the interfaces of a YAPI project.

    Args:
        client: Registry client
        project_id: YAPI project ID

    Returns:
        Text content holding [{id, name, path, method}, ...]

    Raises:
        UpstreamFormatError: Response has no data.list
        TransportError: Registry request failed
    """
    body = client.get(INTERFACE_LIST_PATH, params={"project_id": _query_value(project_id)})

    logger.info("YAPI response: " + json.dumps(body, indent=JSON_INDENT, ensure_ascii=False))

    data = _response_data(body)
    if not isinstance(data, dict) or is_missing(data.get("list")):
        raise UpstreamFormatError()

    items = data["list"]
    if not isinstance(items, list):
        logger.warning(f"Interface list is {type(items).__name__}, not a list; returning no interfaces")
        items = []

    interfaces = [map_interface(item) for item in items]
    logger.debug(f"Mapped {len(interfaces)} interfaces for project {project_id}")
    return _text_result(interfaces)


def get_interface_detail(client: YapiClient, interface_id: Any = None) -> dict[str, Any]:
    """
    Get the full definition of one interface.

    Args:
        client: Registry client
        interface_id: Interface ID

    Returns:
        Text content holding the upstream `data` object unmodified

    Raises:
        UpstreamFormatError: Response has no data
        TransportError: Registry request failed
    """
    body = client.get(INTERFACE_GET_PATH, params={"id": _query_value(interface_id)})

    data = _response_data(body)
    if is_missing(data):
        raise UpstreamFormatError()

    return _text_result(data)


TOOL_MAP: dict[str, Callable[..., dict[str, Any]]] = {
    "get_interfaces": get_interfaces,
    "get_interface_detail": get_interface_detail,
}

# Tool name -> (call argument, tool function keyword)
TOOL_ARGUMENTS = {
    "get_interfaces": ("project_id", "project_id"),
    "get_interface_detail": ("id", "interface_id"),
}


def call_tool(client: YapiClient, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Execute a tool by name.

    Args:
        client: Registry client
        name: Tool name
        arguments: Tool arguments

    Returns:
        {"content": [{"type": "text", "text": ...}]}

    Raises:
        UnknownToolError: Tool is not registered (no request is made)
    """
    tool_fn = TOOL_MAP.get(name)
    if tool_fn is None:
        raise UnknownToolError(name)

    arg_name, keyword = TOOL_ARGUMENTS[name]
    value = (arguments or {}).get(arg_name)
    logger.info(f"Calling tool: {name} ({arg_name}={value})")
    return tool_fn(client, **{keyword: value})
