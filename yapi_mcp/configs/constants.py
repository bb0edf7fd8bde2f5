"""
YAPI MCP Constants

Static values shared by the server, providers, and HTTP client.
"""

# --- Server Identity ---

SERVER_NAME = "yapi-mcp-service"
SERVER_VERSION = "0.1.0"

# --- Resources ---

INTERFACES_RESOURCE_URI = "yapi://interfaces"
JSON_MIME_TYPE = "application/json"

# --- Registry Endpoints ---

INTERFACE_LIST_PATH = "/api/interface/list"
INTERFACE_GET_PATH = "/api/interface/get"

# --- Output ---

JSON_INDENT = 2

# --- Error Reporting ---

MAX_ERROR_BODY_CHARS = 500  # Truncate upstream bodies attached to errors
