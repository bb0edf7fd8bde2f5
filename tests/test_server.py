"""
Tests for the YAPI MCP server handlers.

Drives the registered MCP request handlers directly, without a stdio
transport, and checks the envelopes they produce.
"""

import asyncio
import json
from unittest.mock import patch

import mcp.types as types
import pytest

from tests.fakes import interface_list_body, make_response
from yapi_mcp.exceptions import UnknownResourceError
from yapi_mcp.server import create_server, main


@pytest.fixture
def server(client):
    return create_server(client)


def _handle(server, request):
    """Run the handler registered for `request` and unwrap the result."""
    handler = server.request_handlers[type(request)]
    return asyncio.run(handler(request)).root


def _call_tool(server, name, arguments):
    return _handle(
        server,
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name=name, arguments=arguments),
        ),
    )


def _read_resource(server, uri):
    return _handle(
        server,
        types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri=uri),
        ),
    )


class TestInitialization:
    """Tests for server identity and capabilities."""

    def test_identity_and_capabilities(self, server):
        options = server.create_initialization_options()

        assert options.server_name == "yapi-mcp-service"
        assert options.server_version == "0.1.0"
        assert options.capabilities.resources is not None
        assert options.capabilities.tools is not None

    def test_all_handlers_registered(self, server):
        """The four request kinds have handlers."""
        for request_type in (
            types.ListResourcesRequest,
            types.ReadResourceRequest,
            types.ListToolsRequest,
            types.CallToolRequest,
        ):
            assert request_type in server.request_handlers


class TestResourceHandlers:
    """Tests for resources/list and resources/read."""

    def test_list_resources(self, server):
        result = _handle(server, types.ListResourcesRequest(method="resources/list"))

        assert len(result.resources) == 1
        resource = result.resources[0]
        assert str(resource.uri) == "yapi://interfaces"
        assert resource.name == "YAPI Interfaces"
        assert resource.mimeType == "application/json"
        assert resource.description == "List of all YAPI interfaces"

    def test_read_resource(self, server, mock_get):
        body = interface_list_body([{"_id": 1, "title": "Ping", "path": "/ping", "method": "GET"}])
        mock_get.return_value = make_response(body)

        result = _read_resource(server, "yapi://interfaces")

        assert len(result.contents) == 1
        content = result.contents[0]
        assert str(content.uri) == "yapi://interfaces"
        assert content.mimeType == "application/json"
        assert json.loads(content.text) == body["data"]
        mock_get.assert_called_once()

    def test_read_unknown_resource_fails(self, server, mock_get):
        """Unknown URIs fail the request; no HTTP call is made."""
        with pytest.raises(UnknownResourceError):
            _read_resource(server, "yapi://projects")

        mock_get.assert_not_called()


class TestToolHandlers:
    """Tests for tools/list and tools/call."""

    def test_list_tools(self, server):
        result = _handle(server, types.ListToolsRequest(method="tools/list"))

        tools = {tool.name: tool for tool in result.tools}
        assert set(tools) == {"get_interfaces", "get_interface_detail"}
        assert tools["get_interfaces"].inputSchema["required"] == ["project_id"]
        assert tools["get_interface_detail"].inputSchema["required"] == ["id"]

    def test_call_get_interfaces(self, server, mock_get):
        mock_get.return_value = make_response(
            interface_list_body([{"_id": 7, "title": "Login", "path": "/login", "method": "POST"}])
        )

        result = _call_tool(server, "get_interfaces", {"project_id": 3})

        assert not result.isError
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert json.loads(result.content[0].text) == [
            {"id": 7, "name": "Login", "path": "/login", "method": "POST"}
        ]
        mock_get.assert_called_once()
        assert mock_get.call_args.kwargs["params"]["project_id"] == 3

    def test_call_get_interface_detail(self, server, mock_get):
        data = {"_id": 42, "title": "Detail", "req_query": []}
        mock_get.return_value = make_response({"data": data})

        result = _call_tool(server, "get_interface_detail", {"id": 42})

        assert not result.isError
        assert json.loads(result.content[0].text) == data

    def test_upstream_format_error_surfaces(self, server, mock_get):
        """A malformed registry response becomes an error result."""
        mock_get.return_value = make_response({"data": {}})

        result = _call_tool(server, "get_interfaces", {"project_id": 3})

        assert result.isError
        assert "Invalid YAPI response format" in result.content[0].text

    def test_transport_error_surfaces(self, server, mock_get):
        mock_get.return_value = make_response(status_code=500, text="boom")

        result = _call_tool(server, "get_interface_detail", {"id": 1})

        assert result.isError
        assert "HTTP 500" in result.content[0].text

    def test_unknown_tool(self, server, mock_get):
        """Unknown tools give an error result without an HTTP call."""
        result = _call_tool(server, "drop_project", {})

        assert result.isError
        assert "Unknown tool" in result.content[0].text
        mock_get.assert_not_called()

    def test_server_keeps_serving_after_error(self, server, mock_get):
        """A failed call doesn't affect the next one."""
        mock_get.return_value = make_response({"data": {}})
        assert _call_tool(server, "get_interfaces", {"project_id": 1}).isError

        mock_get.return_value = make_response(interface_list_body([]))
        result = _call_tool(server, "get_interfaces", {"project_id": 1})

        assert not result.isError
        assert json.loads(result.content[0].text) == []


class TestMain:
    """Tests for the process entry point."""

    def test_missing_token_prevents_startup(self):
        """Without a token the process exits before serving."""
        with patch("yapi_mcp.server.asyncio.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_interrupt_exits_cleanly(self, monkeypatch):
        """KeyboardInterrupt during serving exits with status 0."""
        monkeypatch.setenv("YAPI_TOKEN", "abc")

        def interrupted(coro):
            coro.close()
            raise KeyboardInterrupt

        with patch("yapi_mcp.server.asyncio.run", side_effect=interrupted) as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        mock_run.assert_called_once()
