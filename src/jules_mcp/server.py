"""MCP protocol binding for the Jules tools.

Exposes the tool registry through a low-level MCP server. Each
``tools/call`` derives its credential from the HTTP request that carried
it, so nothing credential-related outlives the call.
"""

import json
import uuid
from typing import Any, Mapping, Optional

import mcp.types as types
from mcp.server.lowlevel import Server

from jules_mcp.auth import credential_from_headers
from jules_mcp.registry import ToolRegistry
from jules_mcp.router import ToolRouter
from shared.config import ResultFormat, ServerSettings
from shared.models import ExecutionContext, ToolCall, ToolDefinition, ToolResult


CORRELATION_HEADER = "x-correlation-id"


class ToolCallError(Exception):
    """Raised into the MCP SDK to report an ``isError`` tool result."""
    pass


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def format_result(result: ToolResult, result_format: ResultFormat) -> Any:
    """
    Convert a successful result into MCP call-tool output.

    JSON objects are returned as structured content in ``json`` mode;
    everything else is rendered as pretty-printed JSON text.
    """
    if result_format == ResultFormat.JSON and isinstance(result.data, dict):
        return result.data

    return [types.TextContent(type="text", text=json.dumps(result.data, indent=2))]


def _inbound_headers(server: Server) -> Optional[Any]:
    """Headers of the HTTP request carrying the current MCP message."""
    try:
        request = server.request_context.request
    except LookupError:
        return None
    return getattr(request, "headers", None)


def context_from_headers(headers: Optional[Mapping[str, Any]]) -> ExecutionContext:
    """Build the per-call execution context from inbound request headers."""
    return ExecutionContext(
        request_id=str(uuid.uuid4()),
        api_key=credential_from_headers(headers),
        correlation_id=headers.get(CORRELATION_HEADER) if headers is not None else None,
    )


def build_mcp_server(
    registry: ToolRegistry,
    router: ToolRouter,
    settings: Optional[ServerSettings] = None
) -> Server:
    """Create the MCP server exposing every registered tool."""
    settings = settings or ServerSettings()
    server: Server = Server(settings.name, version=settings.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(definition) for definition in registry.list_tools()]

    # Arguments are validated by the router so failures carry field detail
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> Any:
        context = context_from_headers(_inbound_headers(server))
        call = ToolCall(tool_name=name, parameters=arguments or {}, context=context)

        result = await router.execute(call)
        if not result.ok:
            raise ToolCallError(result.error or f"{name} failed")

        return format_result(result, settings.result_format)

    return server
