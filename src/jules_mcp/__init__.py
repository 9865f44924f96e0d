"""Jules MCP Server - tool registry, credential handling and routing.

Exposes the Jules REST API as MCP tools over streamable HTTP, forwarding
each call with the caller's own bearer credential.
"""

from jules_mcp.auth import parse_bearer_token, require_credential
from jules_mcp.registry import ToolRegistry, build_registry
from jules_mcp.router import ToolRouter
from jules_mcp.tools import JULES_TOOLS

__all__ = [
    "JULES_TOOLS",
    "ToolRegistry",
    "ToolRouter",
    "build_registry",
    "parse_bearer_token",
    "require_credential",
]
