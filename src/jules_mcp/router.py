"""Tool Router for the Jules MCP Server.

Routes tool calls to their handlers.
Handles validation, credential checks, client construction and the
error policy shared by every tool.
"""

import time
from typing import Callable, Optional

import httpx

from jules_api.client import create_client
from jules_mcp.auth import require_credential
from jules_mcp.registry import ToolRegistry
from shared.config import UpstreamSettings
from shared.errors import UnauthorizedError, UserError
from shared.logging import bind_context, clear_context, get_logger
from shared.models import ToolCall, ToolResult, ToolResultStatus

logger = get_logger(__name__)


# Builds a fresh upstream client from a caller credential
ClientFactory = Callable[[str], httpx.AsyncClient]


def default_client_factory(settings: Optional[UpstreamSettings] = None) -> ClientFactory:
    """Return a factory creating Jules clients bound to ``settings``."""
    settings = settings or UpstreamSettings()

    def factory(api_key: str) -> httpx.AsyncClient:
        return create_client(api_key, settings)

    return factory


def internal_error_message(tool_name: str) -> str:
    return (
        f"An internal error occurred while executing {tool_name}. "
        "Please check server logs for details."
    )


class ToolRouter:
    """
    Routes tool calls to the matching handler.

    Responsibilities:
    - Validate tool calls against schemas
    - Require a per-call credential
    - Build a call-scoped upstream client
    - Genericize internal failures
    """

    def __init__(
        self,
        registry: ToolRegistry,
        client_factory: Optional[ClientFactory] = None
    ) -> None:
        self.registry = registry
        self.client_factory = client_factory or default_client_factory()

    async def execute(self, call: ToolCall) -> ToolResult:
        """
        Execute a tool call.

        This is the main entry point for tool execution. It never raises;
        every outcome is reported through the returned ``ToolResult``.
        """
        start_time = time.perf_counter()
        tool_name = call.tool_name

        bind_context(request_id=call.context.request_id, tool=tool_name)
        if call.context.correlation_id:
            bind_context(correlation_id=call.context.correlation_id)
        try:
            result = await self._execute(call)
            result.execution_time_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "Tool executed",
                status=result.status.value,
                execution_time_ms=round(result.execution_time_ms, 2)
            )
            return result
        finally:
            clear_context()

    async def _execute(self, call: ToolCall) -> ToolResult:
        tool_name = call.tool_name

        descriptor = self.registry.get(tool_name)
        if not descriptor:
            return ToolResult(
                tool_name=tool_name,
                status=ToolResultStatus.NOT_FOUND,
                error=f"Tool '{tool_name}' not found",
                error_code="TOOL_NOT_FOUND"
            )

        is_valid, errors = self.registry.validate_input(tool_name, call.parameters)
        if not is_valid:
            return ToolResult(
                tool_name=tool_name,
                status=ToolResultStatus.VALIDATION_ERROR,
                error=f"Validation failed: {'; '.join(errors)}",
                error_code="VALIDATION_ERROR"
            )

        try:
            api_key = require_credential(call.context)
            async with self.client_factory(api_key) as client:
                data = await descriptor.handler(client, call.parameters)
        except UnauthorizedError as e:
            logger.warning("Tool call rejected without credential")
            return ToolResult(
                tool_name=tool_name,
                status=ToolResultStatus.UNAUTHORIZED,
                error=str(e),
                error_code="UNAUTHORIZED"
            )
        except UserError as e:
            return ToolResult(
                tool_name=tool_name,
                status=ToolResultStatus.ERROR,
                error=str(e),
                error_code="USER_ERROR"
            )
        except Exception as e:
            logger.error(
                f"Error in {tool_name}",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True
            )
            return ToolResult(
                tool_name=tool_name,
                status=ToolResultStatus.ERROR,
                error=internal_error_message(tool_name),
                error_code="EXECUTION_ERROR"
            )

        return ToolResult(
            tool_name=tool_name,
            status=ToolResultStatus.SUCCESS,
            data=data
        )
