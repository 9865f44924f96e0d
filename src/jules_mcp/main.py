"""Jules MCP Server - FastAPI Application.

Serves the Jules tools over the MCP streamable HTTP transport, plus a
couple of plain HTTP endpoints for operators.
"""

from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from pydantic import BaseModel
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from jules_mcp.registry import build_registry
from jules_mcp.router import ClientFactory, ToolRouter, default_client_factory
from jules_mcp.server import build_mcp_server
from shared.config import Settings, get_settings
from shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


class ToolListResponse(BaseModel):
    """List of available tools."""
    tools: list[dict[str, Any]]
    count: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    name: str
    version: str
    tool_count: int


class StreamableHTTPEndpoint:
    """ASGI endpoint handing requests to the MCP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Application settings; loaded from YAML/env when omitted
        client_factory: Override for upstream client construction

    Returns:
        The FastAPI application
    """
    settings = settings or get_settings()

    registry = build_registry()
    router = ToolRouter(
        registry=registry,
        client_factory=client_factory or default_client_factory(settings.upstream),
    )
    mcp_server = build_mcp_server(registry, router, settings.server)
    session_manager = StreamableHTTPSessionManager(
        app=mcp_server,
        json_response=settings.server.json_response,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with session_manager.run():
            logger.info(
                "Server started",
                port=settings.server.port,
                endpoint=settings.server.endpoint,
                upstream=settings.upstream.base_url,
            )
            yield
        logger.info("Server stopped")

    app = FastAPI(
        title=settings.server.name,
        description="MCP server for the Jules API",
        version=settings.server.version,
        lifespan=lifespan
    )

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            name=settings.server.name,
            version=settings.server.version,
            tool_count=len(registry),
        )

    @app.get("/tools", response_model=ToolListResponse, tags=["Tools"])
    async def list_tools():
        """List the tool definitions served over MCP."""
        tools = [definition.model_dump(mode="json") for definition in registry.list_tools()]
        return ToolListResponse(tools=tools, count=len(tools))

    app.router.routes.append(
        Route(
            settings.server.endpoint,
            endpoint=StreamableHTTPEndpoint(session_manager),
            methods=["GET", "POST", "DELETE"],
        )
    )

    return app


def main():
    """Run the Jules MCP Server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.effective_log_level, json_output=settings.environment == "production")

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    main()
