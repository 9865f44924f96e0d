"""Core data models for the Jules MCP Server.

This module defines the shared data structures passed between the
registry, the router and the MCP transport binding.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field


class ExecutionType(str, Enum):
    """Type of tool execution - read operations vs write operations."""
    READ = "read"
    WRITE = "write"


class ToolDefinition(BaseModel):
    """
    Complete definition of an MCP tool.

    Tools are declarative and discoverable; the input schema is strict
    JSON Schema and is enforced before any handler runs.
    """
    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="Clear description for LLM usage")
    version: str = Field(default="1.0.0")

    input_schema: dict[str, Any] = Field(
        default_factory=dict,
        description="JSON Schema for input validation"
    )

    execution_type: ExecutionType = Field(default=ExecutionType.READ)
    tags: list[str] = Field(default_factory=list)


ToolHandler = Callable[[httpx.AsyncClient, dict[str, Any]], Awaitable[Any]]


class ToolDescriptor(BaseModel):
    """A tool definition paired with the coroutine that executes it."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    definition: ToolDefinition
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.definition.name


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExecutionContext(BaseModel):
    """
    Per-call context for tool execution.

    The credential lives here and nowhere else; a context is built for
    exactly one inbound call and discarded afterwards.
    """
    request_id: str = Field(..., description="Unique request identifier")
    api_key: Optional[str] = Field(default=None, repr=False, exclude=True)
    timestamp: datetime = Field(default_factory=_utcnow)
    correlation_id: Optional[str] = None


class ToolCall(BaseModel):
    """A request to execute a specific tool."""
    tool_name: str = Field(..., description="Tool name")
    parameters: dict[str, Any] = Field(default_factory=dict)
    context: ExecutionContext


class ToolResultStatus(str, Enum):
    """Status of tool execution."""
    SUCCESS = "success"
    ERROR = "error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"


class ToolResult(BaseModel):
    """
    Result of a tool execution.

    ``data`` holds the decoded upstream body on success; ``error`` holds
    the caller-facing message otherwise.
    """
    tool_name: str
    status: ToolResultStatus
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    execution_time_ms: float = 0

    @property
    def ok(self) -> bool:
        return self.status == ToolResultStatus.SUCCESS
