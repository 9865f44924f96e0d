"""Shared utilities and base classes for the Jules MCP Server."""

from shared.models import (
    ExecutionContext,
    ToolCall,
    ToolDefinition,
    ToolDescriptor,
    ToolResult,
    ToolResultStatus,
)
from shared.config import ResultFormat, Settings, get_settings
from shared.errors import UnauthorizedError, UserError
from shared.logging import get_logger, setup_logging

__all__ = [
    "ToolDefinition",
    "ToolDescriptor",
    "ToolCall",
    "ToolResult",
    "ToolResultStatus",
    "ExecutionContext",
    "ResultFormat",
    "Settings",
    "get_settings",
    "UserError",
    "UnauthorizedError",
    "get_logger",
    "setup_logging",
]
