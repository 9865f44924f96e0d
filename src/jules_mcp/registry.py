"""Tool Registry for the Jules MCP Server.

Holds the tool descriptors, validates arguments against their schemas and
formats definitions for MCP discovery.
"""

from typing import Any, Iterable, Optional

from jules_mcp.tools import JULES_TOOLS
from shared.logging import get_logger
from shared.models import ToolDefinition, ToolDescriptor
from shared.schema import validate_schema

logger = get_logger(__name__)


class ToolRegistry:
    """
    Central registry for MCP tools.

    Responsibilities:
    - Register tool descriptors
    - Lookup tools by name
    - Validate tool arguments
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        """
        Register a tool descriptor.

        Raises:
            ValueError: If the tool name is already registered
        """
        name = descriptor.name

        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")

        self._tools[name] = descriptor

        logger.debug(
            "Tool registered",
            tool=name,
            execution_type=descriptor.definition.execution_type.value
        )

    def register_many(self, descriptors: Iterable[ToolDescriptor]) -> None:
        """Register multiple tools at once."""
        for descriptor in descriptors:
            self.register(descriptor)

    def get(self, tool_name: str) -> Optional[ToolDescriptor]:
        """Get a tool descriptor by name."""
        return self._tools.get(tool_name)

    def list_tools(self) -> list[ToolDefinition]:
        """List all registered tool definitions in registration order."""
        return [descriptor.definition for descriptor in self._tools.values()]

    def validate_input(
        self,
        tool_name: str,
        parameters: dict[str, Any]
    ) -> tuple[bool, list[str]]:
        """
        Validate input parameters against the tool's input schema.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        descriptor = self.get(tool_name)
        if not descriptor:
            return False, [f"Tool '{tool_name}' not found"]

        return validate_schema(parameters, descriptor.definition.input_schema)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._tools


def build_registry(descriptors: Optional[Iterable[ToolDescriptor]] = None) -> ToolRegistry:
    """Create a registry loaded with the Jules tools."""
    registry = ToolRegistry()
    registry.register_many(JULES_TOOLS if descriptors is None else descriptors)
    logger.info("Tools loaded", tool_count=len(registry))
    return registry
