"""Jules tool descriptors.

Each descriptor pairs a tool definition with a handler that maps the
validated arguments onto one Jules API operation.
"""

from typing import Any

import httpx

from jules_api import operations
from shared.models import ExecutionType, ToolDefinition, ToolDescriptor
from shared.schema import boolean_field, strict_object_schema, string_field


async def _list_sources(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.list_sources(client)


async def _get_source(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.get_source(client, params["sourceName"])


async def _get_session(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.get_session(client, params["sessionId"])


async def _create_session(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.create_session(
        client,
        params["prompt"],
        params["source"],
        params.get("requirePlanApproval"),
    )


async def _list_sessions(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.list_sessions(client)


async def _approve_plan(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.approve_plan(client, params["sessionId"])


async def _list_activities(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.list_activities(client, params["sessionId"])


async def _send_message(client: httpx.AsyncClient, params: dict[str, Any]) -> Any:
    return await operations.send_message(client, params["sessionId"], params["prompt"])


_SESSION_ID = string_field("Session ID")

JULES_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        definition=ToolDefinition(
            name="list_sources",
            description="List available sources",
            input_schema=strict_object_schema(),
            tags=["sources"],
        ),
        handler=_list_sources,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="get_source",
            description="Get a source by name",
            input_schema=strict_object_schema({
                "sourceName": string_field("Source resource name"),
            }),
            tags=["sources"],
        ),
        handler=_get_source,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="get_session",
            description="Get a session by ID",
            input_schema=strict_object_schema({"sessionId": _SESSION_ID}),
            tags=["sessions"],
        ),
        handler=_get_session,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="create_session",
            description="Create a new session",
            input_schema=strict_object_schema(
                {
                    "prompt": string_field("Task for the agent"),
                    "source": string_field("Source the session works against"),
                    "requirePlanApproval": boolean_field(
                        "Wait for explicit plan approval before executing"
                    ),
                },
                required=["prompt", "source"],
            ),
            execution_type=ExecutionType.WRITE,
            tags=["sessions"],
        ),
        handler=_create_session,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="list_sessions",
            description="List all sessions",
            input_schema=strict_object_schema(),
            tags=["sessions"],
        ),
        handler=_list_sessions,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="approve_plan",
            description="Approve a session's plan",
            input_schema=strict_object_schema({"sessionId": _SESSION_ID}),
            execution_type=ExecutionType.WRITE,
            tags=["sessions"],
        ),
        handler=_approve_plan,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="list_activities",
            description="List all activities in a session",
            input_schema=strict_object_schema({"sessionId": _SESSION_ID}),
            tags=["activities"],
        ),
        handler=_list_activities,
    ),
    ToolDescriptor(
        definition=ToolDefinition(
            name="send_message",
            description="Send a message to the agent in a session",
            input_schema=strict_object_schema({
                "sessionId": _SESSION_ID,
                "prompt": string_field("Message for the agent"),
            }),
            execution_type=ExecutionType.WRITE,
            tags=["sessions"],
        ),
        handler=_send_message,
    ),
)
