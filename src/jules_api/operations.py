"""Jules API operations.

One coroutine per remote operation. Each performs exactly one HTTP call
and returns the decoded response body.
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx

from jules_api.client import request

AUTOMATION_MODE = "AUTO_CREATE_PR"
STARTING_BRANCH = "main"


def _escape(segment: str) -> str:
    """Percent-encode a path segment, including '/' and '?'."""
    return quote(segment, safe="")


async def list_sources(client: httpx.AsyncClient) -> Any:
    return await request(client, "GET", "/sources")


async def get_source(client: httpx.AsyncClient, source_name: str) -> Any:
    return await request(client, "GET", f"/{_escape(source_name)}")


async def list_sessions(client: httpx.AsyncClient) -> Any:
    return await request(client, "GET", "/sessions")


async def get_session(client: httpx.AsyncClient, session_id: str) -> Any:
    return await request(client, "GET", f"/sessions/{_escape(session_id)}")


def build_session_body(
    prompt: str,
    source: str,
    require_plan_approval: Optional[bool] = None
) -> dict[str, Any]:
    """
    Build the create-session request body.

    The starting branch and automation mode are fixed. The plan-approval
    flag is only sent when it is an actual boolean.
    """
    body: dict[str, Any] = {
        "prompt": prompt,
        "sourceContext": {
            "source": source,
            "githubRepoContext": {
                "startingBranch": STARTING_BRANCH,
            },
        },
        "automationMode": AUTOMATION_MODE,
    }
    if isinstance(require_plan_approval, bool):
        body["requirePlanApproval"] = require_plan_approval
    return body


async def create_session(
    client: httpx.AsyncClient,
    prompt: str,
    source: str,
    require_plan_approval: Optional[bool] = None
) -> Any:
    body = build_session_body(prompt, source, require_plan_approval)
    return await request(client, "POST", "/sessions", json=body)


async def approve_plan(client: httpx.AsyncClient, session_id: str) -> Any:
    return await request(client, "POST", f"/sessions/{_escape(session_id)}:approvePlan")


async def list_activities(client: httpx.AsyncClient, session_id: str) -> Any:
    return await request(client, "GET", f"/sessions/{_escape(session_id)}/activities")


async def send_message(client: httpx.AsyncClient, session_id: str, prompt: str) -> Any:
    return await request(
        client,
        "POST",
        f"/sessions/{_escape(session_id)}:sendMessage",
        json={"prompt": prompt},
    )
