"""Test doubles and call builders shared by the test modules."""

import json
from typing import Any, Callable, Optional

import httpx

from jules_api.client import create_client
from shared.config import UpstreamSettings
from shared.models import ExecutionContext, ToolCall

BASE_URL = "https://jules.test/v1alpha"

# Arguments accepted by each tool's schema
VALID_ARGS: dict[str, dict[str, Any]] = {
    "list_sources": {},
    "get_source": {"sourceName": "sources/github/acme/repo"},
    "get_session": {"sessionId": "s1"},
    "create_session": {"prompt": "fix bug", "source": "repo-x"},
    "list_sessions": {},
    "approve_plan": {"sessionId": "s1"},
    "list_activities": {"sessionId": "s1"},
    "send_message": {"sessionId": "s1", "prompt": "looks good"},
}


class FakeUpstream:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"ok": True})
        )
        self.credentials: list[str] = []

    def respond_with(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        content: Optional[bytes] = None
    ) -> None:
        if content is not None:
            self.responder = lambda request: httpx.Response(status_code, content=content)
        else:
            self.responder = lambda request: httpx.Response(status_code, json=json_body)

    def fail_with(self, exc: Exception) -> None:
        def responder(request: httpx.Request) -> httpx.Response:
            raise exc
        self.responder = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client_factory(self, api_key: str) -> httpx.AsyncClient:
        self.credentials.append(api_key)
        return create_client(
            api_key,
            UpstreamSettings(base_url=BASE_URL),
            transport=httpx.MockTransport(self.handler),
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def make_call(
    tool_name: str,
    parameters: Optional[dict[str, Any]] = None,
    api_key: Optional[str] = "abc123",
    correlation_id: Optional[str] = None
) -> ToolCall:
    return ToolCall(
        tool_name=tool_name,
        parameters=parameters if parameters is not None else dict(VALID_ARGS.get(tool_name, {})),
        context=ExecutionContext(
            request_id="req-1", api_key=api_key, correlation_id=correlation_id
        ),
    )
