"""HTTP client for the Jules REST API.

A client is bound to a single caller credential and is meant to live for
exactly one tool call.
"""

from typing import Any, Optional

import httpx

from shared.config import UpstreamSettings
from shared.logging import get_logger

logger = get_logger(__name__)


class JulesClientError(Exception):
    """Base exception for Jules API client errors."""
    pass


class JulesConnectionError(JulesClientError):
    """The Jules API could not be reached."""
    pass


class JulesAPIError(JulesClientError):
    """The Jules API answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def create_client(
    api_key: str,
    settings: Optional[UpstreamSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """
    Create an HTTP client for the Jules API.

    The credential format is not checked here; a bad key only shows up as an
    authentication failure on first use.

    Args:
        api_key: Caller's credential, sent as the API key header
        settings: Upstream settings (base URL, header name)
        transport: Optional transport override

    Returns:
        An unopened ``httpx.AsyncClient``
    """
    settings = settings or UpstreamSettings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers={
            settings.api_key_header: api_key,
            "Content-Type": "application/json",
        },
        transport=transport,
    )


def _error_message(response: httpx.Response) -> str:
    """Extract the upstream error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    text = response.text.strip()
    if text:
        return text
    return f"{response.status_code} {response.reason_phrase}".strip()


async def request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    json: Optional[dict[str, Any]] = None
) -> Any:
    """
    Perform one request against the Jules API and decode the body.

    Raises:
        JulesConnectionError: On transport failures
        JulesAPIError: On non-2xx responses
    """
    try:
        response = await client.request(method, path, json=json)
    except httpx.HTTPError as e:
        raise JulesConnectionError(f"Cannot reach Jules API: {e}") from e

    if response.is_error:
        message = _error_message(response)
        logger.debug(
            "Jules API request failed",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise JulesAPIError(message, response.status_code)

    if not response.content:
        return {}
    return response.json()
