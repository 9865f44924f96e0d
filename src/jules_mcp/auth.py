"""Credential handling for the Jules MCP Server.

The caller's bearer token is parsed from the inbound Authorization header
once per call. A missing or malformed header is not an error at this
point; it yields ``None`` and the router refuses the call later.
"""

import re
from typing import Any, Mapping, Optional

from shared.errors import UnauthorizedError
from shared.models import ExecutionContext

BEARER_PATTERN = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


def parse_bearer_token(header: Optional[str]) -> Optional[str]:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Args:
        header: Raw header value, if any

    Returns:
        The token, or None when the header is absent or not a bearer header
    """
    if not header:
        return None

    match = BEARER_PATTERN.match(header.strip())
    if not match:
        return None

    token = match.group(1).strip()
    return token or None


def credential_from_headers(headers: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Derive the call credential from request headers."""
    if headers is None:
        return None
    return parse_bearer_token(headers.get("authorization"))


def require_credential(context: Optional[ExecutionContext]) -> str:
    """
    Return the credential carried by the context.

    Raises:
        UnauthorizedError: If the context carries no credential
    """
    if context is None or not context.api_key:
        raise UnauthorizedError()
    return context.api_key
