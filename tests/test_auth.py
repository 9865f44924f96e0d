"""Tests for bearer credential handling."""

import pytest

from jules_mcp.auth import credential_from_headers, parse_bearer_token, require_credential
from shared.errors import UnauthorizedError, UserError
from shared.models import ExecutionContext


class TestParseBearerToken:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc123", "abc123"),
            ("bearer abc123", "abc123"),
            ("BEARER abc123", "abc123"),
            ("Bearer   abc123", "abc123"),
            ("Token abc123", None),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse(self, header, expected):
        assert parse_bearer_token(header) == expected

    def test_token_is_kept_verbatim(self):
        """Opaque tokens are not validated or altered."""
        assert parse_bearer_token("Bearer a.b-c_d/e+f=") == "a.b-c_d/e+f="

    def test_credential_from_headers(self):
        assert credential_from_headers({"authorization": "Bearer xyz"}) == "xyz"
        assert credential_from_headers({"authorization": "Token xyz"}) is None
        assert credential_from_headers({}) is None
        assert credential_from_headers(None) is None


class TestRequireCredential:
    """Tests for the per-call credential check."""

    def test_returns_credential(self):
        context = ExecutionContext(request_id="req1", api_key="abc123")
        assert require_credential(context) == "abc123"

    def test_missing_credential_raises(self):
        context = ExecutionContext(request_id="req1")

        with pytest.raises(UnauthorizedError, match="Bearer token") as exc_info:
            require_credential(context)

        assert isinstance(exc_info.value, UserError)

    def test_missing_context_raises(self):
        with pytest.raises(UnauthorizedError):
            require_credential(None)

    def test_credential_not_in_repr_or_dump(self):
        context = ExecutionContext(request_id="req1", api_key="abc123")

        assert "abc123" not in repr(context)
        assert "api_key" not in context.model_dump()
