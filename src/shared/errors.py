"""Caller-facing error types.

Anything raised as a ``UserError`` is safe to show to the MCP caller
verbatim. Every other exception is treated as internal and genericized.
"""


class UserError(Exception):
    """A failure whose message is intended for the caller."""
    pass


class UnauthorizedError(UserError):
    """No usable credential was supplied with the call."""

    def __init__(
        self,
        message: str = (
            "Unauthorized: No API key provided in session context. "
            "Please provide a Bearer token in the Authorization header."
        ),
    ) -> None:
        super().__init__(message)
