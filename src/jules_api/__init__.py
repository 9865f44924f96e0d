"""Jules REST API client and operations."""

from jules_api.client import (
    JulesAPIError,
    JulesClientError,
    JulesConnectionError,
    create_client,
)
from jules_api import operations

__all__ = [
    "JulesAPIError",
    "JulesClientError",
    "JulesConnectionError",
    "create_client",
    "operations",
]
