"""GraphQL-over-HTTP transport."""

from __future__ import annotations

from .client import CONFIG_ERROR_PREFIX, GraphQLClient, error_kind_for
from .schema import GraphQLResponse, ResponseError, join_error_messages

__all__ = [
    "CONFIG_ERROR_PREFIX",
    "GraphQLClient",
    "GraphQLResponse",
    "ResponseError",
    "error_kind_for",
    "join_error_messages",
]
