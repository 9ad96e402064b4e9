"""Aletheia: a typed async client for the Guardian content API."""

from aletheia.client import GuardianContentClient
from aletheia.enums import (
    Block,
    BlockKind,
    Endpoint,
    Field,
    OrderBy,
    OrderDate,
    Tag,
    UseDate,
)
from aletheia.errors import (
    AletheiaError,
    ApiError,
    DecodeError,
    MissingParameterError,
    TransportError,
)
from aletheia.models import ResponseEnvelope, SearchResponse, SearchResult

__all__ = [
    "GuardianContentClient",
    "Block",
    "BlockKind",
    "Endpoint",
    "Field",
    "OrderBy",
    "OrderDate",
    "Tag",
    "UseDate",
    "AletheiaError",
    "ApiError",
    "DecodeError",
    "MissingParameterError",
    "TransportError",
    "ResponseEnvelope",
    "SearchResponse",
    "SearchResult",
]
