"""Pagination module for cursor-based pagination."""

from .tokens import (
    MalformedTokenError,
    TokenCodec,
    Base64TokenCodec,
    JsonTokenCodec,
    get_token_codec
)
from .cursor import (
    Page,
    CursorPaginator,
    create_link_header
)

__all__ = [
    "MalformedTokenError",
    "TokenCodec",
    "Base64TokenCodec",
    "JsonTokenCodec",
    "get_token_codec",
    "Page",
    "CursorPaginator",
    "create_link_header"
]
