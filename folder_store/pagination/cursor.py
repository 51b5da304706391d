"""Cursor-based pagination over ordered record sets."""

import logging
from operator import attrgetter
from urllib.parse import urlencode
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field

from ..errors.pagination import InvalidPageSizeError, InvalidTokenError, StaleTokenError
from .tokens import MalformedTokenError, TokenCodec


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Page(BaseModel):
    """One contiguous slice of a result set."""

    items: List[Any] = Field(default_factory=list, description="Records on this page")
    next_token: str = Field(default="", description="Token for the next page, empty when exhausted")

    @property
    def has_more(self) -> bool:
        return self.next_token != ""


class CursorPaginator(Generic[T]):
    """Split an ordered result set into pages keyed by the last record seen.

    ``fetch`` must return the complete result set for a scope in the same
    order on every call; page boundaries are only meaningful under that
    guarantee. Errors raised by ``fetch`` propagate unchanged.

    Args:
        fetch: Returns the ordered records for a scope (e.g. an organization)
        codec: Converts cursors to tokens and back
        key: Extracts the identifier of a record
        parse_key: Parses a decoded cursor string back into an identifier;
            must raise ``ValueError`` for malformed input
    """

    def __init__(
        self,
        fetch: Callable[[Any], Sequence[T]],
        codec: TokenCodec,
        key: Callable[[T], Any] = attrgetter("id"),
        parse_key: Callable[[str], Any] = UUID,
    ):
        self.fetch = fetch
        self.codec = codec
        self.key = key
        self.parse_key = parse_key

    def get_page(self, scope: Any, per_page: int, token: str = "") -> Page:
        """Return the page that follows ``token`` within ``scope``.

        Raises:
            InvalidPageSizeError: If ``per_page`` is not positive
            InvalidTokenError: If the token or its cursor is malformed
            StaleTokenError: If the cursor is no longer in the result set
        """
        if per_page < 1:
            raise InvalidPageSizeError(per_page)

        records = self.fetch(scope)
        if not records:
            return Page()

        start = self._start_index(records, token) if token else 0

        if start >= len(records):
            return Page()

        end = min(start + per_page, len(records))
        items = list(records[start:end])

        next_token = ""
        if end < len(records):
            next_token = self.codec.encode(str(self.key(items[-1])))

        logger.debug(f"Paginated {scope}: records [{start}, {end}) of {len(records)}")
        return Page(items=items, next_token=next_token)

    def _start_index(self, records: Sequence[T], token: str) -> int:
        try:
            cursor = self.codec.decode(token)
        except MalformedTokenError as e:
            raise InvalidTokenError(f"Invalid pagination token: {e}") from e

        try:
            cursor_key = self.parse_key(cursor)
        except (ValueError, TypeError) as e:
            raise InvalidTokenError(f"Invalid cursor in pagination token: {e}") from e

        for i, record in enumerate(records):
            if self.key(record) == cursor_key:
                return i + 1

        logger.info(f"Stale pagination token: cursor {cursor_key} not found")
        raise StaleTokenError()


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_token: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.

    Args:
        base_url: Base URL for the resource
        params: Current query parameters
        next_token: Token for next page

    Returns:
        Link header value or None if there is no next page
    """
    if not next_token:
        return None

    next_params = {**params, "token": next_token}
    return f'<{base_url}?{urlencode(next_params)}>; rel="next"'
