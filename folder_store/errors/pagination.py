"""Errors raised while paging through folder records.

Each error is a Problem Details exception, so a request that fails mid
iteration surfaces to HTTP callers with a stable ``type`` URI they can branch
on. Pages fetched before the failure stay valid.
"""

from typing import Any, Optional

from .problem_details import BadRequestError, ConflictError, ServiceUnavailableError


INVALID_TOKEN_TYPE = "/problems/invalid-token"
STALE_TOKEN_TYPE = "/problems/stale-token"
INVALID_PAGE_SIZE_TYPE = "/problems/invalid-page-size"
RECORD_SOURCE_TYPE = "/problems/record-source-unavailable"


class InvalidTokenError(BadRequestError):
    """Token could not be decoded, or decoded to a malformed cursor."""

    def __init__(self, detail: str = "Invalid pagination token", **extensions: Any):
        super().__init__(detail, type_uri=INVALID_TOKEN_TYPE, **extensions)


class StaleTokenError(ConflictError):
    """Token decoded fine but its cursor is not in the current result set."""

    def __init__(
        self,
        detail: str = "Pagination token no longer matches the result set; restart without a token",
        **extensions: Any
    ):
        super().__init__(detail, type_uri=STALE_TOKEN_TYPE, **extensions)


class InvalidPageSizeError(BadRequestError):
    """Requested page size is not a positive integer within limits."""

    def __init__(self, per_page: int, max_page_size: Optional[int] = None):
        if per_page < 1:
            detail = f"per_page must be a positive integer, got {per_page}"
        else:
            detail = f"per_page must not exceed {max_page_size}, got {per_page}"
        super().__init__(detail, type_uri=INVALID_PAGE_SIZE_TYPE, per_page=per_page)
        self.per_page = per_page


class RecordSourceError(ServiceUnavailableError):
    """The backing record source failed to answer."""

    def __init__(self, detail: str = "Folder records are temporarily unavailable", **extensions: Any):
        super().__init__(detail, **extensions)
        self.type_uri = RECORD_SOURCE_TYPE
