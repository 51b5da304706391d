"""Error handling module for Folder Store API."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    ConflictError,
    ServiceUnavailableError,
    create_problem_response
)
from .pagination import (
    InvalidTokenError,
    StaleTokenError,
    InvalidPageSizeError,
    RecordSourceError
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "ConflictError",
    "ServiceUnavailableError",
    "create_problem_response",
    "InvalidTokenError",
    "StaleTokenError",
    "InvalidPageSizeError",
    "RecordSourceError",
    "register_exception_handlers"
]
