"""Continuation token codecs.

A token is an opaque, printable string that wraps the cursor (the string form
of the last identifier returned). Codecs only translate between the two; they
never check whether the identifier still exists.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ValidationError


class MalformedTokenError(ValueError):
    """Raised when a token is not validly encoded."""


class TokenCodec(ABC):
    """Translate cursor identifiers to opaque tokens and back."""

    @abstractmethod
    def encode(self, cursor_id: str) -> str:
        """Encode a cursor identifier into a token."""

    @abstractmethod
    def decode(self, token: str) -> str:
        """Decode a token back into the cursor identifier.

        Raises:
            MalformedTokenError: If the token is not validly encoded
        """


def _b64decode(token: str, altchars: Optional[bytes] = None) -> bytes:
    if not token:
        raise MalformedTokenError("Empty token provided")
    try:
        return base64.b64decode(token.encode("ascii"), altchars=altchars, validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedTokenError(f"Token is not valid base64: {e}") from e


class Base64TokenCodec(TokenCodec):
    """Standard base64 over the UTF-8 bytes of the cursor."""

    def encode(self, cursor_id: str) -> str:
        return base64.b64encode(cursor_id.encode("utf-8")).decode("ascii")

    def decode(self, token: str) -> str:
        raw = _b64decode(token)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTokenError(f"Token is not valid UTF-8: {e}") from e


class TokenPayload(BaseModel):
    """Versioned cursor payload carried by JSON tokens."""

    v: int = 1
    id: str


class JsonTokenCodec(TokenCodec):
    """URL-safe base64 of a versioned JSON payload.

    The version field lets the format change later while still rejecting
    tokens minted by an incompatible release.
    """

    version = 1

    def encode(self, cursor_id: str) -> str:
        payload = TokenPayload(v=self.version, id=cursor_id)
        raw = payload.model_dump_json().encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii")

    def decode(self, token: str) -> str:
        raw = _b64decode(token, altchars=b"-_")
        try:
            payload = TokenPayload.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedTokenError(f"Invalid token payload: {e}") from e

        if payload.v != self.version:
            raise MalformedTokenError(f"Unsupported token version {payload.v}")
        return payload.id


TOKEN_CODECS = {
    "base64": Base64TokenCodec,
    "json": JsonTokenCodec,
}


def get_token_codec(token_format: str = "base64") -> TokenCodec:
    """Build the codec registered under ``token_format``."""
    try:
        return TOKEN_CODECS[token_format]()
    except KeyError:
        raise ValueError(
            f"Unknown token format '{token_format}', expected one of: {sorted(TOKEN_CODECS)}"
        )
