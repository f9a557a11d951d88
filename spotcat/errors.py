"""Error types and the error envelope decoder.

Three failure kinds reach callers:

- transport failures (``requests.RequestException``) propagate unchanged
- the service rejected the request: :class:`APIError` with status and message
- the response could not be understood: :class:`DecodeError`

Nothing here logs or retries.
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any


class SpotifyError(Exception):
    """Base class for errors raised by this package."""


class APIError(SpotifyError):
    """Non-success response carrying a decodable error envelope."""

    def __init__(self, status: int, message: str, response: Any = None):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.response = response


class DecodeError(SpotifyError):
    """Response body was not JSON or did not have the expected shape."""

    def __init__(self, reason: str, body: Any = None):
        super().__init__(reason)
        self.reason = reason
        self.body = _excerpt(body)


def _excerpt(body: Any, limit: int = 200) -> str | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    text = body if isinstance(body, str) else repr(body)
    return text if len(text) <= limit else text[:limit] + "..."


def load_json(body: Any) -> Any:
    """Parse a response body into Python objects.

    Already-decoded values (dict/list) pass through so decoders can be
    chained without re-serializing.

    Raises:
        DecodeError: If body is not well-formed JSON
    """
    if isinstance(body, (dict, list)):
        return body
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"response body is not UTF-8: {e}", body) from e
    if not isinstance(body, str):
        raise DecodeError(f"unsupported body type {type(body).__name__}", body)
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"malformed JSON: {e}", body) from e


@dataclass(frozen=True)
class ErrorEnvelope:
    """Shape of the service's error body.

    Defaults match ``{"error": {"status": 404, "message": "..."}}``. Override
    the keys if the service answers with a different layout.
    """
    error_key: str = "error"
    status_key: str = "status"
    message_key: str = "message"

    def decode(self, body: Any, response: Any = None) -> APIError:
        """Decode an error body into an :class:`APIError`.

        Args:
            body: Raw response body (bytes, str or parsed JSON)
            response: Optional transport response attached to the error

        Returns:
            APIError carrying exactly the decoded status and message

        Raises:
            DecodeError: If the body does not match the envelope
        """
        data = load_json(body)
        if not isinstance(data, dict) or not isinstance(data.get(self.error_key), dict):
            raise DecodeError(f"error body has no '{self.error_key}' object", body)
        err = data[self.error_key]
        status = err.get(self.status_key)
        message = err.get(self.message_key)
        # bool is an int subclass; reject it explicitly
        if not isinstance(status, int) or isinstance(status, bool):
            raise DecodeError(f"error envelope '{self.status_key}' is not an integer", body)
        if not isinstance(message, str):
            raise DecodeError(f"error envelope '{self.message_key}' is not a string", body)
        return APIError(status, message, response)


DEFAULT_ERROR_ENVELOPE = ErrorEnvelope()


def decode_error(body: Any, envelope: ErrorEnvelope | None = None, response: Any = None) -> APIError:
    """Decode ``body`` with ``envelope`` (or the default shape)."""
    return (envelope or DEFAULT_ERROR_ENVELOPE).decode(body, response)


__all__ = [
    "SpotifyError",
    "APIError",
    "DecodeError",
    "ErrorEnvelope",
    "DEFAULT_ERROR_ENVELOPE",
    "decode_error",
    "load_json",
]
