"""Custom exceptions for blockfrost_sleuth package."""

from typing import Optional, Union

from pydantic import BaseModel, ValidationError


class BlockfrostSleuthError(Exception):
    """Base exception for blockfrost_sleuth package."""

    pass


class ConfigurationError(BlockfrostSleuthError):
    """Exception raised for configuration-related errors."""

    pass


class RequestDuplicationError(BlockfrostSleuthError):
    """Raised when a request cannot be copied before a send attempt.

    Only requests with a streaming (non-replayable) body hit this. Clients in
    this package never build such requests, so seeing it means a caller
    handed the dispatcher something it cannot resend.
    """

    pass


class APIError(BlockfrostSleuthError):
    """Exception raised for API-related errors."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(APIError):
    """The request never produced a usable HTTP response."""

    def __init__(
        self, message: str, url: Optional[str] = None, status_code: Optional[int] = None
    ):
        super().__init__(message, url)
        self.status_code = status_code


class ResponseError(APIError):
    """Non-2xx response with a structured Blockfrost error body."""

    def __init__(
        self, status_code: Union[int, str], error: str, message: str, url: str
    ):
        super().__init__(f"{status_code} {error}: {message} ({url})", url)
        self.status_code = status_code
        self.error = error
        self.message = message


class UnrecognizedResponseError(APIError):
    """Non-2xx response whose body is not a structured error payload."""

    def __init__(self, body: str, status_code: int, url: str):
        super().__init__(f"{status_code} with unrecognized body: {body!r} ({url})", url)
        self.body = body
        self.status_code = status_code


class DecodingError(APIError):
    """2xx response whose body does not match the expected schema."""

    def __init__(self, body: str, url: Optional[str] = None, reason: str = ""):
        message = f"Could not decode response from {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, url)
        self.body = body
        self.reason = reason


class ErrorPayload(BaseModel):
    """Error body returned by the API, e.g. ``{"status_code": 403, ...}``."""

    status_code: Union[int, str]
    error: str
    message: str


def process_error_response(text: str, status_code: int, url: str) -> APIError:
    """Turn a non-2xx response body into the matching exception.

    Never raises: a body that is not a structured payload becomes an
    ``UnrecognizedResponseError`` holding the text verbatim.
    """
    try:
        payload = ErrorPayload.model_validate_json(text)
    except ValidationError:
        return UnrecognizedResponseError(text, status_code, url)

    return ResponseError(payload.status_code, payload.error, payload.message, url)
