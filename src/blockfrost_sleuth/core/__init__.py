"""Core infrastructure for blockfrost_sleuth package."""

from .exceptions import (
    APIError,
    BlockfrostSleuthError,
    ConfigurationError,
    DecodingError,
    RequestDuplicationError,
    ResponseError,
    TransportError,
    UnrecognizedResponseError,
    process_error_response,
)
from .request import send_get_request, send_request_with_retries
from .aio import async_send_get_request, async_send_request_with_retries

__all__ = [
    "APIError",
    "BlockfrostSleuthError",
    "ConfigurationError",
    "DecodingError",
    "RequestDuplicationError",
    "ResponseError",
    "TransportError",
    "UnrecognizedResponseError",
    "process_error_response",
    "send_get_request",
    "send_request_with_retries",
    "async_send_get_request",
    "async_send_request_with_retries",
]
