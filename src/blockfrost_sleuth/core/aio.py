"""Common request logic shared by the asyncio clients.

Mirrors :mod:`blockfrost_sleuth.core.request` on top of ``httpx.AsyncClient``.
The retry pause is an ``asyncio.sleep``, so a rate-limited call only
suspends its own task.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Optional, Type, TypeVar

import httpx

from .exceptions import RequestDuplicationError, TransportError, process_error_response
from .request import TOO_MANY_REQUESTS, decode_response

if TYPE_CHECKING:
    from blockfrost_sleuth.config.settings import RetrySettings

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _error_status(error: httpx.HTTPError) -> Optional[int]:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


async def async_send_get_request(
    client: httpx.AsyncClient, url: str, response_type: Type[T]
) -> T:
    """Send one GET and decode the body into ``response_type``."""
    try:
        response = await client.get(url)
        text = response.text
    except httpx.HTTPError as e:
        raise TransportError(f"GET {url} failed: {e}", url) from e

    logger.debug(f"GET {url} -> {response.status_code}")
    if not response.is_success:
        raise process_error_response(text, response.status_code, url)

    return decode_response(text, response_type, url)


def clone_request(request: httpx.Request) -> httpx.Request:
    """Copy a request so it can be sent again."""
    try:
        content = request.content
    except httpx.RequestNotRead as e:
        raise RequestDuplicationError(
            f"Cannot resend {request.method} {request.url}: body is a stream"
        ) from e
    return httpx.Request(
        request.method,
        request.url,
        headers=request.headers,
        content=content,
        extensions=request.extensions,
    )


async def async_send_request_with_retries(
    client: httpx.AsyncClient,
    request: httpx.Request,
    retry_settings: "RetrySettings",
) -> httpx.Response:
    """Send ``request``, resending it while the server answers 429.

    Same budget as the synchronous version: ``amount - 1`` retryable sends
    followed by one final send whose response is returned as is.
    """
    for attempt in range(1, retry_settings.amount):
        attempt_request = clone_request(request)
        try:
            response = await client.send(attempt_request)
        except httpx.HTTPError as e:
            if _error_status(e) != TOO_MANY_REQUESTS:
                raise TransportError(
                    f"{request.method} {request.url} failed: {e}",
                    str(request.url),
                    _error_status(e),
                ) from e
        else:
            if response.status_code != TOO_MANY_REQUESTS:
                return response

        logger.warning(
            f"Rate limited on {request.url} (attempt {attempt}/{retry_settings.amount}). "
            f"Retrying in {retry_settings.delay}s..."
        )
        await asyncio.sleep(retry_settings.delay)

    try:
        return await client.send(request)
    except httpx.HTTPError as e:
        raise TransportError(
            f"{request.method} {request.url} failed: {e}",
            str(request.url),
            _error_status(e),
        ) from e
