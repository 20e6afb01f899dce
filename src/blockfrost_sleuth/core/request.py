"""Common request logic shared by the synchronous clients."""

import time
import logging
import functools
from typing import TYPE_CHECKING, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    DecodingError,
    RequestDuplicationError,
    TransportError,
    process_error_response,
)

if TYPE_CHECKING:
    from blockfrost_sleuth.config.settings import RetrySettings

T = TypeVar("T")

TOO_MANY_REQUESTS = 429

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def _adapter(response_type) -> TypeAdapter:
    # one schema build per response type
    return TypeAdapter(response_type)


def decode_response(text: str, response_type: Type[T], url: str) -> T:
    """Validate a JSON body against ``response_type``."""
    try:
        return _adapter(response_type).validate_json(text)
    except ValidationError as e:
        raise DecodingError(text, url, reason=str(e)) from e


# Used only for simple and common GET requests.
# Endpoints that need extra logic may not call this.
def send_get_request(
    session: requests.Session,
    url: str,
    response_type: Type[T],
    timeout: Optional[float] = None,
) -> T:
    """Send one GET and decode the body into ``response_type``."""
    try:
        response = session.get(url, timeout=timeout)
        text = response.text
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}", url) from e

    logger.debug(f"GET {url} -> {response.status_code}")
    if not 200 <= response.status_code < 300:
        raise process_error_response(text, response.status_code, url)

    return decode_response(text, response_type, url)


def clone_request(request: requests.PreparedRequest) -> requests.PreparedRequest:
    """Copy a prepared request so it can be sent again."""
    if request.body is not None and not isinstance(request.body, (bytes, str)):
        raise RequestDuplicationError(
            f"Cannot resend {request.method} {request.url}: body is a stream"
        )
    return request.copy()


def _error_status(error: requests.RequestException) -> Optional[int]:
    response = getattr(error, "response", None)
    return getattr(response, "status_code", None)


def send_request_with_retries(
    session: requests.Session,
    request: requests.PreparedRequest,
    retry_settings: "RetrySettings",
    timeout: Optional[float] = None,
) -> requests.Response:
    """Send ``request``, resending it while the server answers 429.

    At most ``retry_settings.amount`` sends happen. Only the first
    ``amount - 1`` may be retried; the last one is returned whatever its
    status. Any other outcome stops the loop at once.
    """
    for attempt in range(1, retry_settings.amount):
        attempt_request = clone_request(request)
        try:
            response = session.send(attempt_request, timeout=timeout)
        except requests.RequestException as e:
            if _error_status(e) != TOO_MANY_REQUESTS:
                raise TransportError(
                    f"{request.method} {request.url} failed: {e}",
                    request.url,
                    _error_status(e),
                ) from e
        else:
            if response.status_code != TOO_MANY_REQUESTS:
                return response

        logger.warning(
            f"Rate limited on {request.url} (attempt {attempt}/{retry_settings.amount}). "
            f"Retrying in {retry_settings.delay}s..."
        )
        time.sleep(retry_settings.delay)

    try:
        return session.send(request, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(
            f"{request.method} {request.url} failed: {e}",
            request.url,
            _error_status(e),
        ) from e
