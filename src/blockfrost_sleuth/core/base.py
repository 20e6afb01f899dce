"""Abstract base classes for blockfrost_sleuth API clients."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
import requests

from blockfrost_sleuth.config.settings import RetrySettings, get_base_url, settings
from blockfrost_sleuth.pagination import Pagination, append_query, async_iter_pages, iter_pages
from .aio import async_send_get_request, async_send_request_with_retries
from .exceptions import ConfigurationError, process_error_response
from .request import decode_response, send_get_request, send_request_with_retries

T = TypeVar("T")

USER_AGENT = "blockfrost-sleuth/0.1.0"


@dataclass
class APIConfig:
    """Configuration for API clients."""

    base_url: str
    project_id: Optional[str] = None
    timeout: float = 30
    retry_settings: RetrySettings = field(default_factory=RetrySettings)
    user_agent: str = USER_AGENT

    @classmethod
    def from_settings(
        cls,
        project_id: Optional[str] = None,
        base_url: Optional[str] = None,
        retry_settings: Optional[RetrySettings] = None,
    ) -> "APIConfig":
        """Fill whatever is not given from the environment-backed settings."""
        project_id = project_id or settings.api.project_id
        if not project_id:
            raise ConfigurationError(
                "No project id given and BLOCKFROST_PROJECT_ID is not set"
            )
        return cls(
            base_url=base_url or get_base_url(project_id),
            project_id=project_id,
            timeout=settings.api.timeout,
            retry_settings=retry_settings or settings.api.retry_settings,
        )


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class _ClientMixin(ABC):
    """URL and header handling shared by the sync and async bases."""

    config: APIConfig

    @abstractmethod
    def _build_headers(self) -> Dict[str, str]:
        """Build headers attached to every request."""
        pass

    def _build_url(self, endpoint: str) -> str:
        # Handle full URLs (when endpoint starts with http)
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        if not endpoint:
            return self.config.base_url
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"


class BaseAPIClient(_ClientMixin):
    """Abstract base class for synchronous API clients.

    One ``requests.Session`` is created per client and reused by every call.
    """

    def __init__(self, config: APIConfig):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(self._build_headers())
        return session

    def _get(self, endpoint: str, response_type: Type[T]) -> T:
        return send_get_request(
            self._session,
            self._build_url(endpoint),
            response_type,
            timeout=self.config.timeout,
        )

    def _get_paged(
        self,
        endpoint: str,
        response_type: Type[List[T]],
        pagination: Optional[Pagination] = None,
    ) -> List[T]:
        pagination = pagination or Pagination()

        def fetch_page(page: Pagination) -> List[T]:
            return self._get(append_query(endpoint, page), response_type)

        if pagination.fetch_all:
            return list(iter_pages(fetch_page, pagination))
        return fetch_page(pagination)

    def _post(
        self,
        endpoint: str,
        response_type: Type[T],
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> T:
        url = self._build_url(endpoint)
        request = self._session.prepare_request(
            requests.Request("POST", url, data=data, headers=headers)
        )
        response = send_request_with_retries(
            self._session, request, self.config.retry_settings, timeout=self.config.timeout
        )
        if not _is_success(response.status_code):
            raise process_error_response(response.text, response.status_code, url)
        return decode_response(response.text, response_type, url)

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class BaseAsyncAPIClient(_ClientMixin):
    """Abstract base class for asyncio API clients.

    The ``httpx.AsyncClient`` is shared by every call made through the
    client, concurrent ones included.
    """

    def __init__(
        self, config: APIConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._client = httpx.AsyncClient(
            headers=self._build_headers(),
            timeout=self.config.timeout,
            transport=transport,
        )

    async def _get(self, endpoint: str, response_type: Type[T]) -> T:
        return await async_send_get_request(
            self._client, self._build_url(endpoint), response_type
        )

    async def _get_paged(
        self,
        endpoint: str,
        response_type: Type[List[T]],
        pagination: Optional[Pagination] = None,
    ) -> List[T]:
        pagination = pagination or Pagination()

        async def fetch_page(page: Pagination) -> List[T]:
            return await self._get(append_query(endpoint, page), response_type)

        if pagination.fetch_all:
            return [item async for item in async_iter_pages(fetch_page, pagination)]
        return await fetch_page(pagination)

    async def _post(
        self,
        endpoint: str,
        response_type: Type[T],
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> T:
        url = self._build_url(endpoint)
        request = self._client.build_request("POST", url, content=data, headers=headers)
        response = await async_send_request_with_retries(
            self._client, request, self.config.retry_settings
        )
        if not _is_success(response.status_code):
            raise process_error_response(response.text, response.status_code, url)
        return decode_response(response.text, response_type, url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


class BaseSource(ABC):
    """Abstract base class for DLT source factories."""

    def __init__(self, client: BaseAPIClient):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        pass
