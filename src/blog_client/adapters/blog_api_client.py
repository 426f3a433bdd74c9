"""Authenticated HTTP transport for the blog content API."""

import logging
from collections.abc import Generator, Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from blog_client.adapters.credential_store import CredentialProvider

_logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Structured failure returned by the blog API."""

    def __init__(self, reason: str | None, status_code: int | None = None) -> None:
        super().__init__(reason or f"HTTP {status_code or 'error'}")
        self.reason = reason
        self.status_code = status_code


class AuthenticationError(ApiError):
    """The server rejected or required credentials."""


class NotFoundError(ApiError):
    """The requested resource does not exist."""


class TransportFailure(ApiError):
    """The request never produced an HTTP response."""


class BlogApiClient(Protocol):
    """Interface for authenticated blog API requests."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: object | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes, str]] | None = None,
    ) -> object:
        """Send a request and return the parsed success body."""


class BearerCredentialAuth(httpx.Auth):
    """Attach the stored bearer token to each outgoing request."""

    def __init__(self, credentials: CredentialProvider) -> None:
        self.credentials = credentials

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.credentials.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


@dataclass
class HttpxBlogApiClient(BlogApiClient):
    """Blog API client implemented with httpx."""

    base_url: str
    credentials: CredentialProvider
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, credentials: CredentialProvider, timeout: float = 10
    ) -> "HttpxBlogApiClient":
        """Create a blog API client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            credentials=credentials,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: object | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes, str]] | None = None,
    ) -> object:
        """Send a request, raising ``ApiError`` on any failure."""
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method,
                url,
                json=json,
                data=data,
                files=files,
                auth=BearerCredentialAuth(self.credentials),
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            _logger.warning("Blog API %s %s unreachable: %s", method, path, exc)
            raise TransportFailure(None) from exc

        _logger.debug("Blog API %s %s -> %s", method, path, response.status_code)
        if response.is_error:
            raise _error_for(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            _logger.warning("Blog API %s %s returned a non-JSON body", method, path)
            raise ApiError(None, response.status_code) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _error_for(response: httpx.Response) -> ApiError:
    """Map an error response to the matching exception type."""
    reason = _error_reason(response)
    if response.status_code == httpx.codes.NOT_FOUND:
        return NotFoundError(reason, response.status_code)
    if response.status_code == httpx.codes.UNAUTHORIZED:
        return AuthenticationError(reason, response.status_code)
    return ApiError(reason, response.status_code)


def _error_reason(response: httpx.Response) -> str | None:
    """Extract the ``error`` message from a structured error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        reason = body.get("error")
        if isinstance(reason, str) and reason:
            return reason
    return None
