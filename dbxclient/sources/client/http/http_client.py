import asyncio
import logging
from pathlib import Path
from typing import AsyncIterator, Optional

import httpx  # type: ignore

from dbxclient.sources.client.http.http_request import HTTPRequest
from dbxclient.sources.client.http.http_response import HTTPResponse
from dbxclient.sources.client.iclient import IClient

FILE_CHUNK_SIZE = 4 * 1024 * 1024


async def _iter_file(path: Path, chunk_size: int = FILE_CHUNK_SIZE) -> AsyncIterator[bytes]:
    with path.open("rb") as f:
        while True:
            chunk = await asyncio.to_thread(f.read, chunk_size)
            if not chunk:
                break
            yield chunk


class HTTPClient(IClient):
    """
    HTTP client with authentication.

    Features:
    - Automatic Authorization header injection
    - Lazily created httpx.AsyncClient, shared by every request
    - Optional streamed responses left open for the caller

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport (e.g. httpx.MockTransport)
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str,
        token_type: str = "Bearer",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers = {
            "Authorization": f"{token_type} {token}",
        }
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None
        # False when the pool is borrowed from another HTTPClient
        self._owns_client = True

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self.transport,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects
        )

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is created and available."""
        if self.client is None:
            self.client = self._new_client()
            self._owns_client = True
        return self.client

    async def execute(self, request: HTTPRequest, stream: bool = False, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            stream: Leave the response body unread; the caller must close it
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        """
        url = f"{request.url.format(**request.path_params)}"
        client = await self._ensure_client()

        # Merge client headers with request headers (request headers take precedence)
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {
            "params": request.query_params,
            "headers": merged_headers,
            **kwargs
        }

        if request.stream is not None:
            request_kwargs["content"] = request.stream
        elif isinstance(request.body, dict):
            content_type = request.headers.get("Content-Type", "").lower()
            if "application/x-www-form-urlencoded" in content_type:
                request_kwargs["data"] = request.body
            else:
                request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body
        elif isinstance(request.body, Path):
            request_kwargs["content"] = _iter_file(request.body)

        http_request = client.build_request(request.method, url, **request_kwargs)
        response = await client.send(http_request, stream=stream)
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client; a borrowed pool is only released, never closed"""
        if self.client and self._owns_client:
            await self.client.aclose()
        self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
