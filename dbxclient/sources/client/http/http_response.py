from typing import Any, AsyncIterator, Optional

import httpx  # type: ignore


class HTTPResponse:
    """Thin wrapper over an httpx response.

    Responses obtained with `stream=True` are not read yet; the owner must
    consume the body and call `aclose()`.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def is_closed(self) -> bool:
        return self.response.is_closed

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.response.headers.get(name, default)

    def text(self) -> str:
        return self.response.text

    def json(self) -> Any:
        return self.response.json()

    def bytes(self) -> bytes:
        return self.response.content

    async def aread(self) -> bytes:
        return await self.response.aread()

    async def aiter_bytes(self, chunk_size: Optional[int] = None) -> AsyncIterator[bytes]:
        async for chunk in self.response.aiter_bytes(chunk_size):
            yield chunk

    async def aclose(self) -> None:
        await self.response.aclose()

    async def __aenter__(self) -> "HTTPResponse":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
