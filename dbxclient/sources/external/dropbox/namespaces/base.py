from pathlib import Path
from typing import TYPE_CHECKING, Any, AsyncIterable, NamedTuple, Optional, Union

from dbxclient.sources.client.http.http_response import HTTPResponse
from dbxclient.sources.external.dropbox.route import Route

if TYPE_CHECKING:
    from dbxclient.sources.external.dropbox.dropbox_ import DropboxDataSource

# Request body of an upload route
UploadContent = Union[bytes, Path, AsyncIterable[bytes]]


class DownloadResult(NamedTuple):
    """Decoded result of a download route plus the still-open response.

    The caller reads the body (``await content.aread()`` or
    ``content.aiter_bytes()``) and must close it, e.g.::

        result, content = await dbx.files.download(DownloadArg(path="/a.txt"))
        async with content:
            data = await content.aread()
    """
    result: Any
    content: HTTPResponse


class Namespace:
    """One Dropbox namespace; every route method delegates to the data source executor"""

    def __init__(self, source: "DropboxDataSource") -> None:
        self._source = source

    async def _execute(self, route: Route, arg: Any = None, content: Optional[UploadContent] = None) -> Any:
        return await self._source.execute(route, arg, content)
