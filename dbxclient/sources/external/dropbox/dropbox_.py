import json
from pathlib import Path
from typing import Any, Dict, Optional

from dbxclient.config.constants.http_status_code import HttpStatusCode
from dbxclient.config.constants.service import DropboxHeaders
from dbxclient.exceptions.dropbox_exceptions import (
    AccessApiError,
    ApiError,
    AuthApiError,
    BadInputError,
    EndpointError,
    InternalServerError,
    RateLimitApiError,
)
from dbxclient.sources.client.dropbox.dropbox_ import DropboxClient
from dbxclient.sources.client.http.http_request import HTTPRequest
from dbxclient.sources.client.http.http_response import HTTPResponse
from dbxclient.sources.external.dropbox.models.auth import (
    AccessError,
    AuthError,
    RateLimitError,
    RateLimitReason,
)
from dbxclient.sources.external.dropbox.namespaces.auth import AuthNamespace
from dbxclient.sources.external.dropbox.namespaces.base import DownloadResult, UploadContent
from dbxclient.sources.external.dropbox.namespaces.files import FilesNamespace
from dbxclient.sources.external.dropbox.namespaces.sharing import SharingNamespace
from dbxclient.sources.external.dropbox.namespaces.team import TeamNamespace
from dbxclient.sources.external.dropbox.namespaces.users import UsersNamespace
from dbxclient.sources.external.dropbox.route import Route, RouteStyle
from dbxclient.sources.external.dropbox.stone import decode, encode


def _parse_json(text: str) -> Optional[Dict[str, Any]]:
    """Parse an error body, None when it is not a JSON object"""
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _user_message(payload: Dict[str, Any]) -> Optional[str]:
    message = payload.get("user_message")
    if isinstance(message, dict):
        return message.get("text")
    return message


class DropboxDataSource:
    """Typed Dropbox API v2 over a DropboxClient.

    Routes are grouped by namespace::

        dbx = DropboxDataSource(DropboxClient.build_with_config(DropboxTokenConfig(access_token=token)))
        result = await dbx.files.list_folder(ListFolderArg(path=""))

    Every route method issues exactly one HTTP exchange. Non-200 answers
    raise a subclass of ApiError; transport failures propagate as
    httpx errors.
    """

    def __init__(self, client: DropboxClient) -> None:
        self._dropbox_client = client
        self._client = client.get_client()
        if self._client is None:
            raise ValueError("Dropbox client is not initialized.")
        self.logger = self._client.logger

        self.auth = AuthNamespace(self)
        self.files = FilesNamespace(self)
        self.sharing = SharingNamespace(self)
        self.team = TeamNamespace(self)
        self.users = UsersNamespace(self)

    def get_data_source(self) -> "DropboxDataSource":
        return self

    def get_client(self) -> DropboxClient:
        return self._dropbox_client

    def as_member(self, team_member_id: str) -> "DropboxDataSource":
        """Data source issuing team-scoped calls on behalf of `team_member_id`"""
        return DropboxDataSource(DropboxClient(self._client.with_member(team_member_id)))

    async def execute(
        self,
        route: Route,
        arg: Any = None,
        content: Optional[UploadContent] = None,
    ) -> Any:
        """Execute one route.

        Args:
            route: The route to call
            arg: Route argument, a model instance or its wire dict
            content: Request body of upload routes
        Returns:
            The decoded result (None for routes without a result); download
            routes return a DownloadResult whose response is still open
        Raises:
            ApiError: Any non-200 answer, see the subclasses
        """
        if arg is not None and route.arg_type is not None and not isinstance(arg, route.arg_type):
            arg = decode(route.arg_type, arg)
        encoded = encode(arg) if arg is not None else None

        url = self._client.generate_url(route.host.value, route.namespace, route.name, route.style.value)
        headers = self._client.route_headers()
        body: Any = None
        stream: Any = None

        if route.style is RouteStyle.RPC:
            if encoded is not None:
                headers["Content-Type"] = "application/json"
                body = encoded
        else:
            if encoded is not None:
                headers[DropboxHeaders.API_ARG.value] = json.dumps(encoded)
            if route.style is RouteStyle.UPLOAD:
                headers["Content-Type"] = "application/octet-stream"
                if content is None:
                    body = b""
                elif isinstance(content, (bytes, bytearray)):
                    body = bytes(content)
                elif isinstance(content, Path):
                    body = content
                else:
                    stream = content

        if self._client.verbose:
            self.logger.debug(f"dropbox {route.path} arg: {json.dumps(encoded)}")

        request = HTTPRequest(url=url, method="POST", headers=headers, body=body, stream=stream)
        is_download = route.style is RouteStyle.DOWNLOAD
        response = await self._client.execute(request, stream=is_download)
        self.logger.debug(f"dropbox {route.path} [{route.host.value}] -> {response.status}")

        if response.status == HttpStatusCode.SUCCESS.value:
            if is_download:
                return await self._download_result(route, response)
            return self._decode_result(route, response.text())

        if is_download:
            try:
                await response.aread()
            finally:
                await response.aclose()
        raise self._error_for(route, response)

    async def _download_result(self, route: Route, response: HTTPResponse) -> DownloadResult:
        raw = response.header(DropboxHeaders.API_RESULT.value)
        try:
            if raw is None:
                raise ValueError(f"{route.path}: response carries no {DropboxHeaders.API_RESULT.value} header")
            if self._client.verbose:
                self.logger.debug(f"dropbox {route.path} result: {raw}")
            result = decode(route.result_type, json.loads(raw))
        except Exception:
            await response.aclose()
            raise
        return DownloadResult(result, response)

    def _decode_result(self, route: Route, text: str) -> Any:
        if self._client.verbose:
            self.logger.debug(f"dropbox {route.path} body: {text}")
        if route.result_type is None or not text:
            return None
        return decode(route.result_type, json.loads(text))

    def _error_for(self, route: Route, response: HTTPResponse) -> ApiError:
        status = response.status
        text = response.text()
        request_id = response.header(DropboxHeaders.REQUEST_ID.value)
        common = {"status_code": status, "request_id": request_id}
        self.logger.debug(f"dropbox {route.path} error {status}: {text}")

        if status == HttpStatusCode.BAD_REQUEST.value:
            return BadInputError(text, **common)

        payload = _parse_json(text)
        summary = payload.get("error_summary", text) if payload is not None else text
        raw_error = payload.get("error") if payload is not None else None

        if status == HttpStatusCode.CONFLICT.value:
            error = None
            if route.error_type is not None and raw_error is not None:
                error = decode(route.error_type, raw_error)
            user_message = _user_message(payload) if payload is not None else None
            return EndpointError(summary, route.path, error=error, user_message=user_message, **common)

        if status == HttpStatusCode.UNAUTHORIZED.value:
            error = AuthError.from_dict(raw_error) if raw_error is not None else None
            return AuthApiError(summary, error=error, **common)

        if status == HttpStatusCode.FORBIDDEN.value:
            error = AccessError.from_dict(raw_error) if raw_error is not None else None
            return AccessApiError(summary, error=error, **common)

        if status == HttpStatusCode.TOO_MANY_REQUESTS.value:
            if raw_error is not None:
                error = RateLimitError.from_dict(raw_error)
            else:
                retry_after = response.header("Retry-After")
                error = RateLimitError(
                    reason=RateLimitReason(RateLimitReason.TOO_MANY_REQUESTS),
                    retry_after=int(retry_after) if retry_after and retry_after.isdigit() else 1,
                )
            return RateLimitApiError(summary or error.reason.tag, error=error, **common)

        if status >= HttpStatusCode.INTERNAL_SERVER_ERROR.value:
            return InternalServerError(summary, **common)

        return ApiError(summary, **common)
