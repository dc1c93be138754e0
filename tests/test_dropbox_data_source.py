"""
Route execution tests against a canned Dropbox (httpx.MockTransport).
"""
import json
from typing import List

import httpx  # type: ignore
import pytest  # type: ignore

from dbxclient.exceptions.dropbox_exceptions import (
    AccessApiError,
    ApiError,
    AuthApiError,
    BadInputError,
    EndpointError,
    InternalServerError,
    RateLimitApiError,
)
from dbxclient.sources.client.dropbox.dropbox_ import DropboxClient, DropboxTokenConfig
from dbxclient.sources.client.http.http_client import _iter_file
from dbxclient.sources.external.dropbox.dropbox_ import DropboxDataSource
from dbxclient.sources.external.dropbox.models.async_ import PollArg
from dbxclient.sources.external.dropbox.models.files import (
    CommitInfo,
    DownloadArg,
    DownloadError,
    FileMetadata,
    GetMetadataArg,
    GetMetadataError,
    ListFolderArg,
    ListFolderLongpollArg,
    Metadata,
    UploadSessionStartArg,
    WriteMode,
)
from dbxclient.sources.external.dropbox.models.sharing import GetSharedLinkMetadataArg
from dbxclient.sources.external.dropbox.models.team import GroupsListArg, GroupSelector
from dbxclient.sources.external.dropbox.models.users import BasicAccount, GetAccountBatchArg
from tests.conftest import DropboxStub, file_metadata_payload, folder_metadata_payload


def account_payload(faker, account_id: str) -> dict:
    first, last = faker.first_name(), faker.last_name()
    return {
        "account_id": account_id,
        "name": {
            "given_name": first,
            "surname": last,
            "familiar_name": first,
            "display_name": f"{first} {last}",
            "abbreviated_name": f"{first[0]}{last[0]}",
        },
        "email": faker.email(),
        "email_verified": True,
        "disabled": False,
        "is_teammate": False,
    }


class TestRpcRoutes:
    """RPC style: JSON argument in the body, JSON result in the body."""

    @pytest.mark.asyncio
    async def test_success_decodes_result(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={
            "entries": [file_metadata_payload("/Homework/a.txt"), folder_metadata_payload("/Homework/math")],
            "cursor": "cursor-1",
            "has_more": False,
        })

        result = await dbx.files.list_folder(ListFolderArg(path="/Homework"))

        assert [entry.tag for entry in result.entries] == ["file", "folder"]
        assert result.entries[0].file.path_display == "/Homework/a.txt"
        assert result.cursor == "cursor-1"

    @pytest.mark.asyncio
    async def test_request_shape(self, dbx: DropboxDataSource, stub: DropboxStub, access_token: str):
        stub.reply(json_body=file_metadata_payload("/a.txt"))

        await dbx.files.get_metadata(GetMetadataArg(path="/a.txt"))

        request = stub.last
        assert request.method == "POST"
        assert str(request.url) == "https://api.dropboxapi.com/2/files/get_metadata"
        assert request.headers["Authorization"] == f"Bearer {access_token}"
        assert request.headers["Content-Type"] == "application/json"
        assert "Dropbox-API-Select-User" not in request.headers
        assert stub.last_json() == {
            "path": "/a.txt",
            "include_media_info": False,
            "include_deleted": False,
            "include_has_explicit_shared_members": False,
        }

    @pytest.mark.asyncio
    async def test_route_without_argument_sends_no_body(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={"used": 314159265, "allocation": {".tag": "individual", "allocated": 10000000000}})

        usage = await dbx.users.get_space_usage()

        assert usage.used == 314159265
        assert usage.allocation.individual.allocated == 10000000000
        assert stub.last_body == b""
        assert "Content-Type" not in stub.last.headers

    @pytest.mark.asyncio
    async def test_void_result_returns_none(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body=None)

        assert await dbx.auth.token_revoke() is None
        assert str(stub.last.url) == "https://api.dropboxapi.com/2/auth/token/revoke"

    @pytest.mark.asyncio
    async def test_list_result(self, dbx: DropboxDataSource, stub: DropboxStub, faker_instance):
        ids = [f"dbid:{faker_instance.pystr()}" for _ in range(2)]
        stub.reply(json_body=[account_payload(faker_instance, account_id) for account_id in ids])

        accounts: List[BasicAccount] = await dbx.users.get_account_batch(GetAccountBatchArg(account_ids=ids))

        assert [account.account_id for account in accounts] == ids
        assert all(account.is_teammate is False for account in accounts)
        assert stub.last_json() == {"account_ids": ids}

    @pytest.mark.asyncio
    async def test_dict_argument_is_validated(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={"groups": [], "cursor": "c", "has_more": False})

        await dbx.team.groups_list({"limit": 10})

        assert stub.last_json() == {"limit": 10}
        assert str(stub.last.url) == "https://api.dropboxapi.com/2/team/groups/list"

    @pytest.mark.asyncio
    async def test_union_argument(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={".tag": "complete"})

        result = await dbx.team.groups_delete(GroupSelector("group_id", "g:e2db7665347abcd600000000001a2b3c"))

        assert result.tag == "complete"
        assert stub.last_json() == {".tag": "group_id", "group_id": "g:e2db7665347abcd600000000001a2b3c"}

    @pytest.mark.asyncio
    async def test_async_job_status(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={".tag": "in_progress"})

        status = await dbx.sharing.check_job_status(PollArg(async_job_id="34g93hh34h04y384084"))

        assert status.is_("in_progress")

    @pytest.mark.asyncio
    async def test_longpoll_uses_notify_host(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={"changes": True})

        result = await dbx.files.list_folder_longpoll(ListFolderLongpollArg(cursor="c"))

        assert result.changes is True
        assert result.backoff is None
        assert str(stub.last.url) == "https://notify.dropboxapi.com/2/files/list_folder/longpoll"
        assert stub.last_json() == {"cursor": "c", "timeout": 30}


class TestUploadRoutes:
    """Upload style: argument in Dropbox-API-Arg, raw bytes in the body."""

    @pytest.mark.asyncio
    async def test_upload_bytes(self, dbx: DropboxDataSource, stub: DropboxStub, faker_instance):
        data = faker_instance.binary(length=256)
        stub.reply(json_body=file_metadata_payload("/Homework/math/Matrices.txt", tagged=False))

        meta = await dbx.files.upload(
            CommitInfo(path="/Homework/math/Matrices.txt", mode=WriteMode("overwrite")), data
        )

        assert isinstance(meta, FileMetadata)
        request = stub.last
        assert str(request.url) == "https://content.dropboxapi.com/2/files/upload"
        assert request.headers["Content-Type"] == "application/octet-stream"
        assert stub.last_api_arg() == {
            "path": "/Homework/math/Matrices.txt",
            "mode": {".tag": "overwrite"},
            "autorename": False,
            "mute": False,
        }
        assert stub.last_body == data

    @pytest.mark.asyncio
    async def test_upload_path(self, dbx: DropboxDataSource, stub: DropboxStub, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_bytes(b"line one\nline two\n")
        stub.reply(json_body=file_metadata_payload("/notes.txt", tagged=False))

        await dbx.files.upload(CommitInfo(path="/notes.txt"), source)

        assert stub.last_body == b"line one\nline two\n"

    @pytest.mark.asyncio
    async def test_file_read_in_chunks(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_bytes(b"0123456789")

        chunks = [chunk async for chunk in _iter_file(source, chunk_size=4)]

        assert chunks == [b"0123", b"4567", b"89"]

    @pytest.mark.asyncio
    async def test_upload_async_stream(self, dbx: DropboxDataSource, stub: DropboxStub):
        async def chunks():
            yield b"first-"
            yield b"second"

        stub.reply(json_body={"session_id": "1234faaf0678bcde"})

        result = await dbx.files.upload_session_start(UploadSessionStartArg(), chunks())

        assert result.session_id == "1234faaf0678bcde"
        assert stub.last_body == b"first-second"
        assert stub.last_api_arg() == {"close": False}
        assert str(stub.last.url) == "https://content.dropboxapi.com/2/files/upload_session/start"

    @pytest.mark.asyncio
    async def test_upload_conflict_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(409, json_body={
            "error_summary": "path/conflict/file/..",
            "error": {
                ".tag": "path",
                "reason": {".tag": "conflict", "conflict": {".tag": "file"}},
                "upload_session_id": "abc",
            },
        })

        with pytest.raises(EndpointError) as exc_info:
            await dbx.files.upload(CommitInfo(path="/a.txt"), b"x")

        assert exc_info.value.error.path.reason.conflict.tag == "file"


class TestDownloadRoutes:
    """Download style: result in Dropbox-API-Result, body left open."""

    @pytest.mark.asyncio
    async def test_download_result_and_stream(self, dbx: DropboxDataSource, stub: DropboxStub, faker_instance):
        data = faker_instance.binary(length=1024)
        payload = file_metadata_payload("/a.txt", tagged=False)
        stub.reply(content=data, headers={"Dropbox-API-Result": json.dumps(payload)})

        result, content = await dbx.files.download(DownloadArg(path="/a.txt"))

        assert result.name == "a.txt"
        assert not content.is_closed
        async with content:
            assert await content.aread() == data
        assert content.is_closed
        assert stub.last_api_arg() == {"path": "/a.txt"}
        assert str(stub.last.url) == "https://content.dropboxapi.com/2/files/download"
        assert stub.last_body == b""

    @pytest.mark.asyncio
    async def test_download_chunks(self, dbx: DropboxDataSource, stub: DropboxStub):
        payload = file_metadata_payload("/a.txt", tagged=False)
        stub.reply(content=b"abcdef", headers={"Dropbox-API-Result": json.dumps(payload)})

        _, content = await dbx.files.download(DownloadArg(path="/a.txt"))
        received = b""
        async with content:
            async for chunk in content.aiter_bytes():
                received += chunk

        assert received == b"abcdef"

    @pytest.mark.asyncio
    async def test_download_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(409, json_body={
            "error_summary": "path/not_found/..",
            "error": {".tag": "path", "path": {".tag": "not_found"}},
        })

        with pytest.raises(EndpointError) as exc_info:
            await dbx.files.download(DownloadArg(path="/missing.txt"))

        error = exc_info.value.error
        assert isinstance(error, DownloadError)
        assert error.path.tag == "not_found"

    @pytest.mark.asyncio
    async def test_download_without_result_header(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(content=b"data")

        with pytest.raises(ValueError):
            await dbx.files.download(DownloadArg(path="/a.txt"))

    @pytest.mark.asyncio
    async def test_shared_link_file_download(self, dbx: DropboxDataSource, stub: DropboxStub):
        link = {
            ".tag": "file",
            "url": "https://www.dropbox.com/s/2sn712vy1ovegw8/Prime_Numbers.txt?dl=0",
            "name": "Prime_Numbers.txt",
            "link_permissions": {"can_revoke": False},
            "client_modified": "2015-05-12T15:50:38Z",
            "server_modified": "2015-05-12T15:50:38Z",
            "rev": "a1c10ce0dd78",
            "size": 7212,
        }
        stub.reply(content=b"2 3 5 7", headers={"Dropbox-API-Result": json.dumps(link)})

        result, content = await dbx.sharing.get_shared_link_file(GetSharedLinkMetadataArg(url=link["url"]))
        async with content:
            body = await content.aread()

        assert result.file.size == 7212
        assert body == b"2 3 5 7"
        assert str(stub.last.url) == "https://content.dropboxapi.com/2/sharing/get_shared_link_file"


class TestErrorResponses:
    """Non-200 answers map onto the ApiError hierarchy."""

    @pytest.mark.asyncio
    async def test_endpoint_error_decodes_route_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(
            409,
            json_body={
                "error_summary": "path/not_found/...",
                "error": {".tag": "path", "path": {".tag": "not_found"}},
                "user_message": {"text": "File not found", "locale": "en"},
            },
            headers={"X-Dropbox-Request-Id": "req-123"},
        )

        with pytest.raises(EndpointError) as exc_info:
            await dbx.files.get_metadata(GetMetadataArg(path="/missing"))

        err = exc_info.value
        assert isinstance(err.error, GetMetadataError)
        assert err.error.tag == "path"
        assert err.error.path.tag == "not_found"
        assert err.error_summary == "path/not_found/..."
        assert str(err) == "path/not_found/..."
        assert err.route == "files/get_metadata"
        assert err.user_message == "File not found"
        assert err.status_code == 409
        assert err.request_id == "req-123"

    @pytest.mark.asyncio
    async def test_endpoint_error_unknown_tag(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(409, json_body={"error_summary": "brand_new/", "error": {".tag": "brand_new"}})

        with pytest.raises(EndpointError) as exc_info:
            await dbx.files.get_metadata(GetMetadataArg(path="/a"))

        assert exc_info.value.error.tag == "brand_new"
        assert exc_info.value.error.path is None

    @pytest.mark.asyncio
    async def test_endpoint_error_non_json_body(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(409, text="conflict")

        with pytest.raises(EndpointError) as exc_info:
            await dbx.files.get_metadata(GetMetadataArg(path="/a"))

        assert exc_info.value.error_summary == "conflict"
        assert exc_info.value.error is None

    @pytest.mark.asyncio
    async def test_bad_input_is_raw_text(self, dbx: DropboxDataSource, stub: DropboxStub):
        message = 'Error in call to API function "files/list_folder": request body: path: missing'
        stub.reply(400, text=message)

        with pytest.raises(BadInputError) as exc_info:
            await dbx.files.list_folder(ListFolderArg(path="bogus"))

        assert exc_info.value.error_summary == message
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_auth_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(401, json_body={"error_summary": "user_suspended/...", "error": {".tag": "user_suspended"}})

        with pytest.raises(AuthApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.error.tag == "user_suspended"
        assert exc_info.value.error_summary == "user_suspended/..."

    @pytest.mark.asyncio
    async def test_access_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(403, json_body={
            "error_summary": "paper_access_denied/not_paper_user/",
            "error": {".tag": "paper_access_denied", "paper_access_denied": {".tag": "not_paper_user"}},
        })

        with pytest.raises(AccessApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.error.paper_access_denied.tag == "not_paper_user"

    @pytest.mark.asyncio
    async def test_rate_limit_json(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(429, json_body={
            "error_summary": "too_many_requests/..",
            "error": {"reason": {".tag": "too_many_requests"}, "retry_after": 300},
        })

        with pytest.raises(RateLimitApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.error.reason.tag == "too_many_requests"
        assert exc_info.value.retry_after == 300

    @pytest.mark.asyncio
    async def test_rate_limit_plain_text(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(429, text="Too Many Requests", headers={"Retry-After": "10"})

        with pytest.raises(RateLimitApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.error.reason.tag == "too_many_requests"
        assert exc_info.value.retry_after == 10
        assert exc_info.value.error_summary == "Too Many Requests"

    @pytest.mark.asyncio
    async def test_rate_limit_plain_text_without_header(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(429, text="")

        with pytest.raises(RateLimitApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.retry_after == 1
        assert exc_info.value.error_summary == "too_many_requests"

    @pytest.mark.asyncio
    async def test_server_error_plain_text(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(500, text="Internal Server Error")

        with pytest.raises(InternalServerError) as exc_info:
            await dbx.users.get_space_usage()

        assert exc_info.value.error_summary == "Internal Server Error"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_other_status_is_generic_api_error(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(418, json_body={"error_summary": "teapot/"})

        with pytest.raises(ApiError) as exc_info:
            await dbx.users.get_space_usage()

        assert type(exc_info.value) is ApiError
        assert exc_info.value.error_summary == "teapot/"

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, token_config: DropboxTokenConfig):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with DropboxClient.build_with_config(token_config, transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(httpx.ConnectError):
                await DropboxDataSource(client).users.get_space_usage()

    @pytest.mark.asyncio
    async def test_undecodable_success_body(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(text="not json")

        with pytest.raises(ValueError):
            await dbx.users.get_space_usage()


class TestClientContext:
    """Member selection, domains and URL overrides."""

    @pytest.mark.asyncio
    async def test_as_member_header(self, dbx: DropboxDataSource, stub: DropboxStub, faker_instance):
        member_id = f"dbmid:{faker_instance.pystr()}"
        stub.reply(json_body={"used": 1, "allocation": {".tag": "other"}})

        member = dbx.as_member(member_id)
        await member.users.get_space_usage()

        assert stub.last.headers["Dropbox-API-Select-User"] == member_id
        assert member.get_client().get_client().client is dbx.get_client().get_client().client

    @pytest.mark.asyncio
    async def test_closing_member_keeps_parent_pool(self, dbx: DropboxDataSource, stub: DropboxStub):
        stub.reply(json_body={"used": 1, "allocation": {".tag": "other"}})
        stub.reply(json_body={"used": 2, "allocation": {".tag": "other"}})
        pool = dbx.get_client().get_client()

        member = dbx.as_member("dbmid:abc")
        async with member.get_client():
            await member.users.get_space_usage()
        usage = await dbx.users.get_space_usage()

        assert usage.used == 2
        assert pool.client is not None
        assert not pool.client.is_closed
        assert "Dropbox-API-Select-User" not in stub.last.headers
        assert member.get_client().get_client().client is None

    @pytest.mark.asyncio
    async def test_configured_member_header(self, stub: DropboxStub, access_token: str):
        config = DropboxTokenConfig(access_token=access_token, as_member_id="dbmid:abc")
        async with DropboxClient.build_with_config(config, transport=httpx.MockTransport(stub.handler)) as client:
            await DropboxDataSource(client).team.groups_list(GroupsListArg())

        assert stub.last.headers["Dropbox-API-Select-User"] == "dbmid:abc"
        assert stub.last_json() == {"limit": 1000}

    @pytest.mark.asyncio
    async def test_custom_domain(self, stub: DropboxStub, access_token: str):
        config = DropboxTokenConfig(access_token=access_token, domain=".dropbox-dev.example.com")
        async with DropboxClient.build_with_config(config, transport=httpx.MockTransport(stub.handler)) as client:
            await DropboxDataSource(client).users.get_space_usage()

        assert str(stub.last.url) == "https://api.dropbox-dev.example.com/2/users/get_space_usage"

    @pytest.mark.asyncio
    async def test_url_generator_override(self, stub: DropboxStub, token_config: DropboxTokenConfig):
        seen = []

        def generate(host: str, style: str, namespace: str, route: str) -> str:
            seen.append((host, style, namespace, route))
            return f"http://localhost:8080/{host}/{namespace}/{route}"

        payload = file_metadata_payload("/a.txt", tagged=False)
        stub.reply(content=b"x", headers={"Dropbox-API-Result": json.dumps(payload)})
        client = DropboxClient.build_with_config(
            token_config, transport=httpx.MockTransport(stub.handler), url_generator=generate
        )
        async with client:
            _, content = await DropboxDataSource(client).files.download(DownloadArg(path="/a.txt"))
            await content.aclose()

        assert seen == [("content", "download", "files", "download")]
        assert str(stub.last.url) == "http://localhost:8080/content/files/download"

    @pytest.mark.asyncio
    async def test_verbose_logs_arguments(self, stub: DropboxStub, access_token: str, caplog):
        config = DropboxTokenConfig(access_token=access_token, verbose=True)
        stub.reply(json_body=file_metadata_payload("/a.txt"))
        async with DropboxClient.build_with_config(config, transport=httpx.MockTransport(stub.handler)) as client:
            with caplog.at_level("DEBUG"):
                meta = await DropboxDataSource(client).files.get_metadata(GetMetadataArg(path="/a.txt"))

        assert isinstance(meta, Metadata)
        assert any('"path": "/a.txt"' in record.getMessage() for record in caplog.records)
        assert any("files/get_metadata [api] -> 200" in record.getMessage() for record in caplog.records)
