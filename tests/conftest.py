"""
Global pytest configuration and fixtures for the dbxclient test suite.

Every test talks to a canned Dropbox served by httpx.MockTransport; no
network access is needed.
"""

import json
import os
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx  # type: ignore
import pytest  # type: ignore
from faker import Faker  # type: ignore

from dbxclient.sources.client.dropbox.dropbox_ import DropboxClient, DropboxTokenConfig
from dbxclient.sources.external.dropbox.dropbox_ import DropboxDataSource

# Initialize Faker for generating test data
fake: Faker = Faker()

Handler = Callable[[httpx.Request], httpx.Response]


# ============================================================================
# Canned Dropbox server
# ============================================================================


class DropboxStub:
    """Records every request and answers with the queued responses in order.

    When the queue runs dry the stub answers 200 with an empty body.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.bodies: List[bytes] = []
        self._responses: List[httpx.Response] = []

    def reply(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body, headers=headers)
        elif text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        else:
            response = httpx.Response(status_code, content=content or b"", headers=headers)
        self._responses.append(response)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(await request.aread())
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, content=b"")

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> bytes:
        return self.bodies[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_body)

    def last_api_arg(self) -> Any:
        return json.loads(self.last.headers["Dropbox-API-Arg"])


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state before each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("DROPBOX_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def access_token() -> str:
    return fake.sha256()


@pytest.fixture
def stub() -> DropboxStub:
    return DropboxStub()


@pytest.fixture
def token_config(access_token: str) -> DropboxTokenConfig:
    return DropboxTokenConfig(access_token=access_token)


@pytest.fixture
async def dropbox_client(stub: DropboxStub, token_config: DropboxTokenConfig):
    """
    DropboxClient whose transport is the canned server.

    Yields:
        DropboxClient instance, closed after the test
    """
    client = DropboxClient.build_with_config(token_config, transport=httpx.MockTransport(stub.handler))
    yield client
    await client.close()


@pytest.fixture
def dbx(dropbox_client: DropboxClient) -> DropboxDataSource:
    return DropboxDataSource(dropbox_client)


# ============================================================================
# Sample payloads
# ============================================================================


def file_metadata_payload(path: Optional[str] = None, tagged: bool = True) -> Dict[str, Any]:
    """Wire form of a files.FileMetadata, as Dropbox sends it."""
    path = path or f"/{fake.file_name(extension='txt')}"
    payload: Dict[str, Any] = {
        "name": path.rsplit("/", 1)[-1],
        "id": f"id:{fake.pystr(min_chars=12, max_chars=12)}",
        "client_modified": "2015-05-12T15:50:38Z",
        "server_modified": "2015-05-12T15:50:38Z",
        "rev": "a1c10ce0dd78",
        "size": fake.pyint(min_value=1, max_value=10_000),
        "path_lower": path.lower(),
        "path_display": path,
        "content_hash": fake.sha256(),
    }
    if tagged:
        payload = {".tag": "file", **payload}
    return payload


def folder_metadata_payload(path: str) -> Dict[str, Any]:
    return {
        ".tag": "folder",
        "name": path.rsplit("/", 1)[-1],
        "id": f"id:{fake.pystr(min_chars=12, max_chars=12)}",
        "path_lower": path.lower(),
        "path_display": path,
    }


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Modify test items after collection.

    Auto-marks tests touching the wire codec or the error paths so they can
    be selected with -m.
    """
    for item in items:
        if "error" in item.nodeid.lower():
            item.add_marker(pytest.mark.errors)

        if "auth" in item.nodeid.lower():
            item.add_marker(pytest.mark.auth)
