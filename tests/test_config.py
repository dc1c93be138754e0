"""
Configuration layer tests: token config, OAuth endpoints, the
configuration service and the client builders.
"""
import logging

import pytest  # type: ignore

from dbxclient.config.configuration_service import ConfigurationService, InMemoryKeyValueStore
from dbxclient.config.constants.service import DEFAULT_DOMAIN, config_node_constants
from dbxclient.sources.client.dropbox import (
    DropboxClient,
    DropboxRESTClientViaToken,
    DropboxTokenConfig,
    oauth_endpoint,
)
from dbxclient.sources.external.dropbox import DropboxDataSource
from dbxclient.utils.logger import create_logger

DROPBOX_KEY = config_node_constants.DROPBOX.value


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.dropbox")


class TestTokenConfig:
    def test_defaults(self, access_token):
        config = DropboxTokenConfig(access_token=access_token)

        assert config.domain == DEFAULT_DOMAIN
        assert config.timeout is None
        assert config.as_member_id is None
        assert config.verbose is False
        assert config.to_dict()["access_token"] == access_token

    def test_from_env(self, monkeypatch, access_token):
        monkeypatch.setenv("DROPBOX_ACCESS_TOKEN", access_token)
        monkeypatch.setenv("DROPBOX_AS_MEMBER_ID", "dbmid:xyz")
        monkeypatch.setenv("DROPBOX_TIMEOUT", "12.5")
        monkeypatch.setenv("DROPBOX_VERBOSE", "true")

        config = DropboxTokenConfig.from_env()

        assert config.access_token == access_token
        assert config.as_member_id == "dbmid:xyz"
        assert config.timeout == 12.5
        assert config.verbose is True
        assert config.domain == DEFAULT_DOMAIN

    def test_from_env_requires_token(self):
        with pytest.raises(ValueError):
            DropboxTokenConfig.from_env()

    def test_create_client(self, access_token):
        client = DropboxTokenConfig(access_token=access_token, timeout=5.0).create_client()

        assert isinstance(client, DropboxRESTClientViaToken)
        assert client.headers["Authorization"] == f"Bearer {access_token}"
        assert client.timeout == 5.0

    def test_default_timeout(self, access_token):
        assert DropboxTokenConfig(access_token=access_token).create_client().timeout == 100.0

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            DropboxRESTClientViaToken("")


class TestUrls:
    def test_host_map(self, access_token):
        client = DropboxRESTClientViaToken(access_token, domain=".example.org")

        assert client.host_map == {
            "api": "api.example.org",
            "content": "content.example.org",
            "notify": "notify.example.org",
        }
        assert client.generate_url("content", "files", "upload") == "https://content.example.org/2/files/upload"

    def test_oauth_endpoint_default_domain(self):
        endpoint = oauth_endpoint()

        assert endpoint.auth_url == "https://www.dropbox.com/1/oauth2/authorize"
        assert endpoint.token_url == "https://api.dropboxapi.com/1/oauth2/token"

    def test_oauth_endpoint_custom_domain(self):
        endpoint = oauth_endpoint(".dropbox-dev.example.com")

        assert endpoint.auth_url == "https://meta.dropbox-dev.example.com/1/oauth2/authorize"
        assert endpoint.token_url == "https://api.dropbox-dev.example.com/1/oauth2/token"


class TestConfigurationService:
    @pytest.mark.asyncio
    async def test_reads_store_and_caches(self, logger):
        store = InMemoryKeyValueStore({DROPBOX_KEY: {"auth": {"accessToken": "t"}}})
        service = ConfigurationService(logger=logger, key_value_store=store)

        first = await service.get_config(DROPBOX_KEY)
        await store.delete_key(DROPBOX_KEY)
        second = await service.get_config(DROPBOX_KEY)

        assert first == second == {"auth": {"accessToken": "t"}}
        assert await service.get_config(DROPBOX_KEY, use_cache=False) is None

    @pytest.mark.asyncio
    async def test_default_for_missing_key(self, logger):
        service = ConfigurationService(logger=logger)

        assert await service.get_config("/services/unknown", default={"x": 1}) == {"x": 1}

    @pytest.mark.asyncio
    async def test_env_fallback(self, logger, monkeypatch, access_token):
        monkeypatch.setenv("DROPBOX_ACCESS_TOKEN", access_token)
        service = ConfigurationService(logger=logger)

        config = await service.get_config(DROPBOX_KEY)

        assert config["auth"] == {"authType": "ACCESS_TOKEN", "accessToken": access_token}
        assert config["timeout"] is None
        assert config["verbose"] is False

    @pytest.mark.asyncio
    async def test_env_fallback_timeout_and_verbose(self, logger, monkeypatch, access_token):
        monkeypatch.setenv("DROPBOX_ACCESS_TOKEN", access_token)
        monkeypatch.setenv("DROPBOX_TIMEOUT", "7.5")
        monkeypatch.setenv("DROPBOX_VERBOSE", "yes")
        service = ConfigurationService(logger=logger)

        config = await service.get_config(DROPBOX_KEY)

        assert config["timeout"] == 7.5
        assert config["verbose"] is True

    @pytest.mark.asyncio
    async def test_set_and_delete(self, logger):
        service = ConfigurationService(logger=logger)

        assert await service.set_config("/k", {"v": 1}) is True
        assert await service.get_config("/k") == {"v": 1}
        assert await service.delete_config("/k") is True
        assert await service.get_config("/k") is None
        assert await service.delete_config("/k") is False

    @pytest.mark.asyncio
    async def test_clear_cache(self, logger):
        store = InMemoryKeyValueStore({"/k": "a"})
        service = ConfigurationService(logger=logger, key_value_store=store)
        await service.get_config("/k")
        await store.create_key("/k", "b")

        service.clear_cache()

        assert await service.get_config("/k") == "b"


class TestBuildFromServices:
    @pytest.mark.asyncio
    async def test_build(self, logger, access_token):
        store = InMemoryKeyValueStore({
            DROPBOX_KEY: {
                "auth": {"authType": "ACCESS_TOKEN", "accessToken": access_token},
                "asMemberId": "dbmid:abc",
                "timeout": 20,
            }
        })
        service = ConfigurationService(logger=logger, key_value_store=store)

        client = await DropboxClient.build_from_services(logger=logger, config_service=service)

        rest = client.get_client()
        assert rest.access_token == access_token
        assert rest.as_member_id == "dbmid:abc"
        assert rest.timeout == 20
        assert rest.route_headers() == {"Dropbox-API-Select-User": "dbmid:abc"}
        assert DropboxDataSource(client).get_data_source().get_client() is client
        await client.close()

    @pytest.mark.asyncio
    async def test_build_from_env_fallback(self, logger, monkeypatch, access_token):
        monkeypatch.setenv("DROPBOX_ACCESS_TOKEN", access_token)
        service = ConfigurationService(logger=logger)

        client = await DropboxClient.build_from_services(logger=logger, config_service=service)

        assert client.get_client().access_token == access_token
        assert client.get_client().domain == DEFAULT_DOMAIN
        assert client.get_client().timeout == 100.0
        assert client.get_client().verbose is False

    @pytest.mark.asyncio
    async def test_build_from_env_fallback_honours_timeout_and_verbose(self, logger, monkeypatch, access_token):
        monkeypatch.setenv("DROPBOX_ACCESS_TOKEN", access_token)
        monkeypatch.setenv("DROPBOX_TIMEOUT", "7.5")
        monkeypatch.setenv("DROPBOX_VERBOSE", "true")
        service = ConfigurationService(logger=logger)

        client = await DropboxClient.build_from_services(logger=logger, config_service=service)

        assert client.get_client().timeout == 7.5
        assert client.get_client().verbose is True

    @pytest.mark.asyncio
    async def test_missing_config(self, logger):
        service = ConfigurationService(logger=logger)

        with pytest.raises(ValueError):
            await DropboxClient.build_from_services(logger=logger, config_service=service)

    @pytest.mark.asyncio
    async def test_invalid_auth_type(self, logger):
        store = InMemoryKeyValueStore({DROPBOX_KEY: {"auth": {"authType": "API_KEY", "accessToken": "t"}}})
        service = ConfigurationService(logger=logger, key_value_store=store)

        with pytest.raises(ValueError, match="Invalid auth type"):
            await DropboxClient.build_from_services(logger=logger, config_service=service)

    @pytest.mark.asyncio
    async def test_missing_token(self, logger):
        store = InMemoryKeyValueStore({DROPBOX_KEY: {"auth": {"authType": "OAUTH"}}})
        service = ConfigurationService(logger=logger, key_value_store=store)

        with pytest.raises(ValueError, match="Access token required"):
            await DropboxClient.build_from_services(logger=logger, config_service=service)


class TestLogger:
    def test_create_logger_is_idempotent(self):
        first = create_logger("dbxclient.tests.logger", level="debug")
        second = create_logger("dbxclient.tests.logger")

        assert first is second
        assert len(first.handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        assert create_logger("dbxclient.tests.env_level").level == logging.WARNING
