import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional

import dotenv
import httpx  # type: ignore

from dbxclient.config.configuration_service import ConfigurationService
from dbxclient.config.constants.service import (
    API_VERSION,
    DEFAULT_DOMAIN,
    DEFAULT_TIMEOUT,
    DropboxEnv,
    DropboxHeaders,
    DropboxHost,
    config_node_constants,
)
from dbxclient.sources.client.http.http_client import HTTPClient
from dbxclient.sources.client.iclient import IClient

# (host, style, namespace, route) -> absolute URL
URLGenerator = Callable[[str, str, str, str], str]


@dataclass(frozen=True)
class OAuthEndpoint:
    """OAuth2 authorize/token URLs for a Dropbox domain"""
    auth_url: str
    token_url: str


def oauth_endpoint(domain: Optional[str] = None) -> OAuthEndpoint:
    """Build the OAuth2 endpoint for `domain` (defaults to production)."""
    domain = domain or DEFAULT_DOMAIN
    auth_url = f"https://meta{domain}/1/oauth2/authorize"
    token_url = f"https://api{domain}/1/oauth2/token"
    if domain == DEFAULT_DOMAIN:
        auth_url = "https://www.dropbox.com/1/oauth2/authorize"
    return OAuthEndpoint(auth_url=auth_url, token_url=token_url)


class DropboxRESTClientViaToken(HTTPClient):
    """Dropbox REST client via short/long-lived OAuth2 access token.

    Args:
        access_token: OAuth2 access token (user or team scoped)
        timeout: Request timeout in seconds
        as_member_id: Team member id sent as Dropbox-API-Select-User
        domain: Domain suffix appended to the host class names
        url_generator: Replaces the default URL scheme (test servers)
        verbose: Log arguments and response bodies at DEBUG
        transport: Optional httpx transport
        logger: Optional logger instance
    """
    def __init__(
        self,
        access_token: str,
        timeout: Optional[float] = None,
        as_member_id: Optional[str] = None,
        domain: Optional[str] = None,
        url_generator: Optional[URLGenerator] = None,
        verbose: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not access_token:
            raise ValueError("Dropbox access_token cannot be empty")

        super().__init__(
            access_token,
            "Bearer",
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            transport=transport,
            logger=logger,
        )
        self.access_token = access_token
        self.as_member_id = as_member_id
        self.domain = domain or DEFAULT_DOMAIN
        self.url_generator = url_generator
        self.verbose = verbose
        self.host_map: Dict[str, str] = {
            host.value: f"{host.value}{self.domain}" for host in DropboxHost
        }

    def generate_url(self, host: str, namespace: str, route: str, style: str = "rpc") -> str:
        """Return the URL for the given host class, namespace and route."""
        if self.url_generator is not None:
            return self.url_generator(host, style, namespace, route)
        fq_host = self.host_map[host]
        return f"https://{fq_host}/{API_VERSION}/{namespace}/{route}"

    def route_headers(self) -> Dict[str, str]:
        """Headers every Dropbox route carries besides Authorization."""
        headers: Dict[str, str] = {}
        if self.as_member_id:
            headers[DropboxHeaders.SELECT_USER.value] = self.as_member_id
        return headers

    def with_member(self, team_member_id: Optional[str]) -> "DropboxRESTClientViaToken":
        """Return a client sharing this one's connection pool but acting as another member."""
        clone = DropboxRESTClientViaToken(
            self.access_token,
            timeout=self.timeout,
            as_member_id=team_member_id,
            domain=self.domain,
            url_generator=self.url_generator,
            verbose=self.verbose,
            transport=self.transport,
            logger=self.logger,
        )
        if self.client is None:
            self.client = self._new_client()
            self._owns_client = True
        clone.client = self.client
        clone._owns_client = False
        return clone


@dataclass
class DropboxTokenConfig:
    """
    Configuration for Dropbox client via access token.

    Args:
        access_token: OAuth2 access token (user or team scoped)
        timeout: Optional request timeout in seconds
        as_member_id: Optional team member to act as
        domain: Domain suffix, ".dropboxapi.com" unless pointed elsewhere
        verbose: Log request arguments and response bodies
    """
    access_token: str
    timeout: Optional[float] = None
    as_member_id: Optional[str] = None
    domain: str = DEFAULT_DOMAIN
    verbose: bool = False

    def create_client(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        url_generator: Optional[URLGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ) -> DropboxRESTClientViaToken:
        return DropboxRESTClientViaToken(
            self.access_token,
            timeout=self.timeout,
            as_member_id=self.as_member_id,
            domain=self.domain,
            url_generator=url_generator,
            verbose=self.verbose,
            transport=transport,
            logger=logger,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_env(cls) -> "DropboxTokenConfig":
        """Load the configuration from the environment (and a .env file if present)."""
        dotenv.load_dotenv()
        access_token = os.getenv(DropboxEnv.ACCESS_TOKEN.value)
        if not access_token:
            raise ValueError(f"{DropboxEnv.ACCESS_TOKEN.value} is not set")
        timeout = os.getenv(DropboxEnv.TIMEOUT.value)
        return cls(
            access_token=access_token,
            timeout=float(timeout) if timeout else None,
            as_member_id=os.getenv(DropboxEnv.AS_MEMBER_ID.value) or None,
            domain=os.getenv(DropboxEnv.DOMAIN.value) or DEFAULT_DOMAIN,
            verbose=os.getenv(DropboxEnv.VERBOSE.value, "").lower() in ("1", "true", "yes"),
        )


class DropboxClient(IClient):
    """
    Builder class for Dropbox clients.

    Holds one DropboxRESTClientViaToken; data sources take it from here.
    """

    def __init__(self, client: DropboxRESTClientViaToken) -> None:
        self.client = client

    def get_client(self) -> DropboxRESTClientViaToken:
        """Return the underlying REST client"""
        return self.client

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "DropboxClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @classmethod
    def build_with_config(
        cls,
        config: DropboxTokenConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        url_generator: Optional[URLGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "DropboxClient":
        """Build DropboxClient using the config dataclass."""
        return cls(config.create_client(transport=transport, url_generator=url_generator, logger=logger))

    @classmethod
    async def build_from_services(
        cls,
        logger: logging.Logger,
        config_service: ConfigurationService,
    ) -> "DropboxClient":
        """Build DropboxClient using the configuration service
        Args:
            logger: Logger instance
            config_service: Configuration service instance
        Returns:
            DropboxClient instance
        Raises:
            ValueError: If configuration is invalid or missing required fields
        """
        try:
            config = await cls._get_connector_config(logger, config_service)
            if not config:
                raise ValueError("Failed to get Dropbox connector configuration")

            auth_config = config.get("auth", {}) or {}
            if not auth_config:
                raise ValueError("Auth configuration not found in Dropbox connector configuration")

            auth_type = auth_config.get("authType", "ACCESS_TOKEN")
            if auth_type not in ("ACCESS_TOKEN", "OAUTH", "BEARER"):
                raise ValueError(f"Invalid auth type: {auth_type}. Must be one of: ACCESS_TOKEN, OAUTH, BEARER")

            access_token = auth_config.get("accessToken") or auth_config.get("access_token", "")
            if not access_token:
                raise ValueError("Access token required for Dropbox auth")

            token_config = DropboxTokenConfig(
                access_token=access_token,
                timeout=config.get("timeout"),
                as_member_id=config.get("asMemberId") or None,
                domain=config.get("domain") or DEFAULT_DOMAIN,
                verbose=bool(config.get("verbose", False)),
            )
            logger.info(f"Successfully created Dropbox client with {auth_type} authentication")
            return cls(token_config.create_client(logger=logger))

        except Exception as e:
            logger.error(f"Failed to build Dropbox client from services: {e}")
            raise

    @staticmethod
    async def _get_connector_config(
        logger: logging.Logger,
        config_service: ConfigurationService
    ) -> Dict[str, Any]:
        """Fetch connector config from configuration service for Dropbox"""
        try:
            config = await config_service.get_config(config_node_constants.DROPBOX.value)
            return config or {}
        except Exception as e:
            logger.error(f"Failed to get Dropbox connector config: {e}")
            return {}
