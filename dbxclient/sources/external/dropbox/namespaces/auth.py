from dbxclient.sources.external.dropbox.models.auth import TokenRevokeError
from dbxclient.sources.external.dropbox.namespaces.base import Namespace
from dbxclient.sources.external.dropbox.route import Route

TOKEN_REVOKE = Route("auth", "token/revoke", error_type=TokenRevokeError)


class AuthNamespace(Namespace):
    async def token_revoke(self) -> None:
        """Disable the access token used to authenticate the call"""
        await self._execute(TOKEN_REVOKE)
