from typing import List

from dbxclient.sources.external.dropbox.models.users import (
    BasicAccount,
    FullAccount,
    GetAccountArg,
    GetAccountBatchArg,
    GetAccountBatchError,
    GetAccountError,
    SpaceUsage,
)
from dbxclient.sources.external.dropbox.namespaces.base import Namespace
from dbxclient.sources.external.dropbox.route import Route

GET_ACCOUNT = Route("users", "get_account", GetAccountArg, BasicAccount, GetAccountError)
GET_ACCOUNT_BATCH = Route("users", "get_account_batch", GetAccountBatchArg, List[BasicAccount], GetAccountBatchError)
GET_CURRENT_ACCOUNT = Route("users", "get_current_account", None, FullAccount)
GET_SPACE_USAGE = Route("users", "get_space_usage", None, SpaceUsage)


class UsersNamespace(Namespace):
    """Routes of the users namespace"""

    async def get_account(self, arg: GetAccountArg) -> BasicAccount:
        """Get information about a user's account"""
        return await self._execute(GET_ACCOUNT, arg)

    async def get_account_batch(self, arg: GetAccountBatchArg) -> List[BasicAccount]:
        """Get information about multiple user accounts, at most 300 per call"""
        return await self._execute(GET_ACCOUNT_BATCH, arg)

    async def get_current_account(self) -> FullAccount:
        return await self._execute(GET_CURRENT_ACCOUNT)

    async def get_space_usage(self) -> SpaceUsage:
        return await self._execute(GET_SPACE_USAGE)
