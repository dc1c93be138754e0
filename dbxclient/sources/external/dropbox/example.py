# ruff: noqa
import asyncio

from dbxclient.config.configuration_service import ConfigurationService
from dbxclient.exceptions.dropbox_exceptions import ApiError, EndpointError
from dbxclient.sources.client.dropbox.dropbox_ import DropboxClient, DropboxTokenConfig
from dbxclient.sources.external.dropbox.dropbox_ import DropboxDataSource
from dbxclient.sources.external.dropbox.models.files import (
    DownloadArg,
    GetMetadataArg,
    ListFolderArg,
    ListFolderContinueArg,
)
from dbxclient.utils.logger import create_logger

logger = create_logger("dropbox_example")


async def list_root(dbx: DropboxDataSource) -> None:
    print("\nListing root folder:")
    page = await dbx.files.list_folder(ListFolderArg(path=""))
    while True:
        for entry in page.entries:
            print(f"  {entry.tag:7} {entry.value.path_display}")
        if not page.has_more:
            break
        page = await dbx.files.list_folder_continue(ListFolderContinueArg(cursor=page.cursor))


async def main() -> None:
    # DROPBOX_ACCESS_TOKEN from the environment or a .env file
    config = DropboxTokenConfig.from_env()

    async with DropboxClient.build_with_config(config, logger=logger) as client:
        dbx = DropboxDataSource(client)

        account = await dbx.users.get_current_account()
        print(f"Current user: {account.name.display_name} <{account.email}>")

        usage = await dbx.users.get_space_usage()
        print(f"Used {usage.used} bytes")

        await list_root(dbx)

        try:
            await dbx.files.get_metadata(GetMetadataArg(path="/does-not-exist"))
        except EndpointError as e:
            print(f"\nget_metadata failed as expected: {e} (tag: {e.error.path.tag})")

        try:
            result, content = await dbx.files.download(DownloadArg(path="/test.txt"))
            async with content:
                data = await content.aread()
            print(f"\nDownloaded {result.name}: {len(data)} bytes")
        except ApiError as e:
            print(f"\nDownload failed: {e}")


async def main_from_services() -> None:
    # Same client built through the configuration service; without a store
    # entry it falls back to DROPBOX_ACCESS_TOKEN.
    config_service = ConfigurationService(logger=logger)
    client = await DropboxClient.build_from_services(logger=logger, config_service=config_service)
    async with client:
        dbx = DropboxDataSource(client)
        account = await dbx.users.get_current_account()
        print(f"Current user (from services): {account.account_id}")


if __name__ == "__main__":
    asyncio.run(main())
    asyncio.run(main_from_services())
