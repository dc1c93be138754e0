from dbxclient.sources.external.dropbox.dropbox_ import DropboxDataSource

__all__ = ["DropboxDataSource"]
