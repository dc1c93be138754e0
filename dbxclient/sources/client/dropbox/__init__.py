"""Dropbox client module."""
from dbxclient.sources.client.dropbox.dropbox_ import (
    DropboxClient,
    DropboxRESTClientViaToken,
    DropboxTokenConfig,
    oauth_endpoint,
)

__all__ = [
    "DropboxClient",
    "DropboxRESTClientViaToken",
    "DropboxTokenConfig",
    "oauth_endpoint",
]
