from enum import Enum


class config_node_constants(Enum):
    """Constants for configuration paths"""

    # Service paths
    DROPBOX = "/services/connectors/dropbox/config"


class DropboxHost(str, Enum):
    """Host classes a Dropbox route can be served from"""

    API = "api"
    CONTENT = "content"
    NOTIFY = "notify"


class DropboxHeaders(str, Enum):
    """Dropbox specific HTTP headers"""

    API_ARG = "Dropbox-API-Arg"
    API_RESULT = "Dropbox-API-Result"
    SELECT_USER = "Dropbox-API-Select-User"
    REQUEST_ID = "X-Dropbox-Request-Id"


class DropboxEnv(str, Enum):
    """Environment variables read by the configuration layer"""

    ACCESS_TOKEN = "DROPBOX_ACCESS_TOKEN"
    AS_MEMBER_ID = "DROPBOX_AS_MEMBER_ID"
    DOMAIN = "DROPBOX_DOMAIN"
    TIMEOUT = "DROPBOX_TIMEOUT"
    VERBOSE = "DROPBOX_VERBOSE"


API_VERSION = 2
DEFAULT_DOMAIN = ".dropboxapi.com"
DEFAULT_TIMEOUT = 100.0
