from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class HostType(str, Enum):
    API = "api"
    CONTENT = "content"
    NOTIFY = "notify"


class RouteStyle(str, Enum):
    RPC = "rpc"
    UPLOAD = "upload"
    DOWNLOAD = "download"


@dataclass(frozen=True)
class Route:
    """Static description of one Dropbox endpoint.

    `arg_type` is None for routes taking no argument, `result_type` None for
    routes returning nothing. Result types may be list types such as
    ``List[BasicAccount]``.
    """
    namespace: str
    name: str
    arg_type: Optional[Any] = None
    result_type: Optional[Any] = None
    error_type: Optional[Any] = None
    host: HostType = HostType.API
    style: RouteStyle = RouteStyle.RPC

    @property
    def path(self) -> str:
        return f"{self.namespace}/{self.name}"
