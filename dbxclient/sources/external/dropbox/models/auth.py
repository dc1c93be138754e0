from typing import ClassVar, Optional

from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class AuthError(TaggedUnion):
    """Body of a 401 answer"""
    INVALID_ACCESS_TOKEN: ClassVar[str] = "invalid_access_token"
    INVALID_SELECT_USER: ClassVar[str] = "invalid_select_user"
    INVALID_SELECT_ADMIN: ClassVar[str] = "invalid_select_admin"
    USER_SUSPENDED: ClassVar[str] = "user_suspended"
    EXPIRED_ACCESS_TOKEN: ClassVar[str] = "expired_access_token"
    OTHER: ClassVar[str] = "other"


class InvalidAccountTypeError(TaggedUnion):
    ENDPOINT: ClassVar[str] = "endpoint"
    FEATURE: ClassVar[str] = "feature"
    OTHER: ClassVar[str] = "other"


class PaperAccessError(TaggedUnion):
    PAPER_DISABLED: ClassVar[str] = "paper_disabled"
    NOT_PAPER_USER: ClassVar[str] = "not_paper_user"
    OTHER: ClassVar[str] = "other"


class AccessError(TaggedUnion):
    """Body of a 403 answer"""
    INVALID_ACCOUNT_TYPE: ClassVar[str] = "invalid_account_type"
    PAPER_ACCESS_DENIED: ClassVar[str] = "paper_access_denied"
    OTHER: ClassVar[str] = "other"

    invalid_account_type: Optional[InvalidAccountTypeError] = None
    paper_access_denied: Optional[PaperAccessError] = None


class RateLimitReason(TaggedUnion):
    TOO_MANY_REQUESTS: ClassVar[str] = "too_many_requests"
    TOO_MANY_WRITE_OPERATIONS: ClassVar[str] = "too_many_write_operations"
    OTHER: ClassVar[str] = "other"


class RateLimitError(Struct):
    """Body of a 429 answer; `retry_after` is in seconds"""
    reason: RateLimitReason
    retry_after: int = 1


class TokenRevokeError(TaggedUnion):
    OTHER: ClassVar[str] = "other"
