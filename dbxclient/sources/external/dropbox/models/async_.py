"""Types shared by the routes that launch background jobs and the routes polling them."""
from typing import ClassVar, Optional

from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class LaunchResultBase(TaggedUnion):
    """Result of a route that may run asynchronously"""
    ASYNC_JOB_ID: ClassVar[str] = "async_job_id"

    async_job_id: Optional[str] = None


class LaunchEmptyResult(LaunchResultBase):
    """Either the job id or `complete` when the work finished synchronously"""
    COMPLETE: ClassVar[str] = "complete"


class PollArg(Struct):
    async_job_id: str


class PollResultBase(TaggedUnion):
    IN_PROGRESS: ClassVar[str] = "in_progress"


class PollEmptyResult(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"


class PollError(TaggedUnion):
    INVALID_ASYNC_JOB_ID: ClassVar[str] = "invalid_async_job_id"
    INTERNAL_ERROR: ClassVar[str] = "internal_error"
    OTHER: ClassVar[str] = "other"
