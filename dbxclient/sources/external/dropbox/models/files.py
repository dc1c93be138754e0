"""Types of the files namespace: metadata, uploads, listings and the per-route errors."""
from typing import ClassVar, List, Optional

from pydantic import Field  # type: ignore

from dbxclient.sources.external.dropbox.models.async_ import LaunchResultBase, PollResultBase
from dbxclient.sources.external.dropbox.models.properties import (
    PropertyField,
    PropertyGroup,
    PropertyTemplateError,
)
from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion, Timestamp

# Errors shared by most routes


class LookupError(TaggedUnion):
    MALFORMED_PATH: ClassVar[str] = "malformed_path"
    NOT_FOUND: ClassVar[str] = "not_found"
    NOT_FILE: ClassVar[str] = "not_file"
    NOT_FOLDER: ClassVar[str] = "not_folder"
    RESTRICTED_CONTENT: ClassVar[str] = "restricted_content"
    OTHER: ClassVar[str] = "other"

    malformed_path: Optional[str] = None


class WriteConflictError(TaggedUnion):
    FILE: ClassVar[str] = "file"
    FOLDER: ClassVar[str] = "folder"
    FILE_ANCESTOR: ClassVar[str] = "file_ancestor"
    OTHER: ClassVar[str] = "other"


class WriteError(TaggedUnion):
    MALFORMED_PATH: ClassVar[str] = "malformed_path"
    CONFLICT: ClassVar[str] = "conflict"
    NO_WRITE_PERMISSION: ClassVar[str] = "no_write_permission"
    INSUFFICIENT_SPACE: ClassVar[str] = "insufficient_space"
    DISALLOWED_NAME: ClassVar[str] = "disallowed_name"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    OTHER: ClassVar[str] = "other"

    malformed_path: Optional[str] = None
    conflict: Optional[WriteConflictError] = None


class WriteMode(TaggedUnion):
    """What to do when the destination path already exists.

    `update` carries the revision the caller expects to overwrite.
    """
    ADD: ClassVar[str] = "add"
    OVERWRITE: ClassVar[str] = "overwrite"
    UPDATE: ClassVar[str] = "update"

    update: Optional[str] = None


# Properties errors


class LookUpPropertiesError(TaggedUnion):
    PROPERTY_GROUP_NOT_FOUND: ClassVar[str] = "property_group_not_found"
    OTHER: ClassVar[str] = "other"


class PropertiesError(PropertyTemplateError):
    PATH: ClassVar[str] = "path"

    path: Optional[LookupError] = None


class InvalidPropertyGroupError(PropertiesError):
    PROPERTY_FIELD_TOO_LARGE: ClassVar[str] = "property_field_too_large"
    DOES_NOT_FIT_TEMPLATE: ClassVar[str] = "does_not_fit_template"


class AddPropertiesError(InvalidPropertyGroupError):
    PROPERTY_GROUP_ALREADY_EXISTS: ClassVar[str] = "property_group_already_exists"


class UpdatePropertiesError(InvalidPropertyGroupError):
    PROPERTY_GROUP_LOOKUP: ClassVar[str] = "property_group_lookup"

    property_group_lookup: Optional[LookUpPropertiesError] = None


class RemovePropertiesError(PropertiesError):
    PROPERTY_GROUP_LOOKUP: ClassVar[str] = "property_group_lookup"

    property_group_lookup: Optional[LookUpPropertiesError] = None


class PropertyGroupUpdate(Struct):
    template_id: str
    add_or_update_fields: Optional[List[PropertyField]] = None
    remove_fields: Optional[List[str]] = None


class PropertyGroupWithPath(Struct):
    path: str
    property_groups: List[PropertyGroup]


class RemovePropertiesArg(Struct):
    path: str
    property_template_ids: List[str]


class UpdatePropertyGroupArg(Struct):
    path: str
    update_property_groups: List[PropertyGroupUpdate]


# Metadata


class Dimensions(Struct):
    height: int
    width: int


class GpsCoordinates(Struct):
    latitude: float
    longitude: float


class BaseMediaMetadata(Struct):
    dimensions: Optional[Dimensions] = None
    location: Optional[GpsCoordinates] = None
    time_taken: Optional[Timestamp] = None


class PhotoMetadata(BaseMediaMetadata):
    pass


class VideoMetadata(BaseMediaMetadata):
    duration: Optional[int] = None


class MediaMetadata(TaggedUnion):
    PHOTO: ClassVar[str] = "photo"
    VIDEO: ClassVar[str] = "video"

    photo: Optional[PhotoMetadata] = None
    video: Optional[VideoMetadata] = None


class MediaInfo(TaggedUnion):
    """`pending` until Dropbox has extracted the media metadata"""
    PENDING: ClassVar[str] = "pending"
    METADATA: ClassVar[str] = "metadata"

    metadata: Optional[MediaMetadata] = None


class SharingInfo(Struct):
    read_only: bool


class FileSharingInfo(SharingInfo):
    parent_shared_folder_id: str
    modified_by: Optional[str] = None


class FolderSharingInfo(SharingInfo):
    parent_shared_folder_id: Optional[str] = None
    shared_folder_id: Optional[str] = None


class BaseMetadata(Struct):
    name: str
    path_lower: Optional[str] = None
    path_display: Optional[str] = None
    parent_shared_folder_id: Optional[str] = None


class FileMetadata(BaseMetadata):
    id: str
    client_modified: Timestamp
    server_modified: Timestamp
    rev: str
    size: int
    media_info: Optional[MediaInfo] = None
    sharing_info: Optional[FileSharingInfo] = None
    property_groups: Optional[List[PropertyGroup]] = None
    has_explicit_shared_members: Optional[bool] = None
    content_hash: Optional[str] = None


class FolderMetadata(BaseMetadata):
    id: str
    shared_folder_id: Optional[str] = None
    sharing_info: Optional[FolderSharingInfo] = None
    property_groups: Optional[List[PropertyGroup]] = None


class DeletedMetadata(BaseMetadata):
    pass


class Metadata(TaggedUnion):
    """A file, folder or deleted entry, discriminated by `.tag`"""
    FILE: ClassVar[str] = "file"
    FOLDER: ClassVar[str] = "folder"
    DELETED: ClassVar[str] = "deleted"

    file: Optional[FileMetadata] = None
    folder: Optional[FolderMetadata] = None
    deleted: Optional[DeletedMetadata] = None


# get_metadata


class GetMetadataArg(Struct):
    path: str
    include_media_info: bool = False
    include_deleted: bool = False
    include_has_explicit_shared_members: bool = False


class AlphaGetMetadataArg(GetMetadataArg):
    include_property_templates: Optional[List[str]] = None


class GetMetadataError(TaggedUnion):
    PATH: ClassVar[str] = "path"

    path: Optional[LookupError] = None


class AlphaGetMetadataError(GetMetadataError):
    PROPERTIES_ERROR: ClassVar[str] = "properties_error"

    properties_error: Optional[LookUpPropertiesError] = None


# upload


class CommitInfo(Struct):
    path: str
    mode: WriteMode = Field(default_factory=lambda: WriteMode(WriteMode.ADD))
    autorename: bool = False
    client_modified: Optional[Timestamp] = None
    mute: bool = False


class CommitInfoWithProperties(CommitInfo):
    property_groups: Optional[List[PropertyGroup]] = None


class UploadWriteFailed(Struct):
    reason: WriteError
    upload_session_id: str


class UploadError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[UploadWriteFailed] = None


class UploadErrorWithProperties(UploadError):
    PROPERTIES_ERROR: ClassVar[str] = "properties_error"

    properties_error: Optional[InvalidPropertyGroupError] = None


# upload sessions


class UploadSessionCursor(Struct):
    """Identifies a session and the byte offset the next chunk starts at"""
    session_id: str
    offset: int


class UploadSessionStartArg(Struct):
    close: bool = False


class UploadSessionStartResult(Struct):
    session_id: str


class UploadSessionAppendArg(Struct):
    cursor: UploadSessionCursor
    close: bool = False


class UploadSessionFinishArg(Struct):
    cursor: UploadSessionCursor
    commit: CommitInfo


class UploadSessionOffsetError(Struct):
    correct_offset: int


class UploadSessionLookupError(TaggedUnion):
    NOT_FOUND: ClassVar[str] = "not_found"
    INCORRECT_OFFSET: ClassVar[str] = "incorrect_offset"
    CLOSED: ClassVar[str] = "closed"
    NOT_CLOSED: ClassVar[str] = "not_closed"
    OTHER: ClassVar[str] = "other"

    incorrect_offset: Optional[UploadSessionOffsetError] = None


class UploadSessionFinishError(TaggedUnion):
    LOOKUP_FAILED: ClassVar[str] = "lookup_failed"
    PATH: ClassVar[str] = "path"
    TOO_MANY_SHARED_FOLDER_TARGETS: ClassVar[str] = "too_many_shared_folder_targets"
    OTHER: ClassVar[str] = "other"

    lookup_failed: Optional[UploadSessionLookupError] = None
    path: Optional[WriteError] = None


class UploadSessionFinishBatchArg(Struct):
    entries: List[UploadSessionFinishArg]


class UploadSessionFinishBatchResultEntry(TaggedUnion):
    SUCCESS: ClassVar[str] = "success"
    FAILURE: ClassVar[str] = "failure"

    success: Optional[FileMetadata] = None
    failure: Optional[UploadSessionFinishError] = None


class UploadSessionFinishBatchResult(Struct):
    entries: List[UploadSessionFinishBatchResultEntry]


class UploadSessionFinishBatchJobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"

    complete: Optional[UploadSessionFinishBatchResult] = None


# create_folder / delete / relocation / restore


class CreateFolderArg(Struct):
    path: str
    autorename: bool = False


class CreateFolderError(TaggedUnion):
    PATH: ClassVar[str] = "path"

    path: Optional[WriteError] = None


class DeleteArg(Struct):
    path: str


class DeleteError(TaggedUnion):
    PATH_LOOKUP: ClassVar[str] = "path_lookup"
    PATH_WRITE: ClassVar[str] = "path_write"
    OTHER: ClassVar[str] = "other"

    path_lookup: Optional[LookupError] = None
    path_write: Optional[WriteError] = None


class RelocationArg(Struct):
    from_path: str
    to_path: str
    allow_shared_folder: bool = False
    autorename: bool = False


class RelocationError(TaggedUnion):
    FROM_LOOKUP: ClassVar[str] = "from_lookup"
    FROM_WRITE: ClassVar[str] = "from_write"
    TO: ClassVar[str] = "to"
    CANT_COPY_SHARED_FOLDER: ClassVar[str] = "cant_copy_shared_folder"
    CANT_NEST_SHARED_FOLDER: ClassVar[str] = "cant_nest_shared_folder"
    CANT_MOVE_FOLDER_INTO_ITSELF: ClassVar[str] = "cant_move_folder_into_itself"
    TOO_MANY_FILES: ClassVar[str] = "too_many_files"
    OTHER: ClassVar[str] = "other"

    from_lookup: Optional[LookupError] = None
    from_write: Optional[WriteError] = None
    to: Optional[WriteError] = None


class RestoreArg(Struct):
    path: str
    rev: str


class RestoreError(TaggedUnion):
    PATH_LOOKUP: ClassVar[str] = "path_lookup"
    PATH_WRITE: ClassVar[str] = "path_write"
    INVALID_REVISION: ClassVar[str] = "invalid_revision"
    OTHER: ClassVar[str] = "other"

    path_lookup: Optional[LookupError] = None
    path_write: Optional[WriteError] = None


# copy references


class GetCopyReferenceArg(Struct):
    path: str


class GetCopyReferenceResult(Struct):
    metadata: Metadata
    copy_reference: str
    expires: Timestamp


class GetCopyReferenceError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class SaveCopyReferenceArg(Struct):
    copy_reference: str
    path: str


class SaveCopyReferenceResult(Struct):
    metadata: Metadata


class SaveCopyReferenceError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    INVALID_COPY_REFERENCE: ClassVar[str] = "invalid_copy_reference"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    NOT_FOUND: ClassVar[str] = "not_found"
    TOO_MANY_FILES: ClassVar[str] = "too_many_files"
    OTHER: ClassVar[str] = "other"

    path: Optional[WriteError] = None


# download / preview / thumbnail / temporary link


class DownloadArg(Struct):
    path: str
    rev: Optional[str] = None


class DownloadError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class PreviewArg(Struct):
    path: str
    rev: Optional[str] = None


class PreviewError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    IN_PROGRESS: ClassVar[str] = "in_progress"
    UNSUPPORTED_EXTENSION: ClassVar[str] = "unsupported_extension"
    UNSUPPORTED_CONTENT: ClassVar[str] = "unsupported_content"

    path: Optional[LookupError] = None


class ThumbnailFormat(TaggedUnion):
    JPEG: ClassVar[str] = "jpeg"
    PNG: ClassVar[str] = "png"


class ThumbnailSize(TaggedUnion):
    W32H32: ClassVar[str] = "w32h32"
    W64H64: ClassVar[str] = "w64h64"
    W128H128: ClassVar[str] = "w128h128"
    W640H480: ClassVar[str] = "w640h480"
    W1024H768: ClassVar[str] = "w1024h768"


class ThumbnailArg(Struct):
    path: str
    format: ThumbnailFormat = Field(default_factory=lambda: ThumbnailFormat(ThumbnailFormat.JPEG))
    size: ThumbnailSize = Field(default_factory=lambda: ThumbnailSize(ThumbnailSize.W64H64))


class ThumbnailError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    UNSUPPORTED_EXTENSION: ClassVar[str] = "unsupported_extension"
    UNSUPPORTED_IMAGE: ClassVar[str] = "unsupported_image"
    CONVERSION_ERROR: ClassVar[str] = "conversion_error"

    path: Optional[LookupError] = None


class GetTemporaryLinkArg(Struct):
    path: str


class GetTemporaryLinkResult(Struct):
    metadata: FileMetadata
    link: str


class GetTemporaryLinkError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


# list_folder


class ListFolderArg(Struct):
    path: str
    recursive: bool = False
    include_media_info: bool = False
    include_deleted: bool = False
    include_has_explicit_shared_members: bool = False


class ListFolderResult(Struct):
    entries: List[Metadata]
    cursor: str
    has_more: bool


class ListFolderError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class ListFolderContinueArg(Struct):
    cursor: str


class ListFolderContinueError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class ListFolderGetLatestCursorResult(Struct):
    cursor: str


class ListFolderLongpollArg(Struct):
    """`timeout` is in seconds, between 30 and 480"""
    cursor: str
    timeout: int = 30


class ListFolderLongpollResult(Struct):
    changes: bool
    backoff: Optional[int] = None


class ListFolderLongpollError(TaggedUnion):
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"


# list_revisions


class ListRevisionsArg(Struct):
    path: str
    limit: int = 10


class ListRevisionsResult(Struct):
    is_deleted: bool
    entries: List[FileMetadata]
    server_deleted: Optional[Timestamp] = None


class ListRevisionsError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


# save_url


class SaveUrlArg(Struct):
    path: str
    url: str


class SaveUrlError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    DOWNLOAD_FAILED: ClassVar[str] = "download_failed"
    INVALID_URL: ClassVar[str] = "invalid_url"
    NOT_FOUND: ClassVar[str] = "not_found"
    OTHER: ClassVar[str] = "other"

    path: Optional[WriteError] = None


class SaveUrlResult(LaunchResultBase):
    COMPLETE: ClassVar[str] = "complete"

    complete: Optional[FileMetadata] = None


class SaveUrlJobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"
    FAILED: ClassVar[str] = "failed"

    complete: Optional[FileMetadata] = None
    failed: Optional[SaveUrlError] = None


# search


class SearchMode(TaggedUnion):
    FILENAME: ClassVar[str] = "filename"
    FILENAME_AND_CONTENT: ClassVar[str] = "filename_and_content"
    DELETED_FILENAME: ClassVar[str] = "deleted_filename"


class SearchMatchType(TaggedUnion):
    FILENAME: ClassVar[str] = "filename"
    CONTENT: ClassVar[str] = "content"
    BOTH: ClassVar[str] = "both"


class SearchArg(Struct):
    path: str
    query: str
    start: int = 0
    max_results: int = 100
    mode: SearchMode = Field(default_factory=lambda: SearchMode(SearchMode.FILENAME))


class SearchMatch(Struct):
    match_type: SearchMatchType
    metadata: Metadata


class SearchResult(Struct):
    matches: List[SearchMatch]
    more: bool
    start: int


class SearchError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None
