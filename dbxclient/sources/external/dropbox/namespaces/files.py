from dbxclient.sources.external.dropbox.models.async_ import LaunchEmptyResult, PollArg, PollError
from dbxclient.sources.external.dropbox.models.files import (
    AddPropertiesError,
    AlphaGetMetadataArg,
    AlphaGetMetadataError,
    CommitInfo,
    CommitInfoWithProperties,
    CreateFolderArg,
    CreateFolderError,
    DeleteArg,
    DeleteError,
    DownloadArg,
    DownloadError,
    FileMetadata,
    FolderMetadata,
    GetCopyReferenceArg,
    GetCopyReferenceError,
    GetCopyReferenceResult,
    GetMetadataArg,
    GetMetadataError,
    GetTemporaryLinkArg,
    GetTemporaryLinkError,
    GetTemporaryLinkResult,
    InvalidPropertyGroupError,
    ListFolderArg,
    ListFolderContinueArg,
    ListFolderContinueError,
    ListFolderError,
    ListFolderGetLatestCursorResult,
    ListFolderLongpollArg,
    ListFolderLongpollError,
    ListFolderLongpollResult,
    ListFolderResult,
    ListRevisionsArg,
    ListRevisionsError,
    ListRevisionsResult,
    Metadata,
    PreviewArg,
    PreviewError,
    PropertyGroupWithPath,
    RelocationArg,
    RelocationError,
    RemovePropertiesArg,
    RemovePropertiesError,
    RestoreArg,
    RestoreError,
    SaveCopyReferenceArg,
    SaveCopyReferenceError,
    SaveCopyReferenceResult,
    SaveUrlArg,
    SaveUrlError,
    SaveUrlJobStatus,
    SaveUrlResult,
    SearchArg,
    SearchError,
    SearchResult,
    ThumbnailArg,
    ThumbnailError,
    UpdatePropertiesError,
    UpdatePropertyGroupArg,
    UploadError,
    UploadErrorWithProperties,
    UploadSessionAppendArg,
    UploadSessionCursor,
    UploadSessionFinishArg,
    UploadSessionFinishBatchArg,
    UploadSessionFinishBatchJobStatus,
    UploadSessionFinishError,
    UploadSessionLookupError,
    UploadSessionStartArg,
    UploadSessionStartResult,
)
from dbxclient.sources.external.dropbox.models.properties import (
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    ListPropertyTemplateIds,
    PropertyTemplateError,
)
from dbxclient.sources.external.dropbox.namespaces.base import DownloadResult, Namespace, UploadContent
from dbxclient.sources.external.dropbox.route import HostType, Route, RouteStyle

NS = "files"
_CONTENT = {"host": HostType.CONTENT}

ALPHA_GET_METADATA = Route(NS, "alpha/get_metadata", AlphaGetMetadataArg, Metadata, AlphaGetMetadataError)
ALPHA_UPLOAD = Route(
    NS, "alpha/upload", CommitInfoWithProperties, FileMetadata, UploadErrorWithProperties,
    style=RouteStyle.UPLOAD, **_CONTENT,
)
COPY = Route(NS, "copy", RelocationArg, Metadata, RelocationError)
COPY_REFERENCE_GET = Route(NS, "copy_reference/get", GetCopyReferenceArg, GetCopyReferenceResult, GetCopyReferenceError)
COPY_REFERENCE_SAVE = Route(
    NS, "copy_reference/save", SaveCopyReferenceArg, SaveCopyReferenceResult, SaveCopyReferenceError
)
CREATE_FOLDER = Route(NS, "create_folder", CreateFolderArg, FolderMetadata, CreateFolderError)
DELETE = Route(NS, "delete", DeleteArg, Metadata, DeleteError)
DOWNLOAD = Route(NS, "download", DownloadArg, FileMetadata, DownloadError, style=RouteStyle.DOWNLOAD, **_CONTENT)
GET_METADATA = Route(NS, "get_metadata", GetMetadataArg, Metadata, GetMetadataError)
GET_PREVIEW = Route(NS, "get_preview", PreviewArg, FileMetadata, PreviewError, style=RouteStyle.DOWNLOAD, **_CONTENT)
GET_TEMPORARY_LINK = Route(
    NS, "get_temporary_link", GetTemporaryLinkArg, GetTemporaryLinkResult, GetTemporaryLinkError
)
GET_THUMBNAIL = Route(
    NS, "get_thumbnail", ThumbnailArg, FileMetadata, ThumbnailError, style=RouteStyle.DOWNLOAD, **_CONTENT
)
LIST_FOLDER = Route(NS, "list_folder", ListFolderArg, ListFolderResult, ListFolderError)
LIST_FOLDER_CONTINUE = Route(
    NS, "list_folder/continue", ListFolderContinueArg, ListFolderResult, ListFolderContinueError
)
LIST_FOLDER_GET_LATEST_CURSOR = Route(
    NS, "list_folder/get_latest_cursor", ListFolderArg, ListFolderGetLatestCursorResult, ListFolderError
)
LIST_FOLDER_LONGPOLL = Route(
    NS, "list_folder/longpoll", ListFolderLongpollArg, ListFolderLongpollResult, ListFolderLongpollError,
    host=HostType.NOTIFY,
)
LIST_REVISIONS = Route(NS, "list_revisions", ListRevisionsArg, ListRevisionsResult, ListRevisionsError)
MOVE = Route(NS, "move", RelocationArg, Metadata, RelocationError)
PERMANENTLY_DELETE = Route(NS, "permanently_delete", DeleteArg, None, DeleteError)
PROPERTIES_ADD = Route(NS, "properties/add", PropertyGroupWithPath, None, AddPropertiesError)
PROPERTIES_OVERWRITE = Route(NS, "properties/overwrite", PropertyGroupWithPath, None, InvalidPropertyGroupError)
PROPERTIES_REMOVE = Route(NS, "properties/remove", RemovePropertiesArg, None, RemovePropertiesError)
PROPERTIES_TEMPLATE_GET = Route(
    NS, "properties/template/get", GetPropertyTemplateArg, GetPropertyTemplateResult, PropertyTemplateError
)
PROPERTIES_TEMPLATE_LIST = Route(NS, "properties/template/list", None, ListPropertyTemplateIds, PropertyTemplateError)
PROPERTIES_UPDATE = Route(NS, "properties/update", UpdatePropertyGroupArg, None, UpdatePropertiesError)
RESTORE = Route(NS, "restore", RestoreArg, FileMetadata, RestoreError)
SAVE_URL = Route(NS, "save_url", SaveUrlArg, SaveUrlResult, SaveUrlError)
SAVE_URL_CHECK_JOB_STATUS = Route(NS, "save_url/check_job_status", PollArg, SaveUrlJobStatus, PollError)
SEARCH = Route(NS, "search", SearchArg, SearchResult, SearchError)
UPLOAD = Route(NS, "upload", CommitInfo, FileMetadata, UploadError, style=RouteStyle.UPLOAD, **_CONTENT)
UPLOAD_SESSION_APPEND = Route(
    NS, "upload_session/append", UploadSessionCursor, None, UploadSessionLookupError,
    style=RouteStyle.UPLOAD, **_CONTENT,
)
UPLOAD_SESSION_APPEND_V2 = Route(
    NS, "upload_session/append_v2", UploadSessionAppendArg, None, UploadSessionLookupError,
    style=RouteStyle.UPLOAD, **_CONTENT,
)
UPLOAD_SESSION_FINISH = Route(
    NS, "upload_session/finish", UploadSessionFinishArg, FileMetadata, UploadSessionFinishError,
    style=RouteStyle.UPLOAD, **_CONTENT,
)
UPLOAD_SESSION_FINISH_BATCH = Route(NS, "upload_session/finish_batch", UploadSessionFinishBatchArg, LaunchEmptyResult)
UPLOAD_SESSION_FINISH_BATCH_CHECK = Route(
    NS, "upload_session/finish_batch/check", PollArg, UploadSessionFinishBatchJobStatus, PollError
)
UPLOAD_SESSION_START = Route(
    NS, "upload_session/start", UploadSessionStartArg, UploadSessionStartResult,
    style=RouteStyle.UPLOAD, **_CONTENT,
)


class FilesNamespace(Namespace):
    """Basic file operations.

    Download style routes (`download`, `get_preview`, `get_thumbnail`)
    return a DownloadResult; its response must be closed by the caller.
    """

    async def alpha_get_metadata(self, arg: AlphaGetMetadataArg) -> Metadata:
        """get_metadata that can also return property templates"""
        return await self._execute(ALPHA_GET_METADATA, arg)

    async def alpha_upload(self, arg: CommitInfoWithProperties, content: UploadContent) -> FileMetadata:
        return await self._execute(ALPHA_UPLOAD, arg, content)

    async def copy(self, arg: RelocationArg) -> Metadata:
        """Copy a file or folder to a different location"""
        return await self._execute(COPY, arg)

    async def copy_reference_get(self, arg: GetCopyReferenceArg) -> GetCopyReferenceResult:
        """Get a reference that can be saved into another user's Dropbox"""
        return await self._execute(COPY_REFERENCE_GET, arg)

    async def copy_reference_save(self, arg: SaveCopyReferenceArg) -> SaveCopyReferenceResult:
        return await self._execute(COPY_REFERENCE_SAVE, arg)

    async def create_folder(self, arg: CreateFolderArg) -> FolderMetadata:
        return await self._execute(CREATE_FOLDER, arg)

    async def delete(self, arg: DeleteArg) -> Metadata:
        """Delete the file or folder at `arg.path`, returning its metadata before deletion"""
        return await self._execute(DELETE, arg)

    async def download(self, arg: DownloadArg) -> DownloadResult:
        return await self._execute(DOWNLOAD, arg)

    async def get_metadata(self, arg: GetMetadataArg) -> Metadata:
        return await self._execute(GET_METADATA, arg)

    async def get_preview(self, arg: PreviewArg) -> DownloadResult:
        """PDF preview of a document; HTML for spreadsheets"""
        return await self._execute(GET_PREVIEW, arg)

    async def get_temporary_link(self, arg: GetTemporaryLinkArg) -> GetTemporaryLinkResult:
        """Link valid for four hours to stream the file's content"""
        return await self._execute(GET_TEMPORARY_LINK, arg)

    async def get_thumbnail(self, arg: ThumbnailArg) -> DownloadResult:
        return await self._execute(GET_THUMBNAIL, arg)

    async def list_folder(self, arg: ListFolderArg) -> ListFolderResult:
        """First page of a folder listing; follow with list_folder_continue while `has_more`"""
        return await self._execute(LIST_FOLDER, arg)

    async def list_folder_continue(self, arg: ListFolderContinueArg) -> ListFolderResult:
        return await self._execute(LIST_FOLDER_CONTINUE, arg)

    async def list_folder_get_latest_cursor(self, arg: ListFolderArg) -> ListFolderGetLatestCursorResult:
        return await self._execute(LIST_FOLDER_GET_LATEST_CURSOR, arg)

    async def list_folder_longpoll(self, arg: ListFolderLongpollArg) -> ListFolderLongpollResult:
        """Block until the folder behind `arg.cursor` changes or the timeout expires.

        Served from the notify host.
        """
        return await self._execute(LIST_FOLDER_LONGPOLL, arg)

    async def list_revisions(self, arg: ListRevisionsArg) -> ListRevisionsResult:
        return await self._execute(LIST_REVISIONS, arg)

    async def move(self, arg: RelocationArg) -> Metadata:
        return await self._execute(MOVE, arg)

    async def permanently_delete(self, arg: DeleteArg) -> None:
        await self._execute(PERMANENTLY_DELETE, arg)

    async def properties_add(self, arg: PropertyGroupWithPath) -> None:
        await self._execute(PROPERTIES_ADD, arg)

    async def properties_overwrite(self, arg: PropertyGroupWithPath) -> None:
        await self._execute(PROPERTIES_OVERWRITE, arg)

    async def properties_remove(self, arg: RemovePropertiesArg) -> None:
        await self._execute(PROPERTIES_REMOVE, arg)

    async def properties_template_get(self, arg: GetPropertyTemplateArg) -> GetPropertyTemplateResult:
        return await self._execute(PROPERTIES_TEMPLATE_GET, arg)

    async def properties_template_list(self) -> ListPropertyTemplateIds:
        return await self._execute(PROPERTIES_TEMPLATE_LIST)

    async def properties_update(self, arg: UpdatePropertyGroupArg) -> None:
        await self._execute(PROPERTIES_UPDATE, arg)

    async def restore(self, arg: RestoreArg) -> FileMetadata:
        return await self._execute(RESTORE, arg)

    async def save_url(self, arg: SaveUrlArg) -> SaveUrlResult:
        """Save the content at `arg.url` into Dropbox; poll with save_url_check_job_status"""
        return await self._execute(SAVE_URL, arg)

    async def save_url_check_job_status(self, arg: PollArg) -> SaveUrlJobStatus:
        return await self._execute(SAVE_URL_CHECK_JOB_STATUS, arg)

    async def search(self, arg: SearchArg) -> SearchResult:
        return await self._execute(SEARCH, arg)

    async def upload(self, arg: CommitInfo, content: UploadContent) -> FileMetadata:
        """Create a file of at most 150 MB from `content`"""
        return await self._execute(UPLOAD, arg, content)

    async def upload_session_append(self, arg: UploadSessionCursor, content: UploadContent) -> None:
        await self._execute(UPLOAD_SESSION_APPEND, arg, content)

    async def upload_session_append_v2(self, arg: UploadSessionAppendArg, content: UploadContent) -> None:
        await self._execute(UPLOAD_SESSION_APPEND_V2, arg, content)

    async def upload_session_finish(self, arg: UploadSessionFinishArg, content: UploadContent = b"") -> FileMetadata:
        return await self._execute(UPLOAD_SESSION_FINISH, arg, content)

    async def upload_session_finish_batch(self, arg: UploadSessionFinishBatchArg) -> LaunchEmptyResult:
        """Commit many closed sessions at once; poll with upload_session_finish_batch_check"""
        return await self._execute(UPLOAD_SESSION_FINISH_BATCH, arg)

    async def upload_session_finish_batch_check(self, arg: PollArg) -> UploadSessionFinishBatchJobStatus:
        return await self._execute(UPLOAD_SESSION_FINISH_BATCH_CHECK, arg)

    async def upload_session_start(self, arg: UploadSessionStartArg, content: UploadContent) -> UploadSessionStartResult:
        """Open an upload session with its first chunk"""
        return await self._execute(UPLOAD_SESSION_START, arg, content)
