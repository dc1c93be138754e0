from typing import List

from dbxclient.sources.external.dropbox.models.async_ import (
    LaunchEmptyResult,
    LaunchResultBase,
    PollArg,
    PollError,
)
from dbxclient.sources.external.dropbox.models.sharing import (
    AddFileMemberArgs,
    AddFileMemberError,
    AddFolderMemberArg,
    AddFolderMemberError,
    CreateSharedLinkArg,
    CreateSharedLinkError,
    CreateSharedLinkWithSettingsArg,
    CreateSharedLinkWithSettingsError,
    FileMemberActionIndividualResult,
    FileMemberActionResult,
    FileMemberRemoveActionResult,
    GetFileMetadataArg,
    GetFileMetadataBatchArg,
    GetFileMetadataBatchResult,
    GetFileMetadataError,
    GetMetadataArgs,
    GetSharedLinkFileError,
    GetSharedLinkMetadataArg,
    GetSharedLinksArg,
    GetSharedLinksError,
    GetSharedLinksResult,
    JobStatus,
    ListFileMembersArg,
    ListFileMembersBatchArg,
    ListFileMembersBatchResult,
    ListFileMembersContinueArg,
    ListFileMembersContinueError,
    ListFileMembersError,
    ListFilesArg,
    ListFilesContinueArg,
    ListFilesContinueError,
    ListFilesResult,
    ListFolderMembersArgs,
    ListFolderMembersContinueArg,
    ListFolderMembersContinueError,
    ListFoldersArgs,
    ListFoldersContinueArg,
    ListFoldersContinueError,
    ListFoldersResult,
    ListSharedLinksArg,
    ListSharedLinksError,
    ListSharedLinksResult,
    MemberAccessLevelResult,
    ModifySharedLinkSettingsArgs,
    ModifySharedLinkSettingsError,
    MountFolderArg,
    MountFolderError,
    PathLinkMetadata,
    RelinquishFileMembershipArg,
    RelinquishFileMembershipError,
    RelinquishFolderMembershipArg,
    RelinquishFolderMembershipError,
    RemoveFileMemberArg,
    RemoveFileMemberError,
    RemoveFolderMemberArg,
    RemoveFolderMemberError,
    RemoveMemberJobStatus,
    RevokeSharedLinkArg,
    RevokeSharedLinkError,
    SharedFileMembers,
    SharedFileMetadata,
    SharedFolderAccessError,
    SharedFolderMembers,
    SharedFolderMetadata,
    SharedLinkError,
    SharedLinkMetadata,
    ShareFolderArg,
    ShareFolderError,
    ShareFolderJobStatus,
    ShareFolderLaunch,
    SharingUserError,
    TransferFolderArg,
    TransferFolderError,
    UnmountFolderArg,
    UnmountFolderError,
    UnshareFileArg,
    UnshareFileError,
    UnshareFolderArg,
    UnshareFolderError,
    UpdateFolderMemberArg,
    UpdateFolderMemberError,
    UpdateFolderPolicyArg,
    UpdateFolderPolicyError,
)
from dbxclient.sources.external.dropbox.namespaces.base import DownloadResult, Namespace
from dbxclient.sources.external.dropbox.route import HostType, Route, RouteStyle

NS = "sharing"

ADD_FILE_MEMBER = Route(NS, "add_file_member", AddFileMemberArgs, List[FileMemberActionResult], AddFileMemberError)
ADD_FOLDER_MEMBER = Route(NS, "add_folder_member", AddFolderMemberArg, None, AddFolderMemberError)
CHECK_JOB_STATUS = Route(NS, "check_job_status", PollArg, JobStatus, PollError)
CHECK_REMOVE_MEMBER_JOB_STATUS = Route(NS, "check_remove_member_job_status", PollArg, RemoveMemberJobStatus, PollError)
CHECK_SHARE_JOB_STATUS = Route(NS, "check_share_job_status", PollArg, ShareFolderJobStatus, PollError)
CREATE_SHARED_LINK = Route(NS, "create_shared_link", CreateSharedLinkArg, PathLinkMetadata, CreateSharedLinkError)
CREATE_SHARED_LINK_WITH_SETTINGS = Route(
    NS, "create_shared_link_with_settings", CreateSharedLinkWithSettingsArg, SharedLinkMetadata,
    CreateSharedLinkWithSettingsError,
)
GET_FILE_METADATA = Route(NS, "get_file_metadata", GetFileMetadataArg, SharedFileMetadata, GetFileMetadataError)
GET_FILE_METADATA_BATCH = Route(
    NS, "get_file_metadata/batch", GetFileMetadataBatchArg, List[GetFileMetadataBatchResult], SharingUserError
)
GET_FOLDER_METADATA = Route(NS, "get_folder_metadata", GetMetadataArgs, SharedFolderMetadata, SharedFolderAccessError)
GET_SHARED_LINK_FILE = Route(
    NS, "get_shared_link_file", GetSharedLinkMetadataArg, SharedLinkMetadata, GetSharedLinkFileError,
    host=HostType.CONTENT, style=RouteStyle.DOWNLOAD,
)
GET_SHARED_LINK_METADATA = Route(
    NS, "get_shared_link_metadata", GetSharedLinkMetadataArg, SharedLinkMetadata, SharedLinkError
)
GET_SHARED_LINKS = Route(NS, "get_shared_links", GetSharedLinksArg, GetSharedLinksResult, GetSharedLinksError)
LIST_FILE_MEMBERS = Route(NS, "list_file_members", ListFileMembersArg, SharedFileMembers, ListFileMembersError)
LIST_FILE_MEMBERS_BATCH = Route(
    NS, "list_file_members/batch", ListFileMembersBatchArg, List[ListFileMembersBatchResult], SharingUserError
)
LIST_FILE_MEMBERS_CONTINUE = Route(
    NS, "list_file_members/continue", ListFileMembersContinueArg, SharedFileMembers, ListFileMembersContinueError
)
LIST_FOLDER_MEMBERS = Route(
    NS, "list_folder_members", ListFolderMembersArgs, SharedFolderMembers, SharedFolderAccessError
)
LIST_FOLDER_MEMBERS_CONTINUE = Route(
    NS, "list_folder_members/continue", ListFolderMembersContinueArg, SharedFolderMembers,
    ListFolderMembersContinueError,
)
LIST_FOLDERS = Route(NS, "list_folders", ListFoldersArgs, ListFoldersResult)
LIST_FOLDERS_CONTINUE = Route(
    NS, "list_folders/continue", ListFoldersContinueArg, ListFoldersResult, ListFoldersContinueError
)
LIST_MOUNTABLE_FOLDERS = Route(NS, "list_mountable_folders", ListFoldersArgs, ListFoldersResult)
LIST_MOUNTABLE_FOLDERS_CONTINUE = Route(
    NS, "list_mountable_folders/continue", ListFoldersContinueArg, ListFoldersResult, ListFoldersContinueError
)
LIST_RECEIVED_FILES = Route(NS, "list_received_files", ListFilesArg, ListFilesResult, SharingUserError)
LIST_RECEIVED_FILES_CONTINUE = Route(
    NS, "list_received_files/continue", ListFilesContinueArg, ListFilesResult, ListFilesContinueError
)
LIST_SHARED_LINKS = Route(NS, "list_shared_links", ListSharedLinksArg, ListSharedLinksResult, ListSharedLinksError)
MODIFY_SHARED_LINK_SETTINGS = Route(
    NS, "modify_shared_link_settings", ModifySharedLinkSettingsArgs, SharedLinkMetadata,
    ModifySharedLinkSettingsError,
)
MOUNT_FOLDER = Route(NS, "mount_folder", MountFolderArg, SharedFolderMetadata, MountFolderError)
RELINQUISH_FILE_MEMBERSHIP = Route(
    NS, "relinquish_file_membership", RelinquishFileMembershipArg, None, RelinquishFileMembershipError
)
RELINQUISH_FOLDER_MEMBERSHIP = Route(
    NS, "relinquish_folder_membership", RelinquishFolderMembershipArg, LaunchEmptyResult,
    RelinquishFolderMembershipError,
)
REMOVE_FILE_MEMBER = Route(
    NS, "remove_file_member", RemoveFileMemberArg, FileMemberActionIndividualResult, RemoveFileMemberError
)
REMOVE_FILE_MEMBER_2 = Route(
    NS, "remove_file_member_2", RemoveFileMemberArg, FileMemberRemoveActionResult, RemoveFileMemberError
)
REMOVE_FOLDER_MEMBER = Route(
    NS, "remove_folder_member", RemoveFolderMemberArg, LaunchResultBase, RemoveFolderMemberError
)
REVOKE_SHARED_LINK = Route(NS, "revoke_shared_link", RevokeSharedLinkArg, None, RevokeSharedLinkError)
SHARE_FOLDER = Route(NS, "share_folder", ShareFolderArg, ShareFolderLaunch, ShareFolderError)
TRANSFER_FOLDER = Route(NS, "transfer_folder", TransferFolderArg, None, TransferFolderError)
UNMOUNT_FOLDER = Route(NS, "unmount_folder", UnmountFolderArg, None, UnmountFolderError)
UNSHARE_FILE = Route(NS, "unshare_file", UnshareFileArg, None, UnshareFileError)
UNSHARE_FOLDER = Route(NS, "unshare_folder", UnshareFolderArg, LaunchEmptyResult, UnshareFolderError)
UPDATE_FOLDER_MEMBER = Route(
    NS, "update_folder_member", UpdateFolderMemberArg, MemberAccessLevelResult, UpdateFolderMemberError
)
UPDATE_FOLDER_POLICY = Route(
    NS, "update_folder_policy", UpdateFolderPolicyArg, SharedFolderMetadata, UpdateFolderPolicyError
)


class SharingNamespace(Namespace):
    """Shared folders, shared files and shared links.

    Routes that start background work (share_folder, unshare_folder,
    remove_folder_member, relinquish_folder_membership) return a launch
    result; poll it with the matching check_* route.
    """

    async def add_file_member(self, arg: AddFileMemberArgs) -> List[FileMemberActionResult]:
        return await self._execute(ADD_FILE_MEMBER, arg)

    async def add_folder_member(self, arg: AddFolderMemberArg) -> None:
        """Invite members to a shared folder; requires owner or editor access"""
        await self._execute(ADD_FOLDER_MEMBER, arg)

    async def check_job_status(self, arg: PollArg) -> JobStatus:
        return await self._execute(CHECK_JOB_STATUS, arg)

    async def check_remove_member_job_status(self, arg: PollArg) -> RemoveMemberJobStatus:
        return await self._execute(CHECK_REMOVE_MEMBER_JOB_STATUS, arg)

    async def check_share_job_status(self, arg: PollArg) -> ShareFolderJobStatus:
        return await self._execute(CHECK_SHARE_JOB_STATUS, arg)

    async def create_shared_link(self, arg: CreateSharedLinkArg) -> PathLinkMetadata:
        """Deprecated upstream in favour of create_shared_link_with_settings"""
        return await self._execute(CREATE_SHARED_LINK, arg)

    async def create_shared_link_with_settings(self, arg: CreateSharedLinkWithSettingsArg) -> SharedLinkMetadata:
        return await self._execute(CREATE_SHARED_LINK_WITH_SETTINGS, arg)

    async def get_file_metadata(self, arg: GetFileMetadataArg) -> SharedFileMetadata:
        return await self._execute(GET_FILE_METADATA, arg)

    async def get_file_metadata_batch(self, arg: GetFileMetadataBatchArg) -> List[GetFileMetadataBatchResult]:
        return await self._execute(GET_FILE_METADATA_BATCH, arg)

    async def get_folder_metadata(self, arg: GetMetadataArgs) -> SharedFolderMetadata:
        return await self._execute(GET_FOLDER_METADATA, arg)

    async def get_shared_link_file(self, arg: GetSharedLinkMetadataArg) -> DownloadResult:
        """Download the file behind a shared link; the caller closes the response"""
        return await self._execute(GET_SHARED_LINK_FILE, arg)

    async def get_shared_link_metadata(self, arg: GetSharedLinkMetadataArg) -> SharedLinkMetadata:
        return await self._execute(GET_SHARED_LINK_METADATA, arg)

    async def get_shared_links(self, arg: GetSharedLinksArg) -> GetSharedLinksResult:
        return await self._execute(GET_SHARED_LINKS, arg)

    async def list_file_members(self, arg: ListFileMembersArg) -> SharedFileMembers:
        return await self._execute(LIST_FILE_MEMBERS, arg)

    async def list_file_members_batch(self, arg: ListFileMembersBatchArg) -> List[ListFileMembersBatchResult]:
        return await self._execute(LIST_FILE_MEMBERS_BATCH, arg)

    async def list_file_members_continue(self, arg: ListFileMembersContinueArg) -> SharedFileMembers:
        return await self._execute(LIST_FILE_MEMBERS_CONTINUE, arg)

    async def list_folder_members(self, arg: ListFolderMembersArgs) -> SharedFolderMembers:
        return await self._execute(LIST_FOLDER_MEMBERS, arg)

    async def list_folder_members_continue(self, arg: ListFolderMembersContinueArg) -> SharedFolderMembers:
        return await self._execute(LIST_FOLDER_MEMBERS_CONTINUE, arg)

    async def list_folders(self, arg: ListFoldersArgs) -> ListFoldersResult:
        """Shared folders the current user has access to"""
        return await self._execute(LIST_FOLDERS, arg)

    async def list_folders_continue(self, arg: ListFoldersContinueArg) -> ListFoldersResult:
        return await self._execute(LIST_FOLDERS_CONTINUE, arg)

    async def list_mountable_folders(self, arg: ListFoldersArgs) -> ListFoldersResult:
        """Shared folders the current user can mount or unmount"""
        return await self._execute(LIST_MOUNTABLE_FOLDERS, arg)

    async def list_mountable_folders_continue(self, arg: ListFoldersContinueArg) -> ListFoldersResult:
        return await self._execute(LIST_MOUNTABLE_FOLDERS_CONTINUE, arg)

    async def list_received_files(self, arg: ListFilesArg) -> ListFilesResult:
        return await self._execute(LIST_RECEIVED_FILES, arg)

    async def list_received_files_continue(self, arg: ListFilesContinueArg) -> ListFilesResult:
        return await self._execute(LIST_RECEIVED_FILES_CONTINUE, arg)

    async def list_shared_links(self, arg: ListSharedLinksArg) -> ListSharedLinksResult:
        return await self._execute(LIST_SHARED_LINKS, arg)

    async def modify_shared_link_settings(self, arg: ModifySharedLinkSettingsArgs) -> SharedLinkMetadata:
        return await self._execute(MODIFY_SHARED_LINK_SETTINGS, arg)

    async def mount_folder(self, arg: MountFolderArg) -> SharedFolderMetadata:
        return await self._execute(MOUNT_FOLDER, arg)

    async def relinquish_file_membership(self, arg: RelinquishFileMembershipArg) -> None:
        await self._execute(RELINQUISH_FILE_MEMBERSHIP, arg)

    async def relinquish_folder_membership(self, arg: RelinquishFolderMembershipArg) -> LaunchEmptyResult:
        return await self._execute(RELINQUISH_FOLDER_MEMBERSHIP, arg)

    async def remove_file_member(self, arg: RemoveFileMemberArg) -> FileMemberActionIndividualResult:
        return await self._execute(REMOVE_FILE_MEMBER, arg)

    async def remove_file_member_2(self, arg: RemoveFileMemberArg) -> FileMemberRemoveActionResult:
        return await self._execute(REMOVE_FILE_MEMBER_2, arg)

    async def remove_folder_member(self, arg: RemoveFolderMemberArg) -> LaunchResultBase:
        return await self._execute(REMOVE_FOLDER_MEMBER, arg)

    async def revoke_shared_link(self, arg: RevokeSharedLinkArg) -> None:
        await self._execute(REVOKE_SHARED_LINK, arg)

    async def share_folder(self, arg: ShareFolderArg) -> ShareFolderLaunch:
        return await self._execute(SHARE_FOLDER, arg)

    async def transfer_folder(self, arg: TransferFolderArg) -> None:
        await self._execute(TRANSFER_FOLDER, arg)

    async def unmount_folder(self, arg: UnmountFolderArg) -> None:
        await self._execute(UNMOUNT_FOLDER, arg)

    async def unshare_file(self, arg: UnshareFileArg) -> None:
        await self._execute(UNSHARE_FILE, arg)

    async def unshare_folder(self, arg: UnshareFolderArg) -> LaunchEmptyResult:
        return await self._execute(UNSHARE_FOLDER, arg)

    async def update_folder_member(self, arg: UpdateFolderMemberArg) -> MemberAccessLevelResult:
        return await self._execute(UPDATE_FOLDER_MEMBER, arg)

    async def update_folder_policy(self, arg: UpdateFolderPolicyArg) -> SharedFolderMetadata:
        return await self._execute(UPDATE_FOLDER_POLICY, arg)
