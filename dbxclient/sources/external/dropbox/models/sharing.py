"""Shared folders, shared files, their members, and shared links."""
from typing import ClassVar, List, Optional

from pydantic import Field  # type: ignore

from dbxclient.sources.external.dropbox.models.async_ import LaunchResultBase, PollResultBase
from dbxclient.sources.external.dropbox.models.files import LookupError
from dbxclient.sources.external.dropbox.models.team import GroupSummary, GroupType
from dbxclient.sources.external.dropbox.models.users import Team
from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion, Timestamp

# Policies and permissions


class AccessLevel(TaggedUnion):
    OWNER: ClassVar[str] = "owner"
    EDITOR: ClassVar[str] = "editor"
    VIEWER: ClassVar[str] = "viewer"
    VIEWER_NO_COMMENT: ClassVar[str] = "viewer_no_comment"
    OTHER: ClassVar[str] = "other"


class AclUpdatePolicy(TaggedUnion):
    OWNER: ClassVar[str] = "owner"
    EDITORS: ClassVar[str] = "editors"
    OTHER: ClassVar[str] = "other"


class MemberPolicy(TaggedUnion):
    TEAM: ClassVar[str] = "team"
    ANYONE: ClassVar[str] = "anyone"
    OTHER: ClassVar[str] = "other"


class SharedLinkPolicy(TaggedUnion):
    ANYONE: ClassVar[str] = "anyone"
    MEMBERS: ClassVar[str] = "members"
    OTHER: ClassVar[str] = "other"


class RequestedVisibility(TaggedUnion):
    PUBLIC: ClassVar[str] = "public"
    TEAM_ONLY: ClassVar[str] = "team_only"
    PASSWORD: ClassVar[str] = "password"


class ResolvedVisibility(RequestedVisibility):
    TEAM_AND_PASSWORD: ClassVar[str] = "team_and_password"
    SHARED_FOLDER_ONLY: ClassVar[str] = "shared_folder_only"
    OTHER: ClassVar[str] = "other"


class Visibility(TaggedUnion):
    PUBLIC: ClassVar[str] = "public"
    TEAM_ONLY: ClassVar[str] = "team_only"
    PASSWORD: ClassVar[str] = "password"
    TEAM_AND_PASSWORD: ClassVar[str] = "team_and_password"
    SHARED_FOLDER_ONLY: ClassVar[str] = "shared_folder_only"
    OTHER: ClassVar[str] = "other"


class SharedLinkAccessFailureReason(TaggedUnion):
    LOGIN_REQUIRED: ClassVar[str] = "login_required"
    EMAIL_VERIFY_REQUIRED: ClassVar[str] = "email_verify_required"
    PASSWORD_REQUIRED: ClassVar[str] = "password_required"
    TEAM_ONLY: ClassVar[str] = "team_only"
    OWNER_ONLY: ClassVar[str] = "owner_only"
    OTHER: ClassVar[str] = "other"


class PermissionDeniedReason(TaggedUnion):
    USER_NOT_SAME_TEAM_AS_OWNER: ClassVar[str] = "user_not_same_team_as_owner"
    USER_NOT_ALLOWED_BY_OWNER: ClassVar[str] = "user_not_allowed_by_owner"
    TARGET_IS_INDIRECT_MEMBER: ClassVar[str] = "target_is_indirect_member"
    TARGET_IS_OWNER: ClassVar[str] = "target_is_owner"
    TARGET_IS_SELF: ClassVar[str] = "target_is_self"
    TARGET_NOT_ACTIVE: ClassVar[str] = "target_not_active"
    FOLDER_IS_LIMITED_TEAM_FOLDER: ClassVar[str] = "folder_is_limited_team_folder"
    OTHER: ClassVar[str] = "other"


class FileAction(TaggedUnion):
    EDIT_CONTENTS: ClassVar[str] = "edit_contents"
    INVITE_VIEWER: ClassVar[str] = "invite_viewer"
    INVITE_VIEWER_NO_COMMENT: ClassVar[str] = "invite_viewer_no_comment"
    UNSHARE: ClassVar[str] = "unshare"
    RELINQUISH_MEMBERSHIP: ClassVar[str] = "relinquish_membership"
    SHARE_LINK: ClassVar[str] = "share_link"
    OTHER: ClassVar[str] = "other"


class FolderAction(TaggedUnion):
    CHANGE_OPTIONS: ClassVar[str] = "change_options"
    EDIT_CONTENTS: ClassVar[str] = "edit_contents"
    INVITE_EDITOR: ClassVar[str] = "invite_editor"
    INVITE_VIEWER: ClassVar[str] = "invite_viewer"
    INVITE_VIEWER_NO_COMMENT: ClassVar[str] = "invite_viewer_no_comment"
    RELINQUISH_MEMBERSHIP: ClassVar[str] = "relinquish_membership"
    UNMOUNT: ClassVar[str] = "unmount"
    UNSHARE: ClassVar[str] = "unshare"
    LEAVE_A_COPY: ClassVar[str] = "leave_a_copy"
    SHARE_LINK: ClassVar[str] = "share_link"
    OTHER: ClassVar[str] = "other"


class MemberAction(TaggedUnion):
    LEAVE_A_COPY: ClassVar[str] = "leave_a_copy"
    MAKE_EDITOR: ClassVar[str] = "make_editor"
    MAKE_OWNER: ClassVar[str] = "make_owner"
    MAKE_VIEWER: ClassVar[str] = "make_viewer"
    MAKE_VIEWER_NO_COMMENT: ClassVar[str] = "make_viewer_no_comment"
    REMOVE: ClassVar[str] = "remove"
    OTHER: ClassVar[str] = "other"


class FilePermission(Struct):
    action: FileAction
    allow: bool
    reason: Optional[PermissionDeniedReason] = None


class FolderPermission(Struct):
    action: FolderAction
    allow: bool
    reason: Optional[PermissionDeniedReason] = None


class MemberPermission(Struct):
    action: MemberAction
    allow: bool
    reason: Optional[PermissionDeniedReason] = None


class FolderPolicy(Struct):
    acl_update_policy: AclUpdatePolicy
    shared_link_policy: SharedLinkPolicy
    member_policy: Optional[MemberPolicy] = None
    resolved_member_policy: Optional[MemberPolicy] = None


# Members


class MemberSelector(TaggedUnion):
    """Picks a member by Dropbox account/team member id or by email"""
    DROPBOX_ID: ClassVar[str] = "dropbox_id"
    EMAIL: ClassVar[str] = "email"
    OTHER: ClassVar[str] = "other"

    dropbox_id: Optional[str] = None
    email: Optional[str] = None


class AddMember(Struct):
    member: MemberSelector
    access_level: AccessLevel = Field(default_factory=lambda: AccessLevel(AccessLevel.VIEWER))


class InviteeInfo(TaggedUnion):
    EMAIL: ClassVar[str] = "email"
    OTHER: ClassVar[str] = "other"

    email: Optional[str] = None


class UserInfo(Struct):
    account_id: str
    same_team: bool
    team_member_id: Optional[str] = None


class GroupInfo(GroupSummary):
    group_type: GroupType
    same_team: bool
    is_owner: bool = False


class MembershipInfo(Struct):
    access_type: AccessLevel
    permissions: Optional[List[MemberPermission]] = None
    initials: Optional[str] = None
    is_inherited: bool = False


class UserMembershipInfo(MembershipInfo):
    user: UserInfo


class InviteeMembershipInfo(MembershipInfo):
    invitee: InviteeInfo
    user: Optional[UserInfo] = None


class GroupMembershipInfo(MembershipInfo):
    group: GroupInfo


class SharedFileMembers(Struct):
    users: List[UserMembershipInfo]
    groups: List[GroupMembershipInfo]
    invitees: List[InviteeMembershipInfo]
    cursor: Optional[str] = None


class SharedFolderMembers(Struct):
    users: List[UserMembershipInfo]
    groups: List[GroupMembershipInfo]
    invitees: List[InviteeMembershipInfo]
    cursor: Optional[str] = None


class ParentFolderAccessInfo(Struct):
    folder_name: str
    shared_folder_id: str
    permissions: List[MemberPermission]
    path: Optional[str] = None


class MemberAccessLevelResult(Struct):
    access_level: Optional[AccessLevel] = None
    warning: Optional[str] = None
    access_details: Optional[List[ParentFolderAccessInfo]] = None


class InsufficientQuotaAmounts(Struct):
    space_needed: int
    space_shortage: int
    space_left: int


# Access errors shared by many routes


class SharingUserError(TaggedUnion):
    EMAIL_UNVERIFIED: ClassVar[str] = "email_unverified"
    OTHER: ClassVar[str] = "other"


class SharingFileAccessError(TaggedUnion):
    NO_PERMISSION: ClassVar[str] = "no_permission"
    INVALID_FILE: ClassVar[str] = "invalid_file"
    IS_FOLDER: ClassVar[str] = "is_folder"
    INSIDE_PUBLIC_FOLDER: ClassVar[str] = "inside_public_folder"
    INSIDE_OSX_PACKAGE: ClassVar[str] = "inside_osx_package"
    OTHER: ClassVar[str] = "other"


class SharedFolderAccessError(TaggedUnion):
    INVALID_ID: ClassVar[str] = "invalid_id"
    NOT_A_MEMBER: ClassVar[str] = "not_a_member"
    EMAIL_UNVERIFIED: ClassVar[str] = "email_unverified"
    UNMOUNTED: ClassVar[str] = "unmounted"
    OTHER: ClassVar[str] = "other"


class SharedFolderMemberError(TaggedUnion):
    INVALID_DROPBOX_ID: ClassVar[str] = "invalid_dropbox_id"
    NOT_A_MEMBER: ClassVar[str] = "not_a_member"
    NO_EXPLICIT_ACCESS: ClassVar[str] = "no_explicit_access"
    OTHER: ClassVar[str] = "other"

    no_explicit_access: Optional[MemberAccessLevelResult] = None


# Shared folder and file metadata


class SharedFolderMetadataBase(Struct):
    access_type: AccessLevel
    is_team_folder: bool
    policy: FolderPolicy
    owner_team: Optional[Team] = None
    parent_shared_folder_id: Optional[str] = None


class SharedFolderMetadata(SharedFolderMetadataBase):
    name: str
    shared_folder_id: str
    time_invited: Timestamp
    preview_url: str
    path_lower: Optional[str] = None
    permissions: Optional[List[FolderPermission]] = None


class SharedFileMetadata(Struct):
    policy: FolderPolicy
    preview_url: str
    name: str
    id: str
    permissions: Optional[List[FilePermission]] = None
    owner_team: Optional[Team] = None
    parent_shared_folder_id: Optional[str] = None
    path_lower: Optional[str] = None
    path_display: Optional[str] = None
    time_invited: Optional[Timestamp] = None
    access_type: Optional[AccessLevel] = None


# Shared links


class LinkPermissions(Struct):
    can_revoke: bool
    resolved_visibility: Optional[ResolvedVisibility] = None
    requested_visibility: Optional[RequestedVisibility] = None
    revoke_failure_reason: Optional[SharedLinkAccessFailureReason] = None


class TeamMemberInfo(Struct):
    team_info: Team
    display_name: str
    member_id: Optional[str] = None


class BaseSharedLinkMetadata(Struct):
    url: str
    name: str
    link_permissions: LinkPermissions
    id: Optional[str] = None
    expires: Optional[Timestamp] = None
    path_lower: Optional[str] = None
    team_member_info: Optional[TeamMemberInfo] = None
    content_owner_team_info: Optional[Team] = None


class FileLinkMetadata(BaseSharedLinkMetadata):
    client_modified: Timestamp
    server_modified: Timestamp
    rev: str
    size: int


class FolderLinkMetadata(BaseSharedLinkMetadata):
    pass


class SharedLinkMetadata(TaggedUnion):
    """Metadata of a shared link, `file` or `folder`"""
    FILE: ClassVar[str] = "file"
    FOLDER: ClassVar[str] = "folder"

    file: Optional[FileLinkMetadata] = None
    folder: Optional[FolderLinkMetadata] = None


class BaseLinkMetadata(Struct):
    url: str
    visibility: Visibility
    expires: Optional[Timestamp] = None


class PathLinkMetadata(BaseLinkMetadata):
    path: str


class CollectionLinkMetadata(BaseLinkMetadata):
    pass


class LinkMetadata(TaggedUnion):
    """Deprecated shared link shape still returned by get_shared_links"""
    PATH: ClassVar[str] = "path"
    COLLECTION: ClassVar[str] = "collection"

    path: Optional[PathLinkMetadata] = None
    collection: Optional[CollectionLinkMetadata] = None


class SharedLinkSettings(Struct):
    requested_visibility: Optional[RequestedVisibility] = None
    link_password: Optional[str] = None
    expires: Optional[Timestamp] = None


class PendingUploadMode(TaggedUnion):
    FILE: ClassVar[str] = "file"
    FOLDER: ClassVar[str] = "folder"


class CreateSharedLinkArg(Struct):
    path: str
    short_url: bool = False
    pending_upload: Optional[PendingUploadMode] = None


class CreateSharedLinkError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class CreateSharedLinkWithSettingsArg(Struct):
    path: str
    settings: Optional[SharedLinkSettings] = None


class SharedLinkSettingsError(TaggedUnion):
    INVALID_SETTINGS: ClassVar[str] = "invalid_settings"
    NOT_AUTHORIZED: ClassVar[str] = "not_authorized"


class CreateSharedLinkWithSettingsError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    EMAIL_NOT_VERIFIED: ClassVar[str] = "email_not_verified"
    SHARED_LINK_ALREADY_EXISTS: ClassVar[str] = "shared_link_already_exists"
    SETTINGS_ERROR: ClassVar[str] = "settings_error"
    ACCESS_DENIED: ClassVar[str] = "access_denied"

    path: Optional[LookupError] = None
    settings_error: Optional[SharedLinkSettingsError] = None


class SharedLinkError(TaggedUnion):
    SHARED_LINK_NOT_FOUND: ClassVar[str] = "shared_link_not_found"
    SHARED_LINK_ACCESS_DENIED: ClassVar[str] = "shared_link_access_denied"
    OTHER: ClassVar[str] = "other"


class GetSharedLinkFileError(SharedLinkError):
    SHARED_LINK_IS_DIRECTORY: ClassVar[str] = "shared_link_is_directory"


class GetSharedLinkMetadataArg(Struct):
    url: str
    path: Optional[str] = None
    link_password: Optional[str] = None


class GetSharedLinksArg(Struct):
    path: Optional[str] = None


class GetSharedLinksResult(Struct):
    links: List[LinkMetadata]


class GetSharedLinksError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    OTHER: ClassVar[str] = "other"

    path: Optional[str] = None


class ListSharedLinksArg(Struct):
    path: Optional[str] = None
    cursor: Optional[str] = None
    direct_only: Optional[bool] = None


class ListSharedLinksResult(Struct):
    links: List[SharedLinkMetadata]
    has_more: bool
    cursor: Optional[str] = None


class ListSharedLinksError(TaggedUnion):
    PATH: ClassVar[str] = "path"
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"

    path: Optional[LookupError] = None


class ModifySharedLinkSettingsArgs(Struct):
    url: str
    settings: SharedLinkSettings
    remove_expiration: bool = False


class ModifySharedLinkSettingsError(SharedLinkError):
    SETTINGS_ERROR: ClassVar[str] = "settings_error"
    EMAIL_NOT_VERIFIED: ClassVar[str] = "email_not_verified"

    settings_error: Optional[SharedLinkSettingsError] = None


class RevokeSharedLinkArg(Struct):
    url: str


class RevokeSharedLinkError(SharedLinkError):
    SHARED_LINK_MALFORMED: ClassVar[str] = "shared_link_malformed"


# File membership


class AddFileMemberArgs(Struct):
    file: str
    members: List[MemberSelector]
    custom_message: Optional[str] = None
    quiet: bool = False
    access_level: AccessLevel = Field(default_factory=lambda: AccessLevel(AccessLevel.VIEWER))
    add_message_as_comment: bool = False


class AddFileMemberError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    RATE_LIMIT: ClassVar[str] = "rate_limit"
    INVALID_COMMENT: ClassVar[str] = "invalid_comment"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None


class FileMemberActionError(TaggedUnion):
    INVALID_MEMBER: ClassVar[str] = "invalid_member"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"


class FileMemberActionIndividualResult(TaggedUnion):
    """`success` carries the access level granted, absent when unchanged"""
    SUCCESS: ClassVar[str] = "success"
    MEMBER_ERROR: ClassVar[str] = "member_error"

    success: Optional[AccessLevel] = None
    member_error: Optional[FileMemberActionError] = None


class FileMemberActionResult(Struct):
    member: MemberSelector
    result: FileMemberActionIndividualResult


class FileMemberRemoveActionResult(TaggedUnion):
    SUCCESS: ClassVar[str] = "success"
    MEMBER_ERROR: ClassVar[str] = "member_error"
    OTHER: ClassVar[str] = "other"

    success: Optional[MemberAccessLevelResult] = None
    member_error: Optional[FileMemberActionError] = None


class GetFileMetadataArg(Struct):
    file: str
    actions: Optional[List[FileAction]] = None


class GetFileMetadataError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None


class GetFileMetadataBatchArg(Struct):
    files: List[str]
    actions: Optional[List[FileAction]] = None


class GetFileMetadataIndividualResult(TaggedUnion):
    METADATA: ClassVar[str] = "metadata"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    OTHER: ClassVar[str] = "other"

    metadata: Optional[SharedFileMetadata] = None
    access_error: Optional[SharingFileAccessError] = None


class GetFileMetadataBatchResult(Struct):
    file: str
    result: GetFileMetadataIndividualResult


class ListFileMembersArg(Struct):
    file: str
    actions: Optional[List[MemberAction]] = None
    include_inherited: bool = True
    limit: int = 100


class ListFileMembersError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None


class ListFileMembersBatchArg(Struct):
    files: List[str]
    limit: int = 10


class ListFileMembersCountResult(Struct):
    members: SharedFileMembers
    member_count: int


class ListFileMembersIndividualResult(TaggedUnion):
    RESULT: ClassVar[str] = "result"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    OTHER: ClassVar[str] = "other"

    result: Optional[ListFileMembersCountResult] = None
    access_error: Optional[SharingFileAccessError] = None


class ListFileMembersBatchResult(Struct):
    file: str
    result: ListFileMembersIndividualResult


class ListFileMembersContinueArg(Struct):
    cursor: str


class ListFileMembersContinueError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None


class ListFilesArg(Struct):
    limit: int = 100
    actions: Optional[List[FileAction]] = None


class ListFilesResult(Struct):
    entries: List[SharedFileMetadata]
    cursor: Optional[str] = None


class ListFilesContinueArg(Struct):
    cursor: str


class ListFilesContinueError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None


class RelinquishFileMembershipArg(Struct):
    file: str


class RelinquishFileMembershipError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    GROUP_ACCESS: ClassVar[str] = "group_access"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharingFileAccessError] = None


class RemoveFileMemberArg(Struct):
    file: str
    member: MemberSelector


class RemoveFileMemberError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    NO_EXPLICIT_ACCESS: ClassVar[str] = "no_explicit_access"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None
    no_explicit_access: Optional[MemberAccessLevelResult] = None


class UnshareFileArg(Struct):
    file: str


class UnshareFileError(TaggedUnion):
    USER_ERROR: ClassVar[str] = "user_error"
    ACCESS_ERROR: ClassVar[str] = "access_error"
    OTHER: ClassVar[str] = "other"

    user_error: Optional[SharingUserError] = None
    access_error: Optional[SharingFileAccessError] = None


# Folder membership


class AddFolderMemberArg(Struct):
    shared_folder_id: str
    members: List[AddMember]
    quiet: bool = False
    custom_message: Optional[str] = None


class AddMemberSelectorError(TaggedUnion):
    AUTOMATIC_GROUP: ClassVar[str] = "automatic_group"
    INVALID_DROPBOX_ID: ClassVar[str] = "invalid_dropbox_id"
    INVALID_EMAIL: ClassVar[str] = "invalid_email"
    UNVERIFIED_DROPBOX_ID: ClassVar[str] = "unverified_dropbox_id"
    GROUP_DELETED: ClassVar[str] = "group_deleted"
    GROUP_NOT_ON_TEAM: ClassVar[str] = "group_not_on_team"
    OTHER: ClassVar[str] = "other"

    invalid_dropbox_id: Optional[str] = None
    invalid_email: Optional[str] = None
    unverified_dropbox_id: Optional[str] = None


class AddFolderMemberError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    EMAIL_UNVERIFIED: ClassVar[str] = "email_unverified"
    BAD_MEMBER: ClassVar[str] = "bad_member"
    CANT_SHARE_OUTSIDE_TEAM: ClassVar[str] = "cant_share_outside_team"
    TOO_MANY_MEMBERS: ClassVar[str] = "too_many_members"
    TOO_MANY_PENDING_INVITES: ClassVar[str] = "too_many_pending_invites"
    RATE_LIMIT: ClassVar[str] = "rate_limit"
    TOO_MANY_INVITEES: ClassVar[str] = "too_many_invitees"
    INSUFFICIENT_PLAN: ClassVar[str] = "insufficient_plan"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None
    bad_member: Optional[AddMemberSelectorError] = None
    too_many_members: Optional[int] = None
    too_many_pending_invites: Optional[int] = None


class GetMetadataArgs(Struct):
    shared_folder_id: str
    actions: Optional[List[FolderAction]] = None


class ListFolderMembersCursorArg(Struct):
    actions: Optional[List[MemberAction]] = None
    limit: int = 1000


class ListFolderMembersArgs(ListFolderMembersCursorArg):
    shared_folder_id: str


class ListFolderMembersContinueArg(Struct):
    cursor: str


class ListFolderMembersContinueError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None


class ListFoldersArgs(Struct):
    limit: int = 1000
    actions: Optional[List[FolderAction]] = None


class ListFoldersResult(Struct):
    entries: List[SharedFolderMetadata]
    cursor: Optional[str] = None


class ListFoldersContinueArg(Struct):
    cursor: str


class ListFoldersContinueError(TaggedUnion):
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"


class MountFolderArg(Struct):
    shared_folder_id: str


class MountFolderError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    INSIDE_SHARED_FOLDER: ClassVar[str] = "inside_shared_folder"
    INSUFFICIENT_QUOTA: ClassVar[str] = "insufficient_quota"
    ALREADY_MOUNTED: ClassVar[str] = "already_mounted"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    NOT_MOUNTABLE: ClassVar[str] = "not_mountable"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None
    insufficient_quota: Optional[InsufficientQuotaAmounts] = None


class RelinquishFolderMembershipArg(Struct):
    shared_folder_id: str
    leave_a_copy: bool = False


class RelinquishFolderMembershipError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    FOLDER_OWNER: ClassVar[str] = "folder_owner"
    MOUNTED: ClassVar[str] = "mounted"
    GROUP_ACCESS: ClassVar[str] = "group_access"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None


class RemoveFolderMemberArg(Struct):
    shared_folder_id: str
    member: MemberSelector
    leave_a_copy: bool


class RemoveFolderMemberError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    MEMBER_ERROR: ClassVar[str] = "member_error"
    FOLDER_OWNER: ClassVar[str] = "folder_owner"
    GROUP_ACCESS: ClassVar[str] = "group_access"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None
    member_error: Optional[SharedFolderMemberError] = None


class RemoveMemberJobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"
    FAILED: ClassVar[str] = "failed"

    complete: Optional[MemberAccessLevelResult] = None
    failed: Optional[RemoveFolderMemberError] = None


class SharePathError(TaggedUnion):
    IS_FILE: ClassVar[str] = "is_file"
    INSIDE_SHARED_FOLDER: ClassVar[str] = "inside_shared_folder"
    CONTAINS_SHARED_FOLDER: ClassVar[str] = "contains_shared_folder"
    IS_APP_FOLDER: ClassVar[str] = "is_app_folder"
    INSIDE_APP_FOLDER: ClassVar[str] = "inside_app_folder"
    IS_PUBLIC_FOLDER: ClassVar[str] = "is_public_folder"
    INSIDE_PUBLIC_FOLDER: ClassVar[str] = "inside_public_folder"
    ALREADY_SHARED: ClassVar[str] = "already_shared"
    INVALID_PATH: ClassVar[str] = "invalid_path"
    IS_OSX_PACKAGE: ClassVar[str] = "is_osx_package"
    INSIDE_OSX_PACKAGE: ClassVar[str] = "inside_osx_package"
    OTHER: ClassVar[str] = "other"

    already_shared: Optional[SharedFolderMetadata] = None


class ShareFolderArg(Struct):
    path: str
    member_policy: MemberPolicy = Field(default_factory=lambda: MemberPolicy(MemberPolicy.ANYONE))
    acl_update_policy: AclUpdatePolicy = Field(default_factory=lambda: AclUpdatePolicy(AclUpdatePolicy.OWNER))
    shared_link_policy: SharedLinkPolicy = Field(default_factory=lambda: SharedLinkPolicy(SharedLinkPolicy.ANYONE))
    force_async: bool = False


class ShareFolderErrorBase(TaggedUnion):
    EMAIL_UNVERIFIED: ClassVar[str] = "email_unverified"
    BAD_PATH: ClassVar[str] = "bad_path"
    TEAM_POLICY_DISALLOWS_MEMBER_POLICY: ClassVar[str] = "team_policy_disallows_member_policy"
    DISALLOWED_SHARED_LINK_POLICY: ClassVar[str] = "disallowed_shared_link_policy"
    OTHER: ClassVar[str] = "other"

    bad_path: Optional[SharePathError] = None


class ShareFolderError(ShareFolderErrorBase):
    NO_PERMISSION: ClassVar[str] = "no_permission"


class ShareFolderLaunch(LaunchResultBase):
    COMPLETE: ClassVar[str] = "complete"

    complete: Optional[SharedFolderMetadata] = None


class ShareFolderJobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"
    FAILED: ClassVar[str] = "failed"

    complete: Optional[SharedFolderMetadata] = None
    failed: Optional[ShareFolderError] = None


class TransferFolderArg(Struct):
    shared_folder_id: str
    to_dropbox_id: str


class TransferFolderError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    INVALID_DROPBOX_ID: ClassVar[str] = "invalid_dropbox_id"
    NEW_OWNER_NOT_A_MEMBER: ClassVar[str] = "new_owner_not_a_member"
    NEW_OWNER_UNMOUNTED: ClassVar[str] = "new_owner_unmounted"
    NEW_OWNER_EMAIL_UNVERIFIED: ClassVar[str] = "new_owner_email_unverified"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None


class UnmountFolderArg(Struct):
    shared_folder_id: str


class UnmountFolderError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    NOT_UNMOUNTABLE: ClassVar[str] = "not_unmountable"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None


class UnshareFolderArg(Struct):
    shared_folder_id: str
    leave_a_copy: bool = False


class UnshareFolderError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    TEAM_FOLDER: ClassVar[str] = "team_folder"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None


class JobError(TaggedUnion):
    UNSHARE_FOLDER_ERROR: ClassVar[str] = "unshare_folder_error"
    REMOVE_FOLDER_MEMBER_ERROR: ClassVar[str] = "remove_folder_member_error"
    RELINQUISH_FOLDER_MEMBERSHIP_ERROR: ClassVar[str] = "relinquish_folder_membership_error"
    OTHER: ClassVar[str] = "other"

    unshare_folder_error: Optional[UnshareFolderError] = None
    remove_folder_member_error: Optional[RemoveFolderMemberError] = None
    relinquish_folder_membership_error: Optional[RelinquishFolderMembershipError] = None


class JobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"
    FAILED: ClassVar[str] = "failed"

    failed: Optional[JobError] = None


class UpdateFolderMemberArg(Struct):
    shared_folder_id: str
    member: MemberSelector
    access_level: AccessLevel


class UpdateFolderMemberError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    MEMBER_ERROR: ClassVar[str] = "member_error"
    NO_EXPLICIT_ACCESS: ClassVar[str] = "no_explicit_access"
    INSUFFICIENT_PLAN: ClassVar[str] = "insufficient_plan"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None
    member_error: Optional[SharedFolderMemberError] = None
    no_explicit_access: Optional[AddFolderMemberError] = None


class UpdateFolderPolicyArg(Struct):
    shared_folder_id: str
    member_policy: Optional[MemberPolicy] = None
    acl_update_policy: Optional[AclUpdatePolicy] = None
    shared_link_policy: Optional[SharedLinkPolicy] = None


class UpdateFolderPolicyError(TaggedUnion):
    ACCESS_ERROR: ClassVar[str] = "access_error"
    NOT_ON_TEAM: ClassVar[str] = "not_on_team"
    TEAM_POLICY_DISALLOWS_MEMBER_POLICY: ClassVar[str] = "team_policy_disallows_member_policy"
    DISALLOWED_SHARED_LINK_POLICY: ClassVar[str] = "disallowed_shared_link_policy"
    NO_PERMISSION: ClassVar[str] = "no_permission"
    OTHER: ClassVar[str] = "other"

    access_error: Optional[SharedFolderAccessError] = None
