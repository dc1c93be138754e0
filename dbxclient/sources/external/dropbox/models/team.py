"""Team administration types: groups, members, devices, linked apps and reports.

The group summary types shared with the sharing namespace live here as well.
"""
from typing import ClassVar, List, Optional

from pydantic import Field  # type: ignore

from dbxclient.sources.external.dropbox.models.async_ import LaunchResultBase, PollError, PollResultBase
from dbxclient.sources.external.dropbox.models.properties import PropertyFieldTemplate, PropertyGroupTemplate
from dbxclient.sources.external.dropbox.models.team_policies import TeamMemberPolicies
from dbxclient.sources.external.dropbox.models.users import Name
from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion, Timestamp


class GroupManagementType(TaggedUnion):
    USER_MANAGED: ClassVar[str] = "user_managed"
    COMPANY_MANAGED: ClassVar[str] = "company_managed"
    SYSTEM_MANAGED: ClassVar[str] = "system_managed"
    OTHER: ClassVar[str] = "other"


class GroupType(TaggedUnion):
    TEAM: ClassVar[str] = "team"
    USER_MANAGED: ClassVar[str] = "user_managed"
    OTHER: ClassVar[str] = "other"


class GroupSummary(Struct):
    group_name: str
    group_id: str
    group_external_id: Optional[str] = None
    member_count: Optional[int] = None
    group_management_type: Optional[GroupManagementType] = None


class AlphaGroupSummary(GroupSummary):
    group_management_type: GroupManagementType


# Selectors


class UserSelectorArg(TaggedUnion):
    """Picks a team member by id, external id or email"""
    TEAM_MEMBER_ID: ClassVar[str] = "team_member_id"
    EXTERNAL_ID: ClassVar[str] = "external_id"
    EMAIL: ClassVar[str] = "email"

    team_member_id: Optional[str] = None
    external_id: Optional[str] = None
    email: Optional[str] = None


class UsersSelectorArg(TaggedUnion):
    TEAM_MEMBER_IDS: ClassVar[str] = "team_member_ids"
    EXTERNAL_IDS: ClassVar[str] = "external_ids"
    EMAILS: ClassVar[str] = "emails"

    team_member_ids: Optional[List[str]] = None
    external_ids: Optional[List[str]] = None
    emails: Optional[List[str]] = None


class GroupSelector(TaggedUnion):
    GROUP_ID: ClassVar[str] = "group_id"
    GROUP_EXTERNAL_ID: ClassVar[str] = "group_external_id"

    group_id: Optional[str] = None
    group_external_id: Optional[str] = None


class GroupsSelector(TaggedUnion):
    GROUP_IDS: ClassVar[str] = "group_ids"
    GROUP_EXTERNAL_IDS: ClassVar[str] = "group_external_ids"

    group_ids: Optional[List[str]] = None
    group_external_ids: Optional[List[str]] = None


class UserSelectorError(TaggedUnion):
    USER_NOT_FOUND: ClassVar[str] = "user_not_found"


class MemberSelectorError(UserSelectorError):
    USER_NOT_IN_TEAM: ClassVar[str] = "user_not_in_team"


# Members


class AdminTier(TaggedUnion):
    TEAM_ADMIN: ClassVar[str] = "team_admin"
    USER_MANAGEMENT_ADMIN: ClassVar[str] = "user_management_admin"
    SUPPORT_ADMIN: ClassVar[str] = "support_admin"
    MEMBER_ONLY: ClassVar[str] = "member_only"


class TeamMemberStatus(TaggedUnion):
    ACTIVE: ClassVar[str] = "active"
    INVITED: ClassVar[str] = "invited"
    SUSPENDED: ClassVar[str] = "suspended"
    REMOVED: ClassVar[str] = "removed"


class TeamMembershipType(TaggedUnion):
    FULL: ClassVar[str] = "full"
    LIMITED: ClassVar[str] = "limited"


class MemberProfile(Struct):
    team_member_id: str
    email: str
    email_verified: bool
    status: TeamMemberStatus
    name: Name
    membership_type: TeamMembershipType
    external_id: Optional[str] = None
    account_id: Optional[str] = None
    joined_on: Optional[Timestamp] = None
    persistent_id: Optional[str] = None


class TeamMemberProfile(MemberProfile):
    groups: List[str]


class TeamMemberInfo(Struct):
    profile: TeamMemberProfile
    role: AdminTier


class MemberAddArg(Struct):
    member_email: str
    member_given_name: Optional[str] = None
    member_surname: Optional[str] = None
    member_external_id: Optional[str] = None
    member_persistent_id: Optional[str] = None
    send_welcome_email: bool = True
    role: AdminTier = Field(default_factory=lambda: AdminTier(AdminTier.MEMBER_ONLY))


class MemberAddResult(TaggedUnion):
    """`success` or one of the failures, each carrying the email it concerns"""
    SUCCESS: ClassVar[str] = "success"
    TEAM_LICENSE_LIMIT: ClassVar[str] = "team_license_limit"
    FREE_TEAM_MEMBER_LIMIT_REACHED: ClassVar[str] = "free_team_member_limit_reached"
    USER_ALREADY_ON_TEAM: ClassVar[str] = "user_already_on_team"
    USER_ON_ANOTHER_TEAM: ClassVar[str] = "user_on_another_team"
    USER_ALREADY_PAIRED: ClassVar[str] = "user_already_paired"
    USER_MIGRATION_FAILED: ClassVar[str] = "user_migration_failed"
    DUPLICATE_EXTERNAL_MEMBER_ID: ClassVar[str] = "duplicate_external_member_id"
    USER_CREATION_FAILED: ClassVar[str] = "user_creation_failed"

    success: Optional[TeamMemberInfo] = None
    team_license_limit: Optional[str] = None
    free_team_member_limit_reached: Optional[str] = None
    user_already_on_team: Optional[str] = None
    user_on_another_team: Optional[str] = None
    user_already_paired: Optional[str] = None
    user_migration_failed: Optional[str] = None
    duplicate_external_member_id: Optional[str] = None
    user_creation_failed: Optional[str] = None


class MembersAddArg(Struct):
    new_members: List[MemberAddArg]
    force_async: bool = False


class MembersAddLaunch(LaunchResultBase):
    COMPLETE: ClassVar[str] = "complete"

    complete: Optional[List[MemberAddResult]] = None


class MembersAddJobStatus(PollResultBase):
    COMPLETE: ClassVar[str] = "complete"
    FAILED: ClassVar[str] = "failed"

    complete: Optional[List[MemberAddResult]] = None
    failed: Optional[str] = None


class MembersGetInfoArgs(Struct):
    members: List[UserSelectorArg]


class MembersGetInfoItem(TaggedUnion):
    ID_NOT_FOUND: ClassVar[str] = "id_not_found"
    MEMBER_INFO: ClassVar[str] = "member_info"

    id_not_found: Optional[str] = None
    member_info: Optional[TeamMemberInfo] = None


class MembersGetInfoError(TaggedUnion):
    OTHER: ClassVar[str] = "other"


class MembersListArg(Struct):
    limit: int = 1000
    include_removed: bool = False


class MembersListResult(Struct):
    members: List[TeamMemberInfo]
    cursor: str
    has_more: bool


class MembersListError(TaggedUnion):
    OTHER: ClassVar[str] = "other"


class MembersListContinueArg(Struct):
    cursor: str


class MembersListContinueError(TaggedUnion):
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"


class MembersDeactivateArg(Struct):
    user: UserSelectorArg
    wipe_data: bool = True


class MembersDeactivateError(UserSelectorError):
    USER_NOT_IN_TEAM: ClassVar[str] = "user_not_in_team"
    OTHER: ClassVar[str] = "other"


class MembersRemoveArg(MembersDeactivateArg):
    transfer_dest_id: Optional[UserSelectorArg] = None
    transfer_admin_id: Optional[UserSelectorArg] = None
    keep_account: bool = False


class MembersRemoveError(MembersDeactivateError):
    REMOVE_LAST_ADMIN: ClassVar[str] = "remove_last_admin"
    REMOVED_AND_TRANSFER_DEST_SHOULD_DIFFER: ClassVar[str] = "removed_and_transfer_dest_should_differ"
    REMOVED_AND_TRANSFER_ADMIN_SHOULD_DIFFER: ClassVar[str] = "removed_and_transfer_admin_should_differ"
    TRANSFER_DEST_USER_NOT_FOUND: ClassVar[str] = "transfer_dest_user_not_found"
    TRANSFER_DEST_USER_NOT_IN_TEAM: ClassVar[str] = "transfer_dest_user_not_in_team"
    TRANSFER_ADMIN_USER_NOT_FOUND: ClassVar[str] = "transfer_admin_user_not_found"
    TRANSFER_ADMIN_USER_NOT_IN_TEAM: ClassVar[str] = "transfer_admin_user_not_in_team"
    UNSPECIFIED_TRANSFER_ADMIN_ID: ClassVar[str] = "unspecified_transfer_admin_id"
    TRANSFER_ADMIN_IS_NOT_ADMIN: ClassVar[str] = "transfer_admin_is_not_admin"
    CANNOT_KEEP_ACCOUNT_AND_TRANSFER: ClassVar[str] = "cannot_keep_account_and_transfer"
    CANNOT_KEEP_ACCOUNT_AND_DELETE_DATA: ClassVar[str] = "cannot_keep_account_and_delete_data"
    EMAIL_ADDRESS_TOO_LONG_TO_BE_DISABLED: ClassVar[str] = "email_address_too_long_to_be_disabled"


class MembersSendWelcomeError(MemberSelectorError):
    OTHER: ClassVar[str] = "other"


class MembersSetPermissionsArg(Struct):
    user: UserSelectorArg
    new_role: AdminTier


class MembersSetPermissionsResult(Struct):
    team_member_id: str
    role: AdminTier


class MembersSetPermissionsError(UserSelectorError):
    LAST_ADMIN: ClassVar[str] = "last_admin"
    USER_NOT_IN_TEAM: ClassVar[str] = "user_not_in_team"
    CANNOT_SET_PERMISSIONS: ClassVar[str] = "cannot_set_permissions"
    TEAM_LICENSE_LIMIT: ClassVar[str] = "team_license_limit"
    OTHER: ClassVar[str] = "other"


class MembersSetProfileArg(Struct):
    user: UserSelectorArg
    new_email: Optional[str] = None
    new_external_id: Optional[str] = None
    new_given_name: Optional[str] = None
    new_surname: Optional[str] = None
    new_persistent_id: Optional[str] = None


class MembersSetProfileError(MemberSelectorError):
    EXTERNAL_ID_AND_NEW_EXTERNAL_ID_UNSAFE: ClassVar[str] = "external_id_and_new_external_id_unsafe"
    NO_NEW_DATA_SPECIFIED: ClassVar[str] = "no_new_data_specified"
    EMAIL_RESERVED_FOR_OTHER_USER: ClassVar[str] = "email_reserved_for_other_user"
    EXTERNAL_ID_USED_BY_OTHER_USER: ClassVar[str] = "external_id_used_by_other_user"
    SET_PROFILE_DISALLOWED: ClassVar[str] = "set_profile_disallowed"
    PARAM_CANNOT_BE_EMPTY: ClassVar[str] = "param_cannot_be_empty"
    PERSISTENT_ID_DISABLED: ClassVar[str] = "persistent_id_disabled"
    OTHER: ClassVar[str] = "other"


class MembersSuspendError(MembersDeactivateError):
    SUSPEND_INACTIVE_USER: ClassVar[str] = "suspend_inactive_user"
    SUSPEND_LAST_ADMIN: ClassVar[str] = "suspend_last_admin"
    TEAM_LICENSE_LIMIT: ClassVar[str] = "team_license_limit"


class MembersUnsuspendArg(Struct):
    user: UserSelectorArg


class MembersUnsuspendError(MembersDeactivateError):
    UNSUSPEND_NON_SUSPENDED_MEMBER: ClassVar[str] = "unsuspend_non_suspended_member"
    TEAM_LICENSE_LIMIT: ClassVar[str] = "team_license_limit"


# Groups


class GroupAccessType(TaggedUnion):
    MEMBER: ClassVar[str] = "member"
    OWNER: ClassVar[str] = "owner"


class GroupMemberInfo(Struct):
    profile: MemberProfile
    access_type: GroupAccessType


class GroupFullInfo(GroupSummary):
    created: int
    members: Optional[List[GroupMemberInfo]] = None


class AlphaGroupFullInfo(AlphaGroupSummary):
    created: int
    members: Optional[List[GroupMemberInfo]] = None


class IncludeMembersArg(Struct):
    return_members: bool = True


class GroupCreateArg(Struct):
    group_name: str
    group_external_id: Optional[str] = None


class AlphaGroupCreateArg(GroupCreateArg):
    group_management_type: GroupManagementType = Field(
        default_factory=lambda: GroupManagementType(GroupManagementType.COMPANY_MANAGED)
    )


class GroupUpdateArgs(IncludeMembersArg):
    group: GroupSelector
    new_group_name: Optional[str] = None
    new_group_external_id: Optional[str] = None


class AlphaGroupUpdateArgs(GroupUpdateArgs):
    new_group_management_type: Optional[GroupManagementType] = None


class GroupSelectorError(TaggedUnion):
    GROUP_NOT_FOUND: ClassVar[str] = "group_not_found"
    OTHER: ClassVar[str] = "other"


class GroupSelectorWithTeamGroupError(GroupSelectorError):
    SYSTEM_MANAGED_GROUP_DISALLOWED: ClassVar[str] = "system_managed_group_disallowed"


class GroupCreateError(TaggedUnion):
    GROUP_NAME_ALREADY_USED: ClassVar[str] = "group_name_already_used"
    GROUP_NAME_INVALID: ClassVar[str] = "group_name_invalid"
    EXTERNAL_ID_ALREADY_IN_USE: ClassVar[str] = "external_id_already_in_use"
    SYSTEM_MANAGED_GROUP_DISALLOWED: ClassVar[str] = "system_managed_group_disallowed"
    OTHER: ClassVar[str] = "other"


class GroupDeleteError(GroupSelectorWithTeamGroupError):
    GROUP_ALREADY_DELETED: ClassVar[str] = "group_already_deleted"


class GroupUpdateError(GroupSelectorWithTeamGroupError):
    GROUP_NAME_ALREADY_USED: ClassVar[str] = "group_name_already_used"
    GROUP_NAME_INVALID: ClassVar[str] = "group_name_invalid"
    EXTERNAL_ID_ALREADY_IN_USE: ClassVar[str] = "external_id_already_in_use"


class GroupsGetInfoItem(TaggedUnion):
    ID_NOT_FOUND: ClassVar[str] = "id_not_found"
    GROUP_INFO: ClassVar[str] = "group_info"

    id_not_found: Optional[str] = None
    group_info: Optional[GroupFullInfo] = None


class AlphaGroupsGetInfoItem(TaggedUnion):
    ID_NOT_FOUND: ClassVar[str] = "id_not_found"
    GROUP_INFO: ClassVar[str] = "group_info"

    id_not_found: Optional[str] = None
    group_info: Optional[AlphaGroupFullInfo] = None


class GroupsGetInfoError(TaggedUnion):
    GROUP_NOT_ON_TEAM: ClassVar[str] = "group_not_on_team"
    OTHER: ClassVar[str] = "other"


class GroupsListArg(Struct):
    limit: int = 1000


class GroupsListResult(Struct):
    groups: List[GroupSummary]
    cursor: str
    has_more: bool


class AlphaGroupsListResult(Struct):
    groups: List[AlphaGroupSummary]
    cursor: str
    has_more: bool


class GroupsListContinueArg(Struct):
    cursor: str


class GroupsListContinueError(TaggedUnion):
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"


class GroupsPollError(PollError):
    ACCESS_DENIED: ClassVar[str] = "access_denied"


class MemberAccess(Struct):
    user: UserSelectorArg
    access_type: GroupAccessType


class GroupMembersAddArg(IncludeMembersArg):
    group: GroupSelector
    members: List[MemberAccess]


class GroupMembersRemoveArg(IncludeMembersArg):
    group: GroupSelector
    users: List[UserSelectorArg]


class GroupMembersChangeResult(Struct):
    """`async_job_id` tracks the membership change, poll groups/job_status/get"""
    group_info: GroupFullInfo
    async_job_id: str


class GroupMembersAddError(GroupSelectorWithTeamGroupError):
    DUPLICATE_USER: ClassVar[str] = "duplicate_user"
    GROUP_NOT_IN_TEAM: ClassVar[str] = "group_not_in_team"
    MEMBERS_NOT_IN_TEAM: ClassVar[str] = "members_not_in_team"
    USERS_NOT_FOUND: ClassVar[str] = "users_not_found"
    USER_MUST_BE_ACTIVE_TO_BE_OWNER: ClassVar[str] = "user_must_be_active_to_be_owner"
    USER_CANNOT_BE_MANAGER_OF_COMPANY_MANAGED_GROUP: ClassVar[str] = "user_cannot_be_manager_of_company_managed_group"

    members_not_in_team: Optional[List[str]] = None
    users_not_found: Optional[List[str]] = None
    user_cannot_be_manager_of_company_managed_group: Optional[List[str]] = None


class GroupMembersSelectorError(GroupSelectorWithTeamGroupError):
    MEMBER_NOT_IN_GROUP: ClassVar[str] = "member_not_in_group"


class GroupMembersRemoveError(GroupMembersSelectorError):
    GROUP_NOT_IN_TEAM: ClassVar[str] = "group_not_in_team"


class GroupMemberSelector(Struct):
    group: GroupSelector
    user: UserSelectorArg


class GroupMembersSetAccessTypeArg(GroupMemberSelector):
    access_type: GroupAccessType
    return_members: bool = True


class GroupMemberSelectorError(GroupSelectorWithTeamGroupError):
    MEMBER_NOT_IN_GROUP: ClassVar[str] = "member_not_in_group"


class GroupMemberSetAccessTypeError(GroupMemberSelectorError):
    USER_CANNOT_BE_MANAGER_OF_COMPANY_MANAGED_GROUP: ClassVar[str] = "user_cannot_be_manager_of_company_managed_group"


class GroupsMembersListArg(Struct):
    group: GroupSelector
    limit: int = 1000


class GroupsMembersListResult(Struct):
    members: List[GroupMemberInfo]
    cursor: str
    has_more: bool


class GroupsMembersListContinueArg(Struct):
    cursor: str


class GroupsMembersListContinueError(TaggedUnion):
    INVALID_CURSOR: ClassVar[str] = "invalid_cursor"
    OTHER: ClassVar[str] = "other"


# Devices


class DeviceSession(Struct):
    session_id: str
    ip_address: Optional[str] = None
    country: Optional[str] = None
    created: Optional[Timestamp] = None
    updated: Optional[Timestamp] = None


class ActiveWebSession(DeviceSession):
    user_agent: str
    os: str
    browser: str


class DesktopPlatform(TaggedUnion):
    WINDOWS: ClassVar[str] = "windows"
    MAC: ClassVar[str] = "mac"
    LINUX: ClassVar[str] = "linux"
    OTHER: ClassVar[str] = "other"


class DesktopClientSession(DeviceSession):
    host_name: str
    client_type: DesktopPlatform
    client_version: str
    platform: str
    is_delete_on_unlink_supported: bool


class MobileClientPlatform(TaggedUnion):
    IPHONE: ClassVar[str] = "iphone"
    IPAD: ClassVar[str] = "ipad"
    ANDROID: ClassVar[str] = "android"
    WINDOWS_PHONE: ClassVar[str] = "windows_phone"
    BLACKBERRY: ClassVar[str] = "blackberry"
    OTHER: ClassVar[str] = "other"


class MobileClientSession(DeviceSession):
    device_name: str
    client_type: MobileClientPlatform
    client_version: Optional[str] = None
    os_version: Optional[str] = None
    last_carrier: Optional[str] = None


class MemberDevices(Struct):
    team_member_id: str
    web_sessions: Optional[List[ActiveWebSession]] = None
    desktop_clients: Optional[List[DesktopClientSession]] = None
    mobile_clients: Optional[List[MobileClientSession]] = None


class ListMemberDevicesArg(Struct):
    team_member_id: str
    include_web_sessions: bool = True
    include_desktop_clients: bool = True
    include_mobile_clients: bool = True


class ListMemberDevicesResult(Struct):
    active_web_sessions: Optional[List[ActiveWebSession]] = None
    desktop_client_sessions: Optional[List[DesktopClientSession]] = None
    mobile_client_sessions: Optional[List[MobileClientSession]] = None


class ListMemberDevicesError(TaggedUnion):
    MEMBER_NOT_FOUND: ClassVar[str] = "member_not_found"
    OTHER: ClassVar[str] = "other"


class ListMembersDevicesArg(Struct):
    cursor: Optional[str] = None
    include_web_sessions: bool = True
    include_desktop_clients: bool = True
    include_mobile_clients: bool = True


class ListMembersDevicesResult(Struct):
    devices: List[MemberDevices]
    has_more: bool
    cursor: Optional[str] = None


class ListMembersDevicesError(TaggedUnion):
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"


class ListTeamDevicesArg(ListMembersDevicesArg):
    pass


class ListTeamDevicesResult(ListMembersDevicesResult):
    pass


class ListTeamDevicesError(TaggedUnion):
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"


class DeviceSessionArg(Struct):
    session_id: str
    team_member_id: str


class RevokeDesktopClientArg(DeviceSessionArg):
    delete_on_unlink: bool = False


class RevokeDeviceSessionArg(TaggedUnion):
    WEB_SESSION: ClassVar[str] = "web_session"
    DESKTOP_CLIENT: ClassVar[str] = "desktop_client"
    MOBILE_CLIENT: ClassVar[str] = "mobile_client"

    web_session: Optional[DeviceSessionArg] = None
    desktop_client: Optional[RevokeDesktopClientArg] = None
    mobile_client: Optional[DeviceSessionArg] = None


class RevokeDeviceSessionError(TaggedUnion):
    DEVICE_SESSION_NOT_FOUND: ClassVar[str] = "device_session_not_found"
    MEMBER_NOT_FOUND: ClassVar[str] = "member_not_found"
    OTHER: ClassVar[str] = "other"


class RevokeDeviceSessionBatchArg(Struct):
    revoke_devices: List[RevokeDeviceSessionArg]


class RevokeDeviceSessionStatus(Struct):
    success: bool
    error_type: Optional[RevokeDeviceSessionError] = None


class RevokeDeviceSessionBatchResult(Struct):
    revoke_devices_status: List[RevokeDeviceSessionStatus]


class RevokeDeviceSessionBatchError(TaggedUnion):
    OTHER: ClassVar[str] = "other"


# Linked apps


class ApiApp(Struct):
    app_id: str
    app_name: str
    is_app_folder: bool
    publisher: Optional[str] = None
    publisher_url: Optional[str] = None
    linked: Optional[Timestamp] = None


class MemberLinkedApps(Struct):
    team_member_id: str
    linked_api_apps: List[ApiApp]


class ListMemberAppsArg(Struct):
    team_member_id: str


class ListMemberAppsResult(Struct):
    linked_api_apps: List[ApiApp]


class ListMemberAppsError(TaggedUnion):
    MEMBER_NOT_FOUND: ClassVar[str] = "member_not_found"
    OTHER: ClassVar[str] = "other"


class ListMembersAppsArg(Struct):
    cursor: Optional[str] = None


class ListMembersAppsResult(Struct):
    apps: List[MemberLinkedApps]
    has_more: bool
    cursor: Optional[str] = None


class ListMembersAppsError(TaggedUnion):
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"


class ListTeamAppsArg(ListMembersAppsArg):
    pass


class ListTeamAppsResult(ListMembersAppsResult):
    pass


class ListTeamAppsError(TaggedUnion):
    RESET: ClassVar[str] = "reset"
    OTHER: ClassVar[str] = "other"


class RevokeLinkedApiAppArg(Struct):
    app_id: str
    team_member_id: str
    keep_app_folder: bool = True


class RevokeLinkedApiAppBatchArg(Struct):
    revoke_linked_app: List[RevokeLinkedApiAppArg]


class RevokeLinkedAppError(TaggedUnion):
    APP_NOT_FOUND: ClassVar[str] = "app_not_found"
    MEMBER_NOT_FOUND: ClassVar[str] = "member_not_found"
    OTHER: ClassVar[str] = "other"


class RevokeLinkedAppStatus(Struct):
    success: bool
    error_type: Optional[RevokeLinkedAppError] = None


class RevokeLinkedAppBatchResult(Struct):
    revoke_linked_app_status: List[RevokeLinkedAppStatus]


class RevokeLinkedAppBatchError(TaggedUnion):
    OTHER: ClassVar[str] = "other"


# Team info and property templates


class TeamGetInfoResult(Struct):
    name: str
    team_id: str
    num_licensed_users: int
    num_provisioned_users: int
    policies: TeamMemberPolicies


class AddPropertyTemplateArg(PropertyGroupTemplate):
    pass


class AddPropertyTemplateResult(Struct):
    template_id: str


class UpdatePropertyTemplateArg(Struct):
    template_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    add_fields: Optional[List[PropertyFieldTemplate]] = None


class UpdatePropertyTemplateResult(Struct):
    template_id: str


# Reports


class DateRange(Struct):
    """Both ends are optional; Dropbox picks the widest range it keeps"""
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None


class DateRangeError(TaggedUnion):
    OTHER: ClassVar[str] = "other"


class BaseDfbReport(Struct):
    start_date: str


class GetActivityReport(BaseDfbReport):
    adds: List[Optional[int]]
    edits: List[Optional[int]]
    deletes: List[Optional[int]]
    active_users_28_day: List[Optional[int]]
    active_users_7_day: List[Optional[int]]
    active_users_1_day: List[Optional[int]]
    active_shared_folders_28_day: List[Optional[int]]
    active_shared_folders_7_day: List[Optional[int]]
    active_shared_folders_1_day: List[Optional[int]]
    shared_links_created: List[Optional[int]]
    shared_links_viewed_by_team: List[Optional[int]]
    shared_links_viewed_by_outside_user: List[Optional[int]]
    shared_links_viewed_by_not_logged_in: List[Optional[int]]
    shared_links_viewed_total: List[Optional[int]]


class DevicesActive(Struct):
    windows: List[Optional[int]]
    macos: List[Optional[int]]
    linux: List[Optional[int]]
    ios: List[Optional[int]]
    android: List[Optional[int]]
    other: List[Optional[int]]
    total: List[Optional[int]]


class GetDevicesReport(BaseDfbReport):
    active_1_day: DevicesActive
    active_7_day: DevicesActive
    active_28_day: DevicesActive


class GetMembershipReport(BaseDfbReport):
    team_size: List[Optional[int]]
    pending_invites: List[Optional[int]]
    members_joined: List[Optional[int]]
    suspended_members: List[Optional[int]]
    licenses: List[Optional[int]]


class StorageBucket(Struct):
    bucket: str
    users: int


class GetStorageReport(BaseDfbReport):
    total_usage: List[Optional[int]]
    shared_usage: List[Optional[int]]
    unshared_usage: List[Optional[int]]
    shared_folders: List[Optional[int]]
    member_storage_map: List[List[StorageBucket]]
