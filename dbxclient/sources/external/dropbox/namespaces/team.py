from typing import List

from dbxclient.sources.external.dropbox.models.async_ import (
    LaunchEmptyResult,
    PollArg,
    PollEmptyResult,
    PollError,
)
from dbxclient.sources.external.dropbox.models.properties import (
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    ListPropertyTemplateIds,
    ModifyPropertyTemplateError,
    PropertyTemplateError,
)
from dbxclient.sources.external.dropbox.models.team import (
    AddPropertyTemplateArg,
    AddPropertyTemplateResult,
    AlphaGroupCreateArg,
    AlphaGroupFullInfo,
    AlphaGroupsGetInfoItem,
    AlphaGroupsListResult,
    AlphaGroupUpdateArgs,
    DateRange,
    DateRangeError,
    GetActivityReport,
    GetDevicesReport,
    GetMembershipReport,
    GetStorageReport,
    GroupCreateArg,
    GroupCreateError,
    GroupDeleteError,
    GroupFullInfo,
    GroupMembersAddArg,
    GroupMembersAddError,
    GroupMembersChangeResult,
    GroupMembersRemoveArg,
    GroupMembersRemoveError,
    GroupMembersSetAccessTypeArg,
    GroupMemberSetAccessTypeError,
    GroupSelector,
    GroupSelectorError,
    GroupsGetInfoError,
    GroupsGetInfoItem,
    GroupsListArg,
    GroupsListContinueArg,
    GroupsListContinueError,
    GroupsListResult,
    GroupsMembersListArg,
    GroupsMembersListContinueArg,
    GroupsMembersListContinueError,
    GroupsMembersListResult,
    GroupsPollError,
    GroupsSelector,
    GroupUpdateArgs,
    GroupUpdateError,
    ListMemberAppsArg,
    ListMemberAppsError,
    ListMemberAppsResult,
    ListMemberDevicesArg,
    ListMemberDevicesError,
    ListMemberDevicesResult,
    ListMembersAppsArg,
    ListMembersAppsError,
    ListMembersAppsResult,
    ListMembersDevicesArg,
    ListMembersDevicesError,
    ListMembersDevicesResult,
    ListTeamAppsArg,
    ListTeamAppsError,
    ListTeamAppsResult,
    ListTeamDevicesArg,
    ListTeamDevicesError,
    ListTeamDevicesResult,
    MembersAddArg,
    MembersAddJobStatus,
    MembersAddLaunch,
    MembersDeactivateArg,
    MembersGetInfoArgs,
    MembersGetInfoError,
    MembersGetInfoItem,
    MembersListArg,
    MembersListContinueArg,
    MembersListContinueError,
    MembersListError,
    MembersListResult,
    MembersRemoveArg,
    MembersRemoveError,
    MembersSendWelcomeError,
    MembersSetPermissionsArg,
    MembersSetPermissionsError,
    MembersSetPermissionsResult,
    MembersSetProfileArg,
    MembersSetProfileError,
    MembersSuspendError,
    MembersUnsuspendArg,
    MembersUnsuspendError,
    RevokeDeviceSessionArg,
    RevokeDeviceSessionBatchArg,
    RevokeDeviceSessionBatchError,
    RevokeDeviceSessionBatchResult,
    RevokeDeviceSessionError,
    RevokeLinkedApiAppArg,
    RevokeLinkedApiAppBatchArg,
    RevokeLinkedAppBatchError,
    RevokeLinkedAppBatchResult,
    RevokeLinkedAppError,
    TeamGetInfoResult,
    TeamMemberInfo,
    UpdatePropertyTemplateArg,
    UpdatePropertyTemplateResult,
    UserSelectorArg,
)
from dbxclient.sources.external.dropbox.namespaces.base import Namespace
from dbxclient.sources.external.dropbox.route import Route

NS = "team"

# alpha/groups
ALPHA_GROUPS_CREATE = Route(NS, "alpha/groups/create", AlphaGroupCreateArg, AlphaGroupFullInfo, GroupCreateError)
ALPHA_GROUPS_GET_INFO = Route(
    NS, "alpha/groups/get_info", GroupsSelector, List[AlphaGroupsGetInfoItem], GroupsGetInfoError
)
ALPHA_GROUPS_LIST = Route(NS, "alpha/groups/list", GroupsListArg, AlphaGroupsListResult)
ALPHA_GROUPS_LIST_CONTINUE = Route(
    NS, "alpha/groups/list/continue", GroupsListContinueArg, AlphaGroupsListResult, GroupsListContinueError
)
ALPHA_GROUPS_UPDATE = Route(NS, "alpha/groups/update", AlphaGroupUpdateArgs, AlphaGroupFullInfo, GroupUpdateError)

# devices
DEVICES_LIST_MEMBER_DEVICES = Route(
    NS, "devices/list_member_devices", ListMemberDevicesArg, ListMemberDevicesResult, ListMemberDevicesError
)
DEVICES_LIST_MEMBERS_DEVICES = Route(
    NS, "devices/list_members_devices", ListMembersDevicesArg, ListMembersDevicesResult, ListMembersDevicesError
)
DEVICES_LIST_TEAM_DEVICES = Route(
    NS, "devices/list_team_devices", ListTeamDevicesArg, ListTeamDevicesResult, ListTeamDevicesError
)
DEVICES_REVOKE_DEVICE_SESSION = Route(
    NS, "devices/revoke_device_session", RevokeDeviceSessionArg, None, RevokeDeviceSessionError
)
DEVICES_REVOKE_DEVICE_SESSION_BATCH = Route(
    NS, "devices/revoke_device_session_batch", RevokeDeviceSessionBatchArg, RevokeDeviceSessionBatchResult,
    RevokeDeviceSessionBatchError,
)

GET_INFO = Route(NS, "get_info", None, TeamGetInfoResult)

# groups
GROUPS_CREATE = Route(NS, "groups/create", GroupCreateArg, GroupFullInfo, GroupCreateError)
GROUPS_DELETE = Route(NS, "groups/delete", GroupSelector, LaunchEmptyResult, GroupDeleteError)
GROUPS_GET_INFO = Route(NS, "groups/get_info", GroupsSelector, List[GroupsGetInfoItem], GroupsGetInfoError)
GROUPS_JOB_STATUS_GET = Route(NS, "groups/job_status/get", PollArg, PollEmptyResult, GroupsPollError)
GROUPS_LIST = Route(NS, "groups/list", GroupsListArg, GroupsListResult)
GROUPS_LIST_CONTINUE = Route(
    NS, "groups/list/continue", GroupsListContinueArg, GroupsListResult, GroupsListContinueError
)
GROUPS_MEMBERS_ADD = Route(
    NS, "groups/members/add", GroupMembersAddArg, GroupMembersChangeResult, GroupMembersAddError
)
GROUPS_MEMBERS_LIST = Route(
    NS, "groups/members/list", GroupsMembersListArg, GroupsMembersListResult, GroupSelectorError
)
GROUPS_MEMBERS_LIST_CONTINUE = Route(
    NS, "groups/members/list/continue", GroupsMembersListContinueArg, GroupsMembersListResult,
    GroupsMembersListContinueError,
)
GROUPS_MEMBERS_REMOVE = Route(
    NS, "groups/members/remove", GroupMembersRemoveArg, GroupMembersChangeResult, GroupMembersRemoveError
)
GROUPS_MEMBERS_SET_ACCESS_TYPE = Route(
    NS, "groups/members/set_access_type", GroupMembersSetAccessTypeArg, List[GroupsGetInfoItem],
    GroupMemberSetAccessTypeError,
)
GROUPS_UPDATE = Route(NS, "groups/update", GroupUpdateArgs, GroupFullInfo, GroupUpdateError)

# linked_apps
LINKED_APPS_LIST_MEMBER_LINKED_APPS = Route(
    NS, "linked_apps/list_member_linked_apps", ListMemberAppsArg, ListMemberAppsResult, ListMemberAppsError
)
LINKED_APPS_LIST_MEMBERS_LINKED_APPS = Route(
    NS, "linked_apps/list_members_linked_apps", ListMembersAppsArg, ListMembersAppsResult, ListMembersAppsError
)
LINKED_APPS_LIST_TEAM_LINKED_APPS = Route(
    NS, "linked_apps/list_team_linked_apps", ListTeamAppsArg, ListTeamAppsResult, ListTeamAppsError
)
LINKED_APPS_REVOKE_LINKED_APP = Route(
    NS, "linked_apps/revoke_linked_app", RevokeLinkedApiAppArg, None, RevokeLinkedAppError
)
LINKED_APPS_REVOKE_LINKED_APP_BATCH = Route(
    NS, "linked_apps/revoke_linked_app_batch", RevokeLinkedApiAppBatchArg, RevokeLinkedAppBatchResult,
    RevokeLinkedAppBatchError,
)

# members
MEMBERS_ADD = Route(NS, "members/add", MembersAddArg, MembersAddLaunch)
MEMBERS_ADD_JOB_STATUS_GET = Route(NS, "members/add/job_status/get", PollArg, MembersAddJobStatus, PollError)
MEMBERS_GET_INFO = Route(
    NS, "members/get_info", MembersGetInfoArgs, List[MembersGetInfoItem], MembersGetInfoError
)
MEMBERS_LIST = Route(NS, "members/list", MembersListArg, MembersListResult, MembersListError)
MEMBERS_LIST_CONTINUE = Route(
    NS, "members/list/continue", MembersListContinueArg, MembersListResult, MembersListContinueError
)
MEMBERS_REMOVE = Route(NS, "members/remove", MembersRemoveArg, LaunchEmptyResult, MembersRemoveError)
MEMBERS_REMOVE_JOB_STATUS_GET = Route(NS, "members/remove/job_status/get", PollArg, PollEmptyResult, PollError)
MEMBERS_SEND_WELCOME_EMAIL = Route(
    NS, "members/send_welcome_email", UserSelectorArg, None, MembersSendWelcomeError
)
MEMBERS_SET_ADMIN_PERMISSIONS = Route(
    NS, "members/set_admin_permissions", MembersSetPermissionsArg, MembersSetPermissionsResult,
    MembersSetPermissionsError,
)
MEMBERS_SET_PROFILE = Route(NS, "members/set_profile", MembersSetProfileArg, TeamMemberInfo, MembersSetProfileError)
MEMBERS_SUSPEND = Route(NS, "members/suspend", MembersDeactivateArg, None, MembersSuspendError)
MEMBERS_UNSUSPEND = Route(NS, "members/unsuspend", MembersUnsuspendArg, None, MembersUnsuspendError)

# properties/template
PROPERTIES_TEMPLATE_ADD = Route(
    NS, "properties/template/add", AddPropertyTemplateArg, AddPropertyTemplateResult, ModifyPropertyTemplateError
)
PROPERTIES_TEMPLATE_GET = Route(
    NS, "properties/template/get", GetPropertyTemplateArg, GetPropertyTemplateResult, PropertyTemplateError
)
PROPERTIES_TEMPLATE_LIST = Route(
    NS, "properties/template/list", None, ListPropertyTemplateIds, PropertyTemplateError
)
PROPERTIES_TEMPLATE_UPDATE = Route(
    NS, "properties/template/update", UpdatePropertyTemplateArg, UpdatePropertyTemplateResult,
    ModifyPropertyTemplateError,
)

# reports
REPORTS_GET_ACTIVITY = Route(NS, "reports/get_activity", DateRange, GetActivityReport, DateRangeError)
REPORTS_GET_DEVICES = Route(NS, "reports/get_devices", DateRange, GetDevicesReport, DateRangeError)
REPORTS_GET_MEMBERSHIP = Route(NS, "reports/get_membership", DateRange, GetMembershipReport, DateRangeError)
REPORTS_GET_STORAGE = Route(NS, "reports/get_storage", DateRange, GetStorageReport, DateRangeError)


class TeamNamespace(Namespace):
    """Team administration routes.

    These require a team-scoped token. Routes acting on one member's data
    live on the other namespaces and are reached through
    ``DropboxDataSource.as_member``.
    """

    async def alpha_groups_create(self, arg: AlphaGroupCreateArg) -> AlphaGroupFullInfo:
        return await self._execute(ALPHA_GROUPS_CREATE, arg)

    async def alpha_groups_get_info(self, arg: GroupsSelector) -> List[AlphaGroupsGetInfoItem]:
        return await self._execute(ALPHA_GROUPS_GET_INFO, arg)

    async def alpha_groups_list(self, arg: GroupsListArg) -> AlphaGroupsListResult:
        return await self._execute(ALPHA_GROUPS_LIST, arg)

    async def alpha_groups_list_continue(self, arg: GroupsListContinueArg) -> AlphaGroupsListResult:
        return await self._execute(ALPHA_GROUPS_LIST_CONTINUE, arg)

    async def alpha_groups_update(self, arg: AlphaGroupUpdateArgs) -> AlphaGroupFullInfo:
        return await self._execute(ALPHA_GROUPS_UPDATE, arg)

    async def devices_list_member_devices(self, arg: ListMemberDevicesArg) -> ListMemberDevicesResult:
        """Devices of one team member"""
        return await self._execute(DEVICES_LIST_MEMBER_DEVICES, arg)

    async def devices_list_members_devices(self, arg: ListMembersDevicesArg) -> ListMembersDevicesResult:
        """Devices of every team member, paged by cursor"""
        return await self._execute(DEVICES_LIST_MEMBERS_DEVICES, arg)

    async def devices_list_team_devices(self, arg: ListTeamDevicesArg) -> ListTeamDevicesResult:
        return await self._execute(DEVICES_LIST_TEAM_DEVICES, arg)

    async def devices_revoke_device_session(self, arg: RevokeDeviceSessionArg) -> None:
        await self._execute(DEVICES_REVOKE_DEVICE_SESSION, arg)

    async def devices_revoke_device_session_batch(
        self, arg: RevokeDeviceSessionBatchArg
    ) -> RevokeDeviceSessionBatchResult:
        return await self._execute(DEVICES_REVOKE_DEVICE_SESSION_BATCH, arg)

    async def get_info(self) -> TeamGetInfoResult:
        """Information about the team"""
        return await self._execute(GET_INFO)

    async def groups_create(self, arg: GroupCreateArg) -> GroupFullInfo:
        return await self._execute(GROUPS_CREATE, arg)

    async def groups_delete(self, arg: GroupSelector) -> LaunchEmptyResult:
        """Delete a group; may finish asynchronously, poll with groups_job_status_get"""
        return await self._execute(GROUPS_DELETE, arg)

    async def groups_get_info(self, arg: GroupsSelector) -> List[GroupsGetInfoItem]:
        return await self._execute(GROUPS_GET_INFO, arg)

    async def groups_job_status_get(self, arg: PollArg) -> PollEmptyResult:
        return await self._execute(GROUPS_JOB_STATUS_GET, arg)

    async def groups_list(self, arg: GroupsListArg) -> GroupsListResult:
        return await self._execute(GROUPS_LIST, arg)

    async def groups_list_continue(self, arg: GroupsListContinueArg) -> GroupsListResult:
        return await self._execute(GROUPS_LIST_CONTINUE, arg)

    async def groups_members_add(self, arg: GroupMembersAddArg) -> GroupMembersChangeResult:
        return await self._execute(GROUPS_MEMBERS_ADD, arg)

    async def groups_members_list(self, arg: GroupsMembersListArg) -> GroupsMembersListResult:
        return await self._execute(GROUPS_MEMBERS_LIST, arg)

    async def groups_members_list_continue(self, arg: GroupsMembersListContinueArg) -> GroupsMembersListResult:
        return await self._execute(GROUPS_MEMBERS_LIST_CONTINUE, arg)

    async def groups_members_remove(self, arg: GroupMembersRemoveArg) -> GroupMembersChangeResult:
        return await self._execute(GROUPS_MEMBERS_REMOVE, arg)

    async def groups_members_set_access_type(self, arg: GroupMembersSetAccessTypeArg) -> List[GroupsGetInfoItem]:
        return await self._execute(GROUPS_MEMBERS_SET_ACCESS_TYPE, arg)

    async def groups_update(self, arg: GroupUpdateArgs) -> GroupFullInfo:
        return await self._execute(GROUPS_UPDATE, arg)

    async def linked_apps_list_member_linked_apps(self, arg: ListMemberAppsArg) -> ListMemberAppsResult:
        return await self._execute(LINKED_APPS_LIST_MEMBER_LINKED_APPS, arg)

    async def linked_apps_list_members_linked_apps(self, arg: ListMembersAppsArg) -> ListMembersAppsResult:
        return await self._execute(LINKED_APPS_LIST_MEMBERS_LINKED_APPS, arg)

    async def linked_apps_list_team_linked_apps(self, arg: ListTeamAppsArg) -> ListTeamAppsResult:
        return await self._execute(LINKED_APPS_LIST_TEAM_LINKED_APPS, arg)

    async def linked_apps_revoke_linked_app(self, arg: RevokeLinkedApiAppArg) -> None:
        await self._execute(LINKED_APPS_REVOKE_LINKED_APP, arg)

    async def linked_apps_revoke_linked_app_batch(self, arg: RevokeLinkedApiAppBatchArg) -> RevokeLinkedAppBatchResult:
        return await self._execute(LINKED_APPS_REVOKE_LINKED_APP_BATCH, arg)

    async def members_add(self, arg: MembersAddArg) -> MembersAddLaunch:
        """Invite new members; large batches complete asynchronously"""
        return await self._execute(MEMBERS_ADD, arg)

    async def members_add_job_status_get(self, arg: PollArg) -> MembersAddJobStatus:
        return await self._execute(MEMBERS_ADD_JOB_STATUS_GET, arg)

    async def members_get_info(self, arg: MembersGetInfoArgs) -> List[MembersGetInfoItem]:
        return await self._execute(MEMBERS_GET_INFO, arg)

    async def members_list(self, arg: MembersListArg) -> MembersListResult:
        return await self._execute(MEMBERS_LIST, arg)

    async def members_list_continue(self, arg: MembersListContinueArg) -> MembersListResult:
        return await self._execute(MEMBERS_LIST_CONTINUE, arg)

    async def members_remove(self, arg: MembersRemoveArg) -> LaunchEmptyResult:
        return await self._execute(MEMBERS_REMOVE, arg)

    async def members_remove_job_status_get(self, arg: PollArg) -> PollEmptyResult:
        return await self._execute(MEMBERS_REMOVE_JOB_STATUS_GET, arg)

    async def members_send_welcome_email(self, arg: UserSelectorArg) -> None:
        await self._execute(MEMBERS_SEND_WELCOME_EMAIL, arg)

    async def members_set_admin_permissions(self, arg: MembersSetPermissionsArg) -> MembersSetPermissionsResult:
        return await self._execute(MEMBERS_SET_ADMIN_PERMISSIONS, arg)

    async def members_set_profile(self, arg: MembersSetProfileArg) -> TeamMemberInfo:
        return await self._execute(MEMBERS_SET_PROFILE, arg)

    async def members_suspend(self, arg: MembersDeactivateArg) -> None:
        await self._execute(MEMBERS_SUSPEND, arg)

    async def members_unsuspend(self, arg: MembersUnsuspendArg) -> None:
        await self._execute(MEMBERS_UNSUSPEND, arg)

    async def properties_template_add(self, arg: AddPropertyTemplateArg) -> AddPropertyTemplateResult:
        return await self._execute(PROPERTIES_TEMPLATE_ADD, arg)

    async def properties_template_get(self, arg: GetPropertyTemplateArg) -> GetPropertyTemplateResult:
        return await self._execute(PROPERTIES_TEMPLATE_GET, arg)

    async def properties_template_list(self) -> ListPropertyTemplateIds:
        return await self._execute(PROPERTIES_TEMPLATE_LIST)

    async def properties_template_update(self, arg: UpdatePropertyTemplateArg) -> UpdatePropertyTemplateResult:
        return await self._execute(PROPERTIES_TEMPLATE_UPDATE, arg)

    async def reports_get_activity(self, arg: DateRange) -> GetActivityReport:
        """Daily activity counts over the range"""
        return await self._execute(REPORTS_GET_ACTIVITY, arg)

    async def reports_get_devices(self, arg: DateRange) -> GetDevicesReport:
        return await self._execute(REPORTS_GET_DEVICES, arg)

    async def reports_get_membership(self, arg: DateRange) -> GetMembershipReport:
        return await self._execute(REPORTS_GET_MEMBERSHIP, arg)

    async def reports_get_storage(self, arg: DateRange) -> GetStorageReport:
        return await self._execute(REPORTS_GET_STORAGE, arg)
