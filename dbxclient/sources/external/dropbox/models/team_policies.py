from typing import ClassVar

from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class EmmState(TaggedUnion):
    DISABLED: ClassVar[str] = "disabled"
    OPTIONAL: ClassVar[str] = "optional"
    REQUIRED: ClassVar[str] = "required"
    OTHER: ClassVar[str] = "other"


class SharedFolderJoinPolicy(TaggedUnion):
    FROM_TEAM_ONLY: ClassVar[str] = "from_team_only"
    FROM_ANYONE: ClassVar[str] = "from_anyone"
    OTHER: ClassVar[str] = "other"


class SharedFolderMemberPolicy(TaggedUnion):
    TEAM: ClassVar[str] = "team"
    ANYONE: ClassVar[str] = "anyone"
    OTHER: ClassVar[str] = "other"


class SharedLinkCreatePolicy(TaggedUnion):
    DEFAULT_PUBLIC: ClassVar[str] = "default_public"
    DEFAULT_TEAM_ONLY: ClassVar[str] = "default_team_only"
    TEAM_ONLY: ClassVar[str] = "team_only"
    OTHER: ClassVar[str] = "other"


class TeamSharingPolicies(Struct):
    shared_folder_member_policy: SharedFolderMemberPolicy
    shared_folder_join_policy: SharedFolderJoinPolicy
    shared_link_create_policy: SharedLinkCreatePolicy


class TeamMemberPolicies(Struct):
    sharing: TeamSharingPolicies
    emm_state: EmmState
