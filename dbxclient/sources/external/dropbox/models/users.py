"""Account and space usage types of the users namespace."""
from typing import ClassVar, List, Optional

from dbxclient.sources.external.dropbox.models.team_policies import TeamSharingPolicies
from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class AccountType(TaggedUnion):
    BASIC: ClassVar[str] = "basic"
    PRO: ClassVar[str] = "pro"
    BUSINESS: ClassVar[str] = "business"


class Name(Struct):
    given_name: str
    surname: str
    familiar_name: str
    display_name: str
    abbreviated_name: Optional[str] = None


class Team(Struct):
    id: str
    name: str


class FullTeam(Team):
    sharing_policies: TeamSharingPolicies


class Account(Struct):
    account_id: str
    name: Name
    email: str
    email_verified: bool
    disabled: bool
    profile_photo_url: Optional[str] = None


class BasicAccount(Account):
    """Information about an account other than the caller's"""
    is_teammate: bool
    team_member_id: Optional[str] = None


class FullAccount(Account):
    """The caller's own account"""
    locale: str
    referral_link: str
    is_paired: bool
    account_type: AccountType
    country: Optional[str] = None
    team: Optional[FullTeam] = None
    team_member_id: Optional[str] = None


class GetAccountArg(Struct):
    account_id: str


class GetAccountBatchArg(Struct):
    account_ids: List[str]


class GetAccountError(TaggedUnion):
    NO_ACCOUNT: ClassVar[str] = "no_account"
    OTHER: ClassVar[str] = "other"


class GetAccountBatchError(TaggedUnion):
    """`no_account` holds the first account id that was not found"""
    NO_ACCOUNT: ClassVar[str] = "no_account"
    OTHER: ClassVar[str] = "other"

    no_account: Optional[str] = None


class IndividualSpaceAllocation(Struct):
    allocated: int


class TeamSpaceAllocation(Struct):
    used: int
    allocated: int


class SpaceAllocation(TaggedUnion):
    INDIVIDUAL: ClassVar[str] = "individual"
    TEAM: ClassVar[str] = "team"
    OTHER: ClassVar[str] = "other"

    individual: Optional[IndividualSpaceAllocation] = None
    team: Optional[TeamSpaceAllocation] = None


class SpaceUsage(Struct):
    used: int
    allocation: SpaceAllocation
