from typing import ClassVar, List, Optional

from dbxclient.sources.external.dropbox.stone import Struct, TaggedUnion


class DeleteManualContactsArg(Struct):
    email_addresses: List[str]


class DeleteManualContactsError(TaggedUnion):
    """`contacts_not_found` lists the addresses that were not manual contacts"""
    CONTACTS_NOT_FOUND: ClassVar[str] = "contacts_not_found"
    OTHER: ClassVar[str] = "other"

    contacts_not_found: Optional[List[str]] = None
