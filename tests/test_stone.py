"""
Wire codec tests: structs, tagged unions and timestamps.
"""
from datetime import datetime, timezone
from typing import List

import pytest  # type: ignore
from pydantic import ValidationError  # type: ignore

from dbxclient.sources.external.dropbox.models.auth import AccessError, PaperAccessError, RateLimitError
from dbxclient.sources.external.dropbox.models.contacts import DeleteManualContactsArg, DeleteManualContactsError
from dbxclient.sources.external.dropbox.models.files import (
    CommitInfo,
    FileMetadata,
    FolderMetadata,
    GetMetadataError,
    ListFolderLongpollArg,
    ListFolderResult,
    LookupError,
    Metadata,
    RelocationError,
    SearchArg,
    ThumbnailArg,
    UploadError,
    WriteMode,
)
from dbxclient.sources.external.dropbox.models.team import RevokeDeviceSessionArg, DeviceSessionArg, UserSelectorArg
from dbxclient.sources.external.dropbox.models.users import GetAccountBatchError
from dbxclient.sources.external.dropbox.stone import decode, encode
from tests.conftest import file_metadata_payload, folder_metadata_payload


class TestTaggedUnionDecoding:
    """Decoding populates exactly the field named by the tag."""

    def test_struct_variant_is_inlined(self):
        payload = file_metadata_payload("/Homework/math/Prime_Numbers.txt")

        meta = Metadata.from_dict(payload)

        assert meta.tag == Metadata.FILE
        assert isinstance(meta.file, FileMetadata)
        assert meta.file.path_display == "/Homework/math/Prime_Numbers.txt"
        assert meta.folder is None
        assert meta.deleted is None
        assert meta.value is meta.file

    def test_folder_variant(self):
        meta = Metadata.from_dict(folder_metadata_payload("/Homework"))

        assert meta.is_("folder")
        assert isinstance(meta.value, FolderMetadata)
        assert meta.file is None

    def test_nested_union_stored_under_tag(self):
        error = GetMetadataError.from_dict({".tag": "path", "path": {".tag": "not_found"}})

        assert error.tag == "path"
        assert isinstance(error.path, LookupError)
        assert error.path.tag == LookupError.NOT_FOUND
        assert error.path.value is None

    def test_primitive_payload_stored_under_tag(self):
        error = GetAccountBatchError.from_dict({".tag": "no_account", "no_account": "dbid:AAH4f99"})

        assert error.no_account == "dbid:AAH4f99"
        assert error.value == "dbid:AAH4f99"

    def test_string_shorthand_for_void_variant(self):
        error = LookupError.from_dict("not_folder")

        assert error.tag == "not_folder"
        assert str(error) == "not_folder"

    def test_unknown_tag_decodes_to_tag_only(self):
        error = RelocationError.from_dict({".tag": "something_new", "extra": {"a": 1}})

        assert error.tag == "something_new"
        assert error.value is None
        assert error.from_lookup is None

    def test_unknown_keys_ignored_in_structs(self):
        payload = file_metadata_payload("/a.txt")
        payload["brand_new_field"] = {"x": 1}

        meta = Metadata.from_dict(payload)

        assert meta.file.name == "a.txt"

    def test_union_inside_struct_list(self):
        result = ListFolderResult.from_dict({
            "entries": [file_metadata_payload("/a.txt"), folder_metadata_payload("/b"), {".tag": "deleted", "name": "c"}],
            "cursor": "ZtkX9_EHj3x7PMkVuFIhwKYXEpwpLwyxp9vMKomUhllil9q7eWiAu",
            "has_more": False,
        })

        assert [entry.tag for entry in result.entries] == ["file", "folder", "deleted"]
        assert result.entries[2].deleted.name == "c"

    def test_upload_error_nested_struct_and_union(self):
        error = UploadError.from_dict({
            ".tag": "path",
            "reason": {".tag": "conflict", "conflict": {".tag": "file"}},
            "upload_session_id": "1234faaf0678bcde",
        })

        assert error.path.upload_session_id == "1234faaf0678bcde"
        assert error.path.reason.conflict.tag == "file"

    def test_access_error_paper(self):
        error = AccessError.from_dict({
            ".tag": "paper_access_denied",
            "paper_access_denied": {".tag": "not_paper_user"},
        })

        assert error.paper_access_denied.tag == PaperAccessError.NOT_PAPER_USER
        assert error.invalid_account_type is None

    def test_list_payload_stored_under_tag(self, faker_instance):
        emails = [faker_instance.email() for _ in range(3)]

        error = DeleteManualContactsError.from_dict({".tag": "contacts_not_found", "contacts_not_found": emails})

        assert error.contacts_not_found == emails
        assert error.to_dict() == {".tag": "contacts_not_found", "contacts_not_found": emails}
        assert DeleteManualContactsArg(email_addresses=emails).to_dict() == {"email_addresses": emails}

    def test_missing_required_struct_field_is_rejected(self):
        with pytest.raises(ValidationError):
            Metadata.from_dict({".tag": "file", "name": "a.txt"})


class TestTaggedUnionEncoding:
    """Encoding reproduces the wire shape."""

    def test_void_variant(self):
        assert WriteMode(WriteMode.OVERWRITE).to_dict() == {".tag": "overwrite"}

    def test_primitive_variant(self):
        assert WriteMode("update", "a1c10ce0dd78").to_dict() == {".tag": "update", "update": "a1c10ce0dd78"}

    def test_struct_variant_is_inlined(self, faker_instance):
        session_id = faker_instance.uuid4()
        member_id = faker_instance.uuid4()
        arg = RevokeDeviceSessionArg(
            "web_session", DeviceSessionArg(session_id=session_id, team_member_id=member_id)
        )

        assert arg.to_dict() == {".tag": "web_session", "session_id": session_id, "team_member_id": member_id}

    def test_keyword_construction(self, faker_instance):
        email = faker_instance.email()

        assert UserSelectorArg(tag="email", email=email).to_dict() == {".tag": "email", "email": email}

    def test_void_tag_rejects_value(self):
        with pytest.raises(ValueError):
            WriteMode("add", "rev")

    def test_decoded_value_reencodes_identically(self):
        payload = {".tag": "path", "path": {".tag": "malformed_path", "malformed_path": "bad"}}

        assert GetMetadataError.from_dict(payload).to_dict() == payload

    def test_struct_payload_reencodes_identically(self):
        payload = file_metadata_payload("/x.txt")

        assert Metadata.from_dict(payload).to_dict() == payload


class TestStructDefaults:
    """Defaults follow the Dropbox constructors; None fields are omitted."""

    def test_commit_info_defaults(self):
        arg = CommitInfo(path="/Homework/math/Matrices.txt")

        assert arg.mode.tag == "add"
        assert arg.to_dict() == {
            "path": "/Homework/math/Matrices.txt",
            "mode": {".tag": "add"},
            "autorename": False,
            "mute": False,
        }

    def test_optional_fields_omitted(self):
        encoded = CommitInfo(path="/a.txt").to_dict()

        assert "client_modified" not in encoded

    def test_longpoll_default_timeout(self):
        assert ListFolderLongpollArg(cursor="c").timeout == 30

    def test_thumbnail_defaults(self):
        arg = ThumbnailArg(path="/image.jpg")

        assert arg.to_dict() == {"path": "/image.jpg", "format": {".tag": "jpeg"}, "size": {".tag": "w64h64"}}

    def test_search_defaults(self):
        arg = SearchArg(path="", query="prime numbers")

        assert arg.start == 0
        assert arg.max_results == 100
        assert arg.mode.tag == "filename"

    def test_rate_limit_retry_after_default(self):
        error = RateLimitError.from_dict({"reason": {".tag": "too_many_write_operations"}})

        assert error.retry_after == 1
        assert error.reason.tag == "too_many_write_operations"

    def test_to_json_is_wire_string(self):
        assert CommitInfo(path="/a").to_json().startswith('{"path": "/a"')


class TestTimestamp:
    def test_decode(self):
        meta = FileMetadata.from_dict(file_metadata_payload("/a.txt", tagged=False))

        assert meta.client_modified == datetime(2015, 5, 12, 15, 50, 38, tzinfo=timezone.utc)

    def test_encode_second_precision_utc(self):
        arg = CommitInfo(path="/a", client_modified=datetime(2020, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc))

        assert arg.to_dict()["client_modified"] == "2020-01-02T03:04:05Z"

    def test_naive_datetime_encoded_as_is(self):
        arg = CommitInfo(path="/a", client_modified=datetime(2020, 1, 2, 3, 4, 5))

        assert arg.to_dict()["client_modified"] == "2020-01-02T03:04:05Z"


class TestDecodeHelpers:
    def test_decode_list_type(self):
        entries = decode(List[Metadata], [file_metadata_payload("/a.txt")])

        assert entries[0].file.name == "a.txt"

    def test_decode_none_type(self):
        assert decode(None, {"anything": 1}) is None

    def test_encode_list_of_models(self):
        assert encode([WriteMode("add"), WriteMode("overwrite")]) == [{".tag": "add"}, {".tag": "overwrite"}]

    def test_encode_passes_plain_values(self):
        assert encode({"path": "/a"}) == {"path": "/a"}
