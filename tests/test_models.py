"""models モジュールのテスト。"""
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from collaborator_auditor.models import CollaboratorRecord, Permissions, parse_collaborators


def test_from_dict_reads_login_and_flags():
    record = CollaboratorRecord.from_dict(
        {"login": "alice", "id": 1, "permissions": {"admin": True, "push": True, "pull": True}}
    )
    assert record.login == "alice"
    assert record.permissions == Permissions(admin=True, push=True, pull=True)


def test_missing_permissions_read_as_false():
    record = CollaboratorRecord.from_dict({"login": "ghost"})
    assert record.permissions == Permissions(admin=False, push=False, pull=False)


def test_only_literal_true_counts():
    perms = Permissions.from_dict({"admin": "true", "push": 1, "pull": True})
    assert perms.admin is False
    assert perms.push is False
    assert perms.pull is True


def test_from_dict_rejects_missing_login():
    with pytest.raises(ValueError):
        CollaboratorRecord.from_dict({"permissions": {"pull": True}})


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        CollaboratorRecord.from_dict("alice")


def test_parse_collaborators_keeps_order():
    payload = [{"login": name, "permissions": {"pull": True}} for name in ("zed", "amy", "mo")]
    assert [r.login for r in parse_collaborators(payload)] == ["zed", "amy", "mo"]


def test_parse_collaborators_empty_list():
    assert parse_collaborators([]) == []


def test_parse_collaborators_rejects_error_object():
    with pytest.raises(ValueError):
        parse_collaborators({"message": "Not Found"})


def test_records_are_immutable():
    record = CollaboratorRecord.from_dict({"login": "alice"})
    with pytest.raises(AttributeError):
        record.login = "mallory"
