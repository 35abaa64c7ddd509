"""Collaborator records as returned by the GitHub API, and the classification result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple


@dataclass(frozen=True)
class Permissions:
    """The three permission flags GitHub reports for a collaborator."""

    admin: bool = False
    push: bool = False
    pull: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Permissions":
        if not isinstance(data, Mapping):
            return cls()
        # Only a literal JSON true counts as set.
        return cls(
            admin=data.get("admin") is True,
            push=data.get("push") is True,
            pull=data.get("pull") is True,
        )


@dataclass(frozen=True)
class CollaboratorRecord:
    """One collaborator entry."""

    login: str
    permissions: Permissions

    @classmethod
    def from_dict(cls, data: Any) -> "CollaboratorRecord":
        """
        Build a record from one element of the collaborators array.

        Raises:
            ValueError: If the element is not an object or has no string login.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Collaborator entry must be a JSON object.")
        login = data.get("login")
        if not isinstance(login, str):
            raise ValueError("Collaborator entry is missing a login.")
        return cls(login=login, permissions=Permissions.from_dict(data.get("permissions")))


@dataclass(frozen=True)
class ClassificationResult:
    """Logins grouped by permission tier, with per-tier counts."""

    admins: Tuple[str, ...]
    writers: Tuple[str, ...]
    readers: Tuple[str, ...]
    total: int
    admin_count: int
    write_count: int
    read_count: int


def parse_collaborators(payload: Any) -> List[CollaboratorRecord]:
    """
    Convert the decoded collaborators response into records, keeping API order.

    Raises:
        ValueError: If the payload is not a list or an entry is malformed.
    """
    if not isinstance(payload, list):
        raise ValueError("Unexpected response when listing collaborators.")
    return [CollaboratorRecord.from_dict(entry) for entry in payload]
