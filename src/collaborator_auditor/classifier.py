"""Permission-tier classification of collaborator records."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, Tuple

from .models import ClassificationResult, CollaboratorRecord

Predicate = Callable[[CollaboratorRecord], bool]


def is_admin(record: CollaboratorRecord) -> bool:
    return record.permissions.admin


def is_writer(record: CollaboratorRecord) -> bool:
    return record.permissions.push and not record.permissions.admin


def is_reader(record: CollaboratorRecord) -> bool:
    return record.permissions.pull and not record.permissions.push


def _select(records: Iterable[CollaboratorRecord], predicate: Predicate) -> Tuple[str, ...]:
    return tuple(record.login for record in records if predicate(record))


def _count(records: Iterable[CollaboratorRecord], predicate: Predicate) -> int:
    return sum(1 for record in records if predicate(record))


def classify(records: Sequence[CollaboratorRecord]) -> ClassificationResult:
    """
    Group collaborators into admin, write and read-only buckets.

    Each predicate is tested against every record on its own, so the buckets
    are not a strict partition: a record may land in none of them, or in
    both the admin and read-only buckets when it has admin and pull but not
    push. Bucket order follows the input order.

    Args:
        records: Collaborators in API response order.

    Returns:
        The three buckets and their counts.
    """
    records = list(records)
    return ClassificationResult(
        admins=_select(records, is_admin),
        writers=_select(records, is_writer),
        readers=_select(records, is_reader),
        total=len(records),
        admin_count=_count(records, is_admin),
        write_count=_count(records, is_writer),
        read_count=_count(records, is_reader),
    )
