"""Immutable roster snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from staff_lookup.models.employee import EmployeeDetail

logger = logging.getLogger(__name__)


class RosterSnapshot:
    """An ordered, read-only view of the employee roster at one point in time.

    Identifiers are unique within a snapshot: when the source delivers the
    same ``id`` twice, the first record is kept. A snapshot is never changed
    after construction; a roster reload produces a new snapshot with a
    higher ``version``.
    """

    __slots__ = ("records", "version", "available", "_by_id")

    def __init__(
        self,
        records: Iterable[EmployeeDetail] = (),
        *,
        version: int = 0,
        available: bool = True,
    ) -> None:
        by_id: dict[str, EmployeeDetail] = {}
        for record in records:
            if record.id in by_id:
                logger.warning("Duplicate employee id %s in roster — keeping first record", record.id)
                continue
            by_id[record.id] = record

        self.records: tuple[EmployeeDetail, ...] = tuple(by_id.values())
        self.version = version
        self.available = available
        self._by_id = by_id

    @classmethod
    def unavailable(cls, version: int = 0) -> RosterSnapshot:
        return cls((), version=version, available=False)

    def get(self, identifier: str) -> EmployeeDetail | None:
        return self._by_id.get(identifier)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[EmployeeDetail]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"RosterSnapshot(version={self.version}, size={len(self)}, available={self.available})"
