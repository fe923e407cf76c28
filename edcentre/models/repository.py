from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from .record import Record
from .role import Role

logger = logging.getLogger(__name__)


@dataclass
class Repository:
    """Ordered in-memory record set plus the id counter.

    Records keep insertion order. ``next_id`` is always greater than every id
    held, and ids of 0 or below never pull it under 1.
    """

    records: List[Record] = field(default_factory=list)
    next_id: int = 1

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "Repository":
        items = list(records)
        top = max((r.id for r in items), default=0)
        return cls(records=items, next_id=max(top, 0) + 1)

    def allocate_id(self) -> int:
        rid = self.next_id
        self.next_id += 1
        return rid

    def insert(self, record: Record) -> None:
        if self.find_by_id(record.id) is not None:
            raise ValueError(f"Duplicate record id: {record.id}")
        self.records.append(record)
        if record.id >= self.next_id:
            self.next_id = record.id + 1
        logger.info(f"Inserted {record.role} #{record.id}")

    def find_by_id(self, record_id: int) -> Record | None:
        for r in self.records:
            if r.id == record_id:
                return r
        return None

    def filter_by_role(self, role: Role | str) -> List[Record]:
        parsed = role if isinstance(role, Role) else Role.parse(role)
        if parsed is None:
            return []
        return [r for r in self.records if r.role is parsed]

    def remove(self, record: Record) -> bool:
        for i, r in enumerate(self.records):
            if r is record:
                del self.records[i]
                logger.info(f"Removed {record.role} #{record.id}")
                return True
        return False

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
