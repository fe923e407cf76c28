from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..models import Record, Repository
from .codec import decode


@dataclass
class LoadResult:
    records: List[Record] = field(default_factory=list)
    next_id: int = 1
    skipped: int = 0
    missing: bool = False
    error: str | None = None

    def repository(self) -> Repository:
        return Repository(records=list(self.records), next_id=self.next_id)


def read_lines(path: Path) -> List[str]:
    # Undecodable bytes become U+FFFD in their own cell only
    with path.open("r", encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\r\n") for line in f]


def load_records(path: Path) -> LoadResult:
    logger = logging.getLogger(__name__)
    if not path.exists():
        logger.info(f"No data file at {path}; starting empty")
        return LoadResult(missing=True)
    try:
        lines = read_lines(path)
    except OSError as exc:
        logger.error(f"Could not read {path}: {exc}")
        return LoadResult(error=str(exc))

    result = LoadResult()
    # First line is the header; each following line is decoded on its own
    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        record = decode(line)
        if record is None:
            result.skipped += 1
            logger.debug(f"Skipped malformed row {line_no}: {line!r}")
            continue
        result.records.append(record)

    top = max((r.id for r in result.records), default=0)
    result.next_id = max(top, 0) + 1
    logger.info(
        f"Loaded {len(result.records)} records from {path} "
        f"(skipped {result.skipped}, next id {result.next_id})"
    )
    return result
