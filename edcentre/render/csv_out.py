from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..data.codec import HEADER, encode
from ..errors import PersistenceError
from ..models import Record


def csv_text(records: Iterable[Record]) -> str:
    # Header, then one row per record in repository order
    lines: List[str] = [HEADER]
    for r in records:
        lines.append(encode(r))
    return "\n".join(lines) + "\n"


def write_csv(records: Iterable[Record], path: Path) -> None:
    logger = logging.getLogger(__name__)
    items = list(records)
    # Render fully before opening so a failed encode never truncates the file
    text = csv_text(items)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        logger.error(f"Could not write {path}: {exc}")
        raise PersistenceError(path, exc) from exc
    logger.info(f"Saved {len(items)} records to {path}")
